# presenters.py
import math
from datetime import date, datetime


def format_temperature(value) -> str:
    # half up, so 28.5 shows as 29 and -0.5 as 0
    return f"{math.floor(value + 0.5)}°C"


def format_today(day: date = None) -> str:
    day = day or date.today()
    return f"{day:%A}, {day.day} {day:%b}"


def format_forecast_day(dt_txt: str) -> str:
    stamp = datetime.strptime(dt_txt, "%Y-%m-%d %H:%M:%S")
    return f"{stamp.day} {stamp:%b}"


def register_filters(app):
    app.jinja_env.filters["temperature"] = format_temperature
    app.jinja_env.filters["forecast_day"] = format_forecast_day
    app.jinja_env.globals["today"] = format_today
