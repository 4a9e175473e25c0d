# config.py
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).parent.resolve()
DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"


@dataclass
class DashboardConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    units: str = "metric"
    request_timeout: float = 10.0
    last_query_db: Path = PROJECT_ROOT / "data" / "last_query.db"
    log_level: str = "INFO"
    log_dir: Path = PROJECT_ROOT / "logs"
    host: str = "0.0.0.0"
    port: int = 5000

    @classmethod
    def load(cls):
        return cls(
            api_key=os.getenv("OPENWEATHER_API_KEY", ""),
            base_url=os.getenv("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            units=os.getenv("WEATHER_UNITS", "metric"),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "10")),
            last_query_db=Path(os.getenv("LAST_QUERY_DB", str(PROJECT_ROOT / "data" / "last_query.db"))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=Path(os.getenv("LOG_DIR", str(PROJECT_ROOT / "logs"))),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
        )
