from flask import Flask, request, jsonify, render_template, redirect, url_for
import asyncio, logging, threading

from config import DashboardConfig
from dashboard import DashboardController
from logging_config import setup_logging
from presenters import register_filters

logger = logging.getLogger("app")

MISSING_KEY = {"error": "OPENWEATHER_API_KEY not set on server"}


def create_app(config=None, controller=None, restore=True):
    config = config or DashboardConfig.load()
    controller = controller or DashboardController.from_config(config)

    app = Flask(__name__, template_folder='templates')
    app.config["DASHBOARD"] = config
    app.extensions["dashboard"] = controller
    register_filters(app)

    def key_missing(city):
        return bool(city.strip()) and not config.api_key

    @app.route('/')
    def index():
        return render_template('index.html', state=controller.snapshot_state(), last_place=controller.restored_place)

    @app.route('/search', methods=['POST'])
    async def search():
        city = request.form.get('city', '')
        if key_missing(city):
            return jsonify(MISSING_KEY), 500
        await controller.search(city)
        return redirect(url_for('index'))

    @app.route('/api/weather')
    async def get_weather():
        city = request.args.get('city', '')
        if key_missing(city):
            return jsonify(MISSING_KEY), 500
        state = await controller.search(city)
        return jsonify(state.to_dict())

    @app.route('/api/state')
    def get_state():
        return jsonify(controller.snapshot_state().to_dict())

    if restore and config.api_key:
        # the page is served while the last search is being refreshed
        restorer = threading.Thread(target=lambda: asyncio.run(controller.startup()), name="restore", daemon=True)
        app.extensions["dashboard_restore"] = restorer
        restorer.start()
    elif restore:
        logger.warning("OPENWEATHER_API_KEY not set, skipping restore of the last search")

    return app


if __name__ == '__main__':
    config = DashboardConfig.load()
    setup_logging(config.log_level, config.log_dir)
    app = create_app(config)
    app.run(host=config.host, port=config.port)
