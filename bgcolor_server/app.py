import os
import logging
from flask import Flask, jsonify

from bgcolor_server.config import Settings, load_settings

PUBLIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "public")

logger = logging.getLogger(__name__)


def create_app(settings=None):
    """Builds the app. Without fixed settings, BG_COLOR is read on each request."""
    app = Flask(__name__, static_folder=PUBLIC_DIR, static_url_path="")

    def get_settings() -> Settings:
        if settings is not None:
            return settings
        return load_settings()

    @app.route('/')
    def home():
        return app.send_static_file('index.html')

    @app.route('/api/config')
    def api_config():
        current: Settings = get_settings()
        logger.debug(f"Serving bgColor={current.bg_color!r}")
        return jsonify(current.to_dict())

    return app


app = create_app()

if __name__ == '__main__':
    from dotenv import load_dotenv
    load_dotenv()

    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO').upper())

    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', 8080))
    logging.info(f"Starting server on {host}:{port}")
    app.run(host=host, port=port)
