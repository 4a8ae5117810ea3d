"""
Flight App Flask Application.

Main entry point for the web application. Initializes:
- Flight store (one per application instance)
- API routes
- Error handlers

Usage:
    python -m flightapp.app

Or with gunicorn:
    gunicorn "flightapp.app:create_app()"
"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from flightapp.config import config
from flightapp.api import flights_bp, metrics_bp
from flightapp.store import FlightStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(store: Optional[FlightStore] = None) -> Flask:
    """
    Application factory for Flask.

    Args:
        store: Flight store the handlers operate on. A fresh, empty
               store is created when omitted.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = config.secret_key
    app.config['FLIGHT_STORE'] = store if store is not None else FlightStore()

    # Echo records with their keys in stored order
    app.json.sort_keys = False

    # Enable CORS for API endpoints
    CORS(
        app,
        resources={
            r'/flights*': {'origins': config.cors.origins},
            r'/api/*': {'origins': config.cors.origins},
        },
        send_wildcard=config.cors.origins == '*',
    )

    # Register API blueprints
    app.register_blueprint(flights_bp)
    app.register_blueprint(metrics_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    port = config.server.port

    logger.info(f'Flight app listening at http://localhost:{port}')

    app.run(
        host=config.server.host,
        port=port,
        debug=config.debug,
        use_reloader=False,  # A reloader would start a second, empty store
    )


if __name__ == '__main__':
    run_development_server()
