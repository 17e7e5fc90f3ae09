import sys

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from werkzeug.routing import Map
from werkzeug.serving import make_server

# Import blueprints
from Controllers.errorController import error_bp
from Routes.statusRoutes import status_routes
from Routes.itemRoutes import item_routes
from Utils.catalog import populate_catalog
from Utils.config import Settings
from Utils.logger import setup_logging


class SlashPreservingMap(Map):
    """URL map that leaves "//" in paths alone instead of redirecting."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("merge_slashes", False)
        super().__init__(*args, **kwargs)


class CatalogFlask(Flask):
    # "/items//5" must reach the item controller as a 4-segment path
    url_map_class = SlashPreservingMap


def create_app(settings=None, catalog=None):
    """Build the catalog, then the Flask app that serves it.

    The catalog is fully populated before any blueprint is registered, so a
    listener started on the returned app never sees a partial catalog.
    """
    settings = settings or Settings.from_env()
    if catalog is None:
        catalog = populate_catalog(settings.item_count, seed=settings.seed)

    # ----------------------------
    # Flask app configuration
    # ----------------------------
    app = CatalogFlask(__name__, static_folder=None)
    app.config['CATALOG_SETTINGS'] = settings
    app.config['RATELIMIT_ENABLED'] = settings.ratelimit_enabled
    app.extensions['catalog'] = catalog
    app.json.sort_keys = False
    app.json.compact = False

    # ----------------------------
    # Rate Limiter
    # ----------------------------
    Limiter(
        get_remote_address,
        app=app,
        default_limits=[settings.hourly_limit, settings.secondly_limit],
        storage_uri="memory://",
    )

    # ----------------------------
    # Register blueprints
    # ----------------------------
    app.register_blueprint(error_bp)
    app.register_blueprint(item_routes)
    app.register_blueprint(status_routes)

    # ----------------------------
    # Logging Configuration
    # ----------------------------
    setup_logging(app, settings)
    app.logger.info(f"Catalog loaded with {len(catalog)} items (version {settings.version})")

    return app


def main():
    settings = Settings.from_env()
    app = create_app(settings)
    try:
        # werkzeug reports a failed bind with sys.exit(1) rather than OSError
        server = make_server(settings.host, settings.port, app, threaded=True)
    except (OSError, SystemExit) as e:
        app.logger.critical(f"Could not bind {settings.host}:{settings.port}: {e}")
        sys.exit(1)

    app.logger.info(f"Server started on port {settings.port}")
    app.logger.info(f"Try accessing: http://localhost:{settings.port}/items/5")
    server.serve_forever()


# ----------------------------
# Run the app
# ----------------------------
if __name__ == '__main__':
    main()
