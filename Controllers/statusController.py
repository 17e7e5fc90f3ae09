from flask import current_app, jsonify, request

from Controllers.itemController import get_items
from Utils.appError import AppError
from Utils.mascots import resolve_mascot


def build_status_payload(settings, catalog):
    """Assemble the root status document.

    The mascot art is kept as plain text here; jsonify escapes backslashes,
    quotes and newlines when the body is serialised.
    """
    return {
        "status": "OK",
        "service": "CatalogApi",
        "version": settings.version,
        "itemsLoaded": len(catalog),
        "mascot": resolve_mascot(settings.animal),
    }


def get_status(path=None):
    """GET / only. Every other path under the root context is a 404."""
    # the path converter cannot start with "/", so "/items//5" lands here
    if request.path.startswith("/items/"):
        return get_items()

    if request.method != "GET":
        raise AppError("Method Not Allowed", 405)

    if request.path != "/":
        raise AppError("Not Found", 404)

    settings = current_app.config["CATALOG_SETTINGS"]
    catalog = current_app.extensions["catalog"]
    return jsonify(build_status_payload(settings, catalog)), 200
