import re

from flask import current_app, jsonify, request

from Utils.appError import AppError

ID_PATTERN = re.compile(r"[+-]?[0-9]+")
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1


def split_path(path):
    """Split on "/" and drop trailing empty segments: "/items/5/" -> ["", "items", "5"]."""
    parts = path.split("/")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_item_id(raw):
    """Parse a signed 32-bit decimal id, or raise AppError(400)."""
    if not ID_PATTERN.fullmatch(raw):
        raise AppError("Invalid ID format", 400)
    item_id = int(raw)
    if not INT32_MIN <= item_id <= INT32_MAX:
        raise AppError("Invalid ID format", 400)
    return item_id


def get_items(rest=None):
    """Dispatch /items and /items/<id> by the number of path segments."""
    if request.method != "GET":
        raise AppError("Method Not Allowed", 405)

    catalog = current_app.extensions["catalog"]
    parts = split_path(request.path)

    # /items
    if len(parts) == 2:
        return jsonify({
            "message": f"Use /items/{{id}} to get details for IDs 1-{catalog.max_id}"
        }), 200

    # /items/<id>
    if len(parts) == 3:
        item_id = parse_item_id(parts[2])
        item = catalog.get(item_id)
        if item is None:
            raise AppError("Item not found", 404)
        return current_app.response_class(item.to_json(), status=200, mimetype="application/json")

    raise AppError("Bad Request", 400)
