from flask import Blueprint
from Controllers.itemController import get_items
from Routes.statusRoutes import ALL_METHODS

# ----------------------------
# Item lookup routes
# ----------------------------
item_routes = Blueprint('item_routes', __name__, url_prefix='/items')

item_routes.add_url_rule('', view_func=get_items, methods=ALL_METHODS)
item_routes.add_url_rule('/', view_func=get_items, methods=ALL_METHODS)
item_routes.add_url_rule('/<path:rest>', view_func=get_items, methods=ALL_METHODS)
