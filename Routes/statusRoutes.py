from flask import Blueprint
from Controllers.statusController import get_status

ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

# ----------------------------
# Root status routes
# ----------------------------
status_routes = Blueprint('status_routes', __name__)

# Method and exact-path checks happen in the controller so that
# POST /anything is a 405 and GET /anything is a 404
status_routes.add_url_rule('/', view_func=get_status, methods=ALL_METHODS)
status_routes.add_url_rule('/<path:path>', view_func=get_status, methods=ALL_METHODS)
