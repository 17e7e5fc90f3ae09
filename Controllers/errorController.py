from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from Utils.appError import AppError

error_bp = Blueprint('errors', __name__)


def error_response(message, status_code):
    return jsonify({"error": message}), status_code


@error_bp.app_errorhandler(AppError)
def handle_app_error(err):
    current_app.logger.warning(
        f"AppError {err.status_code} at {request.path}: {err} | Method: {request.method}"
    )
    return error_response(str(err), err.status_code)


@error_bp.app_errorhandler(404)
def not_found_error(e):
    current_app.logger.warning(
        f"404 Not Found: {request.url} | Method: {request.method} | IP: {request.remote_addr}"
    )
    return error_response("Not Found", 404)


@error_bp.app_errorhandler(405)
def method_not_allowed(e):
    return error_response("Method Not Allowed", 405)


@error_bp.app_errorhandler(429)
def ratelimit_handler(e):
    current_app.logger.warning(f"Rate limit exceeded: {request.remote_addr} {request.path}")
    return error_response("Too Many Requests", 429)


@error_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    return error_response(e.name, e.code)


@error_bp.app_errorhandler(Exception)
def handle_unexpected_error(e):
    # This includes traceback automatically
    current_app.logger.exception(
        f"Unexpected Application Error: {e} | URL: {request.url} | Method: {request.method}"
    )
    return error_response("Internal Server Error", 500)
