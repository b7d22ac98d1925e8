import logging

from flask import request, current_app, render_template
from werkzeug.exceptions import HTTPException, BadRequest

from .query_utils import SORT_KEYS

logger = logging.getLogger(__name__)

# -----------------------------
# Error handlers
# -----------------------------

def _wants_json() -> bool:
    return request.path.startswith("/api/")


def _error_body(status: int, code: str, message: str):
    return {"error": {"status": status, "code": code, "message": message}}


def install_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        if _wants_json():
            return _error_body(e.code, e.name.replace(" ", "_").upper(), e.description), e.code
        template = "404.html" if e.code == 404 else "error.html"
        return render_template(template, status=e.code, message=e.description), e.code

    @app.errorhandler(Exception)
    def handle_generic(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        # Avoid leaking details in production responses
        if _wants_json():
            return _error_body(500, "INTERNAL_SERVER_ERROR", "Internal Server Error"), 500
        return render_template("error.html", status=500, message="Internal Server Error"), 500


# -----------------------------
# Validators
# -----------------------------

def validate_sort_param() -> str | None:
    order = request.args.get("sort") or None
    if order is not None and order not in SORT_KEYS:
        raise BadRequest(f"sort must be one of {list(SORT_KEYS)}")
    return order


def validate_limit() -> int:
    max_limit = current_app.config["POPULAR_LIMIT"]
    try:
        limit = int(request.args.get("limit", max_limit))
    except ValueError:
        raise BadRequest("limit must be an integer")
    if not (1 <= limit <= max_limit):
        raise BadRequest(f"limit must be between 1 and {max_limit}")
    return limit
