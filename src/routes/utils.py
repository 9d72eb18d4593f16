import functools
import logging
from typing import Any, Dict, Optional

from flask import abort, jsonify, request
from werkzeug.exceptions import HTTPException

from storefront.core.dependencies import resolve
from storefront.core.exceptions import BaseAPIException
from storefront.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def success_response(payload: Optional[Dict[str, Any]] = None, status: int = 200):
    """Consistent success envelope: {"success": true, ...payload}."""
    response = {"success": True}
    if payload:
        response.update(payload)
    return jsonify(response), status


def handle_errors(failure_message: str):
    """
    Let client errors (4xx aborts and API exceptions) through unchanged and
    turn anything else into a 500 carrying `failure_message` only.
    """
    def decorator(view):
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except HTTPException:
                raise
            except BaseAPIException as e:
                if e.status_code < 500:
                    raise
                logger.error(f"{view.__name__} error: {e.internal_message}")
                abort(500, failure_message)
            except Exception as e:
                logger.exception(f"{view.__name__} error: {e}")
                abort(500, failure_message)
        return wrapper
    return decorator


def get_json_body() -> Dict[str, Any]:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def get_optional_user_id() -> Optional[int]:
    """
    User id from the X-User-Id header, or None for anonymous requests.

    An id with no matching user is rejected with 401.
    """
    uid = request.headers.get("X-User-Id")
    if not uid:
        return None
    try:
        user_id = int(uid)
    except ValueError:
        abort(400, "Invalid X-User-Id header: must be a positive integer.")
    if user_id <= 0:
        abort(400, "User ID must be a positive integer.")
    if not resolve(UserRepository).exists(user_id):
        abort(401, "Unknown user")
    return user_id


def get_current_user_id() -> int:
    """Extract and validate user ID from X-User-Id request header."""
    user_id = get_optional_user_id()
    if user_id is None:
        abort(401, "Authentication required")
    return user_id


def get_session_id() -> Optional[str]:
    """Anonymous cart session from the X-Session-Id header."""
    session_id = (request.headers.get("X-Session-Id") or "").strip()
    return session_id or None
