from flask import Blueprint, abort
from marshmallow import ValidationError

from routes.schemas import SubscriberSchema
from routes.utils import get_json_body, get_optional_user_id, handle_errors, success_response
from storefront.core.dependencies import resolve
from storefront.services.marketing_service import MarketingService

marketing_bp = Blueprint("marketing", __name__)

_subscriber_schema = SubscriberSchema()


def _load_email() -> str:
    try:
        return _subscriber_schema.load(get_json_body())["email"]
    except ValidationError:
        abort(400, "A valid email is required")


@marketing_bp.route("/subscribe", methods=["POST"])
@handle_errors("Failed to subscribe")
def subscribe():
    email = _load_email()
    added = resolve(MarketingService).subscribe(email, get_optional_user_id())
    return success_response({"subscribed": True, "alreadySubscribed": not added})


@marketing_bp.route("/unsubscribe", methods=["POST"])
@handle_errors("Failed to unsubscribe")
def unsubscribe():
    email = _load_email()
    resolve(MarketingService).unsubscribe(email)
    return success_response({"subscribed": False})
