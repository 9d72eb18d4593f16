import logging

from flask import Blueprint
from marshmallow import ValidationError

from routes.schemas import AddressSchema
from routes.utils import get_current_user_id, get_json_body, handle_errors, success_response
from storefront.core.dependencies import resolve
from storefront.core.exceptions import ValidationError as RequestValidationError
from storefront.services.address_service import AddressService

logger = logging.getLogger(__name__)

addresses_bp = Blueprint("addresses", __name__)

_address_schema = AddressSchema()


@addresses_bp.route("", methods=["GET"])
@handle_errors("Failed to get addresses")
def list_addresses():
    user_id = get_current_user_id()
    addresses = resolve(AddressService).list_addresses(user_id)
    return success_response({"addresses": [a.to_dict() for a in addresses]})


@addresses_bp.route("", methods=["POST"])
@handle_errors("Failed to create address")
def create_address():
    """
    Save an address for the signed-in user. Setting isDefault demotes the
    user's previous default.
    """
    user_id = get_current_user_id()

    try:
        fields = _address_schema.load(get_json_body())
    except ValidationError as err:
        logger.info(f"Rejected address for user {user_id}: {err.messages}")
        raise RequestValidationError("Missing required address fields")

    is_default = bool(fields.pop("is_default", False))
    address_id = resolve(AddressService).create_address(user_id, fields, is_default)
    return success_response({"addressId": address_id}, 201)


@addresses_bp.route("/<int:address_id>", methods=["DELETE"])
@handle_errors("Failed to delete address")
def delete_address(address_id: int):
    user_id = get_current_user_id()
    resolve(AddressService).delete_address(user_id, address_id)
    return success_response({"message": "Address deleted"})
