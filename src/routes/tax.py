from flask import Blueprint

from routes.utils import handle_errors, success_response
from storefront.core.dependencies import resolve
from storefront.services.tax_service import TaxService

tax_bp = Blueprint("tax", __name__)


@tax_bp.route("/<state_code>", methods=["GET"])
@handle_errors("Failed to get tax rate")
def get_tax_rate(state_code: str):
    """Unknown state codes are untaxed."""
    service = resolve(TaxService)
    code = service.normalize_code(state_code)
    return success_response({"rate": service.get_rate(code), "stateCode": code})
