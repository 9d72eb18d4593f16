from typing import Any, Dict, List, Optional, Union
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.services.catalog_gateway import CatalogGateway
from storefront.models.order import Order, OrderStatus
from storefront.schemas.catalog_schemas import ShippingQuoteRequest
from storefront.core.exceptions import ForbiddenError, NotFoundError, ValidationError
import logging

logger = logging.getLogger(__name__)


class OrderService:
    """
    Order read paths for customers, plus the write operations the checkout
    flow drives (recording, status and fulfillment id updates).
    """

    def __init__(self, order_repository: OrderRepository):
        self.order_repo = order_repository

    def list_orders(self, user_id: int) -> List[Order]:
        """All of the user's orders, newest first, each with its items."""
        orders = self.order_repo.get_orders_by_user(user_id)
        for order in orders:
            order.items = self.order_repo.get_order_items(order.id)
        return orders

    def find_order(self, order_number: str, with_items: bool = True) -> Order:
        """Internal lookup by order number, without an ownership check."""
        order = self.order_repo.get_order_by_number(order_number)
        if order is None:
            raise NotFoundError("Order")
        if with_items:
            order.items = self.order_repo.get_order_items(order.id)
        return order

    def get_order(self, order_number: str, requester_id: Optional[int]) -> Order:
        """
        Fetch by order number for a requester. Guest orders are open to
        anyone; an owned order is forbidden to anyone but its owner.
        """
        order = self.find_order(order_number, with_items=False)
        if not order.is_visible_to(requester_id):
            logger.warning(f"User {requester_id} denied access to order {order_number}")
            raise ForbiddenError("Access denied")
        order.items = self.order_repo.get_order_items(order.id)
        return order

    def record_order(
        self,
        order_number: str,
        items: List[Dict[str, Any]],
        user_id: Optional[int] = None,
        tax_amount: float = 0,
        shipping_amount: float = 0,
        shipping: Optional[Dict[str, Any]] = None,
        stripe_payment_intent_id: Optional[str] = None,
    ) -> int:
        """
        Persist an order and its lines. Each item needs product_id,
        product_name, size, quantity, unit_price and optionally image_url.
        """
        if not items:
            raise ValidationError("Order has no items")

        subtotal = round(sum(i["unit_price"] * i["quantity"] for i in items), 2)
        total = round(subtotal + tax_amount + shipping_amount, 2)

        order_id = self.order_repo.create_order(
            order_number=order_number,
            user_id=user_id,
            subtotal=subtotal,
            tax_amount=tax_amount,
            shipping_amount=shipping_amount,
            total_amount=total,
            shipping=shipping,
            stripe_payment_intent_id=stripe_payment_intent_id,
        )
        for item in items:
            self.order_repo.create_order_item(
                order_id=order_id,
                product_id=item["product_id"],
                product_name=item["product_name"],
                size=item.get("size"),
                quantity=item["quantity"],
                unit_price=item["unit_price"],
                image_url=item.get("image_url"),
            )
        return order_id

    def update_status(self, order_id: int, status: Union[OrderStatus, str]) -> None:
        try:
            value = OrderStatus(status).value
        except ValueError:
            raise ValidationError(f"Unknown order status: {status}")
        if not self.order_repo.update_order_status(order_id, value):
            raise NotFoundError("Order")
        logger.info(f"Order {order_id} status -> {value}")

    def set_fulfillment_id(self, order_id: int, printify_order_id: str) -> None:
        if not self.order_repo.update_order_fulfillment_id(order_id, printify_order_id):
            raise NotFoundError("Order")


class FulfillmentService:
    """Forwards placed orders to the print-on-demand provider"""

    SHIPPING_METHOD_STANDARD = 1

    def __init__(
        self,
        order_service: OrderService,
        product_repository: ProductRepository,
        catalog: CatalogGateway,
    ):
        self.orders = order_service
        self.product_repo = product_repository
        self.catalog = catalog

    def build_line_items(self, order: Order) -> List[Dict[str, Any]]:
        """
        Map order lines to provider variants. Lines whose product has no
        provider id or whose size has no available variant are skipped.
        """
        line_items = []
        for item in order.items:
            product = self.product_repo.get_product_by_id(item.product_id)
            if product is None or not product.printify_id:
                logger.warning(f"Order {order.order_number}: product {item.product_id} has no provider id, skipping")
                continue

            variant_id = self.catalog.find_variant_id(product.printify_id, item.size or "")
            if variant_id is None:
                logger.warning(
                    f"Order {order.order_number}: no variant for product {product.printify_id} size {item.size!r}, skipping"
                )
                continue

            line_items.append({
                "product_id": product.printify_id,
                "variant_id": variant_id,
                "quantity": item.quantity,
            })
        return line_items

    @staticmethod
    def build_address(order: Order) -> Dict[str, Any]:
        shipping = order.shipping
        return {
            "first_name": shipping.first_name,
            "last_name": shipping.last_name,
            "email": shipping.email,
            "country": shipping.country or "US",
            "region": shipping.state,
            "address1": shipping.address1,
            "address2": shipping.address2 or "",
            "city": shipping.city,
            "zip": shipping.postal_code,
        }

    def submit_order(self, order_number: str) -> str:
        """
        Create the provider order for a stored order, then record the
        provider id and move the order to processing. Returns the provider id.
        """
        order = self.orders.find_order(order_number)
        line_items = self.build_line_items(order)
        if not line_items:
            raise ValidationError("No order items could be matched to provider variants")

        payload = {
            "external_id": order.order_number,
            "label": order.order_number,
            "line_items": line_items,
            "shipping_method": self.SHIPPING_METHOD_STANDARD,
            "send_shipping_notification": True,
            "address_to": self.build_address(order),
        }
        response = self.catalog.create_order(payload)
        provider_id = str(response.get("id", ""))
        if not provider_id:
            raise ValidationError("Provider did not return an order id")

        self.orders.set_fulfillment_id(order.id, provider_id)
        self.orders.update_status(order.id, OrderStatus.PROCESSING)
        logger.info(f"Order {order.order_number} submitted for fulfillment as {provider_id}")
        return provider_id

    def cancel_order(self, order_number: str) -> Dict[str, Any]:
        order = self.orders.find_order(order_number)
        if not order.printify_order_id:
            raise ValidationError("Order was never submitted for fulfillment")

        response = self.catalog.cancel_order(order.printify_order_id)
        self.orders.update_status(order.id, OrderStatus.CANCELLED)
        return response

    def quote_shipping(self, address: Dict[str, Any], line_items: List[Dict[str, Any]]) -> Dict[str, Any]:
        request = ShippingQuoteRequest(line_items=line_items, address_to=address)
        return self.catalog.get_shipping_cost(request.model_dump())
