from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Text, func, text

from db import Base


class Address(Base):
    """
    A saved postal address belonging to a user.

    At most one address per user carries is_default = 1; the repository clears
    the others in the same transaction that inserts a new default.
    """

    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    is_default = Column(Integer, nullable=False, server_default=text("0"))
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    address_line1 = Column(Text, nullable=False)
    address_line2 = Column(Text, nullable=True)
    city = Column(Text, nullable=False)
    state = Column(Text, nullable=False)
    postal_code = Column(Text, nullable=False)
    country = Column(Text, nullable=False, server_default=text("'US'"))
    phone = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    def __repr__(self) -> str:
        return f"<Address id={self.id} city={self.city!r}>"


class Order(Base):
    """
    A placed order.

    user_id is NULL for guest checkouts. The shipping columns are a snapshot of
    the address at the time of purchase, not a reference to `addresses`.
    stripe_payment_intent_id and printify_order_id are written by the checkout
    and fulfillment flows.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    order_number = Column(Text, nullable=False, unique=True)
    status = Column(Text, nullable=False, server_default=text("'pending'"))
    subtotal = Column(Float, nullable=False)
    tax_amount = Column(Float, nullable=False, server_default=text("0"))
    shipping_amount = Column(Float, nullable=False, server_default=text("0"))
    total_amount = Column(Float, nullable=False)
    shipping_first_name = Column(Text, nullable=True)
    shipping_last_name = Column(Text, nullable=True)
    shipping_address1 = Column(Text, nullable=True)
    shipping_address2 = Column(Text, nullable=True)
    shipping_city = Column(Text, nullable=True)
    shipping_state = Column(Text, nullable=True)
    shipping_postal_code = Column(Text, nullable=True)
    shipping_country = Column(Text, nullable=True)
    shipping_email = Column(Text, nullable=True)
    stripe_payment_intent_id = Column(Text, nullable=True)
    printify_order_id = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    def __repr__(self) -> str:
        return f"<Order id={self.id} number={self.order_number!r} status={self.status!r}>"


class OrderItem(Base):
    """
    A line item of an order.

    Product name, size, price and image are copied at purchase time so later
    catalog changes do not rewrite history.
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, nullable=False)
    product_name = Column(Text, nullable=False)
    size = Column(Text, nullable=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)
    total_price = Column(Float, nullable=False)
    image_url = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<OrderItem id={self.id} product_id={self.product_id} qty={self.quantity}>"
