from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Text, func, text

from db import Base


class CartItem(Base):
    """
    One line of a shopping cart.

    A line belongs either to a signed-in user (user_id) or to an anonymous
    browser session (session_id). Logging in moves session lines to the user
    by rewriting both columns. Product details are snapshotted like order items.
    """

    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True)
    session_id = Column(Text, nullable=True)
    product_id = Column(Integer, nullable=False)
    product_name = Column(Text, nullable=False)
    size = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False, server_default=text("1"))
    unit_price = Column(Float, nullable=False)
    image_url = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    def __repr__(self) -> str:
        return f"<CartItem id={self.id} product_id={self.product_id} qty={self.quantity}>"
