from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, func, text

from db import Base


class User(Base):
    """
    A registered customer.

    Password hashing and sessions live in the auth layer; only the hash is
    stored here.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    first_name = Column(Text, nullable=True)
    last_name = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    marketing_opt_in = Column(Integer, nullable=False, server_default=text("1"))
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


class MarketingSubscriber(Base):
    """
    An email address on the marketing list.

    Unsubscribing flips `subscribed` to 0; rows are never deleted. Deleting the
    user keeps the subscription but drops the link.
    """

    __tablename__ = "marketing_subscribers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False, unique=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    subscribed = Column(Integer, nullable=False, server_default=text("1"))
    subscribed_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    def __repr__(self) -> str:
        return f"<MarketingSubscriber email={self.email!r} subscribed={self.subscribed}>"
