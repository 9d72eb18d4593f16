from sqlalchemy import Column, Float, Integer, Text

from db import Base


class Product(Base):
    """
    Local copy of the provider catalog.

    Served when the provider is unreachable and for lookups by local id.
    `sizes` holds a JSON-encoded list of size labels.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(Text, nullable=True)
    tag = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    sizes = Column(Text, nullable=True)
    printify_id = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"


class TaxRate(Base):
    """Sales tax rate for a US state (or DC), keyed by two-letter code."""

    __tablename__ = "tax_rates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    state_code = Column(Text, nullable=False, unique=True)
    state_name = Column(Text, nullable=False)
    rate = Column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<TaxRate {self.state_code}={self.rate}>"
