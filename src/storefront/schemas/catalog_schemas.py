from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderImage(BaseModel):
    """Mockup image attached to a provider product"""
    model_config = ConfigDict(extra="ignore")

    src: str = Field(default="", description="Image URL")
    is_default: bool = Field(default=False, description="Flagged as the product's main image")


class ProviderVariant(BaseModel):
    """A purchasable size/colour combination"""
    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = ""
    price: int = Field(default=0, description="Price in minor units (cents)")
    is_available: bool = False


class ProviderProduct(BaseModel):
    """Product as returned by the provider's products endpoints"""
    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    description: str = ""
    images: List[ProviderImage] = Field(default_factory=list)
    variants: List[ProviderVariant] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Union[str, int]) -> str:
        return str(v)

    @field_validator("title", "description", mode="before")
    @classmethod
    def none_to_empty(cls, v: Optional[str]) -> str:
        return v or ""

    @field_validator("images", "variants", mode="before")
    @classmethod
    def none_to_list(cls, v):
        return v or []


class ShippingQuoteRequest(BaseModel):
    """Body of the provider's shipping-cost endpoint"""
    line_items: List[dict]
    address_to: dict
