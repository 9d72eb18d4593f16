from marshmallow import EXCLUDE, Schema, fields, validate


class _BodySchema(Schema):
    class Meta:
        unknown = EXCLUDE


class Text(fields.Field):
    """String field that also takes bare numbers (postal codes, phone numbers)."""

    default_error_messages = {"invalid": "Not a valid string."}

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise self.make_error("invalid")
        return str(value)


_required_text = dict(required=True, validate=validate.Length(min=1))


class AddressSchema(_BodySchema):
    first_name = Text(data_key="firstName", **_required_text)
    last_name = Text(data_key="lastName", **_required_text)
    address_line1 = Text(data_key="addressLine1", **_required_text)
    address_line2 = Text(data_key="addressLine2", load_default=None, allow_none=True)
    city = Text(**_required_text)
    state = Text(**_required_text)
    postal_code = Text(data_key="postalCode", **_required_text)
    country = Text(load_default=None, allow_none=True)
    phone = Text(load_default=None, allow_none=True)
    is_default = fields.Bool(data_key="isDefault", load_default=False, allow_none=True)


class AddCartItemSchema(_BodySchema):
    product_id = fields.Int(data_key="productId", required=True, strict=True)
    product_name = fields.Str(data_key="productName", **_required_text)
    size = fields.Str(**_required_text)
    quantity = fields.Int(load_default=1, strict=True, validate=validate.Range(min=1, max=99))
    unit_price = fields.Float(data_key="unitPrice", required=True, validate=validate.Range(min=0))
    image_url = fields.Str(data_key="imageUrl", load_default=None, allow_none=True)


class UpdateCartItemSchema(_BodySchema):
    quantity = fields.Int(required=True, strict=True, validate=validate.Range(min=0, max=99))


class SubscriberSchema(_BodySchema):
    email = fields.Email(required=True)
