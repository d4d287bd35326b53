from marshmallow import fields


class WholeNumber(fields.Integer):
    """Integer that refuses fractional numbers instead of truncating them.

    Numeric strings such as ``"4"`` from form posts are still accepted.
    """

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, float) and not value.is_integer():
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)
