from marshmallow import EXCLUDE, fields, validate
from golfteam.extensions import ma
from .fields import WholeNumber

PHONE_PATTERN = r"^\+?[0-9 ().-]{7,20}$"


class ContactProfileSchema(ma.Schema):
    """Shared shape of the Partner and Coach profiles."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    email = fields.Email(required=True)
    phone = fields.Str(
        allow_none=True, load_default=None,
        validate=validate.Regexp(PHONE_PATTERN, error="Not a valid phone number."),
    )
    user_id = WholeNumber(allow_none=True, load_default=None)


class PartnerSchema(ContactProfileSchema):
    athletes = fields.List(fields.Nested("AthleteSchema", only=("id", "name")), dump_only=True)


class CoachSchema(ContactProfileSchema):
    pass
