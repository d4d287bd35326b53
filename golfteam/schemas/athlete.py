from marshmallow import EXCLUDE, fields, validate
from golfteam.extensions import ma
from .fields import WholeNumber

RATING_RANGE = validate.Range(min=0, max=5)


class AthleteSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    picture_url = fields.Str(allow_none=True, load_default=None, validate=validate.Length(max=255))
    swing_rating = WholeNumber(load_default=0, validate=RATING_RANGE)
    power_rating = WholeNumber(load_default=0, validate=RATING_RANGE)
    understanding_rating = WholeNumber(load_default=0, validate=RATING_RANGE)
    partner_id = WholeNumber(required=True)
    user_id = WholeNumber(allow_none=True, load_default=None)

    partner = fields.Nested("PartnerSchema", only=("id", "name"), dump_only=True)
