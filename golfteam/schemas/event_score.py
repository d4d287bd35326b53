from marshmallow import EXCLUDE, fields, validate
from golfteam.extensions import ma
from .fields import WholeNumber


class EventScoreSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    athlete_id = WholeNumber(required=True)
    event_id = WholeNumber(required=True)
    entered_by_partner_id = WholeNumber(required=True)
    golf_score = WholeNumber(required=True)
    holes_completed = WholeNumber(required=True, validate=validate.Range(min=1, max=18))
    # Server clock only, never read from input
    timestamp = fields.DateTime(dump_only=True)

    athlete = fields.Nested("AthleteSchema", only=("id", "name", "partner_id"), dump_only=True)
    event = fields.Nested("GolfEventSchema", only=("id", "title", "event_date"), dump_only=True)
    entered_by_partner = fields.Nested("PartnerSchema", only=("id", "name"), dump_only=True)
