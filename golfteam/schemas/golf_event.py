from marshmallow import EXCLUDE, ValidationError, fields, validate, validates_schema
from golfteam.extensions import ma
from .fields import WholeNumber


class GolfEventSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    event_date = fields.Date(required=True)
    start_time = fields.Time(required=True)
    end_time = fields.Time(required=True)
    location = fields.Str(required=True, validate=validate.Length(min=1, max=300))
    created_by_coach_id = WholeNumber(required=True)

    created_by_coach = fields.Nested("CoachSchema", only=("id", "name"), dump_only=True)

    @validates_schema
    def validate_time_window(self, data, **kwargs):
        start, end = data.get("start_time"), data.get("end_time")
        if start is not None and end is not None and end <= start:
            raise ValidationError("End time must be after start time.", field_name="end_time")
