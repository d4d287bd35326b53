from marshmallow import EXCLUDE, fields
from golfteam.extensions import ma


class UserSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True)
    roles = fields.Method("get_roles", dump_only=True)
    created_at = fields.DateTime(dump_only=True)

    def get_roles(self, user):
        return sorted(user.role_names)
