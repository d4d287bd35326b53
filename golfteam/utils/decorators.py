# golfteam/utils/decorators.py
from functools import wraps
from flask import request
from golfteam.errors import ValidationFailed
from golfteam.identity import load_caller


def with_caller(view_func):
    """
    Resolve the caller context (identity, roles, linked profiles) for the
    request and pass it to the view as the ``caller`` keyword argument.
    Anonymous requests get an empty context; the policy decides what they see.
    """
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        kwargs['caller'] = load_caller()
        return view_func(*args, **kwargs)
    return wrapper


def submitted_data():
    """Body of a create/edit submission, JSON or form encoded."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationFailed({"_schema": ["Submission must be an object."]})
    return data
