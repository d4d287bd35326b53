"""Redirects shared by the coach and partner blueprints."""
from flask import flash, redirect, url_for

from golfteam import identity
from golfteam.services import profiles


def after_registration(kind, registration, caller, blueprint, dashboard_endpoint):
    label = kind.entity
    profile, outcome = registration

    if outcome == profiles.EXISTING:
        flash(f"You already have a {label} profile.", "info")
        return redirect(url_for(f"{blueprint}.details", **{f"{label}_id": profile.id}))

    if outcome == profiles.ROLE_FAILED:
        flash(f"Your {label} profile was saved but the {kind.role} role could not be assigned.", "danger")
        return redirect(url_for("main.home"))

    if outcome == profiles.REGISTERED:
        flash(f"Welcome! Your {label} profile is ready.", "success")
        response = redirect(url_for(dashboard_endpoint))
        identity.refresh_session(response, caller.user_id)
        return response

    flash(f"{label.capitalize()} created successfully!", "success")
    return redirect(url_for(f"{blueprint}.index"))
