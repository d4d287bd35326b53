from flask import Blueprint, jsonify, redirect, url_for, flash

from golfteam.models.user import PARTNER
from golfteam.schemas import PartnerSchema
from golfteam.services import partners
from golfteam.utils.decorators import with_caller, submitted_data
from .profiles import after_registration

partners_bp = Blueprint("partners", __name__)

partner_schema = PartnerSchema()
partners_schema = PartnerSchema(many=True, exclude=("athletes",))


@partners_bp.route("/", methods=["GET"])
@with_caller
def index(caller):
    return jsonify({"partners": partners_schema.dump(partners.list_partners(caller))}), 200


@partners_bp.route("/<int:partner_id>", methods=["GET"])
@with_caller
def details(partner_id, caller):
    return jsonify(partner_schema.dump(partners.get_partner(caller, partner_id))), 200


@partners_bp.route("/create", methods=["GET"])
@with_caller
def create_form(caller):
    rule, existing = partners.create_form(caller)
    if existing is not None:
        return redirect(url_for("partners.details", partner_id=existing.id))
    return jsonify({"editable_fields": sorted(rule.fields), "self_registration": rule.binds_identity}), 200


@partners_bp.route("/create", methods=["POST"])
@with_caller
def create(caller):
    registration = partners.create_partner(caller, submitted_data())
    return after_registration(partners.PARTNERS, registration, caller, "partners", "dashboard.partner_dashboard")


@partners_bp.route("/<int:partner_id>/edit", methods=["GET"])
@with_caller
def edit_form(partner_id, caller):
    rule, partner = partners.edit_form(caller, partner_id)
    return jsonify({"partner": partner_schema.dump(partner), "editable_fields": sorted(rule.fields)}), 200


@partners_bp.route("/<int:partner_id>/edit", methods=["POST"])
@with_caller
def edit(partner_id, caller):
    rule, partner = partners.update_partner(caller, partner_id, submitted_data())
    flash("Partner profile updated successfully!", "success")
    if rule.role == PARTNER:
        return redirect(url_for("dashboard.partner_dashboard"))
    return redirect(url_for("partners.index"))


@partners_bp.route("/<int:partner_id>/delete", methods=["GET"])
@with_caller
def delete_form(partner_id, caller):
    return jsonify(partner_schema.dump(partners.delete_form(caller, partner_id))), 200


@partners_bp.route("/<int:partner_id>/delete", methods=["POST"])
@with_caller
def delete(partner_id, caller):
    partners.delete_partner(caller, partner_id)
    flash("Partner deleted.", "success")
    return redirect(url_for("partners.index"))
