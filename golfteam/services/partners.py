from golfteam.models import Athlete, EventScore, Partner
from golfteam.models.user import PARTNER
from golfteam.schemas import PartnerSchema
from . import profiles


def _dependents(partner):
    return [
        ("athletes", Athlete.query.filter_by(partner_id=partner.id).count()),
        ("event scores", EventScore.query.filter_by(entered_by_partner_id=partner.id).count()),
    ]


PARTNERS = profiles.ProfileKind("partner", Partner, PartnerSchema(), PARTNER, _dependents)


def list_partners(caller):
    return profiles.list_profiles(PARTNERS, caller)


def get_partner(caller, partner_id):
    return profiles.get_profile(PARTNERS, caller, partner_id)


def create_form(caller):
    return profiles.create_form(PARTNERS, caller)


def create_partner(caller, submitted):
    return profiles.create_profile(PARTNERS, caller, submitted)


def edit_form(caller, partner_id):
    return profiles.edit_form(PARTNERS, caller, partner_id)


def update_partner(caller, partner_id, submitted):
    return profiles.update_profile(PARTNERS, caller, partner_id, submitted)


def delete_form(caller, partner_id):
    return profiles.delete_form(PARTNERS, caller, partner_id)


def delete_partner(caller, partner_id):
    return profiles.delete_profile(PARTNERS, caller, partner_id)
