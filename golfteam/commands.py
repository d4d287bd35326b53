import click
from flask import current_app
from flask.cli import with_appcontext

from golfteam import identity
from golfteam.extensions import db
from golfteam.models import User
from golfteam.models.user import ADMIN, ROLE_NAMES


def ensure_user(email, password):
    """Return the identity for ``email``, creating it or resetting its password."""
    email = email.strip().lower()
    user = User.query.filter_by(email=email).first()
    if user is None:
        user = User(email=email)
        db.session.add(user)
    user.set_password(password)
    db.session.commit()
    return user


@click.command("seed-roles")
@with_appcontext
def seed_roles():
    """Create or repair the administrator identity."""
    click.echo(f"Roles: {', '.join(ROLE_NAMES)}")
    email = current_app.config["ADMIN_EMAIL"]
    user = ensure_user(email, current_app.config["ADMIN_PASSWORD"])
    identity.assign_role(user.id, ADMIN)
    click.echo(f"Admin ready: {email}")


@click.command("create-user")
@click.argument("email")
@click.argument("password")
@click.option("--role", type=click.Choice(ROLE_NAMES), default=None, help="Role to grant.")
@with_appcontext
def create_user(email, password, role):
    if User.query.filter_by(email=email.strip().lower()).first():
        raise click.ClickException(f"User with email '{email}' already exists.")

    user = ensure_user(email, password)
    if role:
        identity.assign_role(user.id, role)
    click.echo(f"Created user {user.email} ({role or 'no role'})")


def register_commands(app):
    app.cli.add_command(seed_roles)
    app.cli.add_command(create_user)
