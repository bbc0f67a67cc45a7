"""Profile CLI commands for Rescisao Calc.

Manages the user profile (profile.yaml): worker or HR, company and CNPJ.
"""

import click
from pydantic import ValidationError

from rescisao.sdk import get_profile_path, has_seen_first_open
from rescisao.sdk.profile import UserProfile, get_user_profile, save_user_profile, validate_cnpj


@click.group()
def profile():
    """Manage the user profile (profile.yaml)."""
    pass


@profile.command("show")
def profile_show():
    """Show the current profile."""
    click.echo(f"Profile file: {get_profile_path()}")
    click.echo(f"Onboarding done: {has_seen_first_open()}")

    try:
        current = get_user_profile()
    except ValidationError as e:
        raise click.ClickException(f"Invalid profile: {e}")

    if current is None:
        click.echo("\nNo profile saved. Create one with: rescisao-calc profile init")
        return

    click.echo()
    for key, value in current.model_dump(exclude_none=True).items():
        click.echo(f"  {key}: {value}")


@profile.command("init")
@click.option("--type", "user_type", type=click.Choice(["worker", "hr"]), prompt="User type",
              default="worker", show_default=True)
@click.option("--name", prompt="Name", default="", show_default=False)
@click.option("--email", default="", help="Contact email")
@click.option("--company", default="", help="Company name (HR users)")
@click.option("--cnpj", default="", help="Company CNPJ (HR users)")
def profile_init(user_type, name, email, company, cnpj):
    """Create or replace the profile."""
    if user_type == "hr":
        if not company:
            company = click.prompt("Company")
        if not cnpj:
            cnpj = click.prompt("CNPJ")
        if not validate_cnpj(cnpj):
            raise click.BadParameter(f"Invalid CNPJ: {cnpj}", param_hint="--cnpj")

    try:
        user = UserProfile(
            user_type=user_type,
            name=name or None,
            email=email or None,
            company=company or None,
            cnpj=cnpj or None,
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid profile: {e}")
    save_user_profile(user)
    click.echo(f"Saved profile to {get_profile_path()}")
