"""User profile command.

Contents:
    * :func:`cli_user` - Check a user's email and optionally set the existence flag.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from google_home.domain.enums import OtherBool, OutputFormat
from google_home.domain.errors import ValidationError
from google_home.domain.user import User

from ..constants import CLICK_CONTEXT_SETTINGS
from ._shared import echo_json, exit_on_validation_error, output_format_option

logger = logging.getLogger(__name__)


@click.command("user", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("display_name")
@click.argument("email")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    help="Password for the profile. Prompted for when omitted; never printed.",
)
@click.option("--with-name", is_flag=True, default=False, help="Show the part before '@' as well as the domain")
@click.option(
    "--exists",
    "exists_answer",
    type=click.Choice([v.value for v in OtherBool]),
    default=None,
    help="Set whether the user exists in the user store",
)
@click.option("--admin", is_flag=True, default=False, help="Mark the user as an administrator")
@output_format_option
def cli_user(
    display_name: str,
    email: str,
    password: str,
    with_name: bool,
    exists_answer: str | None,
    admin: bool,
    output_format: str,
) -> None:
    """Create an in-memory profile for DISPLAY_NAME and report on EMAIL."""
    user = User(display_name, email, password, admin=admin)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-user", extra={"command": "user", "format": fmt.value}):
        logger.info("Inspecting user profile", extra={"admin": admin})
        try:
            email_parts = user.get_email_domain(name=with_name)
        except ValidationError as exc:
            logger.warning("Email has no domain part", extra={"error": str(exc)})
            email_parts = []
        previous_exists = user.exists
        with exit_on_validation_error("user"):
            if exists_answer is not None:
                user.toggle_exists_status(exists_answer)

        report = {
            "display_name": user.display_name,
            "email": user.email,
            "email_valid": user.validate_email(),
            "email_parts": email_parts,
            "exists": user.exists,
            "exists_changed": user.exists != previous_exists,
            "admin": user.admin,
            "signed_out": user.signed_out,
        }
        if fmt is OutputFormat.JSON:
            echo_json(report)
            return
        for key, value in report.items():
            click.echo(f"{key:<14} = {_human(value)}")


def _human(value: object) -> str:
    if isinstance(value, bool):
        return OtherBool.YES.value if value else OtherBool.NO.value
    if isinstance(value, list):
        return " @ ".join(str(part) for part in value)
    return str(value)


__all__ = ["cli_user"]
