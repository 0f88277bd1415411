"""CLI commands for the wedding invitation RSVP service."""

import asyncio

import typer

from src.client.controller import RSVPFormController
from src.client.form_state import ConfirmationSummary
from src.client.submitter import HttpRSVPSubmitter
from src.config.database import upgrade_db
from src.config.logging import setup_logging
from src.config.settings import settings
from src.email_service import (
    EmailMessage,
    EmailTemplates,
    get_email_service,
    render_rsvp_email,
    render_rsvp_email_text,
)

app = typer.Typer(help="CLI commands for the wedding invitation RSVP service")


def _show_confirmation(summary: ConfirmationSummary, show_confetti: bool) -> None:
    if show_confetti:
        typer.secho("🎉 ✨ 🎊 ✨ 🎉 ✨ 🎊 ✨ 🎉", fg=typer.colors.YELLOW)
    typer.secho(summary.headline, fg=typer.colors.GREEN, bold=True)
    typer.echo(summary.subheadline)

    if summary.event_details:
        details = summary.event_details
        typer.echo()
        typer.secho("Event Details", fg=typer.colors.YELLOW)
        typer.secho(f"  {details.venue_name}", fg=typer.colors.BLUE)
        typer.echo(f"  {details.venue_address}")
        typer.secho(f"  {details.event_date}", fg=typer.colors.BLUE)
        typer.echo(f"  {details.schedule}")

    typer.echo()
    typer.secho("Your RSVP", fg=typer.colors.YELLOW)
    for label, value in summary.rows:
        typer.echo(f"  {label}: {value}")
    if summary.message:
        typer.echo(f"  Message: “{summary.message}”")


async def _fill_and_submit(controller: RSVPFormController) -> None:
    while True:
        state = controller.state
        controller.update_field("name", typer.prompt("Full name", default=state.name or None))
        controller.update_field("email", typer.prompt("Email", default=state.email or None))
        controller.update_field("guests", typer.prompt("Number of guests", default=state.guests))
        attending = typer.confirm("Will you be attending?", default=state.attending != "no")
        controller.update_field("attending", "yes" if attending else "no")
        controller.update_field(
            "message", typer.prompt("Message for the couple", default=state.message, show_default=False)
        )

        await controller.submit()

        if controller.state.show_modal:
            _show_confirmation(controller.confirmation(), controller.state.show_confetti)
            controller.close_modal()
            return

        typer.secho(controller.state.error, fg=typer.colors.RED)
        if not typer.confirm("Try again?", default=True):
            raise typer.Exit(1)


@app.command()
def rsvp(
    api_url: str = typer.Option(
        settings.api_base_url,
        "--api-url",
        "-u",
        help="Base URL of the RSVP API",
    ),
):
    """Fill in the RSVP form and send it to the API."""
    controller = RSVPFormController(submitter=HttpRSVPSubmitter(base_url=api_url))
    asyncio.run(_fill_and_submit(controller))


async def _send_test_email(to_address: str, attending: bool, guests: int) -> str | None:
    message = EmailMessage(
        to=to_address,
        subject=EmailTemplates.get_confirmation_subject(attending),
        html=render_rsvp_email("Test Guest", attending, guests),
        text=render_rsvp_email_text("Test Guest", attending, guests),
    )
    return await get_email_service().send(message)


@app.command()
def send_test_email(
    to: str = typer.Option(
        ...,
        "--to",
        "-t",
        help="Address to send the test confirmation to",
    ),
    not_attending: bool = typer.Option(
        False,
        "--not-attending",
        help="Send the 'we'll miss you' variant",
    ),
    guests: int = typer.Option(
        1,
        "--guests",
        "-g",
        min=1,
        help="Number of guests shown in the email",
    ),
):
    """Render the RSVP confirmation email and send it with the configured mailer."""
    setup_logging()
    try:
        email_id = asyncio.run(_send_test_email(to, not not_attending, guests))
    except Exception as e:
        typer.secho(f"Failed to send email: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Email sent!", fg=typer.colors.GREEN)
    typer.secho(f"  To: {to}", fg=typer.colors.BLUE)
    if email_id:
        typer.secho(f"  Email ID: {email_id}", fg=typer.colors.CYAN)


@app.command()
def init_db(
    alembic_ini: str = typer.Option(
        "alembic.ini",
        "--config",
        "-c",
        help="Path to alembic.ini",
    ),
):
    """Run database migrations up to head."""
    asyncio.run(upgrade_db(alembic_ini))
    typer.secho("Database is up to date!", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
