#!/usr/bin/env python3
"""
Command-line front end for the EV Service Center API.

Covers the day-to-day staff and technician tasks: signing in, the weekly
slot timetable, transaction review and refunds, appointment confirmation and
technician assignment, and part request approval.
"""
import functools
import logging
from datetime import date
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from evservice.client import ApiClient
from evservice.config import Settings, get_settings
from evservice.errors import EVServiceError
from evservice.filters import TransactionBrowser, TransactionFilters
from evservice.formatting import format_vietnamese_datetime, format_vnd
from evservice.notify import ErrorThrottle, Notifier
from evservice.resources import EVServiceAPI
from evservice.schedule import fetch_week, occupancy, technician_names, week_start_for
from evservice.session import AuthSession
from evservice import workflows

console = Console()

STYLES = {"error": "bold red", "warning": "yellow", "success": "green"}


def console_sink(level: str, message: str) -> None:
    console.print(message, style=STYLES.get(level))


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_api(settings: Settings) -> EVServiceAPI:
    def on_unauthorized(login_path: str) -> None:
        console.print("Session ended. Run `evservice login` to sign in again.", style="yellow")

    notifier = Notifier(
        sink=console_sink, throttle=ErrorThrottle(settings.error_throttle_seconds)
    )
    client = ApiClient(settings=settings, notifier=notifier, on_unauthorized=on_unauthorized)
    return EVServiceAPI(client)


def handle_errors(func):
    """Turn client errors into a clean exit status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except EVServiceError as exc:
            raise click.ClickException(str(exc)) from exc
    return wrapper


def require_user(session: AuthSession):
    session.bootstrap()
    if not session.is_authenticated:
        raise click.ClickException("Not signed in. Run `evservice login` first.")
    return session.user


@click.group()
@click.option("--api-url", default=None, help="Override the API base URL.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx, api_url: Optional[str], verbose: bool):
    """EV Service Center client."""
    settings = get_settings()
    if api_url is not None:
        settings = settings.model_copy(update={"api_url": api_url})
    setup_logging("DEBUG" if verbose or settings.debug else settings.log_level)
    if ctx.obj is None:
        ctx.obj = build_api(settings)


# ---------------------------------------------------------------- auth

@cli.command()
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True)
@click.pass_obj
@handle_errors
def login(api: EVServiceAPI, email: str, password: str):
    """Sign in and remember the token."""
    state = AuthSession(api).login(email, password)
    console.print(f"✅ Signed in as {state.user.full_name} ({state.user.role.value})")


@cli.command()
@click.pass_obj
def logout(api: EVServiceAPI):
    """Forget the stored token."""
    AuthSession(api).logout()
    console.print("👋 Signed out")


@cli.command()
@click.pass_obj
@handle_errors
def whoami(api: EVServiceAPI):
    """Show the signed-in user."""
    user = require_user(AuthSession(api))
    console.print(f"{user.full_name} <{user.email}> - {user.role.value}")


# ---------------------------------------------------------------- slots

@cli.group()
def slots():
    """Technician slot timetable."""


@slots.command("week")
@click.option("--week-start", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Any day of the week to show (defaults to this week).")
@click.option("--technician", "technician_id", default=None,
              help="Technician id (defaults to the signed-in user).")
@click.pass_obj
@handle_errors
def slots_week(api: EVServiceAPI, week_start, technician_id: Optional[str]):
    """Show a weekly timetable of working slots."""
    user = require_user(AuthSession(api))
    technician_id = technician_id or user.id
    day = week_start.date() if week_start else date.today()
    grid = fetch_week(api, technician_id, week_start_for(day))

    table = Table(title=f"Working slots, week of {grid.date_from}")
    table.add_column("Time")
    for day_iso in grid.dates:
        table.add_column(date.fromisoformat(day_iso).strftime("%a %d/%m"))

    for start, end, cells in grid.rows():
        row = [f"{start} - {end}"]
        for day_iso, slot in zip(grid.dates, cells):
            if slot is None:
                row.append("[dim]No slot assigned[/dim]")
                continue
            marker = "✓ Completed" if grid.is_past(day_iso, start) else "⏰ Scheduled"
            names = ", ".join(technician_names(slot, user.id))
            row.append(f"{slot.status} {occupancy(slot)}\n{names}\n{marker}")
        table.add_row(*row)
    console.print(table)


# ---------------------------------------------------------------- transactions

@cli.group()
def transactions():
    """Staff transaction management."""


@transactions.command("list")
@click.option("--status", default=None)
@click.option("--type", "transaction_type", default=None)
@click.option("--purpose", "payment_purpose", default=None)
@click.option("--from", "start_date", default=None, help="YYYY-MM-DD")
@click.option("--to", "end_date", default=None, help="YYYY-MM-DD")
@click.option("--search", default=None)
@click.option("--page", default=1, show_default=True, type=int)
@click.pass_obj
@handle_errors
def transactions_list(api: EVServiceAPI, page: int, **filters):
    """List transactions matching the filters."""
    browser = TransactionBrowser(
        api, TransactionFilters(**filters), limit=api.client.settings.page_size
    )
    browser.fetch(page)
    if browser.error:
        raise click.ClickException(browser.error)

    table = Table(title=f"Transactions (page {browser.pagination.page})")
    for column in ("Ref", "Type", "Purpose", "Amount", "Status", "Created"):
        table.add_column(column)
    for tx in browser.transactions:
        table.add_row(
            tx.transaction_ref or tx.id,
            tx.transaction_type,
            tx.payment_purpose or "",
            format_vnd(tx.amount),
            tx.status,
            format_vietnamese_datetime(tx.created_at) if tx.created_at else "",
        )
    console.print(table)
    if browser.has_next:
        console.print(f"More results: --page {browser.pagination.page + 1}", style="dim")


@transactions.command("stats")
@click.option("--from", "start_date", default=None)
@click.option("--to", "end_date", default=None)
@click.pass_obj
@handle_errors
def transactions_stats(api: EVServiceAPI, start_date, end_date):
    """Show transaction statistics."""
    browser = TransactionBrowser(api, TransactionFilters(start_date=start_date, end_date=end_date))
    stats = browser.fetch_stats()
    if stats is None:
        raise click.ClickException("No statistics available")
    table = Table(title="Transaction statistics")
    table.add_column("Metric")
    table.add_column("Value")
    for key, value in stats.items():
        is_money = "amount" in str(key).lower() and isinstance(value, (int, float))
        table.add_row(str(key), format_vnd(value) if is_money else str(value))
    console.print(table)


@transactions.command("refund")
@click.argument("transaction_id")
@click.option("--reason", required=True)
@click.option("--amount", type=float, default=None, help="Partial amount; full refund if omitted.")
@click.pass_obj
@handle_errors
def transactions_refund(api: EVServiceAPI, transaction_id: str, reason: str, amount):
    """Refund a completed transaction."""
    browser = TransactionBrowser(api)
    try:
        browser.refund(transaction_id, reason=reason, amount=amount)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


# ---------------------------------------------------------------- appointments

@cli.group()
def appointments():
    """Appointment confirmation and assignment."""


@appointments.command("pending")
@click.pass_obj
@handle_errors
def appointments_pending(api: EVServiceAPI):
    """Appointments waiting for staff confirmation."""
    table = Table(title="Pending staff confirmation")
    for column in ("Id", "Number", "Date", "Time", "Status"):
        table.add_column(column)
    for appt in workflows.pending_appointments(api):
        table.add_row(
            appt.id,
            appt.appointment_number or "",
            appt.scheduled_date or "",
            appt.scheduled_time or "",
            appt.status.value,
        )
    console.print(table)


@appointments.command("confirm")
@click.argument("appointment_id")
@click.option("--notes", default=None)
@click.pass_obj
@handle_errors
def appointments_confirm(api: EVServiceAPI, appointment_id: str, notes):
    """Confirm an appointment."""
    workflows.confirm_appointment(api, appointment_id, notes)


@appointments.command("assign")
@click.argument("appointment_id")
@click.argument("technician_id")
@click.pass_obj
@handle_errors
def appointments_assign(api: EVServiceAPI, appointment_id: str, technician_id: str):
    """Assign a technician to an appointment."""
    workflows.assign_technician(api, appointment_id, technician_id)


@cli.group()
def technicians():
    """Technician lookups."""


@technicians.command("available")
@click.argument("day")
@click.argument("time")
@click.option("--duration", type=int, default=None)
@click.option("--category", "categories", multiple=True)
@click.pass_obj
@handle_errors
def technicians_available(api: EVServiceAPI, day: str, time: str, duration, categories):
    """Technicians free at DAY TIME, as ranked by the server."""
    candidates = workflows.available_technicians(
        api, day, time, duration, list(categories) or None
    )
    table = Table(title=f"Available technicians {day} {time}")
    for column in ("Id", "Name", "Recommended", "Matching skills", "Workload"):
        table.add_column(column)
    for tech in candidates:
        workload = tech.workload
        table.add_row(
            tech.id,
            tech.name,
            "★" if tech.is_recommended else "",
            ", ".join(tech.matching_skills),
            f"{workload:.0f}%" if workload is not None else "",
        )
    console.print(table)


# ---------------------------------------------------------------- part requests

@cli.group("part-requests")
def part_requests():
    """Part request review."""


@part_requests.command("approve")
@click.argument("request_id")
@click.option("--notes", default=None)
@click.pass_obj
@handle_errors
def part_requests_approve(api: EVServiceAPI, request_id: str, notes):
    """Approve a technician's part request."""
    workflows.approve_part_request(api, request_id, notes)


@part_requests.command("reject")
@click.argument("request_id")
@click.option("--reason", required=True)
@click.pass_obj
@handle_errors
def part_requests_reject(api: EVServiceAPI, request_id: str, reason: str):
    """Reject a technician's part request."""
    try:
        workflows.reject_part_request(api, request_id, reason)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def main():
    cli(obj=None)


if __name__ == "__main__":
    main()
