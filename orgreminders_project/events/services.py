from datetime import datetime

from django.core.exceptions import ValidationError
from django.urls import reverse
from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe

from events.models import Event
from notifications.exceptions import ReminderError, UnknownTimeZone
from notifications.services.reminders import lookup_organization, resolve_timezone


def reminder_tokens(quantities, units):
    """
    Join the parallel remqty[] / remtyp[] form rows into offset
    tokens. Rows left completely blank are dropped.
    """
    tokens = []
    for qty, unit in zip(quantities, units):
        qty = (qty or "").strip()
        unit = (unit or "").strip()
        if not qty and not unit:
            continue
        tokens.append(f"{qty}{unit}")
    return tokens


def organization_timezone(org_name):
    """Time zone of an organization, by name."""
    try:
        organization = lookup_organization(org_name)
        return resolve_timezone(organization.time_zone)
    except UnknownTimeZone as exc:
        raise ValidationError(f"Organization {org_name} has an invalid time zone ({exc.name}).")
    except ReminderError:
        raise ValidationError(f"Organization {org_name} was not found.")


def parse_due(value, tz, due_format):
    try:
        naive = datetime.strptime((value or "").strip(), due_format)
    except ValueError:
        raise ValidationError("Invalid time string")
    return naive.replace(tzinfo=tz)


def format_due(event, due_format):
    """Due instant in the first organization's time zone."""
    if not event.orgs:
        return event.due.strftime(due_format)

    try:
        tz = organization_timezone(event.orgs[0])
    except ValidationError:
        return event.due.strftime(due_format)
    return event.due_in(tz).strftime(due_format)


def save_event(data, submitter, due_format):
    """
    Create or update an Event from the event form.

    Returns (event, created). Raises ValidationError when no
    organization was chosen or the due string does not parse.
    """
    orgs = [name for name in data.getlist("orgs") if name]
    if not orgs:
        raise ValidationError("You must choose an organization.")

    tz = organization_timezone(orgs[0])
    due = parse_due(data.get("due"), tz, due_format)

    key = (data.get("key") or "").strip()
    if key:
        try:
            event = Event.objects.get(pk=key)
        except (Event.DoesNotExist, ValueError):
            raise ValidationError("Event not found.")
        created = False
    else:
        event = Event()
        created = True

    event.title = data.get("title", "")
    event.email_message = data.get("emailmessage", "")
    event.text_message = data.get("textmessage", "")
    event.orgs = orgs
    event.due = due
    event.email_enabled = data.get("sendemail") == "on"
    event.text_enabled = data.get("sendtext") == "on"
    event.reminders = reminder_tokens(
        data.getlist("remqty[]"),
        data.getlist("remtyp[]"),
    )
    if created:
        event.submitter = submitter

    event.save()
    return event, created


def event_summary_html(event, due_formatted):
    """HTML block describing a saved event, for the confirmation email."""
    return format_html(
        '<label>Event Title: </label><a href="{}">{}</a><br>'
        "<label>When Due: </label>{}<br>"
        "<label>Organization(s): </label>{}<br>"
        "<label>Email enabled: </label>{}<br>"
        "<label>Text Enabled: </label>{}<br>"
        '<label>Reminders: </label>{}<br>'
        '<label>Email Message: </label><br><div class="msgbody">{}</div><br>'
        '<label>Text Message: </label><br><div class="msgbody"><pre>{}</pre></div><br>',
        reverse("events:detail", args=[event.pk]),
        event.title,
        due_formatted,
        format_html_join(", ", "{}", ((name,) for name in event.orgs)),
        event.email_enabled,
        event.text_enabled,
        ", ".join(event.reminders),
        # The email body is authored as HTML by the organization admin
        mark_safe(event.email_message),
        event.text_message,
    )
