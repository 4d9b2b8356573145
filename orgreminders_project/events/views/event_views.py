import logging

from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET, require_POST

from events.models import Event
from events.services import event_summary_html, format_due, save_event
from notifications.conf import get_reminder_settings
from notifications.exceptions import UnknownTimeZone
from notifications.services import build_evaluator, notify_admin
from notifications.services.reminders import resolve_timezone

logger = logging.getLogger(__name__)


def serialize_event(event, due_formatted):
    return {
        "key": event.key,
        "title": event.title,
        "orgs": event.orgs,
        "due": event.due.isoformat(),
        "due_formatted": due_formatted,
        "email_enabled": event.email_enabled,
        "text_enabled": event.text_enabled,
        "reminders": event.reminders,
    }


# ============================================================
# LIST (ACTIVE EVENTS OF THE USER'S ORGANIZATIONS)
# ============================================================

@require_GET
def event_list(request):
    reminder_settings = get_reminder_settings()
    events = {}

    for org in request.web_user.organizations:
        try:
            tz = resolve_timezone(org.time_zone)
        except UnknownTimeZone:
            logger.info("Skipping events of org %s: bad time zone", org.name)
            continue

        for event in org.get_events(active=True):
            events[event.key] = serialize_event(
                event,
                event.due_in(tz).strftime(reminder_settings.due_format),
            )

    return JsonResponse({"events": list(events.values())})


# ============================================================
# DETAIL (EDIT FORM DATA)
# ============================================================

@require_GET
def event_detail(request, key):
    reminder_settings = get_reminder_settings()
    event = get_object_or_404(Event, pk=key)

    data = serialize_event(event, format_due(event, reminder_settings.due_format))
    data.update({
        "email_message": event.email_message,
        "text_message": event.text_message,
        "submitter": event.submitter,
        "schedule": event.schedule.as_pairs(),
        # Organizations the user could still add to this event
        "available_orgs": [
            name for name in request.web_user.organization_names
            if name not in event.orgs
        ],
    })
    return JsonResponse(data)


# ============================================================
# SAVE (CREATE / UPDATE, OPTIONAL IMMEDIATE NOTIFY)
# ============================================================

@require_POST
def event_save(request):
    reminder_settings = get_reminder_settings()
    web_user = request.web_user

    try:
        event, created = save_event(
            request.POST,
            submitter=web_user.email,
            due_format=reminder_settings.due_format,
        )
    except ValidationError as exc:
        return JsonResponse({"error": " ".join(exc.messages)}, status=400)

    notified = False
    if request.POST.get("oncreate") == "on":
        evaluator = build_evaluator(reminder_settings)
        notified = evaluator.evaluate(event, force_immediate=True)

    due_formatted = format_due(event, reminder_settings.due_format)
    subject = ("Event Saved: " if created else "Event Updated: ") + event.title
    notify_admin(
        web_user.email,
        subject,
        "The following event was just saved: <br><br>"
        + event_summary_html(event, due_formatted),
        reminder_settings=reminder_settings,
    )

    data = serialize_event(event, due_formatted)
    data.update({"created": created, "notified": notified})
    return JsonResponse(data, status=201 if created else 200)
