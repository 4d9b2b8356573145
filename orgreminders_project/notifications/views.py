from django.core.exceptions import PermissionDenied
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from events.services import format_due
from notifications.conf import get_reminder_settings
from notifications.services import build_evaluator, send_event_reminders


@require_GET
def cron(request):
    """
    Run one reminder sweep by hand and list the events notified.
    Superusers only; the scheduler runs the same sweep every minute.
    """
    if not request.web_user.superuser:
        raise PermissionDenied

    reminder_settings = get_reminder_settings()
    notified = send_event_reminders(evaluator=build_evaluator(reminder_settings))

    return JsonResponse({
        "notified": [
            {
                "key": event.key,
                "title": event.title,
                "due_formatted": format_due(event, reminder_settings.due_format),
            }
            for event in notified
        ],
    })
