"""
Database and mail collaborators for the NotificationEvaluator.
"""

import logging
from functools import partial

from django.db import DatabaseError
from django.utils import timezone

from events.models import Event
from notifications.conf import ReminderSettings
from notifications.exceptions import OrganizationNotFound
from notifications.services.dispatch import send_org_message
from notifications.services.reminders.evaluator import NotificationEvaluator
from organizations.models import Organization

logger = logging.getLogger(__name__)


def lookup_organization(name):
    try:
        return Organization.objects.get(name=name)
    except Organization.DoesNotExist:
        raise OrganizationNotFound(name)
    except DatabaseError as exc:
        logger.info("Organization lookup DB error: %s", exc)
        raise OrganizationNotFound(name, "DB lookup error") from exc


def lookup_event(key):
    try:
        return Event.objects.get(pk=key)
    except (Event.DoesNotExist, ValueError, TypeError):
        logger.info("Invalid event key specified: %s", key)
    except DatabaseError as exc:
        logger.info("Event lookup DB error: %s", exc)
    return None


def build_evaluator(reminder_settings=None, clock=timezone.now):
    reminder_settings = reminder_settings or ReminderSettings.from_django()

    return NotificationEvaluator(
        lookup_organization=lookup_organization,
        lookup_event=lookup_event,
        dispatch=partial(send_org_message, reminder_settings=reminder_settings),
        clock=clock,
    )
