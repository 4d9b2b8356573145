"""
notifications/services/reminders/sweep.py

Periodic reminder sweep over every active event.

Meant to run once a minute: reminder times are matched to the
minute, and nothing records which reminders already went out.
"""

import logging

from events.models import Event
from notifications.services.reminders.backends import build_evaluator

logger = logging.getLogger(__name__)


def send_event_reminders(evaluator=None, now=None):
    """
    Evaluate every event due today (UTC) or later.

    A failure on one event is logged and the sweep moves on.
    Returns the events that had a reminder dispatched.
    """
    evaluator = evaluator or build_evaluator()
    now = now or evaluator.clock()
    notified = []

    events = list(Event.active_projection())
    logger.debug("%d events to check for reminders", len(events))

    for event in events:
        try:
            if evaluator.evaluate(event, force_immediate=False, now=now):
                notified.append(event)
        except Exception:
            logger.exception("Reminder evaluation failed for event %s", event.pk)

    logger.info(
        "Reminder sweep at %s: %d of %d events notified",
        now, len(notified), len(events),
    )
    return notified
