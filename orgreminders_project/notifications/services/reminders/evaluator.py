"""
notifications/services/reminders/evaluator.py

Decides, for one event at one instant, whether reminders go out.

Every organization on the event is evaluated on its own, in its own
time zone:

1. look the organization up (failure: skip this organization)
2. resolve its time zone (failure: skip this organization)
3. skip if the event is already past due there, even when forced
4. re-fetch the full event (failure: the whole call returns False)
5. notify when forced, or when any reminder time falls on the
   current minute
6. dispatch once per enabled channel

Nothing here touches the database or the mail backend directly;
both are reached through the collaborators passed in.
"""

import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from notifications.channels import CHANNEL_EMAIL, CHANNEL_TEXT
from notifications.exceptions import ReminderError, UnknownTimeZone

logger = logging.getLogger(__name__)


def utc_now():
    return datetime.now(timezone.utc)


def resolve_timezone(name):
    """
    Resolve an IANA zone name.

    An empty name means UTC. Anything else that cannot be loaded
    raises UnknownTimeZone.
    """
    if not name:
        return timezone.utc

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownTimeZone(name) from exc


def truncate_to_minute(moment):
    return moment.replace(second=0, microsecond=0)


def same_minute(first, second):
    """Compare two aware datetimes as instants, to the minute."""
    return (
        truncate_to_minute(first).astimezone(timezone.utc)
        == truncate_to_minute(second).astimezone(timezone.utc)
    )


def is_overdue(due, now):
    return due.astimezone(timezone.utc) < now.astimezone(timezone.utc)


def enabled_channels(event):
    channels = []
    if event.email_enabled:
        channels.append(CHANNEL_EMAIL)
    if event.text_enabled:
        channels.append(CHANNEL_TEXT)
    return channels


def matching_offset(schedule, due_local, now_local):
    """
    Return the first offset token whose reminder time falls on the
    same minute as `now_local`, or None.
    """
    for token, trigger_time in schedule.trigger_times(due_local).items():
        if same_minute(trigger_time, now_local):
            return token
    return None


class NotificationEvaluator:
    """
    Per-event reminder decision with injected collaborators.

    lookup_organization(name) -> organization, raises ReminderError
    lookup_event(key) -> full event or None
    dispatch(organization, event, channel) -> bool
    resolve_timezone(name) -> tzinfo, raises UnknownTimeZone
    clock() -> aware datetime
    """

    def __init__(
        self,
        lookup_organization,
        lookup_event,
        dispatch,
        resolve_timezone=resolve_timezone,
        clock=utc_now,
    ):
        self.lookup_organization = lookup_organization
        self.lookup_event = lookup_event
        self.dispatch = dispatch
        self.resolve_timezone = resolve_timezone
        self.clock = clock

    def should_notify(self, event, tz, now, force_immediate=False):
        if force_immediate:
            return True

        due_local = event.due.astimezone(tz)
        now_local = now.astimezone(tz)

        token = matching_offset(event.schedule, due_local, now_local)
        if token is None:
            return False

        logger.info(
            "Reminder offset %s matched for event %s at %s",
            token, event.pk, truncate_to_minute(now_local),
        )
        return True

    def evaluate(self, event, force_immediate=False, now=None):
        """
        Evaluate one event and dispatch its reminders.

        Returns True when at least one dispatch, for any organization
        and channel, reported success.
        """
        now = now or self.clock()
        sent = False

        for org_name in event.orgs:
            try:
                organization = self.lookup_organization(org_name)
            except ReminderError as exc:
                logger.info(
                    "Notify: error looking up org %s (%s). "
                    "Skipping notifications for this organization.",
                    org_name, exc,
                )
                continue

            try:
                tz = self.resolve_timezone(organization.time_zone)
            except UnknownTimeZone as exc:
                logger.error(
                    "Notify: %s for org %s. "
                    "Skipping notifications for this organization.",
                    exc, org_name,
                )
                continue

            due_local = event.due.astimezone(tz)
            if is_overdue(due_local, now.astimezone(tz)):
                logger.info("Event %s is past due: %s", event.pk, due_local)
                continue

            full_event = self.lookup_event(event.pk)
            if full_event is None:
                logger.info("Notify: error querying for event %s", event.pk)
                return False

            if not self.should_notify(full_event, tz, now, force_immediate):
                continue

            logger.info(
                "Event notification triggered: %s (org=%s, forced=%s)",
                event.pk, org_name, force_immediate,
            )

            for channel in enabled_channels(event):
                if self._dispatch(organization, full_event, channel):
                    sent = True

        return sent

    def _dispatch(self, organization, event, channel):
        try:
            return bool(self.dispatch(organization, event, channel))
        except Exception:
            logger.exception(
                "Dispatch failed for event %s (org=%s, channel=%s)",
                event.pk, organization.name, channel,
            )
            return False
