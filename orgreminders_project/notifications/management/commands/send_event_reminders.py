"""
notifications/management/commands/send_event_reminders.py

Scheduled command (runs every minute from APScheduler, or from
system cron).

Evaluates every active event once and sends whichever reminders
fall on the current minute.
"""

from django.core.management.base import BaseCommand
from django.utils import timezone

from notifications.conf import get_reminder_settings
from notifications.services.reminders import build_evaluator, send_event_reminders


class Command(BaseCommand):
    help = "Send event reminders whose offset falls on the current minute"

    def handle(self, *args, **options):
        now = timezone.now()

        self.stdout.write(
            self.style.NOTICE(
                f"[{now:%Y-%m-%d %H:%M:%S}] Starting scheduled event reminders"
            )
        )

        evaluator = build_evaluator(get_reminder_settings())
        notified = send_event_reminders(evaluator=evaluator, now=now)

        self.stdout.write(
            self.style.SUCCESS(
                f"[{now:%Y-%m-%d %H:%M:%S}] Completed: "
                f"{len(notified)} event(s) notified"
            )
        )
