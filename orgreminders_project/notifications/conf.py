"""
Reminder settings, read once from Django settings.

The object is built at startup and passed to whatever needs it
instead of code reaching into settings on every call.
"""

from dataclasses import dataclass

from django.conf import settings


DEFAULT_DUE_FORMAT = "%m/%d/%Y %I:%M%p"


@dataclass(frozen=True)
class ReminderSettings:
    sender_domain: str
    admin_sender: str
    due_format: str = DEFAULT_DUE_FORMAT
    enable_scheduler: bool = False
    sweep_minute: str = "*"
    scheduler_timezone: str = "UTC"

    @classmethod
    def from_django(cls, source=None):
        source = source or settings
        domain = getattr(source, "REMINDERS_SENDER_DOMAIN", "localhost")

        return cls(
            sender_domain=domain,
            admin_sender=getattr(
                source,
                "REMINDERS_ADMIN_SENDER",
                f"orgreminders@{domain}",
            ),
            due_format=getattr(source, "REMINDERS_DUE_FORMAT", DEFAULT_DUE_FORMAT),
            enable_scheduler=bool(getattr(source, "ENABLE_SCHEDULER", False)),
            sweep_minute=getattr(source, "REMINDERS_SWEEP_MINUTE", "*"),
            scheduler_timezone=getattr(source, "TIME_ZONE", "UTC") or "UTC",
        )


def get_reminder_settings():
    """The ReminderSettings built when the notifications app loaded."""
    from django.apps import apps

    config = apps.get_app_config("notifications")
    if config.reminder_settings is None:
        config.reminder_settings = ReminderSettings.from_django()
    return config.reminder_settings
