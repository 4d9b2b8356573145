from django.apps import AppConfig
import os


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "notifications"

    reminder_settings = None

    def ready(self):
        from .conf import ReminderSettings

        # --------------------------------------------------
        # Reminder settings are read once, here
        # --------------------------------------------------
        self.reminder_settings = ReminderSettings.from_django()

        # --------------------------------------------------
        # Start APScheduler SAFELY
        # --------------------------------------------------
        # Prevent duplicate scheduler from Django autoreload
        if os.environ.get("RUN_MAIN") != "true" and not os.environ.get("SCHEDULER_AUTOSTART"):
            return

        from .scheduler import start_scheduler
        start_scheduler(self.reminder_settings)
