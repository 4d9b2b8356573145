from django.db import models
from django.utils import timezone

from events.schedule import Schedule
from organizations.models import start_of_today_utc


# Fields the periodic sweep loads; everything else comes from the
# full re-fetch right before dispatch.
SWEEP_FIELDS = ("orgs", "due", "email_enabled", "text_enabled", "title")


class Event(models.Model):
    """
    An organization event with a due instant and reminder schedule.

    `due` is stored in UTC and interpreted in each organization's
    own time zone when reminders are evaluated.
    """

    # Organization names, not keys: a renamed or deleted organization
    # simply fails lookup at notification time.
    orgs = models.JSONField(default=list)

    title = models.CharField(max_length=200)
    due = models.DateTimeField(db_index=True)

    email_message = models.TextField(blank=True)
    text_message = models.TextField(blank=True)
    submitter = models.EmailField(blank=True)

    email_enabled = models.BooleanField(default=False)
    text_enabled = models.BooleanField(default=False)

    # Reminder offset tokens ("3d", "12h", ...)
    reminders = models.JSONField(default=list, blank=True)

    created = models.DateTimeField(default=timezone.now)
    saved = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["due"]

    def __str__(self):
        return f"{self.title} ({self.due:%Y-%m-%d %H:%M} UTC)"

    @property
    def key(self):
        return str(self.pk) if self.pk is not None else ""

    @property
    def schedule(self):
        # Mutate a copy and assign it back: event.schedule = sched
        cached = getattr(self, "_schedule", None)
        if cached is None or cached.offsets != self.reminders:
            cached = Schedule.from_list(self.reminders, name=self.title)
            self._schedule = cached
        return cached

    @schedule.setter
    def schedule(self, value):
        self._schedule = value
        self.reminders = value.to_list()

    @classmethod
    def active_projection(cls):
        """Events due today (UTC) or later, partially loaded."""
        return cls.objects.filter(due__gte=start_of_today_utc()).only(*SWEEP_FIELDS)

    def due_in(self, tz):
        return self.due.astimezone(tz)
