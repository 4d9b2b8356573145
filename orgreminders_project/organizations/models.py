import re
from datetime import datetime, time, timedelta, timezone as dt_timezone

from django.db import models
from django.utils import timezone


# ============================================================
# CARRIER EMAIL-TO-TEXT GATEWAYS
# ============================================================

CARRIER_GATEWAYS = {
    "att": "txt.att.net",
    "sprint": "messaging.sprintpcs.com",
    "verizon": "vtext.com",
    "tmobile": "tmomail.net",
}

NON_DIGITS = re.compile(r"\D")


def gen_text_addr(cell, carrier):
    """
    Build the email-to-text address for a cell number.
    Unknown carriers yield an empty address.
    """
    suffix = CARRIER_GATEWAYS.get(carrier)
    if not suffix:
        return ""

    number = NON_DIGITS.sub("", cell or "")
    return f"{number}@{suffix}"


def start_of_today_utc():
    today = timezone.now().astimezone(dt_timezone.utc).date()
    return datetime.combine(today, time.min, tzinfo=dt_timezone.utc)


def default_expiry():
    return timezone.now() + timedelta(days=7)


class Organization(models.Model):
    name = models.CharField(max_length=150, unique=True)
    description = models.TextField(blank=True)

    time_zone = models.CharField(
        max_length=64,
        blank=True,
        default="UTC",
        help_text="IANA time zone name, e.g. America/New_York",
    )

    # Emails of the web users allowed to manage this organization
    administrators = models.JSONField(default=list, blank=True)

    active = models.BooleanField(default=True)
    expires = models.DateTimeField(default=default_expiry)

    created = models.DateTimeField(default=timezone.now)
    saved = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def get_members(self):
        return self.members.order_by("name")

    def get_events(self, active=True):
        """
        Events that list this organization by name.
        With `active`, only those due today (UTC) or later.
        """
        from events.models import Event

        qs = Event.objects.all()
        if active:
            qs = qs.filter(due__gte=start_of_today_utc())

        return [event for event in qs if self.name in event.orgs]


class Member(models.Model):

    CARRIER_CHOICES = [
        ("att", "AT&T"),
        ("sprint", "Sprint"),
        ("verizon", "Verizon"),
        ("tmobile", "T-Mobile"),
    ]

    name = models.CharField(max_length=150)
    email = models.EmailField(blank=True, db_index=True)

    cell = models.CharField(max_length=20, blank=True)
    carrier = models.CharField(max_length=20, choices=CARRIER_CHOICES, blank=True)
    text_addr = models.CharField(max_length=120, blank=True)

    email_on = models.BooleanField(default=False)
    text_on = models.BooleanField(default=False)

    # Web users may sign in to the site
    web_user = models.BooleanField(default=False)

    organizations = models.ManyToManyField(
        Organization,
        related_name="members",
        blank=True,
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} <{self.email}>" if self.email else self.name

    def save(self, *args, **kwargs):
        self.text_addr = gen_text_addr(self.cell, self.carrier)
        super().save(*args, **kwargs)

    def address_for(self, channel):
        """Recipient address on a channel, or "" when opted out."""
        if channel == "email" and self.email_on:
            return self.email
        if channel == "text" and self.text_on:
            return self.text_addr
        return ""
