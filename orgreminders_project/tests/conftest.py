from datetime import datetime, timedelta, timezone

import pytest

from events.models import Event
from notifications.conf import ReminderSettings
from organizations.models import Member, Organization


@pytest.fixture
def reminder_settings():
    return ReminderSettings(
        sender_domain="reminders.test",
        admin_sender="orgreminders@reminders.test",
    )


@pytest.fixture
def make_org(db):
    def _make(name="Chess Club", time_zone="America/New_York", administrators=None, **kwargs):
        return Organization.objects.create(
            name=name,
            time_zone=time_zone,
            administrators=administrators or ["admin@example.com"],
            **kwargs,
        )
    return _make


@pytest.fixture
def make_member(db):
    def _make(orgs=(), name="Ann", email="ann@example.com", **kwargs):
        member = Member.objects.create(name=name, email=email, **kwargs)
        member.organizations.set(orgs)
        return member
    return _make


@pytest.fixture
def make_event(db):
    def _make(orgs=("Chess Club",), due=None, reminders=(), **kwargs):
        kwargs.setdefault("title", "Tournament")
        kwargs.setdefault("text_message", "Tournament soon")
        kwargs.setdefault("email_message", "<p>Tournament soon</p>")
        return Event.objects.create(
            orgs=list(orgs),
            due=due or datetime.now(timezone.utc) + timedelta(days=2),
            reminders=list(reminders),
            **kwargs,
        )
    return _make
