from datetime import datetime, timedelta, timezone

import pytest

from events.models import Event
from events.schedule import Schedule
from organizations.models import gen_text_addr, start_of_today_utc


# ============================================
# Text gateway addresses
# ============================================
class TestGenTextAddr:
    @pytest.mark.parametrize("carrier, suffix", [
        ("att", "txt.att.net"),
        ("sprint", "messaging.sprintpcs.com"),
        ("verizon", "vtext.com"),
        ("tmobile", "tmomail.net"),
    ])
    def test_known_carriers(self, carrier, suffix):
        assert gen_text_addr("(555) 123-4567", carrier) == f"5551234567@{suffix}"

    def test_unknown_carrier(self):
        assert gen_text_addr("5551234567", "pigeon") == ""

    def test_blank_cell(self):
        assert gen_text_addr("", "att") == "@txt.att.net"


@pytest.mark.django_db
class TestMember:
    def test_text_addr_derived_on_save(self, make_member):
        member = make_member(cell="555.123.4567", carrier="verizon")
        assert member.text_addr == "5551234567@vtext.com"

    def test_address_for(self, make_member):
        member = make_member(cell="5551234567", carrier="att", email_on=True, text_on=False)
        assert member.address_for("email") == "ann@example.com"
        assert member.address_for("text") == ""


# ============================================
# Organization
# ============================================
@pytest.mark.django_db
class TestOrganization:
    def test_members_sorted_by_name(self, make_org, make_member):
        org = make_org()
        make_member([org], name="Zed", email="zed@example.com")
        make_member([org], name="Amy", email="amy@example.com")

        assert [m.name for m in org.get_members()] == ["Amy", "Zed"]

    def test_default_expiry_is_a_week(self, make_org):
        org = make_org()
        assert timedelta(days=6) < org.expires - org.created <= timedelta(days=7, seconds=5)

    def test_get_events_by_name(self, make_org, make_event):
        org = make_org()
        mine = make_event(orgs=["Chess Club", "Go Club"])
        make_event(orgs=["Go Club"])

        assert [e.pk for e in org.get_events()] == [mine.pk]

    def test_get_events_active_only(self, make_org, make_event):
        org = make_org()
        old = make_event(due=datetime(2001, 1, 1, tzinfo=timezone.utc))
        upcoming = make_event()

        assert [e.pk for e in org.get_events(active=True)] == [upcoming.pk]
        assert {e.pk for e in org.get_events(active=False)} == {old.pk, upcoming.pk}


# ============================================
# Event
# ============================================
@pytest.mark.django_db
class TestEvent:
    def test_schedule_from_reminders(self, make_event):
        event = make_event(reminders=["1d", "2h"])
        assert event.schedule == Schedule(name=event.title, offsets=["1d", "2h"])

    def test_schedule_assignment_persists(self, make_event):
        event = make_event(reminders=["1d"])
        schedule = event.schedule
        schedule.add("30m")
        schedule.add("1d")
        schedule.remove("1d")
        event.schedule = schedule
        event.save()

        event.refresh_from_db()
        assert event.reminders == ["30m"]

    def test_active_projection(self, make_event):
        today = start_of_today_utc()
        make_event(title="Old", due=today - timedelta(seconds=1))
        edge = make_event(title="Edge", due=today)
        later = make_event(title="Later")

        events = list(Event.active_projection())

        assert [e.pk for e in events] == [edge.pk, later.pk]
        assert "reminders" in events[0].get_deferred_fields()

    def test_key(self, make_event):
        event = make_event()
        assert event.key == str(event.pk)
        assert Event().key == ""
