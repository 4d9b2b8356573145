import pytest
from django.core import mail

from notifications.services.dispatch import (
    notify_admin,
    remove_duplicates,
    send_org_message,
)


def test_remove_duplicates():
    assert remove_duplicates(["a", "", "b", "a", None, "c", "b"]) == ["a", "b", "c"]


@pytest.mark.django_db
class TestSendOrgMessage:
    @pytest.fixture
    def org(self, make_org, make_member):
        org = make_org(name="Chess Club")
        make_member([org], name="Ann", email="ann@example.com", email_on=True,
                    cell="5551111111", carrier="att", text_on=True)
        make_member([org], name="Bob", email="bob@example.com", email_on=False,
                    cell="5552222222", carrier="verizon", text_on=True)
        make_member([org], name="Cat", email="ann@example.com", email_on=True)
        return org

    def test_email_channel(self, org, make_event, reminder_settings):
        event = make_event(title="Tournament")

        assert send_org_message(org, event, "email", reminder_settings=reminder_settings) is True

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.subject == "Tournament"
        assert message.bcc == ["ann@example.com"]
        assert message.to == []
        assert message.from_email == "Chess Club Reminders <Chess_Club@reminders.test>"
        assert message.body == "Tournament soon"
        assert message.alternatives[0][0] == "<p>Tournament soon</p>"

    def test_text_channel(self, org, make_event, reminder_settings):
        event = make_event()

        assert send_org_message(org, event, "text", reminder_settings=reminder_settings) is True

        message = mail.outbox[0]
        assert message.bcc == ["5551111111@txt.att.net", "5552222222@vtext.com"]
        assert message.alternatives == []

    def test_no_recipients_counts_as_sent(self, make_org, make_event, reminder_settings):
        org = make_org(name="Empty")
        event = make_event(orgs=["Empty"])

        assert send_org_message(org, event, "email", reminder_settings=reminder_settings) is True
        assert mail.outbox == []

    def test_send_failure(self, org, make_event, reminder_settings, monkeypatch):
        def boom(self, fail_silently=False):
            raise OSError("smtp down")

        monkeypatch.setattr("django.core.mail.EmailMultiAlternatives.send", boom)
        event = make_event()

        assert send_org_message(org, event, "email", reminder_settings=reminder_settings) is False

    def test_unknown_channel(self, org, make_event, reminder_settings):
        with pytest.raises(ValueError):
            send_org_message(org, make_event(), "pager", reminder_settings=reminder_settings)


def test_notify_admin(reminder_settings):
    assert notify_admin("me@example.com", "Event Saved: X", "<b>hi</b>",
                        reminder_settings=reminder_settings) is True

    message = mail.outbox[0]
    assert message.to == ["me@example.com"]
    assert message.from_email == "orgreminders@reminders.test"
    assert message.alternatives[0][0] == "<b>hi</b>"


def test_notify_admin_without_recipient(reminder_settings):
    assert notify_admin("", "Event Saved: X", "hi", reminder_settings=reminder_settings) is False
    assert mail.outbox == []
