import pytest
from apscheduler.triggers.cron import CronTrigger

from notifications import scheduler
from notifications.conf import ReminderSettings


def reminder_settings(enabled):
    return ReminderSettings(
        sender_domain="reminders.test",
        admin_sender="orgreminders@reminders.test",
        enable_scheduler=enabled,
    )


@pytest.fixture(autouse=True)
def stopped_scheduler():
    scheduler.stop_scheduler()
    yield
    scheduler.stop_scheduler()


# ============================================
# Start / stop
# ============================================
class TestStartScheduler:
    def test_disabled_returns_none(self):
        assert scheduler.start_scheduler(reminder_settings(enabled=False)) is None

    def test_second_start_returns_running_instance(self):
        first = scheduler.start_scheduler(reminder_settings(enabled=True))
        second = scheduler.start_scheduler(reminder_settings(enabled=True))

        assert first is not None
        assert second is first
        assert first.running

    def test_minute_job(self):
        running = scheduler.start_scheduler(reminder_settings(enabled=True))
        job = running.get_job("send_event_reminders")

        assert isinstance(job.trigger, CronTrigger)
        assert job.max_instances == 1
        assert job.coalesce is True
        assert len(running.get_jobs()) == 1

    def test_stop_allows_fresh_start(self):
        first = scheduler.start_scheduler(reminder_settings(enabled=True))
        scheduler.stop_scheduler()

        second = scheduler.start_scheduler(reminder_settings(enabled=True))

        assert second is not first

    def test_stop_when_not_started(self):
        scheduler.stop_scheduler()
        scheduler.stop_scheduler()


def test_job_runs_management_command(monkeypatch):
    calls = []
    monkeypatch.setattr(scheduler, "call_command", lambda name: calls.append(name))

    scheduler.run_event_reminders()

    assert calls == ["send_event_reminders"]
