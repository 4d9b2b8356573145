"""
Reminder notification service layer.

Time-based reminder emitters triggered by schedulers (management
commands, APScheduler) and by the "notify now" path when an event
is saved.

Reminder logic is:
- service-layer only
- minute-based, in each organization's time zone
- stateless between runs
"""

# =====================================================
# EVALUATION
# =====================================================
from .evaluator import (
    NotificationEvaluator,
    resolve_timezone,
)

# =====================================================
# DJANGO WIRING
# =====================================================
from .backends import (
    build_evaluator,
    lookup_event,
    lookup_organization,
)

# =====================================================
# PERIODIC SWEEP
# =====================================================
from .sweep import (
    send_event_reminders,
)

__all__ = [
    # Evaluation
    "NotificationEvaluator",
    "resolve_timezone",

    # Django wiring
    "build_evaluator",
    "lookup_event",
    "lookup_organization",

    # Sweep
    "send_event_reminders",
]
