"""
Notification service layer.

- dispatch: outbound reminder and confirmation messages
- reminders: the per-event reminder decision and the periodic sweep
"""

# =====================================================
# DISPATCH
# =====================================================
from .dispatch import (
    notify_admin,
    send_org_message,
)

# =====================================================
# REMINDERS
# =====================================================
from .reminders import (
    NotificationEvaluator,
    build_evaluator,
    send_event_reminders,
)

# =====================================================
# PUBLIC EXPORTS
# =====================================================
__all__ = [
    # Dispatch
    "notify_admin",
    "send_org_message",

    # Reminders
    "NotificationEvaluator",
    "build_evaluator",
    "send_event_reminders",
]
