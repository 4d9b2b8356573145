"""
Errors raised by the reminder collaborators.

The evaluator catches these per organization; none of them ever
escape a sweep.
"""


class ReminderError(Exception):
    """Base class for reminder lookup failures."""


class OrganizationNotFound(ReminderError):
    def __init__(self, name, reason="No results found"):
        self.name = name
        self.reason = reason
        super().__init__(f"organization {name!r}: {reason}")


class UnknownTimeZone(ReminderError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"unknown time zone {name!r}")
