"""Shared constants and enums used across the application."""

from enum import StrEnum

# Wire format for every calendar date (requests, responses, log messages).
DATE_FORMAT = "%Y-%m-%d"


class HistoryEventType(StrEnum):
    """Kinds of entries in a car's history timeline."""

    POLICY_START = "PolicyStart"
    POLICY_END = "PolicyEnd"
    CLAIM = "Claim"
