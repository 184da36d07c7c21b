"""Synthetic demo data: fictional risk scores and tenant display fields.

Nothing here is a model or reads business data. Risk scores are uniform
random integers; tenant display fields are derived from a hash of the user
id so the same tenant always renders the same way. Keep all of it out of
real decision paths.
"""

from __future__ import annotations

import random

RISK_SCORE_MIN = 0
RISK_SCORE_MAX = 100

_PHONE_NUMBERS = (
    "+1 (555) 123-4567",
    "+1 (555) 234-5678",
    "+1 (555) 345-6789",
    "+1 (555) 456-7890",
    "+1 (555) 567-8901",
    "+1 (555) 678-9012",
    "+1 (555) 789-0123",
    "+1 (555) 890-1234",
    "+1 (555) 901-2345",
    "+1 (555) 012-3456",
)

_LAST_ACTIVITIES = (
    "2024-01-15",
    "2024-01-20",
    "2024-01-18",
    "2024-01-10",
    "2024-01-22",
    "2024-01-19",
    "2024-01-21",
    "2024-01-05",
    "2024-01-23",
    "2024-01-17",
)


class RiskScoreGenerator:
    """Uniform fictional score in [0, 100]. Pass ``seed`` for reproducible runs."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def score(self) -> int:
        return self._rng.randint(RISK_SCORE_MIN, RISK_SCORE_MAX)


risk_scores = RiskScoreGenerator()


def string_hash(value: str) -> int:
    """31-multiplier string hash wrapped to a signed 32-bit integer."""
    h = 0
    for ch in value:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def tenant_display_fields(user_id: str) -> dict:
    """Cosmetic per-tenant fields, stable for a given user id."""
    h = abs(string_hash(user_id))
    return {
        "phone": _PHONE_NUMBERS[h % len(_PHONE_NUMBERS)],
        "last_activity": _LAST_ACTIVITIES[h % len(_LAST_ACTIVITIES)],
        "properties_viewed": h % 30 + 1,
        "applications_submitted": h % 10,
        "status": "INACTIVE" if h % 5 == 0 else "ACTIVE",
    }
