"""Limites e valores aceitos pela API Asaas v3."""

from __future__ import annotations

MAX_DESCRIPTION_LENGTH = 500

VALID_CYCLES = frozenset(
    {
        "WEEKLY",
        "BIWEEKLY",
        "MONTHLY",
        "BIMONTHLY",
        "QUARTERLY",
        "SEMIANNUALLY",
        "YEARLY",
    }
)

DEFAULT_CYCLE = "MONTHLY"

SUBSCRIPTION_REQUIRED_FIELDS = ("customer", "billingType", "value", "nextDueDate")
SHOPPER_REQUIRED_FIELDS = ("customer", "billingType", "value")
