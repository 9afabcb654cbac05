"""Records produced by the round audits in round_invariants.py.

An audit never raises; it returns a list of violations so the stress runner
can count them per rule.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class ValidationSeverity(str, Enum):
    """How bad a broken round rule is."""

    ERROR = "error"  # the round cannot be played as stored
    WARNING = "warning"  # leftover data that a reset should have cleared
    INFO = "info"


class ValidationViolation(BaseModel):
    """One broken round rule."""

    rule_id: str  # R.1 .. R.9
    category: str  # Role Assignment, Player Flags, Mode Resolution, Lifecycle, Voting
    message: str
    severity: ValidationSeverity = ValidationSeverity.ERROR
    context: Optional[dict] = None  # offending ids, counts or modes

    def describe(self) -> str:
        """One-line summary for reports, e.g. "R.2 Role Assignment: ..."."""
        return f"{self.rule_id} {self.category}: {self.message}"
