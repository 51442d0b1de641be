from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of an instant (non-stepped) structure operation.

    Attributes:
        ok      : False for guarded no-ops (underflow, missing key, …).
        message : User-visible status line.
        value   : Popped / found / peeked value, if any.
    """

    ok:      bool
    message: str
    value:   Any = None

    def to_dict(self) -> dict:
        return {"ok": self.ok, "message": self.message, "value": self.value}
