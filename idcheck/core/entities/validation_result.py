"""
Entity: Validation Result

Verdict returned by every validator. Created fresh per call,
never persisted, never mutated.
"""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    FORMAT = "FORMAT"        # input shape does not match the document kind
    CHECKSUM = "CHECKSUM"    # shape ok, check digit(s) do not


@dataclass(frozen=True)
class ValidationResult:
    """Resultado de uma validação: {valid, error, status}."""
    valid: bool
    error: str | None = None
    status: int = 200                   # 200 (valid) | 400 (invalid)
    failure: FailureKind | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True, error=None, status=200)

    @classmethod
    def format_error(cls, message: str) -> "ValidationResult":
        return cls(valid=False, error=message, status=400, failure=FailureKind.FORMAT)

    @classmethod
    def checksum_error(cls, message: str) -> "ValidationResult":
        return cls(valid=False, error=message, status=400, failure=FailureKind.CHECKSUM)

    def to_dict(self) -> dict:
        """Wire shape forwarded verbatim by callers."""
        return {"valid": self.valid, "error": self.error, "status": self.status}
