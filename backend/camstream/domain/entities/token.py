"""FederatedToken Entity - short-lived media credential"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional


@dataclass(frozen=True)
class FederatedToken:
    """
    Federated session token issued by the vendor media API.

    Opaque to this system. Only ever attached to media requests as a
    query parameter; never persisted.
    """
    value: str = field(repr=False)
    duration_sec: int
    issued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Federated token value cannot be empty")
        if self.duration_sec <= 0:
            raise ValueError("Token duration must be positive")

    def __str__(self) -> str:
        return f"FederatedToken(***, expires_at={self.expires_at.isoformat()})"

    @property
    def expires_at(self) -> datetime:
        return self.issued_at + timedelta(seconds=self.duration_sec)

    def seconds_remaining(self, now: Optional[datetime] = None) -> float:
        now = now or datetime.now(timezone.utc)
        return (self.expires_at - now).total_seconds()

    def is_expiring(self, margin_sec: int, now: Optional[datetime] = None) -> bool:
        """Check if the token expires within margin_sec"""
        return self.seconds_remaining(now) <= margin_sec
