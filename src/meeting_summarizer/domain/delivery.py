"""Email delivery result entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of sending a summary to a single recipient."""

    recipient: str
    delivered: bool
    error: str | None = None
