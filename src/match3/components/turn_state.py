from dataclasses import dataclass


@dataclass(slots=True)
class TurnState:
    """Seconds since the last settle pass or pending-removal timeout."""

    settle_elapsed: float = 0.0
