from dataclasses import dataclass, field
from typing import Set, Tuple

@dataclass(slots=True)
class PendingRemoval:
    """Cells of the most recent match, kept only for highlighting."""
    positions: Set[Tuple[int, int]] = field(default_factory=set)
