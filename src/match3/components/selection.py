from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(slots=True)
class Selection:
    """First tile chosen for a pending swap, if any."""
    cell: Optional[Tuple[int, int]] = None
