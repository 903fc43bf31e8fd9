from dataclasses import dataclass

from match3.constants import TARGET_SCORE

@dataclass(slots=True)
class Score:
    value: int = 0
    target: int = TARGET_SCORE
