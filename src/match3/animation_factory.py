from typing import Iterable, List, Tuple

from esper import World

from match3.components.animation_fade import FadeAnimation
from match3.components.animation_fall import FallAnimation
from match3.components.duration import Duration
from match3.components.tile import Cell
from match3.constants import FADE_DURATION, FALL_DURATION
from match3.systems.board_ops import GravityMove

class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_fade_group(self, cleared: Iterable[Tuple[Tuple[int, int], Cell]], duration: float = FADE_DURATION) -> List[int]:
        ents = []
        for pos, cell in cleared:
            ents.append(self.world.create_entity(FadeAnimation(pos=pos, cell=cell), Duration(duration)))
        return ents

    def create_fall_group(self, moves: Iterable[GravityMove], duration: float = FALL_DURATION) -> List[int]:
        ents = []
        for move in moves:
            # Duration scales with rows fallen.
            scaled = duration * max(move.distance, 1)
            ents.append(self.world.create_entity(
                FallAnimation(src=move.source, dst=move.target, cell=move.cell),
                Duration(scaled),
            ))
        return ents
