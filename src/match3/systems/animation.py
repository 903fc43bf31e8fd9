from esper import World

from match3.animation_factory import AnimationFactory
from match3.components.animation_fade import FadeAnimation
from match3.components.animation_fall import FallAnimation
from match3.components.duration import Duration
from match3.events.bus import (
    EventBus,
    EVENT_ANIMATION_COMPLETE,
    EVENT_BOARD_RESET,
    EVENT_BOARD_RESHUFFLED,
    EVENT_GRAVITY_APPLIED,
    EVENT_MATCH_CLEARED,
    EVENT_TICK,
)

class AnimationSystem:
    """Drives cosmetic fade/fall timing; the grid itself is already final when these start."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_MATCH_CLEARED, self.on_match_cleared)
        event_bus.subscribe(EVENT_GRAVITY_APPLIED, self.on_gravity_applied)
        event_bus.subscribe(EVENT_BOARD_RESET, self.on_board_replaced)
        event_bus.subscribe(EVENT_BOARD_RESHUFFLED, self.on_board_replaced)

    def on_match_cleared(self, sender, **kwargs):
        cleared = kwargs.get('cells') or []
        if cleared:
            self.factory.create_fade_group(cleared)

    def on_gravity_applied(self, sender, **kwargs):
        moves = kwargs.get('moves') or []
        if moves:
            self.factory.create_fall_group(moves)

    def on_board_replaced(self, sender, **kwargs):
        # Stale tweens would point at tiles that no longer exist.
        for comp_type in (FadeAnimation, FallAnimation):
            for ent, _ in list(self.world.get_component(comp_type)):
                self.world.delete_entity(ent, immediate=True)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        # Fade progression
        fades = list(self.world.get_component(FadeAnimation))
        if fades:
            for ent, fade in fades:
                if fade.alpha > 0.0:
                    d = self.world.component_for_entity(ent, Duration)
                    fade.alpha = max(fade.alpha - dt / d.value, 0.0)
            if all(fade.alpha <= 0.0 for _, fade in fades):
                positions = [fade.pos for _, fade in fades]
                for ent, _ in fades:
                    self.world.delete_entity(ent, immediate=True)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='fade', items=positions)
        # Fall progression
        falls = list(self.world.get_component(FallAnimation))
        if falls:
            for ent, fall in falls:
                if fall.linear < 1.0:
                    d = self.world.component_for_entity(ent, Duration)
                    fall.linear = min(fall.linear + dt / d.value, 1.0)
            if all(fall.linear >= 1.0 for _, fall in falls):
                items = [{'from': fall.src, 'to': fall.dst} for _, fall in falls]
                for ent, _ in falls:
                    self.world.delete_entity(ent, immediate=True)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='fall', items=items)
