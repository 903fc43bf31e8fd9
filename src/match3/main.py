"""Entry point for the match-three window.

Sets up the session (event bus, world, core systems) and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color, key

from match3.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from match3.events.bus import EVENT_MOUSE_PRESS, EVENT_RESTART_REQUEST, EVENT_TICK
from match3.session import new_session
from match3.systems.animation import AnimationSystem
from match3.systems.input import InputSystem
from match3.systems.render import RenderSystem

class Match3Window(Window):
    def __init__(self, seed: int | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Match 3")
        self.set_update_rate(1/60)
        self.session = new_session(seed=seed)
        self.event_bus = self.session.event_bus
        self.world = self.session.world
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus, self)
        self.render_system = RenderSystem(self.world, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.R:
            self.event_bus.emit(EVENT_RESTART_REQUEST)

def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    Match3Window()
    run()

if __name__ == "__main__":
    main()
