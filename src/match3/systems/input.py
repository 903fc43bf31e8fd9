from match3.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from match3.ui.layout import cell_at_point

# Arcade reports the left mouse button as 1.
LEFT_MOUSE_BUTTON = 1

class InputSystem:
    """Translates left clicks in window coordinates into tile clicks."""
    def __init__(self, event_bus: EventBus, window):
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        # Other buttons fall through; SessionSystem listens for right-click deselect directly.
        if kwargs.get('button') != LEFT_MOUSE_BUTTON:
            return
        cell = cell_at_point(x, y, self.window.width, self.window.height)
        if cell is None:
            return
        self.event_bus.emit(EVENT_TILE_CLICK, row=cell[0], col=cell[1])
