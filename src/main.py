"""Entry point for the Match Master tile-matching game.

Sets up the game engine, input and render systems, and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from match_master.engine import GameEngine
from match_master.events.bus import EVENT_MOUSE_PRESS
from match_master.systems.input import InputSystem
from match_master.systems.render import RenderSystem


class MatchMasterWindow(Window):
    def __init__(self):
        super().__init__(800, 900, "Match Master")
        self.set_update_rate(1/60)
        self.engine = GameEngine()
        self.event_bus = self.engine.event_bus
        self.input_system = InputSystem(self.event_bus, self, self.engine)
        self.render_system = RenderSystem(self.engine, self)

    def on_draw(self):
        set_background_color(self.render_system.background_color())
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.engine.tick(delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_close(self):
        self.engine.close()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = MatchMasterWindow()
    run()

if __name__ == "__main__":
    main()
