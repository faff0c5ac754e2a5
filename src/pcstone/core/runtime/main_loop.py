"""
main_loop.py
------------
Core game loop orchestrating timing, input polling, simulation and rendering.

Responsibilities:
- Initialize pygame and the scaled window
- Run the simulation at a fixed tick rate with variable rendering
- Poll input exactly once per tick, before the tick runs
- Hand each resulting state to the renderer
"""

import pygame

from pcstone.core.debug.debug_logger import DebugLogger
from pcstone.core.runtime.frame import FrameOrchestrator
from pcstone.core.runtime.game_settings import Debug, Display, Physics
from pcstone.core.runtime.game_state import Playfield
from pcstone.core.runtime.session_stats import get_session_stats
from pcstone.core.runtime.state_store import StateStore
from pcstone.core.services.config_manager import load_config
from pcstone.core.services.input_manager import DEFAULT_CONTROLS, InputManager
from pcstone.graphics.draw_manager import DrawManager


class MainLoop:
    """
    Runtime controller for the game window.

    Implements a fixed timestep for the simulation with one render per frame.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, scale=None):
        DebugLogger.section("Initializing MainLoop")

        self.controls = load_config("controls.yaml", DEFAULT_CONTROLS)
        self.scale = scale or self.controls.get("window", {}).get("scale", Display.DEFAULT_SCALE)
        self.playfield = Playfield(Display.WIDTH, Display.HEIGHT)

        self._init_pygame()
        self._init_systems()

    def _init_pygame(self):
        pygame.init()

        self.window = pygame.display.set_mode(
            (self.playfield.width * self.scale, self.playfield.height * self.scale)
        )
        pygame.display.set_caption(Display.CAPTION)
        self.game_surface = pygame.Surface((self.playfield.width, self.playfield.height))

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {self.window.get_size()} (x{self.scale})")

    def _init_systems(self):
        self.input_manager = InputManager(self.controls)
        self.store = StateStore(self.playfield)
        self.frame = FrameOrchestrator(self.playfield)

        self.session_stats = get_session_stats()
        self.session_stats.subscribe()
        self.draw_manager = DrawManager(self.session_stats)

        self.clock = pygame.time.Clock()
        self.running = True
        self.state = self.store.load()

        DebugLogger.init_entry("Main Loop Runtime")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute the main loop until the window is closed."""
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()

            while accumulator >= fixed_dt:
                self.input_manager.update()
                self.state = self.frame.run_tick(self.store, self.input_manager)
                accumulator -= fixed_dt

            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_F3:
                    Debug.HITBOX_VISIBLE = not Debug.HITBOX_VISIBLE
                    Debug.SHOW_TICK = Debug.HITBOX_VISIBLE
                    DebugLogger.action(f"Debug overlay: {'ON' if Debug.HITBOX_VISIBLE else 'OFF'}")

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.draw(self.state, self.game_surface)
        pygame.transform.scale(self.game_surface, self.window.get_size(), self.window)
        pygame.display.flip()
