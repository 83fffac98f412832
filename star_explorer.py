#!/usr/bin/env python3
"""
Star Explorer
=============
A procedurally generated galaxy you can pan, zoom and fly into.

Controls:
- Click a star: fly into its system
- Click in a system: return to the galaxy
- Drag / scroll: pan / zoom the galaxy
- D: toggle debug overlay, F11: fullscreen, Q / ESC: quit

Usage:
    python star_explorer.py
    python star_explorer.py --seed 1234 --stars 150
"""

import argparse
import time

import numpy as np
import pygame

from core.display import GameDisplay
from scenes.explorer_scene import ExplorerScene
from ui.settings import ExplorerSettings


class ExplorerApp:
    """Main loop: events, update, render, present."""

    def __init__(self, settings: ExplorerSettings, seed=None, title="Star Explorer"):
        self.settings = settings
        width, height = settings.graphics.resolution

        self.display = GameDisplay(width, height, title, fullscreen=settings.graphics.fullscreen)
        self.display.set_target_fps(settings.graphics.max_fps)

        width, height = self.display.get_size()
        self.scene = ExplorerScene(settings, width, height, seed=seed)

    def run(self):
        self.scene.start(time.monotonic())

        try:
            while self.display.running:
                events = self.display.process_events()
                if events['quit']:
                    break

                if self._handle_keys(events['key_down']):
                    break

                self.scene.handle_events(events)
                self.scene.update(time.monotonic())

                width, height = self.display.get_size()
                frame = np.zeros((height, width, 3), dtype=np.uint8)
                self.scene.render(frame)

                self.display.show_frame(frame)
        finally:
            self.scene.close()
            self.display.close()

    def _handle_keys(self, keys) -> bool:
        """Returns True when the app should quit."""
        for key in keys:
            if key in (pygame.K_q, pygame.K_ESCAPE):
                return True
            if key == pygame.K_d:
                self.scene.controller.toggle_debug()
        return False


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Procedural star map explorer")
    parser.add_argument("--seed", type=int, default=None, help="Galaxy seed (random if omitted)")
    parser.add_argument("--stars", type=int, default=None, help="Number of stars to place")
    parser.add_argument("--settings", default="settings.json", help="Settings file")
    parser.add_argument("--fullscreen", action="store_true", help="Start fullscreen")
    parser.add_argument("--save-settings", action="store_true",
                        help="Write the effective settings back to the settings file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    settings = ExplorerSettings.load(args.settings)
    if args.stars is not None:
        settings.galaxy.num_stars = args.stars
    if args.fullscreen:
        settings.graphics.fullscreen = True
    if args.save_settings:
        settings.save(args.settings)

    print("=" * 50)
    print("STAR EXPLORER")
    print("=" * 50)
    print("Controls:")
    print("  - Click a star to explore its system")
    print("  - Click anywhere in a system to return")
    print("  - Drag to move, scroll to zoom")
    print("  - D: debug overlay, F11: fullscreen, Q: quit")
    print("=" * 50)

    app = ExplorerApp(settings, seed=args.seed)
    app.run()


if __name__ == "__main__":
    main()
