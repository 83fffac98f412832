"""
Display Module
==============
Pygame-based display wrapper for windowing, fullscreen and pointer input.
Shows OpenCV frames and turns pygame events into explorer input.
"""

import pygame
import numpy as np
from typing import Tuple


# Pixels-per-notch scale for the mouse wheel, matching browser wheel deltas
WHEEL_DELTA = 100


class GameDisplay:
    """
    Pygame-based display for the explorer.

    Features:
    - True fullscreen support
    - Proper window events (resize, minimize, close)
    - Click, drag and wheel collection per frame
    """

    def __init__(self,
                 width: int = 1920,
                 height: int = 1080,
                 title: str = "Star Explorer",
                 fullscreen: bool = False):
        """
        Initialize the display.

        Args:
            width: Window width
            height: Window height
            title: Window title
            fullscreen: Start in fullscreen mode
        """
        pygame.init()
        pygame.display.set_caption(title)

        self.width = width
        self.height = height
        self.title = title
        self._fullscreen = fullscreen
        self._running = True

        info = pygame.display.Info()
        self.screen_width = info.current_w
        self.screen_height = info.current_h

        self._create_window(fullscreen)

        self.clock = pygame.time.Clock()
        self.target_fps = 60  # 0 = uncapped
        self.actual_fps = 0.0

    def set_target_fps(self, fps: int):
        """Set target FPS. Use 0 for uncapped."""
        self.target_fps = fps

    def _create_window(self, fullscreen: bool):
        """Create or recreate the window."""
        if fullscreen:
            flags = pygame.FULLSCREEN | pygame.DOUBLEBUF
            self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), flags)
            self.width, self.height = self.screen_width, self.screen_height
        else:
            flags = pygame.DOUBLEBUF | pygame.RESIZABLE
            self.screen = pygame.display.set_mode((self.width, self.height), flags)

        self._fullscreen = fullscreen

    def toggle_fullscreen(self) -> bool:
        """Toggle between fullscreen and windowed mode."""
        self._create_window(not self._fullscreen)
        return self._fullscreen

    @property
    def is_fullscreen(self) -> bool:
        return self._fullscreen

    def get_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def process_events(self) -> dict:
        """
        Process pygame events and return relevant input.

        Returns:
            Dictionary with:
            - 'quit': True if window should close
            - 'key_down': List of keys just pressed this frame
            - 'clicks': List of (x, y) left-button presses
            - 'drag': (dx, dy) pointer travel while the left button was held
            - 'scroll': Wheel delta, positive when scrolling down
            - 'mouse_pos': (x, y) in pixels
            - 'resized': New size if window was resized, None otherwise
        """
        events = {
            'quit': False,
            'key_down': [],
            'clicks': [],
            'drag': (0, 0),
            'scroll': 0,
            'mouse_pos': (0, 0),
            'resized': None,
        }
        drag_x, drag_y = 0, 0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events['quit'] = True
                self._running = False

            elif event.type == pygame.KEYDOWN:
                events['key_down'].append(event.key)

                # F11 for fullscreen toggle (common convention)
                if event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                    events['resized'] = (self.width, self.height)

            elif event.type == pygame.VIDEORESIZE:
                self.width = event.w
                self.height = event.h
                events['resized'] = (event.w, event.h)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # Left click
                    events['clicks'].append(event.pos)

            elif event.type == pygame.MOUSEMOTION:
                if event.buttons[0]:
                    drag_x += event.rel[0]
                    drag_y += event.rel[1]

            elif event.type == pygame.MOUSEWHEEL:
                # Wheel up is positive in pygame; scrolling down zooms out
                events['scroll'] += -event.y * WHEEL_DELTA

        events['drag'] = (drag_x, drag_y)
        events['mouse_pos'] = pygame.mouse.get_pos()

        return events

    def show_frame(self, frame: np.ndarray):
        """
        Display an OpenCV frame (BGR numpy array).

        Args:
            frame: BGR numpy array from OpenCV
        """
        # OpenCV is BGR and HxWxC; pygame wants RGB and WxHxC
        frame_rgb = frame[:, :, ::-1]
        surface = pygame.surfarray.make_surface(frame_rgb.swapaxes(0, 1))

        if surface.get_width() != self.width or surface.get_height() != self.height:
            surface = pygame.transform.scale(surface, (self.width, self.height))

        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

        if self.target_fps > 0:
            self.clock.tick(self.target_fps)
        else:
            self.clock.tick()
        self.actual_fps = self.clock.get_fps()

    def get_fps(self) -> float:
        return self.actual_fps

    @property
    def running(self) -> bool:
        """Check if the display is still running (not closed)."""
        return self._running

    def close(self):
        """Close the display and clean up pygame."""
        self._running = False
        pygame.quit()
