"""
Buttons
=======
Click buttons drawn in the UI band above the galaxy.
"""

from typing import Callable, List, Optional, Tuple

import cv2
import numpy as np


class Button:
    """Click-to-activate button."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, callback: Callable[[], object],
                 color: Tuple[int, int, int] = (60, 60, 70)):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.text = text
        self.callback = callback
        self.color = color

        self.is_hovered = False

    def contains(self, px: float, py: float) -> bool:
        return (self.x <= px <= self.x + self.width and
                self.y <= py <= self.y + self.height)

    def update_hover(self, px: float, py: float):
        self.is_hovered = self.contains(px, py)

    def handle_click(self, px: float, py: float) -> bool:
        """Run the callback if the click lands on the button."""
        if not self.contains(px, py):
            return False
        self.callback()
        return True

    def draw(self, frame: np.ndarray):
        """Draw the button."""
        font = cv2.FONT_HERSHEY_SIMPLEX

        bg_color = self.color if not self.is_hovered else tuple(min(255, c + 20) for c in self.color)
        cv2.rectangle(frame, (self.x, self.y),
                      (self.x + self.width, self.y + self.height), bg_color, -1)

        border_color = (150, 150, 150) if self.is_hovered else (100, 100, 100)
        cv2.rectangle(frame, (self.x, self.y),
                      (self.x + self.width, self.y + self.height), border_color, 1)

        (tw, th), _ = cv2.getTextSize(self.text, font, 0.4, 1)
        tx = self.x + (self.width - tw) // 2
        ty = self.y + (self.height + th) // 2
        cv2.putText(frame, self.text, (tx, ty), font, 0.4, (220, 220, 220), 1)


class ButtonBar:
    """A row of buttons laid out left to right."""

    def __init__(self, x: int = 20, y: int = 120, height: int = 24, spacing: int = 10):
        self.x = x
        self.y = y
        self.height = height
        self.spacing = spacing
        self.buttons: List[Button] = []

    def add(self, text: str, callback: Callable[[], object], width: Optional[int] = None) -> Button:
        if width is None:
            (tw, _), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, 0.4, 1)
            width = tw + 20

        x = self.x
        if self.buttons:
            last = self.buttons[-1]
            x = last.x + last.width + self.spacing

        button = Button(x, self.y, width, self.height, text, callback)
        self.buttons.append(button)
        return button

    def handle_click(self, px: float, py: float) -> bool:
        for button in self.buttons:
            if button.handle_click(px, py):
                return True
        return False

    def update_hover(self, px: float, py: float):
        for button in self.buttons:
            button.update_hover(px, py)

    def draw(self, frame: np.ndarray):
        for button in self.buttons:
            button.draw(frame)
