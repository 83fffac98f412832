"""
View State Module
=================
Overview / detail view modes and the eased transition between them.

Features:
- Timed camera fly-in toward a selected star
- Instant return to the overview
- Input gating: navigation only in the overview
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .camera import Camera, CameraTransform, clamp
from .galaxy import Star


class ViewMode(Enum):
    """Which view is showing."""
    OVERVIEW = auto()
    TRANSITIONING_TO_DETAIL = auto()
    DETAIL = auto()


@dataclass
class ViewTransition:
    """Holds transition animation state. Snapshots are captured once at start."""
    active: bool = False
    start_time: float = 0.0
    duration: float = 1.5
    target_star: Optional[Star] = None
    start: CameraTransform = CameraTransform()
    end: CameraTransform = CameraTransform()


class ViewStateMachine:
    """
    Drives the camera between the galaxy overview and a star's detail view.

    Overview --select_star--> TransitioningToDetail --duration--> Detail
    Detail --return_to_overview--> Overview
    """

    def __init__(self, camera: Camera, transition_duration: float = 1.5,
                 transition_zoom: float = 5.0):
        if transition_duration <= 0:
            raise ValueError(f"transition_duration must be positive, got {transition_duration}")

        self.camera = camera
        self.transition_duration = transition_duration
        self.transition_zoom = transition_zoom

        self.mode = ViewMode.OVERVIEW
        self.selected_star: Optional[Star] = None
        self.transition = ViewTransition(duration=transition_duration)

    @property
    def is_transitioning(self) -> bool:
        return self.transition.active

    @property
    def accepts_navigation(self) -> bool:
        """Drag and scroll only apply to the overview."""
        return self.mode == ViewMode.OVERVIEW

    def select_star(self, star: Optional[Star], now: float, width: int, height: int) -> bool:
        """
        Start the fly-in toward a star.

        Returns:
            True if a transition started, False if ignored
        """
        if star is None or self.mode != ViewMode.OVERVIEW or self.transition.active:
            return False

        self.transition = ViewTransition(
            active=True,
            start_time=now,
            duration=self.transition_duration,
            target_star=star,
            start=self.camera.current_transform(),
            end=self._centered_on(star, width, height),
        )
        self.mode = ViewMode.TRANSITIONING_TO_DETAIL
        return True

    def _centered_on(self, star: Star, width: int, height: int) -> CameraTransform:
        """Pan that puts the star on the canvas center at the fly-in zoom."""
        zoom = self.transition_zoom
        return CameraTransform(
            (star.x - width / 2) * zoom,
            (star.y - height / 2) * zoom,
            zoom,
        )

    def update(self, now: float) -> Optional[str]:
        """
        Advance one frame.

        Returns:
            "arrived" when a transition completes, None otherwise
        """
        if not self.transition.active:
            self.camera.tick()
            return None

        progress = self.transition_progress(now)
        self.camera.apply_transition(self.transition.start, self.transition.end, progress)

        if now - self.transition.start_time >= self.transition.duration:
            self.selected_star = self.transition.target_star
            self.camera.reset()
            self.transition.active = False
            self.mode = ViewMode.DETAIL
            return "arrived"

        return None

    def return_to_overview(self) -> bool:
        """Leave the detail view immediately, no animation."""
        if self.mode != ViewMode.DETAIL:
            return False
        self.selected_star = None
        self.mode = ViewMode.OVERVIEW
        return True

    def force_detail(self, star: Optional[Star]) -> bool:
        """Jump straight to a star's detail view, skipping the fly-in."""
        if star is None or self.transition.active:
            return False
        self.selected_star = star
        self.camera.reset()
        self.mode = ViewMode.DETAIL
        return True

    def force_overview(self) -> bool:
        """Return to the overview from any settled mode."""
        if self.transition.active:
            return False
        self.selected_star = None
        self.mode = ViewMode.OVERVIEW
        return True

    def transition_progress(self, now: float) -> float:
        """Linear progress of the current transition, 0-1."""
        if not self.transition.active:
            return 0.0
        elapsed = now - self.transition.start_time
        return clamp(elapsed / self.transition.duration, 0.0, 1.0)

    def progress_percent(self, now: float) -> int:
        return int(self.transition_progress(now) * 100)
