"""
Frontend interface for the driver loop.

A frontend owns the screen and the keyboard. The loop hands it Frames and
asks it for keys; it never sees the GameState itself.
"""

from typing import Optional

from .config import Key
from .frame import Frame


class FrontendError(Exception):
    """Base class for frontend failures."""


class SetupError(FrontendError):
    """The display or raw keyboard mode could not be acquired."""


class InputError(FrontendError):
    """Reading a key failed. The loop treats this as no input for the frame."""


class Frontend:
    """
    Base class/interface for presentation and input.
    """

    def setup(self) -> None:
        """Acquire the display. Raises SetupError on failure."""
        raise NotImplementedError

    def poll_input(self, timeout: float) -> Optional[Key]:
        """
        Wait at most `timeout` seconds for a key.

        Returns:
            A direction (dx, dy), QUIT, or None when nothing relevant arrived.
        """
        raise NotImplementedError

    def render(self, frame: Frame) -> None:
        raise NotImplementedError

    def announce_game_over(self, frame: Frame, reason: Optional[str]) -> None:
        raise NotImplementedError

    def teardown(self) -> None:
        """Restore the terminal or close the window. Safe to call twice."""
        raise NotImplementedError
