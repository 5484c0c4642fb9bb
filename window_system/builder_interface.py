"""
Abstract base class for platform window builders.
Provides a unified step-by-step interface the director drives without knowing
which platform's window is being assembled.
"""

from abc import ABC, abstractmethod


class WindowBuilder(ABC):
    """Abstract base class for window builders."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name

    def get_platform_name(self) -> str:
        """Get the name of the platform."""
        return self.platform_name

    @abstractmethod
    def reset(self) -> None:
        """Discard the window under construction and start an empty one."""
        pass

    @abstractmethod
    def create_native_window(self) -> None:
        """Create the native window shell."""
        pass

    @abstractmethod
    def add_menubar(self) -> None:
        """Attach the platform's default menubar."""
        pass

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Set the window title."""
        pass

    @abstractmethod
    def set_default_background_color(self) -> None:
        """Apply the platform's default background color."""
        pass

    @abstractmethod
    def get_window(self):
        """Return the window built so far. Does not reset the builder."""
        pass
