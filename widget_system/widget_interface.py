"""
Abstract widget products and the abstract factory that creates them.
Client code only ever talks to these interfaces, never to a platform family.
"""

from abc import ABC, abstractmethod


class Button(ABC):
    """Abstract push button."""

    @abstractmethod
    def click(self) -> None:
        """Handle a click using the native toolkit."""
        pass


class TextEdit(ABC):
    """Abstract single-line text field."""

    def __init__(self):
        self.text = ""

    @abstractmethod
    def get_text(self) -> str:
        """Return the current text."""
        pass

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the current text."""
        pass


class WindowApplication(ABC):
    """Abstract factory for one family of matching widgets."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name

    def get_platform_name(self) -> str:
        """Get the name of the platform this family belongs to."""
        return self.platform_name

    @abstractmethod
    def create_button(self) -> Button:
        """Create a new button of this family."""
        pass

    @abstractmethod
    def create_text_edit(self) -> TextEdit:
        """Create a new text edit of this family."""
        pass
