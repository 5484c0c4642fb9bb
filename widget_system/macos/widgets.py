from widget_system.widget_interface import Button, TextEdit, WindowApplication


class MacOSButton(Button):
    def click(self):
        # MacOS native handling
        print("MacOS button was clicked")


class MacOSTextEdit(TextEdit):
    def get_text(self):
        # MacOS native handling
        return self.text

    def set_text(self, text):
        # MacOS native handling
        self.text = text
        print(f"MacOS TextEdit text set to '{self.text}'")


class MacOSWindowApplication(WindowApplication):
    """MacOS widget family."""

    def __init__(self):
        super().__init__("macos")

    def create_button(self):
        return MacOSButton()

    def create_text_edit(self):
        return MacOSTextEdit()
