from widget_system.widget_interface import Button, TextEdit, WindowApplication


class WindowsButton(Button):
    def click(self):
        # Windows native handling
        print("Windows button was clicked")


class WindowsTextEdit(TextEdit):
    def get_text(self):
        # Windows native handling
        return self.text

    def set_text(self, text):
        # Windows native handling
        self.text = text
        print(f"Windows TextEdit text set to '{self.text}'")


class WindowsWindowApplication(WindowApplication):
    """Windows widget family."""

    def __init__(self):
        super().__init__("windows")

    def create_button(self):
        return WindowsButton()

    def create_text_edit(self):
        return WindowsTextEdit()
