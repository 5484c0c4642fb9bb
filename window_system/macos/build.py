from window_system.builder_interface import WindowBuilder


class MacOSWindow:
    def __init__(self):
        self.structure = ""

    def print_structure(self):
        print(self.structure)


class MacOSWindowBuilder(WindowBuilder):
    """macOS window builder implementation."""

    def __init__(self):
        super().__init__("macos")
        self.reset()

    def reset(self):
        self.window = MacOSWindow()

    def create_native_window(self):
        self.window.structure += "Window: Standard MacOS; "

    def add_menubar(self):
        self.window.structure += "Menubar: MacOS default; "

    def set_title(self, title):
        self.window.structure += "Window title: " + title + ";"

    def set_default_background_color(self):
        self.window.structure += "Background color: MacOS default; "

    def get_window(self) -> MacOSWindow:
        return self.window
