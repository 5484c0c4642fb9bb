from window_system.builder_interface import WindowBuilder


class WindowsWindow:
    def __init__(self):
        self.structure = ""

    def print_structure(self):
        print(self.structure)


class WindowsWindowBuilder(WindowBuilder):
    """Windows window builder implementation."""

    def __init__(self):
        super().__init__("windows")
        self.reset()

    def reset(self):
        self.window = WindowsWindow()

    def create_native_window(self):
        self.window.structure += "Window: Standard Windows; "

    def add_menubar(self):
        self.window.structure += "Menubar: Windows default; "

    def set_title(self, title):
        self.window.structure += "Window title: " + title + ";"

    def set_default_background_color(self):
        self.window.structure += "Background color: Windows default; "

    def get_window(self) -> WindowsWindow:
        return self.window
