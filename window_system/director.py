from window_system.builder_interface import WindowBuilder

DEFAULT_WINDOW_TITLE = "New Window"


class WindowCreationManager:
    """
    Director that runs builder steps in a fixed order.

    The manager only borrows the builder; it never resets it or takes the
    finished window. Running a recipe twice without the caller resetting the
    builder appends the second window onto the first.
    """

    def __init__(self):
        self.builder = None

    def set_builder(self, builder: WindowBuilder) -> None:
        self.builder = builder

    def _require_builder(self) -> WindowBuilder:
        if self.builder is None:
            raise RuntimeError("No window builder is set")
        return self.builder

    def create_default_window(self):
        self.create_window_with_title(DEFAULT_WINDOW_TITLE)

    def create_window_with_title(self, title):
        builder = self._require_builder()
        builder.create_native_window()
        builder.add_menubar()
        builder.set_title(title)
        builder.set_default_background_color()
