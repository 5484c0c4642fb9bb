"""Builder demo.

A director assembles windows step by step through a builder interface. The
same recipe produces a different description for each platform's builder.

Usage:
    python builder_demo.py
    python builder_demo.py --platform macos --title "Settings"
"""

import argparse
import sys

DEFAULT_TITLE = "New title"


def parse_args(args=None):
    from window_system.builder_factory import get_supported_platforms

    parser = argparse.ArgumentParser(
        description="Run the window builder demo.")

    parser.add_argument("--platform", action="append",
                        choices=get_supported_platforms(),
                        help="Platform to build windows for. Repeat for several; defaults to all")
    parser.add_argument("--title", default=DEFAULT_TITLE,
                        help="Title of the second window built per platform")

    parsed_args = parser.parse_args(args)

    return {
        "platforms": parsed_args.platform or get_supported_platforms(),
        "title": parsed_args.title,
    }


def client_code(manager, platforms=None, title=DEFAULT_TITLE):
    from window_system.builder_factory import create_builder, get_supported_platforms

    if platforms is None:
        platforms = get_supported_platforms()

    for platform in platforms:
        builder = create_builder(platform)
        manager.set_builder(builder)

        manager.create_default_window()
        builder.get_window().print_structure()

        # Without this the titled window would be appended to the default one
        builder.reset()
        manager.create_window_with_title(title)
        builder.get_window().print_structure()


def main(args=None):
    from window_system.director import WindowCreationManager

    args = parse_args(args)

    manager = WindowCreationManager()
    client_code(manager, args["platforms"], args["title"])
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
