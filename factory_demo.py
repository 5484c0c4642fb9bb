"""Abstract Factory demo.

Creates a matching button and text edit from whichever widget family is
configured and drives them only through their abstract interfaces. Switching
platforms swaps the whole family at once; the client code never changes.

Usage:
    python factory_demo.py
    python factory_demo.py --platform macos
"""

import argparse
import sys

# Static platform selection. The first enabled flag wins.
PLATFORM_WINDOWS = True
PLATFORM_MACOS = False

PLATFORM_NONE = "none"
DEFAULT_TEXT = "Hello OS"


def resolve_platform(windows, macos):
    if windows:
        return "windows"
    elif macos:
        return "macos"
    return PLATFORM_NONE


USED_API = resolve_platform(PLATFORM_WINDOWS, PLATFORM_MACOS)


def parse_args(args=None):
    from widget_system.application_factory import get_supported_platforms

    parser = argparse.ArgumentParser(
        description="Run the abstract factory widget demo.")

    parser.add_argument("--platform", default=USED_API,
                        choices=get_supported_platforms() + [PLATFORM_NONE],
                        help="Widget family to use (defaults to the statically configured one)")

    parsed_args = parser.parse_args(args)

    return {
        "platform": parsed_args.platform,
    }


def client_code(application):
    button = application.create_button()
    text_edit = application.create_text_edit()

    button.click()
    text_edit.set_text(DEFAULT_TEXT)
    print(f"Text edit have text -> {text_edit.get_text()}")


def main(args=None):
    from widget_system.application_factory import create_application, get_supported_platforms

    args = parse_args(args)

    if args["platform"] not in get_supported_platforms():
        print("None of platforms is chosen!")
        return 1

    app = create_application(args["platform"])
    client_code(app)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
