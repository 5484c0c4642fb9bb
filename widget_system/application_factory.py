"""
Factory for selecting a widget family.
"""

from widget_system.widget_interface import WindowApplication


def create_application(platform: str) -> WindowApplication:
    """
    Create the widget factory for the specified platform.

    Args:
        platform: The platform name ("windows", "macos")

    Returns:
        A WindowApplication producing widgets of that platform's family

    Raises:
        ValueError: If the platform is not supported
    """
    if platform == "windows":
        from widget_system.windows.widgets import WindowsWindowApplication
        return WindowsWindowApplication()
    elif platform == "macos":
        from widget_system.macos.widgets import MacOSWindowApplication
        return MacOSWindowApplication()
    else:
        raise ValueError(f"Unsupported platform: {platform}")


def get_supported_platforms() -> list:
    """Get a list of supported platform names."""
    return ["windows", "macos"]
