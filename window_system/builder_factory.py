"""
Factory for creating platform window builders.
"""

from window_system.builder_interface import WindowBuilder


def create_builder(platform: str) -> WindowBuilder:
    """
    Create a builder instance for the specified platform.

    Args:
        platform: The platform name ("windows", "macos")

    Returns:
        A WindowBuilder instance for the specified platform

    Raises:
        ValueError: If the platform is not supported
    """
    if platform == "windows":
        from window_system.windows.build import WindowsWindowBuilder
        return WindowsWindowBuilder()
    elif platform == "macos":
        from window_system.macos.build import MacOSWindowBuilder
        return MacOSWindowBuilder()
    else:
        raise ValueError(f"Unsupported platform: {platform}")


def get_supported_platforms() -> list:
    """Get a list of supported platform names."""
    return ["windows", "macos"]
