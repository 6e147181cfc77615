"""Port interfaces for Clean Architecture.

TIER 0: No internal imports, only Python stdlib.

Ports define contracts that adapters must implement.
The snippet command depends on these, never on a concrete editor or OS.

Usage:
    # In commands - ask the port
    root = locator.settings_root()

    # In lib - implement the port
    class PlatformLocator:
        def settings_root(self) -> str:
            return os.environ["HOME"] + "/.config/Code/User/"
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SettingsLocator(Protocol):
    """Port for editor settings directory resolution.

    Implemented by: lib.paths
    """

    separator: str

    def settings_root(self) -> str:
        """Get the editor's user settings directory, ending in a separator."""
        ...


@runtime_checkable
class EditorPort(Protocol):
    """Port for the host editor's selection, prompts, and notifications.

    Implemented by: commands.create_snippet.RequestEditor
    """

    def active_language(self) -> str | None:
        """Get the active document's language id, or None without an editor."""
        ...

    def selected_text(self) -> str:
        """Get the current selection's text."""
        ...

    def pick_language(self, default: str) -> str | None:
        """Ask for the target language. None means cancelled."""
        ...

    def prompt(self, message: str) -> str | None:
        """Ask for a line of text. None means cancelled."""
        ...

    def show_info(self, message: str) -> None:
        """Show an information message."""
        ...

    def show_warning(self, message: str) -> None:
        """Show a warning message."""
        ...

    def show_error(self, message: str, *details: str) -> None:
        """Show an error message with optional detail items."""
        ...


def verify_port(implementation: Any, port: type) -> bool:
    """Verify that an implementation satisfies a port.

    Args:
        implementation: Object to verify.
        port: Protocol class to check against.

    Returns:
        True if implementation satisfies the port.

    Example:
        from lib.paths import PlatformLocator
        from core.ports import SettingsLocator, verify_port

        assert verify_port(PlatformLocator(PlatformFamily.LINUX), SettingsLocator)
    """
    return isinstance(implementation, port)
