"""Editor settings and snippets file locations.

TIER 1: May import from core only.

Paths are built as plain strings with the locator's separator, so a
Windows layout can be computed (and tested) on any host.
"""

import os
import platform
from collections.abc import Mapping

from core.errors import ConfigError, InvalidSnippetError
from core.ports import SettingsLocator
from core.types import PlatformFamily
from lib.config import get

# platform.system() value to family
SYSTEMS = {
    "Darwin": PlatformFamily.DARWIN,
    "Linux": PlatformFamily.LINUX,
    "Windows": PlatformFamily.WINDOWS,
}

SNIPPETS_DIR = "snippets"


def detect_platform(system: str | None = None) -> PlatformFamily:
    """Map an OS name to a platform family.

    Args:
        system: OS name as returned by platform.system() (default: current OS).

    Returns:
        Matching family, OTHER if unrecognized.
    """
    if system is None:
        system = platform.system()
    return SYSTEMS.get(system, PlatformFamily.OTHER)


class PlatformLocator:
    """Resolve the editor's user settings directory for a platform family.

    Implements core.ports.SettingsLocator.
    """

    def __init__(
        self,
        family: PlatformFamily,
        environ: Mapping[str, str] | None = None,
        product: str = "Code",
        override: str | None = None,
    ):
        """Initialize the locator.

        Args:
            family: Platform family to resolve for.
            environ: Environment to read HOME/APPDATA from (default: os.environ).
            product: Editor product directory name ("Code", "VSCodium", ...).
            override: Settings root to use as-is instead of computing one.
        """
        self.family = family
        self.environ = os.environ if environ is None else environ
        self.product = product
        self.override = override
        self.separator = "\\" if family is PlatformFamily.WINDOWS else "/"

    def _env(self, name: str) -> str:
        value = self.environ.get(name)
        if not value:
            raise ConfigError(f"Cannot locate editor settings: {name} is not set")
        return value

    def settings_root(self) -> str:
        """Get the user settings directory, always ending in a separator."""
        if self.override:
            root = self.override
        elif self.family is PlatformFamily.DARWIN:
            root = f"{self._env('HOME')}/Library/Application Support/{self.product}/User/"
        elif self.family is PlatformFamily.WINDOWS:
            root = f"{self._env('APPDATA')}\\{self.product}\\User\\"
        else:
            # Linux, and BSDs and the like
            root = f"{self._env('HOME')}/.config/{self.product}/User/"

        if not root.endswith(self.separator):
            root += self.separator
        return root


def snippets_file_path(
    locator: SettingsLocator,
    language: str,
    file_template: str = "{language}.json",
) -> str:
    """Build the snippets file path for a language.

    Args:
        locator: Any SettingsLocator.
        language: Language id, e.g. "python".
        file_template: File name template with a {language} field.

    Returns:
        <settings root>snippets<sep><file name>

    Raises:
        InvalidSnippetError: If language is empty or contains a path separator.
        ConfigError: If file_template has fields other than {language}.
    """
    if not isinstance(language, str) or not language:
        raise InvalidSnippetError(f"Language must be a non-empty string, got {language!r}")
    if language in (".", "..") or any(sep in language for sep in ("/", "\\", locator.separator)):
        raise InvalidSnippetError(f"Language id must not name another directory: {language!r}")

    try:
        file_name = file_template.format(language=language)
    except (KeyError, IndexError, ValueError) as e:
        raise ConfigError(f"Invalid snippets.file_template {file_template!r}: {e}") from e
    return f"{locator.settings_root()}{SNIPPETS_DIR}{locator.separator}{file_name}"


def default_locator(family: PlatformFamily | None = None) -> PlatformLocator:
    """Build a locator for the current OS using config overrides."""
    return PlatformLocator(
        family or detect_platform(),
        product=get("editor.product"),
        override=get("editor.settings_root"),
    )
