"""Core types and enums.

TIER 0: No internal imports, only Python stdlib.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from core.errors import InvalidSnippetError

# Tab-stop placeholder appended as the final body line
CURSOR_PLACEHOLDER = "$0"


class UpsertAction(str, Enum):
    """What happened to the snippets file."""

    CREATED = "created"
    APPENDED = "appended"


class PlatformFamily(str, Enum):
    """Platform families with a known editor settings location.

    OTHER covers BSDs and anything unrecognized (resolved like Linux).
    """

    DARWIN = "darwin"
    LINUX = "linux"
    WINDOWS = "windows"
    OTHER = "other"


@dataclass(frozen=True)
class SnippetEntry:
    """A single snippet definition as stored in the snippets file."""

    prefix: str
    body: list[str]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.prefix:
            raise InvalidSnippetError("Snippet shortcut (prefix) must not be empty")
        if not self.body:
            raise InvalidSnippetError("Snippet body must have at least one line")
        if self.description is None:
            raise InvalidSnippetError("Snippet description must be present")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, keys in file order."""
        return {
            "prefix": self.prefix,
            "body": list(self.body),
            "description": self.description,
        }


@dataclass
class SnippetRequest:
    """Everything collected from the user for one snippet."""

    language: str
    selection: str
    name: str
    shortcut: str
    description: str


@dataclass
class UpsertResult:
    """Outcome of inserting a snippet into a store."""

    action: UpsertAction
    text: str
    store: dict[str, Any] = field(default_factory=dict)
    path: str | None = None
