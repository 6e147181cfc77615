"""Snippet store editing.

TIER 0: No internal imports, only Python stdlib.

Pure transformations over in-memory text: parse an existing snippets
file, insert one new entry, and render the file back out.
"""

import json
from typing import Any

from core.errors import InvalidSnippetError, MalformedSnippetsFileError, NameCollisionError
from core.jsonc import load_jsonc, strip_comments
from core.types import CURSOR_PLACEHOLDER, SnippetEntry, UpsertAction, UpsertResult


def build_body(text: str, escape_tabs: bool = False) -> list[str]:
    """Split selected text into snippet body lines.

    A final line holding the cursor placeholder is always appended.

    Args:
        text: Selected text.
        escape_tabs: Replace raw tabs with backslash-t before splitting.

    Returns:
        Body lines.

    Example:
        >>> build_body("a\\nb")
        ['a', 'b', '$0']
    """
    if escape_tabs:
        text = text.replace("\t", "\\t")
    return f"{text}\n{CURSOR_PLACEHOLDER}".split("\n")


def make_entry(
    selection: str,
    shortcut: str,
    description: str,
    escape_tabs: bool = False,
) -> SnippetEntry:
    """Build a snippet entry from raw user input."""
    return SnippetEntry(
        prefix=shortcut,
        body=build_body(selection, escape_tabs=escape_tabs),
        description=description,
    )


def parse_store(
    raw: str,
    path: str | None = None,
    allow_trailing_commas: bool = False,
) -> dict[str, Any]:
    """Parse snippets file content into a name -> entry mapping.

    Content that is blank once comments are removed is an empty store.

    Raises:
        MalformedSnippetsFileError: If content is not a JSON object once
            comments are stripped.
    """
    if not strip_comments(raw, preserve_whitespace=False).strip():
        return {}

    try:
        store = load_jsonc(raw, allow_trailing_commas=allow_trailing_commas)
    except json.JSONDecodeError as e:
        raise MalformedSnippetsFileError("Could not parse snippets file.", path, e) from e

    if not isinstance(store, dict):
        raise MalformedSnippetsFileError(
            "Could not parse snippets file.",
            path,
            ValueError(f"expected a JSON object, got {type(store).__name__}"),
        )
    return store


def serialize_store(store: dict[str, Any]) -> str:
    """Render a store as tab-indented JSON, keeping insertion order."""
    return json.dumps(store, indent="\t", ensure_ascii=False)


def upsert(
    existing: str | None,
    name: str,
    entry: SnippetEntry,
    path: str | None = None,
    allow_trailing_commas: bool = False,
) -> UpsertResult:
    """Insert a new snippet into a snippets file's content.

    Args:
        existing: Current file content, or None if the file does not exist.
        name: Snippet name (JSON key).
        entry: Snippet to insert.
        path: File path, used in error reports and carried on the result.
        allow_trailing_commas: Tolerate trailing commas in existing content.

    Returns:
        UpsertResult with the action taken and the new file text.

    Raises:
        MalformedSnippetsFileError: If existing content cannot be parsed.
        InvalidSnippetError: If name is not a non-empty string.
        NameCollisionError: If name is already defined. Nothing is changed.
    """
    if not isinstance(name, str) or not name:
        raise InvalidSnippetError(f"Snippet name must be a non-empty string, got {name!r}")

    if existing is None:
        store = {name: entry.to_dict()}
        return UpsertResult(UpsertAction.CREATED, serialize_store(store), store, path)

    store = parse_store(existing, path=path, allow_trailing_commas=allow_trailing_commas)
    if name in store:
        raise NameCollisionError(name)

    store[name] = entry.to_dict()
    return UpsertResult(UpsertAction.APPENDED, serialize_store(store), store, path)
