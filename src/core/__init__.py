"""Core module - types, errors, JSONC scanning, snippet store editing, ports.

TIER 0: No internal imports, only Python stdlib.

Exports:
- Error types: SnippetError, ConfigError, NameCollisionError, SnippetFileError, ...
- Types: SnippetEntry, SnippetRequest, UpsertAction, UpsertResult, PlatformFamily
- JSONC: strip_comments, escape_string_tabs, strip_trailing_commas, load_jsonc
- Store editing: build_body, make_entry, parse_store, serialize_store, upsert
- Ports: EditorPort, SettingsLocator, verify_port
"""

from core.errors import (
    ConfigError,
    EmptySelectionError,
    FileOpenError,
    FileReadError,
    FileWriteError,
    InvalidSnippetError,
    MalformedSnippetsFileError,
    NameCollisionError,
    NoActiveEditorError,
    PromptCancelledError,
    SnippetError,
    SnippetFileError,
)
from core.jsonc import escape_string_tabs, load_jsonc, strip_comments, strip_trailing_commas
from core.ports import EditorPort, SettingsLocator, verify_port
from core.snippets import build_body, make_entry, parse_store, serialize_store, upsert
from core.types import (
    CURSOR_PLACEHOLDER,
    PlatformFamily,
    SnippetEntry,
    SnippetRequest,
    UpsertAction,
    UpsertResult,
)

__all__ = [
    "CURSOR_PLACEHOLDER",
    "ConfigError",
    "EditorPort",
    "EmptySelectionError",
    "FileOpenError",
    "FileReadError",
    "FileWriteError",
    "InvalidSnippetError",
    "MalformedSnippetsFileError",
    "NameCollisionError",
    "NoActiveEditorError",
    "PlatformFamily",
    "PromptCancelledError",
    "SettingsLocator",
    "SnippetEntry",
    "SnippetError",
    "SnippetFileError",
    "SnippetRequest",
    "UpsertAction",
    "UpsertResult",
    "build_body",
    "escape_string_tabs",
    "load_jsonc",
    "make_entry",
    "parse_store",
    "serialize_store",
    "strip_comments",
    "strip_trailing_commas",
    "upsert",
    "verify_port",
]
