"""Custom exceptions for snippet-maker.

TIER 0: No internal imports, only Python stdlib.
"""


class SnippetError(Exception):
    """Base exception for snippet-maker."""

    pass


class ConfigError(SnippetError):
    """Configuration error."""

    pass


class InvalidSnippetError(SnippetError):
    """Snippet definition is missing a required part."""

    pass


class NoActiveEditorError(SnippetError):
    """There is no text editor to take a selection from."""

    pass


class EmptySelectionError(SnippetError):
    """Nothing is selected in the active editor."""

    pass


class PromptCancelledError(SnippetError):
    """User dismissed one of the input prompts."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field.capitalize()} was undefined")


class NameCollisionError(SnippetError):
    """A snippet with the same name already exists in the target file."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Snippet with this name already exists: {name}")


class SnippetFileError(SnippetError):
    """Snippets file operation failed.

    Carries the file path and the underlying error for diagnosis.
    """

    def __init__(self, message: str, path: str | None = None, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(message)

    def details(self) -> list[str]:
        """Return cause and path as display strings, skipping missing ones."""
        return [str(item) for item in (self.cause, self.path) if item is not None]


class FileOpenError(SnippetFileError):
    """Snippets file could not be opened for writing."""

    pass


class FileReadError(SnippetFileError):
    """Snippets file exists but could not be read."""

    pass


class FileWriteError(SnippetFileError):
    """Snippets file could not be written."""

    pass


class MalformedSnippetsFileError(SnippetFileError):
    """Snippets file is not valid JSON after comment stripping."""

    pass
