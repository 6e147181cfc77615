#!/usr/bin/env python3
"""Create a snippet from the editor selection.

Collects the target language, snippet name, shortcut, and description,
then adds the snippet to <settings>/snippets/<language>.json.

Run by a host editor: reads a JSON request on stdin, writes a JSON
response on stdout.
"""

from typing import Any

from core.errors import (
    ConfigError,
    EmptySelectionError,
    InvalidSnippetError,
    NameCollisionError,
    NoActiveEditorError,
    PromptCancelledError,
    SnippetFileError,
)
from core.ports import EditorPort, SettingsLocator, verify_port
from core.snippets import make_entry, upsert
from core.types import SnippetRequest, UpsertAction, UpsertResult
from lib.config import get
from lib.logger import get_logger
from lib.messages import message, output_response, read_request
from lib.paths import default_locator, snippets_file_path
from lib.storage import read_snippets_file, write_snippets_file

logger = get_logger("create_snippet")

NO_EDITOR_MSG = "There is no text editor."
EMPTY_SELECTION_MSG = "Cannot create snippet from empty string. Select some text first."
COLLISION_MSG = "Snippet with this name already exists."

# Prompted in order; the first cancellation stops the command
PROMPTS = [
    ("name", "Enter snippet name"),
    ("shortcut", "Enter snippet shortcut"),
    ("description", "Enter snippet description"),
]


def _answer(value: str | None, field: str) -> str:
    if value is None:
        raise PromptCancelledError(field)
    if not isinstance(value, str):
        raise InvalidSnippetError(f"{field.capitalize()} must be text, got {type(value).__name__}")
    return value


def collect_request(editor: EditorPort) -> SnippetRequest:
    """Gather the selection and the user's answers.

    Raises:
        NoActiveEditorError: If no editor is active.
        EmptySelectionError: If nothing is selected.
        PromptCancelledError: On the first dismissed prompt.
        InvalidSnippetError: If the selection or an answer is not text.
    """
    active = editor.active_language()
    if active is None:
        raise NoActiveEditorError(NO_EDITOR_MSG)

    selection = editor.selected_text()
    if not selection:
        raise EmptySelectionError(EMPTY_SELECTION_MSG)
    if not isinstance(selection, str):
        raise InvalidSnippetError(f"Selection must be text, got {type(selection).__name__}")

    language = _answer(editor.pick_language(active), "language")
    answers = {field: _answer(editor.prompt(text), field) for field, text in PROMPTS}
    return SnippetRequest(language=language, selection=selection, **answers)


def save_snippet(request: SnippetRequest, locator: SettingsLocator) -> UpsertResult:
    """Insert the requested snippet into its language's snippets file."""
    path = snippets_file_path(locator, request.language, get("snippets.file_template"))
    entry = make_entry(
        request.selection,
        request.shortcut,
        request.description,
        escape_tabs=bool(get("snippets.escape_body_tabs")),
    )

    existing = read_snippets_file(path)
    result = upsert(
        existing,
        request.name,
        entry,
        path=path,
        allow_trailing_commas=bool(get("snippets.allow_trailing_commas")),
    )
    write_snippets_file(path, result.text)
    logger.info("Snippet %r %s in %s", request.name, result.action.value, path)
    return result


def create_snippet(editor: EditorPort, locator: SettingsLocator | None = None) -> UpsertResult | None:
    """Run the create-snippet command against an editor.

    All failures are reported through the editor and end the command.

    Args:
        editor: Host editor port.
        locator: Settings locator (default: current OS with config overrides).

    Returns:
        UpsertResult on success, None if the command stopped early.

    Raises:
        TypeError: If editor does not implement EditorPort.
    """
    if not verify_port(editor, EditorPort):
        raise TypeError(f"{type(editor).__name__} does not implement EditorPort")

    try:
        request = collect_request(editor)
    except (NoActiveEditorError, EmptySelectionError) as e:
        editor.show_warning(str(e))
        return None
    except PromptCancelledError as e:
        logger.info("Snippet creation cancelled: %s", e)
        return None
    except InvalidSnippetError as e:
        logger.error("Invalid snippet request: %s", e)
        editor.show_error(str(e))
        return None

    try:
        result = save_snippet(request, locator or default_locator())
    except NameCollisionError as e:
        logger.warning("Snippet %r already exists", e.name)
        editor.show_error(COLLISION_MSG, e.name)
        return None
    except SnippetFileError as e:
        logger.error("%s %s: %s", e, e.path, e.cause)
        editor.show_error(str(e), *e.details())
        return None
    except (InvalidSnippetError, ConfigError) as e:
        logger.error("Cannot create snippet: %s", e)
        editor.show_error(str(e))
        return None

    if result.action is UpsertAction.CREATED:
        editor.show_info(f"Created new snippet with shortcut: {request.shortcut}")
    else:
        editor.show_info(f"Created a new snippet. You can use it now by typing: {request.shortcut}")
    return result


class RequestEditor:
    """EditorPort backed by a JSON request instead of a live editor.

    Request keys:
    - active_language: language of the active document (missing = no editor)
    - selection: selected text
    - language: target language (missing = active_language, null = cancelled)
    - name, shortcut, description: answers (missing or null = cancelled)
    """

    def __init__(self, request: dict[str, Any]):
        self.request = request
        self.messages: list[dict[str, Any]] = []

    def active_language(self) -> str | None:
        return self.request.get("active_language")

    def selected_text(self) -> str:
        return self.request.get("selection") or ""

    def pick_language(self, default: str) -> str | None:
        return self.request.get("language", default)

    def prompt(self, message: str) -> str | None:
        for field, text in PROMPTS:
            if text == message:
                return self.request.get(field)
        return None

    def show_info(self, text: str) -> None:
        self.messages.append(message("info", text))

    def show_warning(self, text: str) -> None:
        self.messages.append(message("warning", text))

    def show_error(self, text: str, *details: str) -> None:
        self.messages.append(message("error", text, *details))


def main() -> None:
    """Create a snippet from a stdin request and print the outcome."""
    editor = RequestEditor(read_request())
    result = create_snippet(editor)

    if result is not None:
        status = result.action.value
    elif editor.messages:
        status = "error"
    else:
        status = "cancelled"

    response: dict[str, Any] = {"status": status, "messages": editor.messages}
    if result is not None:
        response["path"] = result.path
    output_response(response)


if __name__ == "__main__":
    main()
