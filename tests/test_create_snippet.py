"""Tests for commands/create_snippet.py - Create-snippet command."""

import io
import json
import sys

import pytest

from commands.create_snippet import RequestEditor, create_snippet, main
from core.ports import EditorPort, verify_port
from core.types import UpsertAction


class FakeEditor:
    """Scripted editor answering prompts from a list."""

    def __init__(self, language="javascript", selection="console.log('hi')", answers=("greet", "grt", "Greeting")):
        self.language = language
        self.selection = selection
        self.answers = list(answers)
        self.prompts = []
        self.infos = []
        self.warnings = []
        self.errors = []

    def active_language(self):
        return self.language

    def selected_text(self):
        return self.selection

    def pick_language(self, default):
        return default

    def prompt(self, message):
        self.prompts.append(message)
        return self.answers.pop(0) if self.answers else None

    def show_info(self, message):
        self.infos.append(message)

    def show_warning(self, message):
        self.warnings.append(message)

    def show_error(self, message, *details):
        self.errors.append((message, details))


@pytest.fixture
def snippets_file(tmp_path):
    """Path of the javascript snippets file under the test settings root."""
    return tmp_path / "User" / "snippets" / "javascript.json"


class TestCreateSnippet:
    """Tests for create_snippet()."""

    def test_fake_editor_satisfies_port(self):
        """Test double should match the editor port."""
        assert verify_port(FakeEditor(), EditorPort)

    def test_creates_file(self, clear_config_cache, settings_root, snippets_file):
        """Should create the snippets file when absent."""
        editor = FakeEditor()

        result = create_snippet(editor, settings_root)

        assert result.action is UpsertAction.CREATED
        assert result.path == str(snippets_file)
        assert json.loads(snippets_file.read_text()) == {
            "greet": {"prefix": "grt", "body": ["console.log('hi')", "$0"], "description": "Greeting"}
        }
        assert editor.infos == ["Created new snippet with shortcut: grt"]
        assert editor.prompts == ["Enter snippet name", "Enter snippet shortcut", "Enter snippet description"]

    def test_appends_to_commented_file(self, clear_config_cache, settings_root, snippets_file, sample_jsonc):
        """Should keep existing snippets and write tab-indented JSON."""
        snippets_file.parent.mkdir(parents=True)
        snippets_file.write_text(sample_jsonc)
        editor = FakeEditor()

        result = create_snippet(editor, settings_root)

        assert result.action is UpsertAction.APPENDED
        text = snippets_file.read_text()
        assert text.startswith('{\n\t"Print to console": {')
        assert list(json.loads(text)) == ["Print to console", "greet"]
        assert editor.infos == ["Created a new snippet. You can use it now by typing: grt"]

    def test_name_collision_leaves_file(self, clear_config_cache, settings_root, snippets_file):
        """Should report a collision and not touch the file."""
        original = '{"greet": {"prefix": "g", "body": ["x"], "description": ""}}'
        snippets_file.parent.mkdir(parents=True)
        snippets_file.write_text(original)
        editor = FakeEditor()

        assert create_snippet(editor, settings_root) is None
        assert snippets_file.read_text() == original
        assert editor.errors == [("Snippet with this name already exists.", ("greet",))]

    def test_malformed_file(self, clear_config_cache, settings_root, snippets_file):
        """Should report a parse failure with cause and path."""
        snippets_file.parent.mkdir(parents=True)
        snippets_file.write_text('{"a": ')
        editor = FakeEditor()

        assert create_snippet(editor, settings_root) is None
        message, details = editor.errors[0]
        assert message == "Could not parse snippets file."
        assert details[-1] == str(snippets_file)
        assert snippets_file.read_text() == '{"a": '

    def test_no_editor_warns(self, clear_config_cache, settings_root):
        """Should warn when there is no active editor."""
        editor = FakeEditor(language=None)

        assert create_snippet(editor, settings_root) is None
        assert editor.warnings == ["There is no text editor."]
        assert editor.prompts == []

    def test_empty_selection_warns(self, clear_config_cache, settings_root):
        """Should warn when nothing is selected."""
        editor = FakeEditor(selection="")

        assert create_snippet(editor, settings_root) is None
        assert editor.warnings == ["Cannot create snippet from empty string. Select some text first."]

    def test_cancel_stops_prompting(self, clear_config_cache, settings_root, snippets_file):
        """Should stop at the first cancelled prompt without notifications."""
        editor = FakeEditor(answers=["greet"])

        assert create_snippet(editor, settings_root) is None
        assert editor.prompts == ["Enter snippet name", "Enter snippet shortcut"]
        assert not (editor.infos or editor.warnings or editor.errors)
        assert not snippets_file.exists()

    def test_empty_shortcut_rejected(self, clear_config_cache, settings_root, snippets_file):
        """Should refuse an empty shortcut."""
        editor = FakeEditor(answers=["greet", "", "d"])

        assert create_snippet(editor, settings_root) is None
        assert len(editor.errors) == 1
        assert not snippets_file.exists()

    def test_rejects_non_port_editor(self, settings_root):
        """Should refuse an object that is not an editor."""
        with pytest.raises(TypeError):
            create_snippet(object(), settings_root)

    def test_non_text_selection_reported(self, clear_config_cache, settings_root, snippets_file):
        """Should report a selection that is not text instead of raising."""
        editor = FakeEditor(selection=["x"])

        assert create_snippet(editor, settings_root) is None
        assert len(editor.errors) == 1
        assert not snippets_file.exists()

    def test_escape_body_tabs_config(self, clear_config_cache, settings_root, snippets_file):
        """Should escape tabs in the selection when configured."""
        clear_config_cache.mkdir()
        (clear_config_cache / "config.json").write_text('{"snippets": {"escape_body_tabs": true}}')
        editor = FakeEditor(selection="\tx")

        create_snippet(editor, settings_root)

        body = json.loads(snippets_file.read_text())["greet"]["body"]
        assert body == ["\\tx", "$0"]


class TestRequestEditor:
    """Tests for RequestEditor."""

    def test_satisfies_port(self):
        """Should implement EditorPort."""
        assert verify_port(RequestEditor({}), EditorPort)

    def test_language_defaults_to_active(self):
        """Should pick the active language when none is requested."""
        assert RequestEditor({}).pick_language("go") == "go"
        assert RequestEditor({"language": "rust"}).pick_language("go") == "rust"
        assert RequestEditor({"language": None}).pick_language("go") is None

    def test_prompts_map_to_fields(self):
        """Should answer prompts from request fields."""
        editor = RequestEditor({"name": "n", "shortcut": "s"})
        assert editor.prompt("Enter snippet name") == "n"
        assert editor.prompt("Enter snippet shortcut") == "s"
        assert editor.prompt("Enter snippet description") is None


class TestMain:
    """Tests for main()."""

    def _run(self, monkeypatch, capsys, request):
        monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(request)))
        main()
        return json.loads(capsys.readouterr().out)

    def test_created(self, clear_config_cache, monkeypatch, capsys, tmp_path):
        """Should report created with path."""
        clear_config_cache.mkdir()
        (clear_config_cache / "config.json").write_text(
            json.dumps({"editor": {"settings_root": str(tmp_path / "User")}})
        )
        request = {
            "active_language": "python",
            "selection": "print('hi')",
            "name": "hi",
            "shortcut": "hi",
            "description": "",
        }

        response = self._run(monkeypatch, capsys, request)

        assert response["status"] == "created"
        assert response["path"].endswith("python.json")
        assert response["messages"][0]["level"] == "info"

    def test_cancelled(self, clear_config_cache, monkeypatch, capsys):
        """Should report cancelled when a field is missing."""
        response = self._run(monkeypatch, capsys, {"active_language": "python", "selection": "x"})

        assert response == {"status": "cancelled", "messages": []}

    def test_no_editor(self, clear_config_cache, monkeypatch, capsys):
        """Should report an error status with the warning."""
        response = self._run(monkeypatch, capsys, {})

        assert response["status"] == "error"
        assert response["messages"] == [{"level": "warning", "text": "There is no text editor."}]

    def test_non_text_name(self, clear_config_cache, monkeypatch, capsys):
        """Should report an error for a name that is not a string."""
        request = {"active_language": "python", "selection": "x", "name": ["x"], "shortcut": "s", "description": ""}

        response = self._run(monkeypatch, capsys, request)

        assert response["status"] == "error"
        assert response["messages"][0]["level"] == "error"

    def test_language_outside_snippets_dir(self, clear_config_cache, monkeypatch, capsys, tmp_path):
        """Should refuse a language id that points at another directory."""
        clear_config_cache.mkdir()
        (clear_config_cache / "config.json").write_text(
            json.dumps({"editor": {"settings_root": str(tmp_path / "User")}})
        )
        request = {
            "active_language": "python",
            "language": "../../x",
            "selection": "x",
            "name": "n",
            "shortcut": "s",
            "description": "",
        }

        response = self._run(monkeypatch, capsys, request)

        assert response["status"] == "error"
        assert response["messages"][0]["level"] == "error"
        assert not (tmp_path / "User").exists()
        assert not (tmp_path / "x.json").exists()
