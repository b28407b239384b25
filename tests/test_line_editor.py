"""Line-editor state machine tests.

Drives the editor with key tokens and checks buffer, echo, and the
side-effecting completion path.
"""

from __future__ import annotations

import os
import unittest

from fakes import FAKE_ROOT, FakeFileSystem, capture_console
from printtree.completion import CompletionEngine
from printtree.input import LineEditor, classify_key, ends_with_separator, last_segment
from printtree.path_state import PathState


def _editor(tree: dict) -> tuple[LineEditor, PathState, object]:
    fs = FakeFileSystem(tree)
    console, stream = capture_console()
    path_state = PathState(FAKE_ROOT, fs)
    return LineEditor(console, CompletionEngine(fs), path_state), path_state, stream


def _feed(editor: LineEditor, keys: list[str]) -> list[str]:
    lines = []
    for key in keys:
        line = editor.feed(key)
        if line is not None:
            lines.append(line)
    return lines


class LineEditorTests(unittest.TestCase):
    def test_typing_then_enter_returns_line_and_echoes(self) -> None:
        editor, _state, stream = _editor({})

        lines = _feed(editor, list("ignore node_modules") + ["ENTER_LF"])

        self.assertEqual(lines, ["ignore node_modules"])
        self.assertEqual(stream.getvalue(), "ignore node_modules\n")
        self.assertEqual(editor.buffer, "")

    def test_backspace_removes_last_character(self) -> None:
        editor, _state, stream = _editor({})

        lines = _feed(editor, ["l", "x", "BACKSPACE", "s", "ENTER_LF"])

        self.assertEqual(lines, ["ls"])
        self.assertIn("\b \b", stream.getvalue())

    def test_backspace_on_empty_buffer_does_nothing(self) -> None:
        editor, _state, stream = _editor({})

        _feed(editor, ["BACKSPACE"])

        self.assertEqual(stream.getvalue(), "")

    def test_crlf_produces_one_line(self) -> None:
        editor, _state, _stream = _editor({})

        lines = _feed(editor, ["l", "s", "ENTER_CR", "ENTER_LF", "ENTER_LF"])

        self.assertEqual(lines, ["ls", ""])

    def test_non_printable_tokens_are_ignored(self) -> None:
        editor, _state, _stream = _editor({})

        lines = _feed(editor, ["UP", "ESC", "l", "LEFT", "s", "ENTER_LF"])

        self.assertEqual(lines, ["ls"])

    def test_tab_with_single_match_enters_directory(self) -> None:
        editor, state, stream = _editor({"src": {}, "docs": {}})

        _feed(editor, ["s", "r", "TAB"])

        self.assertEqual(state.current, FAKE_ROOT / "src")
        self.assertEqual(editor.buffer, "")
        self.assertTrue(stream.getvalue().endswith("\b\bsrc" + os.sep))

    def test_completions_chain_from_an_empty_buffer(self) -> None:
        editor, state, _stream = _editor({"src": {"main": {}, "test": {}}})

        _feed(editor, ["s", "TAB"])
        self.assertEqual(editor.buffer, "")
        lines = _feed(editor, ["m", "TAB", "ENTER_LF"])

        self.assertEqual(state.current, FAKE_ROOT / "src" / "main")
        self.assertEqual(lines, [os.sep])

    def test_enter_right_after_completion_reports_separator_only_once(self) -> None:
        editor, _state, _stream = _editor({"src": {}})

        lines = _feed(editor, ["s", "TAB", "ENTER_LF", "ENTER_LF"])

        self.assertEqual(lines, [os.sep, ""])

    def test_command_typed_after_completion_is_returned_verbatim(self) -> None:
        editor, state, _stream = _editor({"src": {}})

        lines = _feed(editor, ["s", "TAB", *"print", "ENTER_LF"])

        self.assertEqual(lines, ["print"])
        self.assertEqual(state.current, FAKE_ROOT / "src")

    def test_other_key_after_completion_drops_the_separator(self) -> None:
        editor, _state, _stream = _editor({"src": {}})

        lines = _feed(editor, ["s", "TAB", "BACKSPACE", "ENTER_LF"])

        self.assertEqual(lines, [""])

    def test_tab_with_multiple_matches_lists_and_keeps_buffer(self) -> None:
        editor, state, stream = _editor({"src": {}, "srv": {}})

        _feed(editor, ["s", "r", "TAB"])

        output = stream.getvalue()
        self.assertIn("Multiple matches found:\nsrc\nsrv\n", output)
        self.assertTrue(output.endswith(f"{FAKE_ROOT}> sr"))
        self.assertEqual(editor.buffer, "sr")
        self.assertEqual(state.current, FAKE_ROOT)

    def test_tab_without_match_reports_and_keeps_buffer(self) -> None:
        editor, state, stream = _editor({"docs": {}, "zz.txt": None})

        _feed(editor, ["z", "TAB"])

        self.assertIn("No matches found.\n", stream.getvalue())
        self.assertEqual(editor.buffer, "z")
        self.assertEqual(state.current, FAKE_ROOT)

    def test_tab_on_blank_or_separator_terminated_buffer_does_nothing(self) -> None:
        editor, state, stream = _editor({"src": {}})

        _feed(editor, ["TAB", " ", "TAB"])
        self.assertEqual(stream.getvalue(), " ")

        _feed(editor, ["BACKSPACE", "s", "/", "TAB"])
        self.assertEqual(state.current, FAKE_ROOT)
        self.assertEqual(editor.buffer, "s/")


class LineEditorHelperTests(unittest.TestCase):
    def test_classify_key(self) -> None:
        self.assertEqual(classify_key("a"), "printable")
        self.assertEqual(classify_key(":"), "printable")
        self.assertEqual(classify_key("é"), "printable")
        self.assertEqual(classify_key("TAB"), "tab")
        self.assertEqual(classify_key("ENTER_CR"), "enter")
        self.assertEqual(classify_key("BACKSPACE"), "backspace")
        self.assertEqual(classify_key("UP"), "other")
        self.assertEqual(classify_key("\x01"), "other")

    def test_separator_helpers(self) -> None:
        self.assertTrue(ends_with_separator("src/"))
        self.assertTrue(ends_with_separator("src\\"))
        self.assertFalse(ends_with_separator("src"))
        self.assertEqual(last_segment("a/b\\cd"), "cd")
        self.assertEqual(last_segment("plain"), "plain")


if __name__ == "__main__":
    unittest.main()
