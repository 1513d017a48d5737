from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from dialog_core.dialogs import DIALOG_KINDS, Input, Message, Password, Question  # noqa: E402
from dialog_core.formatting import escape_markup, parse_choice, strip_line_terminator  # noqa: E402
from dialog_core.models import Choice  # noqa: E402


class BuilderTests(unittest.TestCase):
    def test_title_last_write_wins(self):
        for cls in (Message, Input, Password, Question):
            dialog = cls("text").title("first").title("second")
            self.assertEqual(dialog.window_title, "second")
            self.assertEqual(dialog.text, "text")

    def test_setters_return_same_object(self):
        dialog = Input("Name")
        self.assertIs(dialog.title("t"), dialog)
        self.assertIs(dialog.default("d"), dialog)

    def test_default_last_write_wins(self):
        dialog = Input("Name").default("a").default("b").default("")
        self.assertEqual(dialog.default_value, "")

    def test_no_validation(self):
        dialog = Question("").title("")
        self.assertEqual(dialog.text, "")
        self.assertEqual(dialog.window_title, "")

    def test_unset_title_is_none(self):
        self.assertIsNone(Message("hi").window_title)
        self.assertIsNone(Input("hi").default_value)

    def test_kind_tags(self):
        self.assertEqual(
            {name: cls.kind for name, cls in DIALOG_KINDS.items()},
            {"message": "message", "input": "input", "password": "password", "question": "question"},
        )

    def test_to_dict(self):
        payload = Input("Name").title("Who").default("anon").to_dict()
        self.assertEqual(payload, {"kind": "input", "text": "Name", "title": "Who", "default": "anon"})


class FormattingTests(unittest.TestCase):
    def test_strip_single_terminator(self):
        self.assertEqual(strip_line_terminator("abc\n\n"), "abc\n")
        self.assertEqual(strip_line_terminator("abc\r\n"), "abc")
        self.assertEqual(strip_line_terminator("abc"), "abc")
        self.assertEqual(strip_line_terminator("\n"), "")

    def test_escape_markup(self):
        self.assertEqual(escape_markup("a & <b>"), "a &amp; &lt;b&gt;")
        self.assertEqual(escape_markup("; rm -rf /"), "; rm -rf /")
        self.assertEqual(escape_markup("it's \"x\""), "it&#39;s &quot;x&quot;")

    def test_parse_choice(self):
        for answer in ("y", "Y", "yes", "YES", " yes "):
            self.assertIs(parse_choice(answer), Choice.YES)
        for answer in ("", "n", "no", "anything else", None):
            self.assertIs(parse_choice(answer), Choice.NO)


if __name__ == "__main__":
    unittest.main()
