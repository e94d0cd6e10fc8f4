import io
import os
import unittest
import unittest.mock
from contextlib import redirect_stderr

from ignite_cli.lib._util import ansi
from ignite_cli.ui_utils.terminal import bold, yes_no


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


class SupportsColorTests(unittest.TestCase):
    def test_no_color_wins(self) -> None:
        with unittest.mock.patch.dict(os.environ, {"NO_COLOR": "", "FORCE_COLOR": "1"}):
            self.assertFalse(ansi.supports_color(_Tty()))

    def test_force_color(self) -> None:
        with unittest.mock.patch.dict(os.environ, {"FORCE_COLOR": "1"}, clear=True):
            self.assertTrue(ansi.supports_color(io.StringIO()))

    def test_force_color_zero_falls_back_to_tty(self) -> None:
        with unittest.mock.patch.dict(os.environ, {"FORCE_COLOR": "0"}, clear=True):
            self.assertTrue(ansi.supports_color(_Tty()))
            self.assertFalse(ansi.supports_color(io.StringIO()))

    def test_stream_without_isatty(self) -> None:
        with unittest.mock.patch.dict(os.environ, {}, clear=True):
            self.assertFalse(ansi.supports_color(object()))


class StylingTests(unittest.TestCase):
    def test_disabled_is_plain(self) -> None:
        self.assertEqual(ansi.red("x", False), "x")
        self.assertEqual(bold("x", False), "x")
        self.assertEqual(yes_no(False, False), "no")

    def test_enabled_wraps(self) -> None:
        self.assertEqual(ansi.yellow("x", True), "\x1b[33mx\x1b[0m")
        self.assertEqual(yes_no(True, True), "\x1b[32myes\x1b[0m")

    def test_warn_goes_to_stderr(self) -> None:
        buffer = io.StringIO()
        with unittest.mock.patch.dict(os.environ, {"NO_COLOR": "1"}), redirect_stderr(buffer):
            ansi.warn("careful")
        self.assertEqual(buffer.getvalue(), "Warning: careful\n")


if __name__ == "__main__":
    unittest.main()
