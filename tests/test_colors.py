"""Tests for color handling."""

import io
import os
import unittest
from unittest.mock import patch, MagicMock

from whichbroke.colors import Colors


class TestColors(unittest.TestCase):
    """Tests for Colors class."""

    def setUp(self):
        self.saved = {attr: getattr(Colors, attr) for attr in Colors._COLOR_ATTRS}

    def tearDown(self):
        for attr, value in self.saved.items():
            setattr(Colors, attr, value)

    def tty(self):
        stream = MagicMock()
        stream.isatty.return_value = True
        return stream

    def test_color_codes_defined(self):
        """All expected color codes are defined."""
        for attr in Colors._COLOR_ATTRS:
            self.assertTrue(getattr(Colors, attr).startswith('\033['))

    def test_disable_clears_colors(self):
        """disable() sets all color codes to empty strings."""
        Colors.disable()

        self.assertEqual(Colors.RED, '')
        self.assertEqual(Colors.DIM, '')
        self.assertEqual(Colors.RESET, '')

    def test_init_keeps_colors_on_tty(self):
        with patch.dict(os.environ, clear=True):
            Colors.init(stream=self.tty())
        self.assertEqual(Colors.GREEN, '\033[32m')

    def test_init_disables_for_non_tty(self):
        """Colors are off when the stream is not a terminal."""
        Colors.init(stream=io.StringIO())
        self.assertEqual(Colors.GREEN, '')

    def test_init_disables_when_asked(self):
        """--no-color switches colors off even on a terminal."""
        Colors.init(enabled=False, stream=self.tty())
        self.assertEqual(Colors.YELLOW, '')

    def test_init_honors_no_color(self):
        with patch.dict(os.environ, {'NO_COLOR': '1'}):
            Colors.init(stream=self.tty())
        self.assertEqual(Colors.CYAN, '')


if __name__ == '__main__':
    unittest.main()
