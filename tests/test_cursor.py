import unittest

from cursor import Cursor


class TestCursor(unittest.TestCase):

    def test_consume_walks_forward(self):
        c = Cursor(list("ab"))
        self.assertTrue(c.is_open())
        self.assertEqual(c.current, "a")
        self.assertEqual(c.consume(), "a")
        self.assertEqual(c.current, "b")
        self.assertEqual(c.consume(), "b")
        self.assertFalse(c.is_open())

    def test_current_past_end_is_sentinel(self):
        c = Cursor("")
        self.assertFalse(c.is_open())
        self.assertEqual(c.current, "")

    def test_consume_past_end_does_not_advance(self):
        c = Cursor("x")
        c.consume()
        self.assertEqual(c.consume(), "")
        self.assertEqual(c.i, 1)
        self.assertFalse(c.is_open())

    def test_custom_sentinel(self):
        c = Cursor([1, 2], sentinel=None)
        c.consume(); c.consume()
        self.assertIsNone(c.current)
