import sys
import os
import io
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tobe import run

TOBE_TXT = os.path.join(os.path.dirname(__file__), "..", "tobe.txt")


class TestTobeClient(unittest.TestCase):
    def test_sample_input(self):
        with open(TOBE_TXT) as f:
            tokens = f.read().split()
        out = io.StringIO()
        queue = run(tokens, out)
        self.assertEqual(out.getvalue(), "to be or not to be (2 left on queue)\n")
        self.assertEqual(list(queue), ["that", "is"])

    def test_dash_on_empty_queue_is_ignored(self):
        out = io.StringIO()
        run(["-", "-", "a", "-", "-"], out)
        self.assertEqual(out.getvalue(), "a (0 left on queue)\n")

    def test_empty_input(self):
        out = io.StringIO()
        run([], out)
        self.assertEqual(out.getvalue(), "(0 left on queue)\n")


if __name__ == "__main__":
    unittest.main()
