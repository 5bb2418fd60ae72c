""" Command-line front end. """
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from microsyntax.msync import main

SVG_POINTS = str(Path(__file__).parent / "grammar_test" / "svg_points.g")


def run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestMsync(unittest.TestCase):
    def test_check(self):
        code, out, _ = run("check", SVG_POINTS)
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "[CHECK OK] entry=list_of_points rules=16 alternatives=25")

    def test_check_debug_lists_rules(self):
        code, _, err = run("check", SVG_POINTS, "-D")
        self.assertEqual(code, 0)
        self.assertIn("[RULES]", err)
        self.assertIn("digit_sequence : digit+", err)

    def test_check_bad_grammar(self):
        fd, path = tempfile.mkstemp(suffix=".g")
        try:
            with os.fdopen(fd, "w") as f:
                f.write("r : /x/\n")
            code, _, err = run("check", path)
        finally:
            os.remove(path)
        self.assertEqual(code, 2)
        self.assertIn("[SYNTAX ERROR]", err)

    def test_parse_prints_tree(self):
        code, out, _ = run("parse", SVG_POINTS, "--text", "1,2", "--complete")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines()[0], "list_of_points 0..2 '1,2'")
        self.assertIn("digit 0..0 '1'", out)

    def test_parse_incomplete(self):
        code, _, err = run("parse", SVG_POINTS, "--text", "1,2,", "--complete")
        self.assertEqual(code, 1)
        self.assertIn("[NO MATCH]", err)
        code, out, _ = run("parse", SVG_POINTS, "--text", "1,2,")
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("list_of_points 0..2 "))

    def test_points(self):
        code, out, _ = run("points", "--text", "10,20 30-40.5")
        self.assertEqual(code, 0)
        self.assertEqual(out, "10,20\n30,-40.5\n")

    def test_points_rejects_garbage(self):
        code, out, err = run("points", "--text", "abc")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("does not match grammar 'list_of_points'", err)


if __name__ == '__main__':
    unittest.main()
