""" The SVG points grammar: coordinate lists through parse and transform. """
import unittest

from microsyntax.grammars.svg_points import (
    SVG_POINTS_GRAMMAR, SVG_POINTS_TRANSFORMS, Point, parse_points,
)
from microsyntax.peg.runtime import ParseError, parse, parse_complete
from microsyntax.peg.transform import apply_transforms


def nodes_named(node, rule):
    out = []
    stack = [node]
    while stack:
        n = stack.pop()
        if n.is_rule and n.rule == rule:
            out.append(n)
        stack.extend(reversed(n.children))
    return out


class TestPoints(unittest.TestCase):
    def test_two_pairs(self):
        self.assertEqual(parse_points("10,20 30,40"), [Point(10, 20), Point(30, 40)])

    def test_transform_from_tree(self):
        text = "10,20 30,40"
        root = parse(text, SVG_POINTS_GRAMMAR)
        self.assertEqual(root.end, len(text) - 1)
        self.assertEqual(apply_transforms(root, SVG_POINTS_TRANSFORMS, text),
                         [Point(10, 20), Point(30, 40)])

    def test_negative_second_coordinate_needs_no_separator(self):
        self.assertEqual(parse_points("10-20"), [Point(10, -20)])
        self.assertEqual(parse_points("-1-2 3-4"), [Point(-1, -2), Point(3, -4)])

    def test_separator_flexibility(self):
        for text in ("10, 20", "10,20", "10  20", "10 ,20", "10\t20", " 10,20 "):
            with self.subTest(text=text):
                self.assertEqual(parse_points(text), [Point(10, 20)])

    def test_number_forms(self):
        for text, pt in [
            ("1.5,2", Point(1.5, 2)),
            ("1.5e2,-.5", Point(150, -0.5)),
            ("+3,4E-1", Point(3, 0.4)),
            ("1.,2.", Point(1, 2)),
            ("0.5-0.25", Point(0.5, -0.25)),
        ]:
            with self.subTest(text=text):
                self.assertEqual(parse_points(text), [pt])

    def test_multiline(self):
        self.assertEqual(parse_points("1,2\n3,4\r\n5,6"),
                         [Point(1, 2), Point(3, 4), Point(5, 6)])

    def test_empty_list(self):
        self.assertEqual(parse_points(""), [])
        self.assertEqual(parse_points("   "), [])

    def test_long_lists(self):
        n = 3000
        text = " ".join(f"{i},{-i}" for i in range(n))
        points = parse_points(text)
        self.assertEqual(len(points), n)
        self.assertEqual(points[-1], Point(n - 1, -(n - 1)))

    def test_long_digit_sequence(self):
        self.assertEqual(parse_points("0" * 400 + "1,2"), [Point(1, 2)])

    def test_long_list_with_dangling_coordinate(self):
        text = " ".join("1,2" for _ in range(2000)) + " 3"
        with self.assertRaises(ParseError) as cm:
            parse_points(text)
        self.assertEqual(cm.exception.pos, len(text) - 1)

    def test_coordinates_consume_distinct_numbers(self):
        text = "10,20"
        root = parse(text, SVG_POINTS_GRAMMAR)
        coords = nodes_named(root, "coordinate")
        self.assertEqual([(c.start, c.end) for c in coords], [(0, 1), (3, 4)])
        # coordinate : number  -> the number node is kept as the single child
        self.assertEqual(coords[0].value.rule, "number")


class TestMalformed(unittest.TestCase):
    def test_garbage_matches_zero_width(self):
        root = parse("abc", SVG_POINTS_GRAMMAR)
        self.assertEqual((root.start, root.end), (0, -1))
        self.assertIsNone(parse_complete("abc", SVG_POINTS_GRAMMAR))
        with self.assertRaises(ParseError) as cm:
            parse_points("abc")
        self.assertEqual(cm.exception.pos, 0)

    def test_trailing_comma_is_not_consumed(self):
        root = parse("10,20,", SVG_POINTS_GRAMMAR)
        self.assertEqual(root.end, 4)
        self.assertIsNone(parse_complete("10,20,", SVG_POINTS_GRAMMAR))
        with self.assertRaises(ParseError) as cm:
            parse_points("10,20,")
        self.assertEqual(cm.exception.pos, 5)

    def test_odd_coordinate_count(self):
        with self.assertRaises(ParseError) as cm:
            parse_points("10,20 30")
        self.assertEqual(cm.exception.pos, 6)
        self.assertIn("^", str(cm.exception))


if __name__ == '__main__':
    unittest.main()
