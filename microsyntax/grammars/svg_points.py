# microsyntax/grammars/svg_points.py
"""SVG <polygon>/<polyline> `points` attribute.

Grammar follows the SVG 1.1 BNF for list-of-points. Alternatives are
ordered longest-first: the engine commits to the first alternative that
matches, so floats are tried before integers. The BNF's right-recursive
lists (coordinate_pairs, digit_sequence) are written as repetitions so
long inputs do not grow the call stack.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List
from ..grammar.ast import Grammar, many, opt, seq, some, term
from ..peg.runtime import require_match
from ..peg.transform import TransformContext, apply_transforms


SVG_POINTS_GRAMMAR = Grammar.build("list_of_points", {
    "list_of_points": [
        seq(many("wsp"), opt("coordinate_pairs"), many("wsp")),
    ],
    "coordinate_pairs": [
        seq("coordinate_pair", many(seq("comma_wsp", "coordinate_pair"))),
    ],
    "coordinate_pair": [
        seq("coordinate", "comma_wsp", "coordinate"),
        # 두 번째 좌표가 음수면 구분자 생략 가능: "10-20"
        seq("coordinate", "negative_coordinate"),
    ],
    "coordinate": ["number"],
    "number": [
        seq(opt("sign"), "floating_point_constant"),
        seq(opt("sign"), "integer_constant"),
    ],
    "negative_coordinate": [
        seq(term(r"-"), "floating_point_constant"),
        seq(term(r"-"), "integer_constant"),
    ],
    "comma_wsp": [
        seq(some("wsp"), opt("comma"), many("wsp")),
        seq("comma", many("wsp")),
    ],
    "comma": [term(r",")],
    "integer_constant": ["digit_sequence"],
    "floating_point_constant": [
        seq("fractional_constant", opt("exponent")),
        seq("digit_sequence", "exponent"),
    ],
    "fractional_constant": [
        seq(opt("digit_sequence"), term(r"\."), "digit_sequence"),
        seq("digit_sequence", term(r"\.")),
    ],
    "exponent": [seq(term(r"[eE]"), opt("sign"), "digit_sequence")],
    "sign": [term(r"[+-]")],
    "digit_sequence": [some("digit")],
    "digit": [term(r"[0-9]")],
    "wsp": [term(r" "), term(r"\t"), term(r"\r"), term(r"\n")],
})


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def _pairs(ctx: TransformContext) -> List[Point]:
    # comma_wsp는 버려지고 좌표쌍만 남는다
    return list(ctx.values)

def _list_of_points(ctx: TransformContext) -> List[Point]:
    return ctx.values[0] if ctx.values else []

def _drop(ctx: TransformContext) -> None:
    return None


SVG_POINTS_TRANSFORMS = {
    "list_of_points": _list_of_points,
    "coordinate_pairs": _pairs,
    "coordinate_pair": lambda ctx: Point(*ctx.values),
    "coordinate": lambda ctx: float(ctx.text),
    "negative_coordinate": lambda ctx: float(ctx.text),
    "comma_wsp": _drop,
    "wsp": _drop,
}


def parse_points(text: str) -> List[Point]:
    """Parse a whole `points` value; raises ParseError on anything else."""
    root = require_match(text, SVG_POINTS_GRAMMAR)
    return apply_transforms(root, SVG_POINTS_TRANSFORMS, text)
