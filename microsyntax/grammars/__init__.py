"""Concrete micro-syntax grammars shipped with microsyntax."""

from .svg_points import SVG_POINTS_GRAMMAR, SVG_POINTS_TRANSFORMS, Point, parse_points
