# microsyntax/peg/__init__.py
"""Backtracking matcher for microsyntax grammars.

This package provides:
- the parse tree node (ASTNode) and a tree printer
- the recursive matching engine (Matcher / match)
- the entry points (parse / parse_complete / require_match)
- the per-rule transform stage that turns a tree into values

Grammars themselves live in microsyntax.grammar.
"""

from .ast import ASTNode, format_tree
from .engine import Matcher, match
from .runtime import ParseError, SyntaxProgram, parse, parse_complete, require_match
from .transform import TransformContext, apply_transforms
