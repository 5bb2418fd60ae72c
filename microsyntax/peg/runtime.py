# microsyntax/peg/runtime.py
"""Entry point: run a grammar from its entry rule at offset 0.

- `parse`          : root node or None; an unconsumed suffix is ignored.
- `parse_complete` : root node only when the whole input was consumed.
- `require_match`  : like `parse_complete`, but raises `ParseError`
                     with a caret snippet instead of returning None.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from ..grammar.ast import Grammar, RuleRef
from ..grammar.notation import load_grammar_text, parse_grammar_text
from ..grammar.source import caret_snippet, line_col
from .ast import ASTNode
from .engine import Matcher


class ParseError(SyntaxError):
    """Input does not match a grammar (or leaves an unconsumed suffix)."""

    def __init__(self, entry: str, text: str, pos: int):
        line, col = line_col(text, pos)
        where = "EOF" if pos >= len(text) else f"{line}:{col}"
        super().__init__(
            f"Input does not match grammar '{entry}' (stopped at {where})\n"
            + caret_snippet(text, pos)
        )
        self.entry = entry
        self.pos = pos


def parse(text: str, grammar: Grammar) -> Optional[ASTNode]:
    return Matcher(grammar).match(RuleRef(grammar.entry), text, 0)

def is_complete(node: Optional[ASTNode], text: str) -> bool:
    return node is not None and node.end == len(text) - 1

def parse_complete(text: str, grammar: Grammar) -> Optional[ASTNode]:
    node = parse(text, grammar)
    return node if is_complete(node, text) else None

def require_match(text: str, grammar: Grammar) -> ASTNode:
    node = parse(text, grammar)
    if node is None:
        raise ParseError(grammar.entry, text, 0)
    if not is_complete(node, text):
        raise ParseError(grammar.entry, text, node.end + 1)
    return node


@dataclass
class SyntaxProgram:
    """A grammar bundled with the parse entry points."""
    grammar: Grammar

    @classmethod
    def from_source(cls, src: str) -> "SyntaxProgram":
        return cls(parse_grammar_text(src))

    @classmethod
    def from_file(cls, path: "str | Path") -> "SyntaxProgram":
        return cls.from_source(load_grammar_text(str(path)))

    def parse(self, text: str) -> Optional[ASTNode]:
        return parse(text, self.grammar)

    def parse_complete(self, text: str) -> Optional[ASTNode]:
        return parse_complete(text, self.grammar)

    def require_match(self, text: str) -> ASTNode:
        return require_match(text, self.grammar)
