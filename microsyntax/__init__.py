"""microsyntax: grammar-driven parser for small attribute micro-syntaxes."""

from .grammar.ast import (
    Arity, Grammar, Quantified, RuleRef, Sequence, Terminal, UndefinedRuleError,
    lit, many, opt, ref, seq, some, term,
)
from .grammar.notation import parse_grammar_text
from .peg import (
    ASTNode, Matcher, ParseError, SyntaxProgram, TransformContext,
    apply_transforms, format_tree, match, parse, parse_complete, require_match,
)

__version__ = "0.1.0"
