# microsyntax/grammar/notation.py
"""Grammar 텍스트 표기(.g) 로더

    %entry list ;                       (선택, 없으면 첫 규칙)
    list  : item (sep item)* | item ;
    item  : /[0-9]+/ ;
    sep   : "," ;

  rule     := IDENT ":" alt ("|" alt)* ";"
  alt      := item+                     (1개면 그 자체, 여러 개면 Sequence)
  item     := primary ("?"|"*"|"+")?
  primary  := IDENT | /regex/flags | "literal" | 'literal' | "(" item+ ")"

  주석: // ..., # ..., /* ... */
  대안(|)은 규칙 최상위에서만 허용된다(괄호 안은 시퀀스만).
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from .ast import Grammar, Quantified, RuleRef, Sequence, Terminal, Validator, lit
from .source import caret_snippet, line_col

_REGEX_FLAGS = "imsx"
_SUFFIXES = "?*+"


def load_grammar_text(path: str) -> str:
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


class _TS:
    def __init__(self, src: str):
        self.s = src
        self.i = 0
        self.n = len(src)

    def _peek(self, k: int = 0) -> Optional[str]:
        j = self.i + k
        if j >= self.n:
            return None
        return self.s[j]

    def _starts(self, lit: str) -> bool:
        return self.s.startswith(lit, self.i)

    def _bump(self, n: int = 1) -> None:
        self.i += n

    def _eof(self) -> bool:
        return self.i >= self.n

    def _err(self, msg: str, pos: Optional[int] = None) -> SyntaxError:
        pos = self.i if pos is None else pos
        line, col = line_col(self.s, pos)
        return SyntaxError(f"Grammar error at {line}:{col}: {msg}\n" + caret_snippet(self.s, pos))

    def _skip_ws(self) -> None:
        while not self._eof():
            if self._starts("/*"):
                j = self.s.find("*/", self.i + 2)
                if j == -1:
                    raise self._err("unclosed block comment")
                self.i = j + 2
                continue
            ch = self._peek()
            if ch in " \t\r\n":
                self._bump(1)
                continue
            if self._starts("//") or ch == "#":
                while not self._eof() and self._peek() != "\n":
                    self._bump(1)
                continue
            break

    def _eat(self, lit: str) -> None:
        self._skip_ws()
        if not self._starts(lit):
            found = "EOF" if self._eof() else repr(self._peek())
            raise self._err(f"expected {lit!r}, found {found}")
        self._bump(len(lit))

    def _try_eat(self, lit: str) -> bool:
        self._skip_ws()
        if self._starts(lit):
            self._bump(len(lit))
            return True
        return False

    def _is_ident_start(self, ch: Optional[str]) -> bool:
        return ch is not None and (ch.isalpha() or ch == "_")

    def _is_ident_continue(self, ch: Optional[str]) -> bool:
        return ch is not None and (ch.isalnum() or ch == "_")

    def _ident(self) -> str:
        self._skip_ws()
        if not self._is_ident_start(self._peek()):
            raise self._err("expected rule name")
        start = self.i
        self._bump(1)
        while self._is_ident_continue(self._peek()):
            self._bump(1)
        return self.s[start:self.i]

    def _read_escape(self) -> str:
        c = self._peek()
        if c is None:
            raise self._err("unterminated escape")
        self._bump(1)
        return {"n": "\n", "r": "\r", "t": "\t"}.get(c, c)

    def _literal(self) -> Terminal:
        q = self._peek()
        open_at = self.i
        self._bump(1)
        out = []
        while not self._eof():
            c = self._peek()
            if c == q:
                self._bump(1)
                break
            if c == "\\":
                self._bump(1)
                out.append(self._read_escape())
            else:
                out.append(c)
                self._bump(1)
        else:
            raise self._err("unterminated string", open_at)
        if not out:
            raise self._err("empty literal", open_at)
        return lit("".join(out))

    def _regex(self) -> Terminal:
        open_at = self.i
        self._bump(1)  # '/'
        start = self.i
        while True:
            c = self._peek()
            if c is None or c == "\n":
                raise self._err("unterminated /regex/", open_at)
            if c == "\\":
                self._bump(2)
                continue
            if c == "/":
                break
            self._bump(1)
        pattern = self.s[start:self.i]
        self._bump(1)
        fstart = self.i
        while self._peek() is not None and self._peek() in _REGEX_FLAGS:
            self._bump(1)
        try:
            return Terminal(pattern, self.s[fstart:self.i])
        except Exception as e:
            raise self._err(f"bad regex: {e}", open_at) from None

    # --- recursive descent ---

    def parse_grammar(self) -> Grammar:
        rules: Dict[str, Tuple[Validator, ...]] = {}
        entry: Optional[Tuple[str, int]] = None
        first: Optional[str] = None
        while True:
            self._skip_ws()
            if self._eof():
                break
            if self._try_eat("%"):
                at = self.i
                kw = self._ident()
                if kw != "entry":
                    raise self._err(f"unknown directive %{kw}", at)
                if entry is not None:
                    raise self._err("duplicate %entry", at)
                self._skip_ws()
                entry = (self._ident(), at)
                self._eat(";")
                continue
            at = self.i
            name = self._ident()
            self._eat(":")
            alts = [self._parse_alt()]
            while self._try_eat("|"):
                alts.append(self._parse_alt())
            self._eat(";")
            if name in rules:
                raise self._err(f"duplicate rule '{name}'", at)
            rules[name] = tuple(alts)
            if first is None:
                first = name
        if not rules:
            raise self._err("empty grammar")
        if entry is not None:
            return Grammar(entry[0], rules)
        return Grammar(first, rules)  # type: ignore[arg-type]

    def _parse_alt(self) -> Validator:
        items: List[Validator] = []
        while True:
            self._skip_ws()
            ch = self._peek()
            if ch is None or ch in ";|)":
                break
            items.append(self._parse_item())
        if not items:
            raise self._err("empty alternative")
        if len(items) == 1:
            return items[0]
        return Sequence(tuple(items))

    def _parse_item(self) -> Validator:
        node = self._parse_primary()
        if not self._eof() and self._peek() in _SUFFIXES:
            kind = self._peek()
            self._bump(1)
            return Quantified(node, kind)
        return node

    def _parse_primary(self) -> Validator:
        self._skip_ws()
        ch = self._peek()
        if ch == "(":
            self._bump(1)
            items: List[Validator] = []
            while True:
                self._skip_ws()
                c = self._peek()
                if c == ")":
                    self._bump(1)
                    break
                if c is None or c in ";":
                    raise self._err("unclosed '('")
                if c == "|":
                    raise self._err("alternatives are only allowed at rule level")
                items.append(self._parse_item())
            if not items:
                raise self._err("empty group")
            return items[0] if len(items) == 1 else Sequence(tuple(items))
        if ch in ("'", '"'):
            return self._literal()
        if ch == "/":
            return self._regex()
        return RuleRef(self._ident())


def parse_grammar_text(src: str) -> Grammar:
    """Parse .g notation into a Grammar."""
    return _TS(src).parse_grammar()
