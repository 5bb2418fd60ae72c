# microsyntax/peg/engine.py
from __future__ import annotations
from typing import List, Optional
from ..grammar.ast import (
    Terminal, RuleRef, Quantified, Sequence, Arity, Grammar, Validator
)
from .ast import ASTNode, empty_node

# Backtracking recursive-descent matcher:
# - Ordered choice only at rule level; first successful alternative wins.
# - No memo, no state between calls: every attempt is a pure function of
#   (validator, text, pos), so a failed attempt leaves nothing to undo.
# - Left recursion is not supported (recurses until the stack runs out).
# - Failure is None.


class Matcher:
    def __init__(self, g: Grammar):
        self.g = g

    # ---- Public entrypoint ----
    def match(self, v: Validator, text: str, pos: int = 0,
              rule: Optional[str] = None) -> Optional[ASTNode]:
        return self._eval(v, text, pos, self.g.entry if rule is None else rule)

    # ---- Rule application ----
    def _apply_rule(self, name: str, text: str, pos: int) -> Optional[ASTNode]:
        for alt in self.g.require_rule(name):
            node = self._eval(alt, text, pos, name)
            if node is None:
                continue
            # 대안 자체가 규칙 노드면 단일 자식으로 감싼다
            value = node if node.is_rule else node.value
            return ASTNode(node.start, node.end, name, value, is_rule=True)
        return None

    # ---- Repetition ----
    def _repeat(self, inner: Validator, text: str, pos: int, rule: str,
                at_least: int) -> Optional[ASTNode]:
        results: List[ASTNode] = []
        cur = pos
        while True:
            node = self._eval(inner, text, cur, rule)
            if node is None:
                break
            if node.end < cur:
                # 폭 0 매치: '+'의 첫 시도만 성공으로 남기고 반복 종료
                if not results and at_least:
                    results.append(node)
                break
            results.append(node)
            cur = node.end + 1
        if len(results) < at_least:
            return None
        if not results:
            return empty_node(pos, rule)
        return ASTNode(pos, cur - 1, rule, tuple(results))

    # ---- Evaluator for validators ----
    def _eval(self, v: Validator, text: str, pos: int, rule: str) -> Optional[ASTNode]:
        if isinstance(v, Terminal):
            m = v.compiled.match(text, pos)
            if m is None:
                return None
            consumed = m.group(0)
            return ASTNode(pos, pos + len(consumed) - 1, rule, consumed)

        if isinstance(v, RuleRef):
            return self._apply_rule(v.name, text, pos)

        if isinstance(v, Quantified):
            if v.arity == Arity.ZERO_OR_ONE:
                node = self._eval(v.inner, text, pos, rule)
                return node if node is not None else empty_node(pos, rule)
            if v.arity == Arity.ZERO_OR_MORE:
                return self._repeat(v.inner, text, pos, rule, 0)
            if v.arity == Arity.ONE_OR_MORE:
                return self._repeat(v.inner, text, pos, rule, 1)
            raise AssertionError(f"unknown arity {v.arity!r}")

        if isinstance(v, Sequence):
            cur = pos
            parts: List[ASTNode] = []
            for it in v.items:
                node = self._eval(it, text, cur, rule)
                if node is None:
                    return None
                parts.append(node)
                cur = node.end + 1
            if not parts:
                return empty_node(pos, rule)
            return ASTNode(pos, cur - 1, rule, tuple(parts))

        raise AssertionError(f"unknown validator: {v!r}")


def match(v: Validator, text: str, g: Grammar, pos: int = 0,
          rule: Optional[str] = None) -> Optional[ASTNode]:
    """Match one validator at `pos`; nodes built outside any rule are tagged `rule` (default: the entry)."""
    return Matcher(g).match(v, text, pos, rule)
