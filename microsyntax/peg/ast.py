# microsyntax/peg/ast.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, Union

# ---- Parse tree node ----
# start/end are inclusive offsets; a zero-width match has end == start - 1.

@dataclass(frozen=True)
class ASTNode:
    start: int
    end: int
    rule: str
    value: Union[str, "ASTNode", Tuple["ASTNode", ...]]
    is_rule: bool = False   # True only for nodes built at a rule reference

    @property
    def width(self) -> int:
        return self.end - self.start + 1

    @property
    def children(self) -> Tuple["ASTNode", ...]:
        if isinstance(self.value, ASTNode):
            return (self.value,)
        if isinstance(self.value, tuple):
            return self.value
        return ()

    def source(self, text: str) -> str:
        return text[self.start:self.end + 1]


def empty_node(pos: int, rule: str) -> ASTNode:
    return ASTNode(start=pos, end=pos - 1, rule=rule, value=())


def format_tree(node: ASTNode, text: str) -> str:
    """트리를 들여쓰기 문자열로 (CLI -D / parse 출력용)."""
    lines: List[str] = []

    def walk(n: ASTNode, depth: int) -> None:
        pad = "  " * depth
        tag = n.rule if n.is_rule else f"({n.rule})"
        span = f"{n.start}..{n.end}"
        if isinstance(n.value, str):
            lines.append(f"{pad}{tag} {span} {n.value!r}")
            return
        lines.append(f"{pad}{tag} {span} {n.source(text)!r}")
        for c in n.children:
            walk(c, depth + 1)

    walk(node, 0)
    return "\n".join(lines)
