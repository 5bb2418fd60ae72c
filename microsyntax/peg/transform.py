# microsyntax/peg/transform.py
"""AST -> 값 변환 단계

규칙 이름별 변환 함수를 트리에 아래에서 위로 적용한다.
- 텍스트 값       : 그대로 문자열
- 단일 자식 값     : 자식을 변환한 결과
- 자식 리스트 값   : 각 자식을 변환한 결과 목록(구조 노드의 리스트는 펼쳐서 합침)
변환 함수가 None을 돌려주면 부모 목록에 아무것도 넣지 않는다.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping
from .ast import ASTNode


@dataclass(frozen=True)
class TransformContext:
    node: ASTNode
    values: List[Any]   # 하위 노드 변환 결과(항상 리스트)
    text: str           # 이 노드가 소비한 원문

TransformMap = Mapping[str, Callable[[TransformContext], Any]]


def _collect(node: ASTNode, transforms: TransformMap, src: str) -> List[Any]:
    v = node.value
    if isinstance(v, str):
        return [v]
    if isinstance(v, ASTNode):
        return _emit(v, transforms, src)
    out: List[Any] = []
    for child in v:
        out.extend(_emit(child, transforms, src))
    return out

def _emit(node: ASTNode, transforms: TransformMap, src: str) -> List[Any]:
    """Values a node contributes to its parent's list."""
    if not node.is_rule:
        # 구조 노드(시퀀스/반복/단말)는 부모 목록에 펼친다
        return _collect(node, transforms, src)
    r = transform_node(node, transforms, src)
    return [] if r is None else [r]


def transform_node(node: ASTNode, transforms: TransformMap, src: str) -> Any:
    values = _collect(node, transforms, src)
    fn = transforms.get(node.rule) if node.is_rule else None
    if fn is not None:
        return fn(TransformContext(node, values, node.source(src)))
    if isinstance(node.value, str):
        return node.value
    if isinstance(node.value, ASTNode):
        return values[0] if values else None
    return values


def apply_transforms(root: ASTNode, transforms: TransformMap, src: str) -> Any:
    return transform_node(root, transforms, src)
