# microsyntax/grammar/ast.py
"""Grammar model
- Terminal / RuleRef / Quantified / Sequence: validator(패턴) 트리
- Grammar: entry 규칙 이름 + 규칙 이름 -> 순서 있는 대안 목록
"""

from __future__     import annotations
from dataclasses    import dataclass, field
from types          import MappingProxyType
from typing         import Dict, Iterable, List, Mapping, Pattern, Tuple, Union
import regex as re


class UndefinedRuleError(LookupError):
    """A rule reference names a rule the grammar does not declare."""

    def __init__(self, name: str):
        super().__init__(f"undefined rule '{name}'")
        self.name = name


class Arity:
    ZERO_OR_MORE = "*"
    ONE_OR_MORE  = "+"
    ZERO_OR_ONE  = "?"

    ALL = (ZERO_OR_MORE, ONE_OR_MORE, ZERO_OR_ONE)


_FLAG_MAP = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE,
}

def _compile_regex(pat: str, flags: str) -> Pattern[str]:
    f = 0
    for ch in flags:
        if ch not in _FLAG_MAP:
            raise ValueError(f"unsupported terminal flag {ch!r}")
        f |= _FLAG_MAP[ch]
    return re.compile(pat, f)


# ---- Validator 노드 ----

@dataclass(frozen=True)
class Terminal:
    pattern: str        # 원본 정규식 문자열
    flags: str = ""
    compiled: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", _compile_regex(self.pattern, self.flags))

@dataclass(frozen=True)
class RuleRef:
    name: str

@dataclass(frozen=True)
class Quantified:
    inner: "Validator"
    arity: str  # '*', '+', '?'

    def __post_init__(self) -> None:
        if self.arity not in Arity.ALL:
            raise ValueError(f"unknown arity {self.arity!r}")

@dataclass(frozen=True)
class Sequence:
    items: Tuple["Validator", ...]

Validator = Union[Terminal, RuleRef, Quantified, Sequence]


@dataclass(frozen=True, eq=False)
class Grammar:
    """
    문법 1개.
    - entry: 시작 규칙 이름
    - rules: 규칙 이름 -> 대안 튜플(선언 순서 = 시도 순서)
    동등성/해시는 객체 동일성 기준(캐시 키로 사용 가능).
    """
    entry: str
    rules: Mapping[str, Tuple[Validator, ...]]

    def __post_init__(self) -> None:
        frozen = {name: tuple(alts) for name, alts in self.rules.items()}
        object.__setattr__(self, "rules", MappingProxyType(frozen))

    @classmethod
    def build(cls, entry: str, rules: Mapping[str, Iterable[Validator]]) -> "Grammar":
        return cls(entry, {name: [_coerce(a) for a in alts] for name, alts in rules.items()})

    def require_rule(self, name: str) -> Tuple[Validator, ...]:
        try:
            return self.rules[name]
        except KeyError:
            raise UndefinedRuleError(name) from None

    def references(self) -> List[str]:
        """Rule names referenced anywhere in the grammar, in first-seen order."""
        seen: Dict[str, None] = {}
        for alts in self.rules.values():
            for alt in alts:
                _collect_refs(alt, seen)
        return list(seen)


def _collect_refs(v: Validator, seen: Dict[str, None]) -> None:
    if isinstance(v, RuleRef):
        seen.setdefault(v.name, None)
    elif isinstance(v, Quantified):
        _collect_refs(v.inner, seen)
    elif isinstance(v, Sequence):
        for it in v.items:
            _collect_refs(it, seen)


# ---- 작성용 헬퍼 ----

def _coerce(v: Union[Validator, str]) -> Validator:
    # 문자열은 규칙 참조로 취급
    if isinstance(v, str):
        return RuleRef(v)
    if isinstance(v, (Terminal, RuleRef, Quantified, Sequence)):
        return v
    raise TypeError(f"not a validator: {v!r}")

def term(pattern: str, flags: str = "") -> Terminal:
    return Terminal(pattern, flags)

def lit(text: str) -> Terminal:
    return Terminal(re.escape(text))

def ref(name: str) -> RuleRef:
    return RuleRef(name)

def seq(*items: Union[Validator, str]) -> Sequence:
    return Sequence(tuple(_coerce(it) for it in items))

def opt(v: Union[Validator, str]) -> Quantified:
    return Quantified(_coerce(v), Arity.ZERO_OR_ONE)

def many(v: Union[Validator, str]) -> Quantified:
    return Quantified(_coerce(v), Arity.ZERO_OR_MORE)

def some(v: Union[Validator, str]) -> Quantified:
    return Quantified(_coerce(v), Arity.ONE_OR_MORE)


def describe(v: Validator) -> str:
    """Render a validator back in .g notation (debug output)."""
    if isinstance(v, Terminal):
        return f"/{v.pattern}/{v.flags}"
    if isinstance(v, RuleRef):
        return v.name
    if isinstance(v, Quantified):
        inner = describe(v.inner)
        if isinstance(v.inner, Sequence) and len(v.inner.items) > 1:
            inner = f"({inner})"
        return inner + v.arity
    if isinstance(v, Sequence):
        return " ".join(describe(it) for it in v.items)
    raise AssertionError(f"unknown validator: {v!r}")
