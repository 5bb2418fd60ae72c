# microsyntax/msync.py
"""msync – microsyntax CLI

사용 예)
    $ python -m microsyntax.msync check tests/grammar_test/svg_points.g -D
    $ python -m microsyntax.msync parse tests/grammar_test/svg_points.g --text "10,20 30,40"
    $ python -m microsyntax.msync points --text "10,20 30,40"

기능
----
- check  : .g 문법을 읽어 규칙 요약 출력
- parse  : .g 문법으로 입력을 파싱해 AST 트리 출력
- points : 내장 SVG points 문법으로 좌표 목록 출력

디버그 모드(-D/--debug)를 켜면 규칙 목록/AST 트리를 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_input(args) -> str:
    if args.text is not None:
        return args.text
    with open(args.input, "r", encoding="utf-8") as f:
        return f.read()


def _print_rules(g) -> None:
    from .grammar.ast import describe
    _eprint("\n[RULES]")
    _eprint(f"Entry: {g.entry}")
    for name, alts in g.rules.items():
        body = " | ".join(describe(a) for a in alts)
        _eprint(f"{name:>24} : {body}")


def _load_program(path: str, debug: bool):
    from .peg.runtime import SyntaxProgram
    prog = SyntaxProgram.from_file(path)
    if debug:
        _eprint("[DEBUG] grammar ready | entry=%s rules=%d" %
                (prog.grammar.entry, len(prog.grammar.rules)))
    return prog

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_check(args) -> int:
    try:
        prog = _load_program(args.file, debug=args.debug)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    g = prog.grammar
    if args.debug:
        _print_rules(g)
        _eprint("[DEBUG] referenced: " + ", ".join(g.references()))

    n_alts = sum(len(a) for a in g.rules.values())
    print(f"[CHECK OK] entry={g.entry} rules={len(g.rules)} alternatives={n_alts}")
    return 0


def cmd_parse(args) -> int:
    from .grammar.ast import UndefinedRuleError
    from .peg.ast import format_tree
    from .peg.runtime import ParseError
    try:
        prog = _load_program(args.file, debug=args.debug)
        text = _read_input(args)
        if args.complete:
            root = prog.require_match(text)
        else:
            root = prog.parse(text)
    except ParseError as e:
        _eprint("[NO MATCH]")
        _eprint(str(e))
        return 1
    except UndefinedRuleError as e:
        _eprint("[GRAMMAR ERROR]", str(e))
        return 2
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if root is None:
        _eprint(f"[NO MATCH] input does not match grammar '{prog.grammar.entry}'")
        return 1
    if args.debug:
        _eprint(f"[DEBUG] consumed {root.width}/{len(text)} chars")
    print(format_tree(root, text))
    return 0


def cmd_points(args) -> int:
    from .grammars.svg_points import SVG_POINTS_GRAMMAR, parse_points
    from .peg.ast import format_tree
    from .peg.runtime import ParseError, parse
    try:
        text = _read_input(args)
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    if args.debug:
        root = parse(text, SVG_POINTS_GRAMMAR)
        if root is not None:
            _eprint("\n[AST]\n" + format_tree(root, text))
    try:
        points = parse_points(text)
    except ParseError as e:
        _eprint("[NO MATCH]")
        _eprint(str(e))
        return 1
    for p in points:
        print(f"{p.x:g},{p.y:g}")
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def _add_input_args(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="직접 입력 텍스트")
    src_group.add_argument("--input", help="입력 텍스트 파일 경로")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="msync", description="microsyntax grammar parser CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="문법 파일을 읽어 규칙을 요약합니다")
    p_check.add_argument("file", help=".g 문법 파일")
    p_check.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_check.set_defaults(func=cmd_check)

    p_parse = sub.add_parser("parse", help="문법으로 입력을 파싱해 AST를 출력합니다")
    p_parse.add_argument("file", help=".g 문법 파일")
    _add_input_args(p_parse)
    p_parse.add_argument("--complete", action="store_true", help="입력 전체를 소비해야 성공")
    p_parse.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_parse.set_defaults(func=cmd_parse)

    p_points = sub.add_parser("points", help="SVG points 값을 좌표 목록으로 출력합니다")
    _add_input_args(p_points)
    p_points.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_points.set_defaults(func=cmd_points)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
