from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

_THIS_DIR = Path(__file__).resolve().parent
if str(_THIS_DIR) not in sys.path:
    sys.path.insert(0, str(_THIS_DIR))

from nfa.errors import RegexError
from nfa.nfa import NFA
from nfa.nfa_builder import compile as compile_regex

USAGE = (
    "输入一个正则表达式，本程序仅支持 a-z 的小写字母（E 表示 ε）\n"
    "运算符支持 'a*'、'a|b'、'ab'、'()'\n"
    "退出请输入 ':q' 或者 'quit'"
)

QUIT_TOKENS = (":q", "quit")

FORMATS = ("list", "table", "dot")


def is_quit_token(line: str) -> bool:
    return line == QUIT_TOKENS[0] or line.lower() == QUIT_TOKENS[1]


def render(nfa: NFA, fmt: str) -> str:
    if fmt == "table":
        return nfa.to_table()
    if fmt == "dot":
        return nfa.to_digraph().source
    return "\n".join(nfa.format_transitions())


def compile_and_print(regex: str, fmt: str, out: TextIO) -> None:
    nfa = compile_regex(regex)
    out.write("\nNFA:\n")
    rendered = render(nfa, fmt)
    if rendered:
        out.write(rendered.rstrip("\n") + "\n")


def run(lines: Iterable[str], fmt: str, out: TextIO, show_usage: bool = True) -> int:
    for raw in lines:
        line = raw.rstrip("\r\n")
        if is_quit_token(line):
            break

        try:
            compile_and_print(line, fmt, out)
        except RegexError as e:
            # 括号不配对、操作数和操作符不匹配：直接结束
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if show_usage:
            out.write(USAGE + "\n")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Thompson 构造：正则表达式 -> NFA")
    parser.add_argument("regex", nargs="*", help="要编译的正则；不提供时从标准输入逐行读取")
    parser.add_argument("--format", choices=FORMATS, default="list", help="NFA 的输出形式")
    parser.add_argument("--quiet", action="store_true", help="不打印用法提示")
    return parser


def main(argv: List[str], stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    args = build_arg_parser().parse_args(argv[1:])
    out = stdout if stdout is not None else sys.stdout

    if args.regex:
        return run(args.regex, args.format, out, show_usage=False)

    show_usage = not args.quiet
    if show_usage:
        out.write(USAGE + "\n")
    return run(stdin if stdin is not None else sys.stdin, args.format, out, show_usage)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
