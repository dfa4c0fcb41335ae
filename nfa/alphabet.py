from __future__ import annotations

# ε 字面量：可以直接写在正则里，相当于一个不消耗输入的空操作符号
EPSILON = "E"

OPERATORS = "()*|"


def is_letter(ch: str) -> bool:
    return len(ch) == 1 and "a" <= ch <= "z"


def is_literal(ch: str) -> bool:
    return is_letter(ch) or ch == EPSILON


def is_operator(ch: str) -> bool:
    return len(ch) == 1 and ch in OPERATORS


def is_valid_char(ch: str) -> bool:
    return is_literal(ch) or is_operator(ch)


def first_invalid_index(regex: str) -> int:
    """返回第一个非法字符的下标；全部合法时返回 -1。

    只检查字符集，不检查括号是否配对、运算符是否缺少操作数，
    这些在求值阶段才会发现。
    """
    for i, ch in enumerate(regex):
        if not is_valid_char(ch):
            return i
    return -1


def validate(regex: str) -> bool:
    if not regex:
        return False
    return first_invalid_index(regex) == -1
