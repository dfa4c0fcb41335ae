from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from nfa.alphabet import first_invalid_index, is_literal
from nfa.errors import InvalidCharacterError, OperandMismatchError, UnbalancedParenthesisError
from nfa.nfa import NFA
from nfa.thompson import concat, kleene_star, literal, union

# 隐式连接符，只会出现在运算符栈里，不是合法的输入字符
CONCAT = "~"


@dataclass
class _Evaluation:
    """一次编译过程中的求值状态，每次 build_nfa 都重新创建。"""

    regex: str
    # 运算符栈：'('、'|' 与隐式连接符 '~'
    op_stack: Deque[str] = field(default_factory=deque)
    # 操作数栈：NFA 片段
    nfa_stack: Deque[NFA] = field(default_factory=deque)
    # 上一个 token 是否为操作数；为真时下一个操作数前要插入 '~'
    concat_flag: bool = False
    # 栈内尚未闭合的 '(' 数量
    open_parens: int = 0

    def pop_operand(self, position: int) -> NFA:
        if not self.nfa_stack:
            raise OperandMismatchError("Operator has no operand", self.regex, position)
        return self.nfa_stack.pop()


@dataclass
class NFABuilder:
    """把简化正则（a-z、E、|、*、()、隐式连接）构建为 Thompson NFA。

    和算 1+1 一样用两个栈：运算符栈与操作数栈，从左到右扫描一遍。
    优先级：* 最高（遇到即归约），其次隐式连接，| 最低。
    """

    def build_nfa(self, regex: str) -> NFA:
        if regex is None or regex == "":
            raise InvalidCharacterError("Regex cannot be null or empty", "", 0)

        bad = first_invalid_index(regex)
        if bad != -1:
            raise InvalidCharacterError(f"Invalid character {regex[bad]!r}", regex, bad)

        ev = _Evaluation(regex)
        for i, ch in enumerate(regex):
            self._shift(ev, ch, i)

        end = len(regex)
        # 以 '|' 或 '(' 结尾：最后一个运算符没有右操作数
        if not ev.concat_flag:
            raise OperandMismatchError("Missing operand at end of regex", regex, end)

        # 扫描结束后把运算符栈全部归约掉
        while ev.op_stack:
            if not ev.nfa_stack:
                raise OperandMismatchError("Operators and operands do not match", regex, end)
            self._reduce(ev, end)

        result = ev.pop_operand(end)
        if ev.nfa_stack:
            raise OperandMismatchError(f"Invalid regex expression: {regex}", regex, end)
        logging.debug("compiled %r: %s", regex, result)
        return result

    def _shift(self, ev: _Evaluation, ch: str, position: int) -> None:
        logging.debug("shift %r ops=%s operands=%d", ch, list(ev.op_stack), len(ev.nfa_stack))

        if is_literal(ch):
            ev.nfa_stack.append(literal(ch))
            # 连续的操作数之间插入连接符
            if ev.concat_flag:
                ev.op_stack.append(CONCAT)
            else:
                ev.concat_flag = True
            return

        if ch == "*":
            if not ev.concat_flag:
                raise OperandMismatchError("Nothing to repeat before '*'", ev.regex, position)
            ev.nfa_stack.append(kleene_star(ev.pop_operand(position)))
            return

        if ch == "(":
            # a(b) 这种情况：括号组要和前面的操作数连接
            if ev.concat_flag:
                ev.op_stack.append(CONCAT)
            ev.op_stack.append(ch)
            ev.open_parens += 1
            ev.concat_flag = False
            return

        if ch == ")":
            if ev.open_parens == 0:
                raise UnbalancedParenthesisError(
                    "More end parenthesis than beginning parenthesis", ev.regex, position
                )
            if not ev.concat_flag:
                raise OperandMismatchError("Empty group or dangling operator before ')'", ev.regex, position)
            ev.open_parens -= 1

            # 不断归约，直到碰到 '('，然后把它弹掉
            while ev.op_stack[-1] != "(":
                self._reduce(ev, position)
            ev.op_stack.pop()
            # 括号组整体是一个操作数
            ev.concat_flag = True
            return

        if ch == "|":
            if not ev.concat_flag:
                raise OperandMismatchError("Missing left operand for '|'", ev.regex, position)
            ev.op_stack.append(ch)
            ev.concat_flag = False
            return

        raise InvalidCharacterError(f"Invalid character {ch!r}", ev.regex, position)

    @staticmethod
    def _reduce(ev: _Evaluation, position: int) -> None:
        op = ev.op_stack.pop()
        logging.debug("reduce %r operands=%d", op, len(ev.nfa_stack))

        if op == CONCAT:
            right = ev.pop_operand(position)
            left = ev.pop_operand(position)
            ev.nfa_stack.append(concat(left, right))
        elif op == "|":
            right = ev.pop_operand(position)
            if ev.op_stack and ev.op_stack[-1] == CONCAT:
                # 左侧是一串尚未归约的连接：整串弹出，按原顺序拼接成一个片段
                pending: Deque[NFA] = deque()
                pending.append(ev.pop_operand(position))
                while ev.op_stack and ev.op_stack[-1] == CONCAT:
                    pending.append(ev.pop_operand(position))
                    ev.op_stack.pop()
                left = pending.pop()
                while pending:
                    left = concat(left, pending.pop())
            else:
                left = ev.pop_operand(position)
            ev.nfa_stack.append(union(left, right))
        elif op == "(":
            # 没有闭合的 '('，扫描结束时直接丢弃
            pass
        else:
            raise ValueError(f"Unsupported operator: {op}")


def compile(regex: str) -> NFA:
    """正则表达式转为 NFA。

    非法字符（或空串）只打印诊断并返回空 NFA；括号不配对、运算符缺少
    操作数会抛出 UnbalancedParenthesisError / OperandMismatchError。
    """
    try:
        return NFABuilder().build_nfa(regex)
    except InvalidCharacterError as e:
        logging.warning("Invalid Regular Expression Input: %s", e)
        return NFA.empty()
