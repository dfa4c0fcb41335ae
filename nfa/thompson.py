"""Thompson 构造的四个基本片段操作。

所有片段都满足：起始状态为 0，接受状态是编号最大的状态。
concat 会直接修改并返回左侧片段，union / kleene_star 返回新片段；
无论哪种，调用之后都不应再使用输入片段。
"""
from __future__ import annotations

from nfa.alphabet import EPSILON
from nfa.nfa import NFA
from nfa.transition import Transition


def literal(symbol: str) -> NFA:
    """单字符片段 0 --symbol--> 1"""
    result = NFA.with_states(2)
    result.transitions.append(Transition(0, symbol, 1))
    result.accept_state = 1
    return result


def concat(left: NFA, right: NFA) -> NFA:
    """拼接 ab：right 的起始状态与 left 的接受状态合并，不额外添加 ε 边。"""
    offset = left.states[-1]

    # right 的 0 号状态被丢弃，其余状态整体编号 +offset 接在 left 后面
    left.states.extend(s + offset for s in right.states[1:])
    left.transitions.extend(t.shifted(offset) for t in right.transitions)

    left.accept_state = right.accept_state + offset
    return left


def union(left: NFA, right: NFA) -> NFA:
    """多选一 a|b：新的首尾状态，left 编号 +1，right 接在 left 后面。"""
    left_offset = 1
    right_offset = left.state_count + 1
    result = NFA.with_states(left.state_count + right.state_count + 2)
    new_accept = result.states[-1]

    # 上半部分
    result.transitions.append(Transition(0, EPSILON, left_offset))
    result.transitions.extend(t.shifted(left_offset) for t in left.transitions)
    result.transitions.append(Transition(left.accept_state + left_offset, EPSILON, new_accept))

    # 下半部分
    result.transitions.append(Transition(0, EPSILON, right_offset))
    result.transitions.extend(t.shifted(right_offset) for t in right.transitions)
    result.transitions.append(Transition(right.accept_state + right_offset, EPSILON, new_accept))

    result.accept_state = new_accept
    return result


def kleene_star(old: NFA) -> NFA:
    """克林闭包 a*：原片段整体编号 +1，外面包一层新的首尾状态。"""
    result = NFA.with_states(old.state_count + 2)
    new_accept = result.states[-1]
    old_start = old.start_state + 1
    old_accept = old.accept_state + 1

    result.transitions.append(Transition(0, EPSILON, old_start))
    result.transitions.extend(t.shifted(1) for t in old.transitions)
    # 出口边
    result.transitions.append(Transition(old_accept, EPSILON, new_accept))
    # 回环边
    result.transitions.append(Transition(old_accept, EPSILON, old_start))
    # 零次重复
    result.transitions.append(Transition(0, EPSILON, new_accept))

    result.accept_state = new_accept
    return result
