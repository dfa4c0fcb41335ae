from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from graphviz import Digraph
from tabulate import tabulate

from nfa.alphabet import EPSILON
from nfa.transition import Transition


@dataclass
class NFA:
    """NFA 子图（片段）：状态编号 0..n-1，起始状态恒为 0，只有一个接受状态。

    由 thompson 中的构造函数创建、合并；被合并的输入片段之后不应再使用。
    """

    states: List[int] = field(default_factory=list)
    transitions: List[Transition] = field(default_factory=list)
    accept_state: int = 0

    START_STATE = 0

    @classmethod
    def with_states(cls, size: int) -> NFA:
        return cls(states=list(range(size)))

    @classmethod
    def empty(cls) -> NFA:
        """非法输入时返回的退化 NFA：没有状态，也没有转移。"""
        return cls()

    @property
    def start_state(self) -> int:
        return self.START_STATE

    @property
    def is_empty(self) -> bool:
        return not self.states

    @property
    def state_count(self) -> int:
        return len(self.states)

    def format_transitions(self) -> List[str]:
        return [str(t) for t in self.transitions]

    def display(self) -> None:
        """按转移列表顺序逐行打印 (from, symbol, to)"""
        for line in self.format_transitions():
            print(line)

    def to_table(self) -> str:
        rows = [(t.from_state, t.symbol, t.to_state) for t in self.transitions]
        table = tabulate(rows, headers=["from", "symbol", "to"], tablefmt="github")
        if self.is_empty:
            return table
        return f"{table}\n起始状态: {self.start_state}  接受状态: {self.accept_state}"

    def to_digraph(self, name: str = "nfa") -> Digraph:
        dot = Digraph(name=name, format="png", engine="dot")
        dot.attr(rankdir="LR")
        for state in self.states:
            shape = "doublecircle" if state == self.accept_state else "circle"
            dot.node(str(state), str(state), shape=shape)
        if not self.is_empty:
            dot.node("start", "", shape="point")
            dot.edge("start", str(self.start_state))
        for t in self.transitions:
            label = "ε" if t.symbol == EPSILON else t.symbol
            dot.edge(str(t.from_state), str(t.to_state), label=label)
        return dot

    def __str__(self) -> str:
        if self.is_empty:
            return "NFA(empty)"
        return (
            f"NFA(States:{self.state_count}, Transitions:{len(self.transitions)}, "
            f"Start:{self.start_state}, Accept:{self.accept_state})"
        )
