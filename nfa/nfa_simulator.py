from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, List, Set, Tuple

from nfa.alphabet import EPSILON
from nfa.nfa import NFA


@dataclass
class NFASimulator:
    """基于 ε-闭包的 NFA 模拟，只用来判断一个串是否被接受。"""

    nfa: NFA

    def __post_init__(self) -> None:
        # (from, symbol) -> [to, ...]
        self._edges: Dict[Tuple[int, str], List[int]] = defaultdict(list)
        for t in self.nfa.transitions:
            self._edges[(t.from_state, t.symbol)].append(t.to_state)

    def epsilon_closure(self, states: Iterable[int]) -> Set[int]:
        closure: Set[int] = set(states)
        stack: Deque[int] = deque(closure)

        while stack:
            state_id = stack.pop()
            for nxt in self._edges.get((state_id, EPSILON), ()):
                if nxt not in closure:
                    closure.add(nxt)
                    stack.append(nxt)

        return closure

    def move(self, states: Iterable[int], symbol: str) -> Set[int]:
        # ε 边不是符号边，输入里的 'E' 不会被消耗
        if symbol == EPSILON:
            return set()
        result: Set[int] = set()
        for state_id in states:
            result.update(self._edges.get((state_id, symbol), ()))
        return result

    def accepts(self, text: str) -> bool:
        if self.nfa.is_empty:
            return False

        current = self.epsilon_closure({self.nfa.start_state})
        for symbol in text:
            current = self.epsilon_closure(self.move(current, symbol))
            if not current:
                return False
        return self.nfa.accept_state in current

    def reachable_states(self) -> Set[int]:
        """从起始状态沿任意边可达的状态集合"""
        if self.nfa.is_empty:
            return set()

        successors: Dict[int, List[int]] = defaultdict(list)
        for t in self.nfa.transitions:
            successors[t.from_state].append(t.to_state)

        visited: Set[int] = {self.nfa.start_state}
        queue: Deque[int] = deque(visited)
        while queue:
            state_id = queue.popleft()
            for nxt in successors[state_id]:
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return visited
