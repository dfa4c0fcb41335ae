from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Transition:
    """三元组 (from, symbol, to)；symbol 为 EPSILON 时表示 ε 转移。"""

    from_state: int
    symbol: str
    to_state: int

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise ValueError("symbol must be a single character")

    def shifted(self, offset: int) -> Transition:
        return Transition(self.from_state + offset, self.symbol, self.to_state + offset)

    def __str__(self) -> str:
        return f"({self.from_state}, {self.symbol}, {self.to_state})"
