from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RegexError(ValueError):
    message: str
    regex: str
    # 出错字符的下标；扫描结束后才发现的错误为 len(regex)
    position: int

    def __str__(self) -> str:
        return f"{self.message} @ {self.position}: {self.regex!r}"


class InvalidCharacterError(RegexError):
    """空串或含有字母表/运算符以外的字符（可恢复）。"""


class UnbalancedParenthesisError(RegexError):
    """右括号多于左括号（致命）。"""


class OperandMismatchError(RegexError):
    """运算符找不到可用的操作数（致命）。"""
