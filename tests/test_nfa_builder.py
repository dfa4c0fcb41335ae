"""Unit tests for nfa/nfa_builder.py"""

import itertools
import re
import string
import unittest

from nfa.errors import InvalidCharacterError, OperandMismatchError, UnbalancedParenthesisError
from nfa.nfa import NFA
from nfa.nfa_builder import NFABuilder, compile
from nfa.nfa_simulator import NFASimulator


def all_strings(alphabet: str, max_len: int):
    for n in range(max_len + 1):
        for chars in itertools.product(alphabet, repeat=n):
            yield "".join(chars)


class TestNFABuilder(unittest.TestCase):
    def setUp(self) -> None:
        self.maxDiff = None  # pylint: disable=invalid-name

    def assert_language(self, regex: str, alphabet: str = "abcd", max_len: int = 4) -> None:
        """用 re.fullmatch 作为参照，比较所有短串的接受结果"""
        nfa = compile(regex)
        sim = NFASimulator(nfa)
        oracle = re.compile(regex)
        for text in all_strings(alphabet, max_len):
            self.assertEqual(
                sim.accepts(text),
                oracle.fullmatch(text) is not None,
                f"regex={regex!r} text={text!r}",
            )

    def assert_accepts_exactly(self, regex: str, expected, alphabet: str = "abc", max_len: int = 3) -> None:
        sim = NFASimulator(compile(regex))
        accepted = {s for s in all_strings(alphabet, max_len) if sim.accepts(s)}
        self.assertEqual(accepted, set(expected), regex)

    def assert_structure(self, nfa: NFA) -> None:
        self.assertEqual(nfa.states, list(range(nfa.state_count)))
        self.assertEqual(nfa.start_state, 0)
        self.assertEqual(nfa.accept_state, nfa.states[-1])
        for t in nfa.transitions:
            self.assertIn(t.from_state, nfa.states)
            self.assertIn(t.to_state, nfa.states)
        self.assertEqual(NFASimulator(nfa).reachable_states(), set(nfa.states))

    def test_single_letter(self) -> None:
        for c in string.ascii_lowercase:
            nfa = compile(c)
            self.assertEqual(nfa.state_count, 2)
            self.assertEqual(nfa.format_transitions(), [f"(0, {c}, 1)"])
            self.assertEqual(nfa.accept_state, 1)

    def test_concat(self) -> None:
        self.assert_accepts_exactly("ab", {"ab"})
        nfa = compile("ab")
        self.assertEqual(nfa.format_transitions(), ["(0, a, 1)", "(1, b, 2)"])

    def test_star(self) -> None:
        sim = NFASimulator(compile("a*"))
        for n in range(6):
            self.assertTrue(sim.accepts("a" * n))
        for text in ("b", "ab", "ba", "aab"):
            self.assertFalse(sim.accepts(text))

    def test_union(self) -> None:
        self.assert_accepts_exactly("a|b", {"a", "b"})

    def test_group_then_concat(self) -> None:
        self.assert_accepts_exactly("(a|b)c", {"ac", "bc"})

    def test_concat_chain_before_union(self) -> None:
        self.assert_accepts_exactly("ab|c", {"ab", "c"})
        self.assert_accepts_exactly("abc|a", {"abc", "a"})

    def test_concat_chain_after_union(self) -> None:
        self.assert_accepts_exactly("a|bc", {"a", "bc"})

    def test_adjacent_and_nested_groups(self) -> None:
        self.assert_accepts_exactly("(a)(b)", {"ab"})
        self.assert_accepts_exactly("((a))", {"a"})
        self.assert_accepts_exactly("a(b)", {"ab"})
        self.assert_accepts_exactly("(a|b)(c|a)", {"ac", "aa", "bc", "ba"})
        self.assert_accepts_exactly("a(b|c)", {"ab", "ac"})

    def test_language_against_re(self) -> None:
        for regex in (
            "a",
            "ab*",
            "(ab)*",
            "a|b|c",
            "ab|cd|a",
            "(a|b)*c",
            "a(b|c)*d",
            "((a|b)c)*",
            "(a*|b)(c|d*)",
            "a(b(c|d))*",
            "(a|bc)(d|ab)|c*",
        ):
            with self.subTest(regex=regex):
                self.assert_language(regex)

    def test_epsilon_literal(self) -> None:
        self.assert_accepts_exactly("E", {""})
        self.assert_accepts_exactly("aEb", {"ab"})
        self.assert_accepts_exactly("a|E", {"", "a"})
        self.assert_accepts_exactly("a**", {"", "a", "aa", "aaa"})
        nfa = compile("E")
        self.assertEqual(nfa.format_transitions(), ["(0, E, 1)"])

    def test_unclosed_group_is_tolerated(self) -> None:
        self.assert_accepts_exactly("(a|b", {"a", "b"})
        self.assert_accepts_exactly("a(b", {"ab"})

    def test_structure(self) -> None:
        for regex in ("a", "ab", "a*", "a|b", "(a|b)c", "ab|c", "(a)(b)", "((a))", "(a|b)*abb", "a(b|c)*d"):
            with self.subTest(regex=regex):
                self.assert_structure(compile(regex))

    def test_empty_input_is_soft_error(self) -> None:
        with self.assertLogs(level="WARNING"):
            nfa = compile("")
        self.assertTrue(nfa.is_empty)
        self.assertEqual(nfa.transitions, [])
        self.assertFalse(NFASimulator(nfa).accepts(""))

    def test_invalid_character_is_soft_error(self) -> None:
        for regex in ("aB", "a+b", "a b", "a?"):
            with self.subTest(regex=regex):
                with self.assertLogs(level="WARNING"):
                    self.assertTrue(compile(regex).is_empty)

    def test_builder_raises_on_invalid_character(self) -> None:
        with self.assertRaises(InvalidCharacterError) as ctx:
            NFABuilder().build_nfa("ab+")
        self.assertEqual(ctx.exception.position, 2)

    def test_unbalanced_parenthesis(self) -> None:
        for regex in (")", "a)", "(a))", "a)(b"):
            with self.subTest(regex=regex):
                with self.assertRaises(UnbalancedParenthesisError):
                    compile(regex)

    def test_operand_mismatch(self) -> None:
        for regex in ("a|", "|a", "a||b", "*", "*a", "()", "(|a)", "a(", "(a|)", "a|*"):
            with self.subTest(regex=regex):
                with self.assertRaises(OperandMismatchError):
                    compile(regex)

    def test_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            compile("a|")
        try:
            compile(")")
        except UnbalancedParenthesisError as e:
            self.assertEqual(e.position, 0)
            self.assertIn("')'", str(e))


if __name__ == "__main__":
    unittest.main()
