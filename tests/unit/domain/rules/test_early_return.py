"""Unit tests for NoEarlyReturnRule (W9701)."""

import unittest

import astroid

from flow_style_linter.domain.guard_clauses import GuardClauseClassifier
from flow_style_linter.domain.rules.early_return import NoEarlyReturnRule
from tests.unit.checker_test_utils import parse_function


class TestNoEarlyReturnRule(unittest.TestCase):
    def setUp(self) -> None:
        self.rule = NoEarlyReturnRule()

    def _lines(self, code: str, rule: NoEarlyReturnRule | None = None) -> list[int]:
        return [v.line for v in (rule or self.rule).check(parse_function(code))]

    def test_check_returns_empty_for_non_function(self) -> None:
        self.assertEqual(self.rule.check(astroid.extract_node("x = 1")), [])

    def test_leading_guards_and_final_result_are_allowed(self) -> None:
        self.assertEqual(
            self._lines(
                """
                def ship(order):
                    if order is None: return
                    if not order.paid: return False
                    order.ship()
                    return order.tracking_number
                """
            ),
            [],
        )

    def test_return_in_middle_of_logic_is_flagged(self) -> None:
        violations = self.rule.check(
            parse_function(
                """
                def ship(order):
                    order.prepare()
                    if order.cancelled:
                        return None
                    order.ship()
                """
            )
        )
        self.assertEqual([v.line for v in violations], [5])
        self.assertEqual(violations[0].code, "W9701")

    def test_guard_after_logic_is_flagged(self) -> None:
        self.assertEqual(
            self._lines(
                """
                def handle(request):
                    if not request: return
                    validate(request)
                    if request.done: return request.result
                    return process(request)
                """
            ),
            [5],
        )

    def test_trailing_bare_return_after_logic_is_flagged(self) -> None:
        self.assertEqual(
            self._lines(
                """
                def handle(request):
                    validate(request)
                    return
                """
            ),
            [4],
        )

    def test_returns_inside_loops_are_flagged(self) -> None:
        self.assertEqual(
            self._lines(
                """
                def find(items, key):
                    for item in items:
                        if item.key == key:
                            return item
                    return None
                """
            ),
            [5],
        )

    def test_if_else_result_chain_is_allowed(self) -> None:
        self.assertEqual(
            self._lines(
                """
                def sign(x):
                    if x > 0:
                        return 1
                    elif x < 0:
                        return -1
                    else:
                        return 0
                """
            ),
            [],
        )

    def test_partial_if_else_chain_is_flagged(self) -> None:
        self.assertEqual(
            self._lines(
                """
                def sign(x):
                    if x > 0:
                        return 1
                    else:
                        log(x)
                """
            ),
            [4],
        )

    def test_nested_function_returns_belong_to_nested_function(self) -> None:
        self.assertEqual(
            self._lines(
                """
                def outer(items):
                    def key(item):
                        if item.pinned:
                            return 0
                        return item.rank
                    items.sort(key=key)
                """
            ),
            [],
        )

    def test_async_function(self) -> None:
        self.assertEqual(
            self._lines(
                """
                async def fetch(client):
                    response = await client.get()
                    if response.failed:
                        return None
                    await response.save()
                """
            ),
            [5],
        )

    def test_single_line_guards_setting(self) -> None:
        code = """
            def ship(order):
                if order is None:
                    return
                order.ship()
            """
        self.assertEqual(self._lines(code), [])
        strict = NoEarlyReturnRule(GuardClauseClassifier(single_line_guards=True))
        self.assertEqual(self._lines(code, strict), [4])

    def test_empty_body(self) -> None:
        self.assertEqual(self._lines("def f():\n    '''Only docs.'''\n"), [])
