"""Unit tests for NewspaperMethodOrderRule (W9601)."""

import textwrap
import unittest

import astroid

from flow_style_linter.domain.rules.method_order import NewspaperMethodOrderRule
from tests.unit.checker_test_utils import parse_class


class TestNewspaperMethodOrderRule(unittest.TestCase):
    """Helpers must be defined after the methods that call them."""

    def setUp(self) -> None:
        self.rule = NewspaperMethodOrderRule()

    def _flagged(self, code: str, rule: NewspaperMethodOrderRule | None = None) -> list[str]:
        return [v.message_args[0] for v in (rule or self.rule).check(parse_class(code))]

    def test_check_returns_empty_for_other_nodes(self) -> None:
        self.assertEqual(self.rule.check(astroid.extract_node("x = 1")), [])

    def test_helper_before_caller_is_flagged(self) -> None:
        cls = parse_class(
            """
            class Order:
                def total(self):
                    return 1

                def summary(self):
                    return self.total()
            """
        )
        violations = self.rule.check(cls)
        self.assertEqual(len(violations), 1)
        self.assertEqual(violations[0].code, "W9601")
        self.assertEqual(violations[0].line, 3)
        self.assertEqual(violations[0].location, ":3:4")
        self.assertEqual(violations[0].message_args, ("total",))
        self.assertEqual(
            violations[0].message, "Define `total` after the functions that call it, not before."
        )

    def test_location_includes_module_file(self) -> None:
        module = astroid.parse(
            textwrap.dedent(
                """
                def parse(text):
                    return text.split()

                def main():
                    return parse("a b")
                """
            )
        )
        module.file = "pkg/cli.py"
        self.assertEqual([v.location for v in self.rule.check(module)], ["pkg/cli.py:2:0"])

    def test_property_and_setter_reported_once(self) -> None:
        cls = parse_class(
            """
            class Gauge:
                @property
                def value(self):
                    return self._value

                @value.setter
                def value(self, new):
                    self._value = new

                def reset(self):
                    self.value = 0
                    return self.value
            """
        )
        violations = self.rule.check(cls)
        self.assertEqual([(v.message_args, v.line) for v in violations], [(("value",), 4)])

    def test_newspaper_order_is_clean(self) -> None:
        self.assertEqual(
            self._flagged(
                """
                class Order:
                    def summary(self):
                        return self.total()

                    def total(self):
                        return 1
                """
            ),
            [],
        )

    def test_method_without_internal_callers_is_ignored(self) -> None:
        self.assertEqual(
            self._flagged(
                """
                class Order:
                    def public_a(self):
                        return 1

                    def public_b(self):
                        return 2
                """
            ),
            [],
        )

    def test_mutual_recursion_is_not_flagged(self) -> None:
        self.assertEqual(
            self._flagged(
                """
                class Walker:
                    def even(self, n):
                        return self.odd(n - 1)

                    def odd(self, n):
                        return self.even(n - 1)
                """
            ),
            [],
        )

    def test_indirect_cycle_is_not_flagged(self) -> None:
        self.assertEqual(
            self._flagged(
                """
                class Walker:
                    def a(self):
                        self.b()

                    def b(self):
                        self.c()

                    def c(self):
                        self.a()
                """
            ),
            [],
        )

    def test_one_non_cyclic_later_caller_is_enough(self) -> None:
        self.assertEqual(
            self._flagged(
                """
                class Walker:
                    def helper(self):
                        self.visit()

                    def visit(self):
                        self.helper()

                    def run(self):
                        self.helper()
                """
            ),
            ["helper"],
        )

    def test_chain_in_reverse_flags_each_helper(self) -> None:
        self.assertEqual(
            self._flagged(
                """
                class Pipeline:
                    def load(self):
                        pass

                    def transform(self):
                        self.load()

                    def run(self):
                        self.transform()
                """
            ),
            ["load", "transform"],
        )

    def test_single_method_class_is_skipped(self) -> None:
        self.assertEqual(self._flagged("class A:\n    def only(self):\n        self.only()\n"), [])

    def test_ignore_methods(self) -> None:
        code = """
            class A(unittest.TestCase):
                def setUp(self):
                    pass

                def test_x(self):
                    self.setUp()
            """
        self.assertEqual(self._flagged(code), ["setUp"])
        rule = NewspaperMethodOrderRule(ignore_methods=["setUp"])
        self.assertEqual(self._flagged(code, rule), [])

    def test_module_functions(self) -> None:
        module = astroid.parse(
            textwrap.dedent(
                """
                def parse(text):
                    return text.split()

                def main():
                    return parse("a b")
                """
            )
        )
        self.assertEqual([v.message_args for v in self.rule.check(module)], [("parse",)])
        rule = NewspaperMethodOrderRule(check_module_functions=False)
        self.assertEqual(rule.check(module), [])

    def test_check_is_idempotent(self) -> None:
        cls = parse_class(
            """
            class Order:
                def total(self):
                    return 1

                def summary(self):
                    return self.total()
            """
        )
        first = [(v.code, v.line) for v in self.rule.check(cls)]
        second = [(v.code, v.line) for v in self.rule.check(cls)]
        self.assertEqual(first, second)
