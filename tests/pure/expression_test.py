import unittest

from lana.pure.expression import (NIL, Bool, Keyword, Lambda, List, NativeFunction, Nil, Number, String, Symbol,
                                  format_number)


class FormatNumberTestCase(unittest.TestCase):

    def test_format_number(self):
        cases = {
            1.0: "1",
            -1.0: "-1",
            1.5: "1.5",
            0.1: "0.1",
            1e-7: "0.0000001",
            1e20: "100000000000000000000",
            float("inf"): "inf",
            float("-inf"): "-inf",
            float("nan"): "NaN",
            -0.0: "-0",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, format_number(case), case)


class ExpressionTestCase(unittest.TestCase):

    def test_str(self):
        cases = {
            NIL: "nil",
            Bool(True): "true",
            Bool(False): "false",
            Symbol("abc"): "abc",
            Keyword(":abc"): ":abc",
            Number(5): "5",
            String("hi there"): "hi there",
            List(): "()",
            List([Number(1), List([Symbol("a"), String("b")])]): "(1, (a, b))",
            NativeFunction("+", sum): "fn(+)",
            Lambda(List([Symbol("a")]), Symbol("a")): "lambda((a) a)",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(case), repr(case))

    def test_describe(self):
        cases = {
            NIL: "nil",
            Number(1): "number '1'",
            Symbol("x"): "symbol 'x'",
            String("s"): "string 's'",
            Bool(False): "boolean 'false'",
            List([Number(1)]): "list '(1)'",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, case.describe(), repr(case))

    def test_equality(self):
        should_be_equal = [
            (Nil(), NIL),
            (Number(2), Number(2.0)),
            (Symbol("a"), Symbol("a")),
            (List([Number(1)]), List([Number(1)])),
            (NativeFunction("+", sum), NativeFunction("+", len)),
            (Lambda(List([Symbol("a")]), Symbol("a")), Lambda(List([Symbol("a")]), Symbol("a"))),
        ]
        for a, b in should_be_equal:
            self.assertEqual(a, b)
            self.assertEqual(hash(a), hash(b))

        should_differ = [
            (Symbol("nil"), NIL),
            (Symbol(":a"), Keyword(":a")),
            (String("1"), Number(1)),
            (Symbol("true"), Bool(True)),
            (Number(1), Number(2)),
            (NativeFunction("+", sum), NativeFunction("-", sum)),
            (Lambda(List([Symbol("a")]), Symbol("a")), Lambda(List([Symbol("b")]), Symbol("b"))),
        ]
        for a, b in should_differ:
            self.assertNotEqual(a, b)

    def test_truthiness(self):
        should_be_falsy = [NIL, Bool(False)]
        for case in should_be_falsy:
            self.assertFalse(case.truthy, repr(case))

        should_be_truthy = [Bool(True), Number(0), String(""), List(), Symbol("nil"), Keyword(":false")]
        for case in should_be_truthy:
            self.assertTrue(case.truthy, repr(case))


if __name__ == '__main__':
    unittest.main()
