import unittest

from lana.pure.tokenizer import Location, Token, TokenKind, Tokenizer, parse_number, tokenize


def kinds(tokens):
    return [(token.kind, token.value) for token in tokens]


class TokenizerTestCase(unittest.TestCase):

    def test_empty(self):
        for case in ["", "   ", ",,,", "; just a comment", "\n\t\n"]:
            self.assertEqual([], tokenize(case), repr(case))

    def test_simple_form(self):
        expected = [
            (TokenKind.LEFT_PAREN, None),
            (TokenKind.IDENTIFIER, "+"),
            (TokenKind.NUMBER, 1.0),
            (TokenKind.NUMBER, 2.0),
            (TokenKind.RIGHT_PAREN, None),
        ]
        self.assertEqual(expected, kinds(tokenize("(+ 1 2)")))

    def test_locations(self):
        expected = [
            Token(TokenKind.LEFT_PAREN, None, Location(1, 1)),
            Token(TokenKind.IDENTIFIER, "+", Location(1, 2)),
            Token(TokenKind.NUMBER, 1.0, Location(1, 4)),
            Token(TokenKind.NUMBER, 2.0, Location(1, 6)),
            Token(TokenKind.RIGHT_PAREN, None, Location(2, 2)),
        ]
        self.assertEqual(expected, tokenize("(+ 1 2 ; yay \n )"))

    def test_location_tracking(self):
        cases = {
            " \ta": Location(1, 3),
            "\n  \n   b": Location(3, 4),
            "; some comment here\n)": Location(2, 1),
            "\"hello world!\"": Location(1, 14),
            "123": Location(1, 3),
        }
        for case, location in cases.items():
            token, = tokenize(case)
            self.assertEqual(location, token.location, repr(case))

    def test_commas_are_whitespace(self):
        self.assertEqual(kinds(tokenize("(1 2)")), kinds(tokenize("(1 , 2)")))
        self.assertEqual(kinds(tokenize("(1 2)")), kinds(tokenize(",(1\t,,2),")))

    def test_commas_do_not_end_atoms(self):
        self.assertEqual([(TokenKind.IDENTIFIER, "1,"), (TokenKind.IDENTIFIER, "2,3")], kinds(tokenize("1, 2,3")))

    def test_comments(self):
        tokens = tokenize("(a ; (b c)\n d)")
        self.assertEqual(["a", "d"], [token.value for token in tokens if token.kind is TokenKind.IDENTIFIER])

    def test_strings(self):
        cases = {
            "\"hello world!\"": "hello world!",
            r' "hello\nworld\t  \"!" ': "hello\nworld\t  \"!",
            "\"hello\\çworld!\"": "helloçworld!",
            "\"a;b(c)\"": "a;b(c)",
            "\"\"": "",
        }
        for case, expected in cases.items():
            token, = tokenize(case)
            self.assertEqual(TokenKind.STRING, token.kind, case)
            self.assertEqual(expected, token.value, case)

    def test_unterminated_strings(self):
        cases = {
            "\"hello\\": ("hello", Location(1, 7)),
            "\"hello": ("hello", Location(1, 6)),
            "(print \"oops)": ("oops)", Location(1, 13)),
        }
        for case, (text, location) in cases.items():
            token = tokenize(case)[-1]
            self.assertEqual(Token(TokenKind.UNTERMINATED_STRING, text, location), token, case)

    def test_numbers(self):
        cases = {"123": 123.0, "-1": -1.0, "1.5": 1.5, "-0.25": -0.25, "1e3": 1000.0, ".5": 0.5}
        for case, expected in cases.items():
            token, = tokenize(case)
            self.assertEqual((TokenKind.NUMBER, expected), (token.kind, token.value), case)

    def test_identifiers(self):
        should_pass = ["my-var", "my_var", "+", "-", "<=", ":keyword", "a,b", "1_000", "1a", "true", "nil"]
        for case in should_pass:
            token, = tokenize(case)
            self.assertEqual((TokenKind.IDENTIFIER, case), (token.kind, token.value), case)

    def test_separators_end_atoms(self):
        self.assertEqual(
            [(TokenKind.IDENTIFIER, "a"), (TokenKind.LEFT_PAREN, None), (TokenKind.IDENTIFIER, "b"),
             (TokenKind.RIGHT_PAREN, None), (TokenKind.IDENTIFIER, "c")],
            kinds(tokenize("a(b)c;d")),
        )

    def test_restartable(self):
        tokenizer = Tokenizer("(def a \"b\")")
        self.assertEqual(tokenizer.tokens(), tokenizer.tokens())
        self.assertEqual(list(tokenizer), tokenize("(def a \"b\")"))


class ParseNumberTestCase(unittest.TestCase):

    def test_parse_number(self):
        should_fail = ["", "a", "+", "-", "1_000", "1.2.3", "--1", ":1", "\u0661\u0662", "\uff11\uff12"]
        for case in should_fail:
            self.assertIsNone(parse_number(case), case)

        should_pass = {"0": 0.0, "-3": -3.0, "2.5": 2.5, "1e-2": 0.01}
        for case, expected in should_pass.items():
            self.assertEqual(expected, parse_number(case), case)


class TokenTestCase(unittest.TestCase):

    def test_str(self):
        cases = {
            Token(TokenKind.RIGHT_PAREN, None, Location(1, 1)): "')' at line 1, column 1",
            Token(TokenKind.IDENTIFIER, "foo", Location(2, 3)): "'foo' at line 2, column 3",
            Token(TokenKind.UNTERMINATED_STRING, "ab", Location(1, 3)): "'\"ab' at line 1, column 3",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(case))


if __name__ == '__main__':
    unittest.main()
