import io

import pytest

from irexec.lexer import LexicalAnalyzer, Token, TokenType


def lex(text):
    return LexicalAnalyzer(io.StringIO(text))


def all_tokens(text):
    lexer = lex(text)
    tokens = []
    token = lexer.get_token()
    while token.token_type is not TokenType.END_OF_FILE:
        tokens.append(token)
        token = lexer.get_token()
    return tokens


def test_identifiers_and_punctuation():
    tokens = all_tokens("a , b ;")
    assert [t.token_type for t in tokens] == [
        TokenType.ID,
        TokenType.COMMA,
        TokenType.ID,
        TokenType.SEMICOLON,
    ]
    assert [t.lexeme for t in tokens] == ["a", "", "b", ""]


def test_keywords():
    tokens = all_tokens("VAR FOR IF WHILE SWITCH CASE DEFAULT input output")
    assert [t.token_type for t in tokens] == [
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.SWITCH,
        TokenType.CASE,
        TokenType.DEFAULT,
        TokenType.INPUT,
        TokenType.OUTPUT,
    ]


@pytest.mark.parametrize("word", ["ARRAY", "INPUT", "OUTPUT", "x1y2"])
def test_non_keywords_are_identifiers(word):
    tokens = all_tokens(word)
    assert [(t.lexeme, t.token_type) for t in tokens] == [(word, TokenType.ID)]


def test_numbers_and_leading_zero():
    tokens = all_tokens("0123 45")
    assert [(t.lexeme, t.token_type) for t in tokens] == [
        ("0", TokenType.NUM),
        ("123", TokenType.NUM),
        ("45", TokenType.NUM),
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+", TokenType.PLUS),
        ("-", TokenType.MINUS),
        ("/", TokenType.DIV),
        ("*", TokenType.MULT),
        ("=", TokenType.EQUAL),
        (":", TokenType.COLON),
        ("[", TokenType.LBRAC),
        ("]", TokenType.RBRAC),
        ("(", TokenType.LPAREN),
        (")", TokenType.RPAREN),
        ("{", TokenType.LBRACE),
        ("}", TokenType.RBRACE),
        (">", TokenType.GREATER),
        ("<", TokenType.LESS),
        ("<>", TokenType.NOTEQUAL),
        ("$", TokenType.ERROR),
    ],
)
def test_symbols(text, expected):
    assert [t.token_type for t in all_tokens(text)] == [expected]


def test_less_followed_by_operand():
    tokens = all_tokens("c<a")
    assert [t.token_type for t in tokens] == [TokenType.ID, TokenType.LESS, TokenType.ID]


def test_line_numbers():
    tokens = all_tokens("a\nb\n\nc")
    assert [t.line_no for t in tokens] == [1, 2, 4]


def test_peek_does_not_consume():
    lexer = lex("x y")
    assert lexer.peek(2).lexeme == "y"
    assert lexer.peek(1) == lexer.get_token()
    assert lexer.get_token().lexeme == "y"


def test_peek_past_end_gives_end_of_file():
    lexer = lex("x")
    assert lexer.peek(5).token_type is TokenType.END_OF_FILE


@pytest.mark.parametrize("how_far", [0, -1])
def test_peek_requires_positive(how_far):
    with pytest.raises(ValueError):
        lex("x").peek(how_far)


def test_get_token_after_end_stays_end_of_file():
    lexer = lex("x")
    lexer.get_token()
    kinds = [lexer.get_token().token_type for _ in range(3)]
    assert kinds == [TokenType.END_OF_FILE] * 3


def test_empty_input_has_no_tokens():
    assert lex("   \n ").get_token().token_type is TokenType.END_OF_FILE


def test_token_print_format():
    out = io.StringIO()
    Token("a", TokenType.ID, 1).print(file=out)
    assert out.getvalue() == "{a , ID , 1}\n"