import pytest

from rexgram.tokens import Terminal, TokenType, token_name, tokenize


def test_empty_input_gives_only_terminator():
    tokens = tokenize("")
    assert tokens == [Terminal(TokenType.TERMINATOR, 0)]
    assert token_name(tokens[0].kind) == "TERMINATOR"


@pytest.mark.parametrize(
    "name, text",
    [
        ("BEGIN_CHARSET", "["),
        ("BEGIN_GROUP", "("),
        ("BEGIN_QUANTIFIER", "{"),
        ("COMMA", ","),
        ("END_CHARSET", "]"),
        ("END_GROUP", ")"),
        ("END_QUANTIFIER", "}"),
        ("MINUS", "-"),
        ("NOT", "^"),
        ("SPLIT", "|"),
        ("PLUS", "+"),
        ("QUEST", "?"),
        ("TIMES", "*"),
    ],
)
def test_single_token(name, text):
    tokens = tokenize(text)
    assert len(tokens) == 2
    assert tokens[0].kind is TokenType[name]
    assert tokens[0].value == 0
    assert token_name(tokens[0].kind) == name
    assert tokens[1] == Terminal(TokenType.TERMINATOR, 0)
    assert token_name(tokens[1].kind) == "TERMINATOR"


@pytest.mark.parametrize(
    "text, value",
    [
        ("{255}", 255),
        ("{256}", 256),
        ("{65536}", 65536),
        ("{16777215}", 16777215),
        ("{16777216}", 0),
    ],
)
def test_number_in_quantifier(text, value):
    tokens = tokenize(text)
    assert len(tokens) == 4
    assert [token_name(t.kind) for t in tokens] == [
        "BEGIN_QUANTIFIER",
        "NUMBER",
        "END_QUANTIFIER",
        "TERMINATOR",
    ]
    assert tokens[0].value == 0
    assert tokens[1].value == value
    assert tokens[2].value == 0
    assert tokens[3].value == 0


@pytest.mark.parametrize(
    "text",
    [
        "0123456789",
        "abcdefghijklmnopqrstuvwxyz",
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "~!@#$%&:;\"'<>.\\/",
    ],
)
def test_plain_characters(text):
    tokens = tokenize(text)
    assert len(tokens) == len(text) + 1
    for token, char in zip(tokens, text):
        assert token.kind is TokenType.CHAR
        assert token.value == ord(char)
        assert token_name(token.kind) == "CHAR"
    assert tokens[-1] == Terminal(TokenType.TERMINATOR, 0)
    assert token_name(tokens[-1].kind) == "TERMINATOR"


def test_long_input():
    text = "12345678123456781234567812345678" "1234567812345678123456781234567"
    tokens = tokenize(text)
    assert len(text) == 63
    assert len(tokens) == 64
    assert token_name(tokens[-1].kind) == "TERMINATOR"


def test_input_of_exactly_thirty_two():
    tokens = tokenize("12345678123456781234567812345678")
    assert len(tokens) == 33
    assert token_name(tokens[-1].kind) == "TERMINATOR"


def test_bytes_and_str_agree():
    assert tokenize(b"a{3,7}[b-c]") == tokenize("a{3,7}[b-c]")


def test_input_stops_at_nul():
    assert tokenize("ab\0cd") == tokenize("ab")


def test_token_name_accepts_value():
    assert token_name(TokenType.NUMBER.value) == "NUMBER"


def test_token_name_rejects_unknown_kind():
    with pytest.raises(ValueError):
        token_name(999)


def test_terminal_name_property():
    assert Terminal(TokenType.SPLIT).name == "SPLIT"