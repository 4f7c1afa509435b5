# tests/test_lexer.py
import pytest
from docsearch.lexer import Lexer, tokenize, normalize


@pytest.mark.parametrize("text,expected", [
    ("abc123 DEF", ["ABC", "123", "DEF"]),
    ("a,b", ["A", ",", "B"]),
    ("", []),
    ("   \t\n  ", []),
    ("Hello, World!", ["HELLO", ",", "WORLD", "!"]),
    ("x+y=42", ["X", "+", "Y", "=", "42"]),
    ("3.14", ["3", ".", "14"]),
    ("COVID-19", ["COVID", "-", "19"]),
    ("c3po", ["C", "3", "PO"]),
    ("---", ["-", "-", "-"]),
    ("  padded  ", ["PADDED"]),
    ("école ÉCOLE", ["ÉCOLE", "ÉCOLE"]),
    ("straße", ["STRASSE"]),
    ("日本語 text", ["日本語", "TEXT"]),
    ("a\u00a0b", ["A", "B"]),      # no-break space is whitespace
    ("\u0663\u0664x", ["\u0663\u0664", "X"]),  # arabic-indic digits form one numeric run
])
def test_tokenizer(text, expected):
    assert tokenize(text) == expected


def test_no_token_spans_whitespace():
    for tok in Lexer("the quick\tbrown\nfox 12 34"):
        assert not any(ch.isspace() for ch in tok)


def test_lexer_is_restartable():
    """Iterating twice over the same Lexer yields the same Terms."""
    lex = Lexer("the cat sat")
    assert list(lex) == ["THE", "CAT", "SAT"]
    assert list(lex) == ["THE", "CAT", "SAT"]


def test_lexer_is_lazy():
    it = iter(Lexer("one two three"))
    assert next(it) == "ONE"
    assert next(it) == "TWO"


def test_raw_tokens_keep_case():
    assert list(Lexer("Mixed CASE").raw_tokens()) == ["Mixed", "CASE"]


def test_query_and_document_normalize_alike():
    assert tokenize("Coffee") == tokenize("COFFEE") == tokenize("coffee")
    assert normalize("coffee") == "COFFEE"
