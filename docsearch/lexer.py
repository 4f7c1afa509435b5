"""
docsearch/lexer.py

Splits raw text into Terms.

Rules, applied at the cursor until the text is exhausted:
  - whitespace is skipped
  - a run of numeric characters is one token ("2024")
  - a run of alphabetic characters is one token ("hello")
  - anything else is a single-character token ("," "!" "+")

"abc123" therefore yields "ABC" and "123". Every token is uppercased
before it becomes a Term, so indexing and querying always agree on case.
"""

from __future__ import annotations
from typing import Iterator, List, NewType

Term = NewType("Term", str)


def normalize(raw: str) -> Term:
    """Case-fold a raw token slice into its canonical Term."""
    return Term(raw.upper())


class Lexer:
    """
    Lazy tokenizer over one string.

    Iterating a Lexer always starts from the beginning of its text, so the
    same Lexer can be walked any number of times:

        lex = Lexer("the cat sat")
        list(lex)  # ['THE', 'CAT', 'SAT']
        list(lex)  # same again
    """

    def __init__(self, content: str):
        self.content = content

    def __iter__(self) -> Iterator[Term]:
        for raw in self.raw_tokens():
            yield normalize(raw)

    def raw_tokens(self) -> Iterator[str]:
        """Yield the token slices as they appear in the text (no case folding)."""
        content = self.content
        n = len(content)
        pos = 0
        while True:
            while pos < n and content[pos].isspace():
                pos += 1
            if pos >= n:
                return

            start = pos
            ch = content[pos]
            if ch.isnumeric():
                pos = self._chop_while(pos, str.isnumeric)
            elif ch.isalpha():
                pos = self._chop_while(pos, str.isalpha)
            else:
                pos += 1
            yield content[start:pos]

    def _chop_while(self, pos: int, predicate) -> int:
        content = self.content
        n = len(content)
        while pos < n and predicate(content[pos]):
            pos += 1
        return pos


def tokenize(text: str) -> List[Term]:
    """Eager form of Lexer: the full list of Terms in `text`."""
    return list(Lexer(text))
