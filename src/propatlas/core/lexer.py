"""Lexical analysis of formula text."""

from typing import List

from .tokens import Token


def tokenize(text: str) -> List[Token]:
    """Split formula text into single-character tokens.

    Whitespace is dropped and letters are folded to uppercase. Unknown
    characters are kept; the parser rejects them.
    """
    return [Token(char.upper() if 'a' <= char <= 'z' else char)
            for char in text if not char.isspace()]
