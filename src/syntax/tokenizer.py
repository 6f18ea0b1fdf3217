"""
Line tokenizer interface used by the diff view.

A tokenizer is handed one line of text plus the opaque continuation state left by
the previous line, and returns styled tokens plus the state for the next line.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Tuple

# pylint: disable=unused-import
import syntax.parser_imports
# pylint: enable=unused-import
from syntax.lexer import TokenType
from syntax.parser_registry import ParserRegistry
from syntax.programming_language import ProgrammingLanguage


@dataclass(frozen=True)
class StyledToken:
    """
    A run of text with an optional colour hint.

    Attributes:
        text: The token text
        color_hint: Token classification for the theme layer, or None for plain text
    """
    text: str
    color_hint: TokenType | None = None


class Tokenizer(ABC):
    """Abstract line tokenizer."""

    @abstractmethod
    def tokenize(
        self,
        text: str,
        language: ProgrammingLanguage,
        continuation_state: Any | None
    ) -> Tuple[List[StyledToken], Any]:
        """
        Tokenize a single line.

        Args:
            text: The line to tokenize (no diff prefix, no newline)
            language: Language to highlight as
            continuation_state: State returned for the previous line, or None

        Returns:
            Tuple of (tokens, next continuation state).  Concatenating the token
            texts must give back `text` exactly.
        """


class ParserTokenizer(Tokenizer):
    """
    Tokenizer backed by the registered syntax parsers.

    Parsers don't emit tokens for whitespace, so the gaps between tokens are
    filled with plain tokens to keep the line text intact.
    """

    def tokenize(
        self,
        text: str,
        language: ProgrammingLanguage,
        continuation_state: Any | None
    ) -> Tuple[List[StyledToken], Any]:
        parser = ParserRegistry.create_parser(language)
        if parser is None:
            return ([StyledToken(text)] if text else []), None

        next_state = parser.parse(continuation_state, text)

        tokens: List[StyledToken] = []
        position = 0
        while True:
            token = parser.get_next_token()
            if token is None:
                break

            if token.start > position:
                tokens.append(StyledToken(text[position:token.start]))

            if token.start + len(token.value) <= position:
                continue

            value = text[max(token.start, position):token.start + len(token.value)]
            tokens.append(StyledToken(value, token.type))
            position = token.start + len(token.value)

        if position < len(text):
            tokens.append(StyledToken(text[position:]))

        return tokens, next_state
