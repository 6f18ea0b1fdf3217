from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from syntax.lexer import LexerState, Token


@dataclass
class ParserState:
    """
    State information for the Parser.

    Attributes:
        lexer_state: The lexer state at the end of the line
        parsing_continuation: True if the line ended inside a multi-line construct
    """
    lexer_state: LexerState | None = None
    parsing_continuation: bool = False


class Parser(ABC):
    """Base class for line-at-a-time parsers."""

    def __init__(self) -> None:
        self._tokens: List[Token] = []
        self._next_token: int = 0

    @abstractmethod
    def parse(self, prev_parser_state: ParserState | None, input_str: str) -> ParserState | None:
        """
        Parse one line of input.

        Args:
            prev_parser_state: The state returned for the previous line, if any
            input_str: The line to parse

        Returns:
            The state to hand to the next line
        """

    def get_next_token(self) -> Token | None:
        """
        Gets the next token from the input.

        Returns:
            The next Token available or None if there are no tokens left.
        """
        if self._next_token >= len(self._tokens):
            return None

        token = self._tokens[self._next_token]
        self._next_token += 1
        return token
