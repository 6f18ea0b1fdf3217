from dataclasses import dataclass
from typing import Callable

from syntax.lexer import Lexer, LexerState, Token, TokenType


@dataclass
class PythonLexerState(LexerState):
    """
    State information for the Python lexer.

    Attributes:
        in_triple_string: Indicates if we're inside a triple-quoted string
        triple_quote: The quote character that opened the triple-quoted string
    """
    in_triple_string: bool = False
    triple_quote: str = ""


class PythonLexer(Lexer):
    """
    Lexer for Python code.

    Handles keywords, operators, numbers, strings, comments and triple-quoted
    strings.  Triple-quoted strings are the only construct that can span lines.
    """

    _OPERATORS = [
        '...', '>>=', '<<=', '**=', '//=', '@=', ':=', '!=', '==',
        '+=', '-=', '*=', '/=', '%=', '&=', '|=', '^=',
        '<=', '>=', '<<', '>>', '**', '//',
        '->', '@', '+', '-', '*', '/', '%', '&', '~', '|',
        '^', '=', '<', '>', '(', ')', '{', '}', '[', ']',
        ':', ';', '.', ','
    ]

    _OPERATORS_MAP = Lexer.build_operator_map(_OPERATORS)

    _KEYWORDS = {
        'and', 'as', 'assert', 'async', 'await', 'break', 'class',
        'continue', 'def', 'del', 'elif', 'else', 'except', 'False',
        'finally', 'for', 'from', 'global', 'if', 'import', 'in',
        'is', 'lambda', 'None', 'nonlocal', 'not', 'or', 'pass',
        'raise', 'return', 'True', 'try', 'while', 'with', 'yield'
    }

    def __init__(self) -> None:
        super().__init__()
        self._in_triple_string = False
        self._triple_quote = ""

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> PythonLexerState:
        """
        Lex all the tokens in the input.

        Args:
            prev_lexer_state: Optional previous lexer state
            input_str: The input string to parse

        Returns:
            The updated lexer state after processing
        """
        self._input = input_str
        self._input_len = len(input_str)
        if prev_lexer_state:
            assert isinstance(prev_lexer_state, PythonLexerState), \
                f"Expected PythonLexerState, got {type(prev_lexer_state).__name__}"
            self._in_triple_string = prev_lexer_state.in_triple_string
            self._triple_quote = prev_lexer_state.triple_quote

        if self._in_triple_string:
            self._read_triple_string(0)

        self._inner_lex()

        return PythonLexerState(
            in_triple_string=self._in_triple_string,
            triple_quote=self._triple_quote
        )

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        if self._is_letter(ch) or ch == '_':
            return self._read_identifier_or_keyword

        if self._is_whitespace(ch):
            return self._read_whitespace

        if self._is_digit(ch):
            return self._read_number

        if ch == '.':
            return self._read_dot

        if ch in ('"', "'"):
            return self._read_quote

        if ch == '#':
            return self._read_comment

        return self._read_operator

    def _read_quote(self) -> None:
        """
        Read a string, or the start of a triple-quoted string.
        """
        ch = self._input[self._position]
        if self._input.startswith(ch * 3, self._position):
            self._triple_quote = ch
            self._read_triple_string(3)
            return

        self._read_string()

    def _read_triple_string(self, skip_chars: int) -> None:
        """
        Read (part of) a triple-quoted string.

        Args:
            skip_chars: Number of opening quote characters to skip
        """
        self._in_triple_string = True
        start = self._position
        end = self._input.find(self._triple_quote * 3, self._position + skip_chars)
        if end == -1:
            self._position = self._input_len

        else:
            self._in_triple_string = False
            self._position = end + 3

        self._tokens.append(Token(type=TokenType.STRING, value=self._input[start:self._position], start=start))

    def _read_dot(self) -> None:
        if (self._position + 1 < self._input_len and
                self._is_digit(self._input[self._position + 1])):
            self._read_number()
            return

        self._read_operator()

    def _read_number(self) -> None:
        """
        Read a numeric literal: decimal, hex, binary, octal, float or complex.
        """
        start = self._position

        prefix = self._input[self._position:self._position + 2].lower()
        if prefix == '0x':
            self._position += 2
            while self._position < self._input_len and self._is_hex_digit(self._input[self._position]):
                self._position += 1

        elif prefix == '0b':
            self._position += 2
            while self._position < self._input_len and self._is_binary_digit(self._input[self._position]):
                self._position += 1

        elif prefix == '0o':
            self._position += 2
            while self._position < self._input_len and self._is_octal_digit(self._input[self._position]):
                self._position += 1

        else:
            self._read_decimal_number()

        if self._position < self._input_len and self._input[self._position] in ('j', 'J'):
            self._position += 1

        self._tokens.append(Token(type=TokenType.NUMBER, value=self._input[start:self._position], start=start))

    def _read_decimal_number(self) -> None:
        while self._position < self._input_len and self._is_digit(self._input[self._position]):
            self._position += 1

        if self._position < self._input_len and self._input[self._position] == '.':
            self._position += 1
            while self._position < self._input_len and self._is_digit(self._input[self._position]):
                self._position += 1

        if self._position < self._input_len and self._input[self._position] in ('e', 'E'):
            self._position += 1
            if self._position < self._input_len and self._input[self._position] in ('+', '-'):
                self._position += 1

            while self._position < self._input_len and self._is_digit(self._input[self._position]):
                self._position += 1

    def _read_identifier_or_keyword(self) -> None:
        start = self._position
        self._position += 1
        while (self._position < self._input_len and
                self._is_letter_or_digit_or_underscore(self._input[self._position])):
            self._position += 1

        value = self._input[start:self._position]
        token_type = TokenType.KEYWORD if value in self._KEYWORDS else TokenType.IDENTIFIER
        self._tokens.append(Token(type=token_type, value=value, start=start))

    def _read_comment(self) -> None:
        self._tokens.append(Token(
            type=TokenType.COMMENT,
            value=self._input[self._position:],
            start=self._position
        ))
        self._position = self._input_len
