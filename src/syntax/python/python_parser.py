from dataclasses import dataclass

from syntax.lexer import TokenType
from syntax.parser import Parser, ParserState
from syntax.parser_registry import ParserRegistry
from syntax.programming_language import ProgrammingLanguage
from syntax.python.python_lexer import PythonLexer, PythonLexerState


@dataclass
class PythonParserState(ParserState):
    """
    State information for the Python parser.
    """


@ParserRegistry.register_parser(ProgrammingLanguage.PYTHON)
class PythonParser(Parser):
    """
    Parser for Python code.

    Identifiers immediately followed by an opening parenthesis are promoted to
    FUNCTION_OR_METHOD tokens.
    """

    def parse(self, prev_parser_state: ParserState | None, input_str: str) -> PythonParserState:
        """
        Parse the input string using the provided parser state.

        Args:
            prev_parser_state: Optional previous parser state
            input_str: The input string to parse

        Returns:
            The updated parser state after parsing
        """
        prev_lexer_state = None
        if prev_parser_state:
            assert isinstance(prev_parser_state, PythonParserState), \
                f"Expected PythonParserState, got {type(prev_parser_state).__name__}"
            prev_lexer_state = prev_parser_state.lexer_state

        lexer = PythonLexer()
        lexer_state: PythonLexerState = lexer.lex(prev_lexer_state, input_str)

        while True:
            token = lexer.get_next_token()
            if not token:
                break

            if token.type == TokenType.IDENTIFIER:
                next_token = lexer.peek_next_token()
                if next_token and next_token.type == TokenType.OPERATOR and next_token.value == '(':
                    token.type = TokenType.FUNCTION_OR_METHOD

            self._tokens.append(token)

        parser_state = PythonParserState()
        parser_state.lexer_state = lexer_state
        parser_state.parsing_continuation = lexer_state.in_triple_string
        return parser_state
