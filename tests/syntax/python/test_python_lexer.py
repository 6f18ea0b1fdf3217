"""
Tests for the Python lexer and parser.
"""
import pytest

from syntax.lexer import TokenType
from syntax.python.python_lexer import PythonLexer, PythonLexerState
from syntax.python.python_parser import PythonParser


def lex_tokens(line, state=None):
    """Lex a line and return (tokens, state)."""
    lexer = PythonLexer()
    new_state = lexer.lex(state, line)
    return list(lexer._tokens), new_state


class TestPythonTokens:
    """Test single-line Python tokenization."""

    def test_keywords_and_identifiers(self):
        """Test that keywords are told apart from identifiers."""
        tokens, _ = lex_tokens('return value')

        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.KEYWORD, 'return'),
            (TokenType.IDENTIFIER, 'value'),
        ]

    def test_token_positions(self):
        """Test that tokens record where they start."""
        tokens, _ = lex_tokens('x  = 1')

        assert [t.start for t in tokens] == [0, 3, 5]

    @pytest.mark.parametrize("source", ['42', '3.14', '0x1F', '0b101', '0o17', '1e-5', '2j', '.5'])
    def test_numbers(self, source):
        """Test numeric literal forms."""
        tokens, _ = lex_tokens(source)

        assert len(tokens) == 1
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].value == source

    def test_strings(self):
        """Test single and double quoted strings with escapes."""
        tokens, _ = lex_tokens('a = "say \\"hi\\"" + \'x\'')

        strings = [t.value for t in tokens if t.type == TokenType.STRING]
        assert strings == ['"say \\"hi\\""', "'x'"]

    def test_comment_runs_to_end_of_line(self):
        """Test that a comment takes the rest of the line."""
        tokens, _ = lex_tokens('x = 1  # set x')

        assert tokens[-1].type == TokenType.COMMENT
        assert tokens[-1].value == '# set x'

    def test_longest_operator_wins(self):
        """Test that multi-character operators are not split."""
        tokens, _ = lex_tokens('a **= b')

        assert tokens[1].type == TokenType.OPERATOR
        assert tokens[1].value == '**='

    def test_unknown_character(self):
        """Test that a character Python doesn't use becomes an error token."""
        tokens, _ = lex_tokens('a $ b')

        assert tokens[1].type == TokenType.ERROR
        assert tokens[1].value == '$'


class TestPythonMultiline:
    """Test triple-quoted strings across lines."""

    def test_triple_string_start(self):
        """Test starting a multiline string."""
        tokens, state = lex_tokens('"""Start of docstring')

        assert len(tokens) == 1
        assert tokens[0].type == TokenType.STRING
        assert state.in_triple_string
        assert state.triple_quote == '"'

    def test_triple_string_middle_and_end(self):
        """Test that state carries the string through to its close."""
        _, state1 = lex_tokens("'''Start")
        tokens2, state2 = lex_tokens('def not_code():', state1)
        tokens3, state3 = lex_tokens("End''' + x", state2)

        assert [t.type for t in tokens2] == [TokenType.STRING]
        assert state2.in_triple_string
        assert tokens3[0].value == "End'''"
        assert tokens3[0].type == TokenType.STRING
        assert tokens3[-1].type == TokenType.IDENTIFIER
        assert not state3.in_triple_string

    def test_other_quote_does_not_close(self):
        """Test that the other quote style doesn't end the string."""
        _, state1 = lex_tokens('"""Start')
        _, state2 = lex_tokens("still ''' inside", state1)

        assert state2.in_triple_string

    def test_single_line_triple_string(self):
        """Test a triple-quoted string that closes on the same line."""
        tokens, state = lex_tokens('x = """doc"""')

        assert tokens[-1].value == '"""doc"""'
        assert not state.in_triple_string

    def test_state_type_checked(self):
        """Test that a foreign lexer state is rejected."""
        class OtherState:
            pass

        with pytest.raises(AssertionError):
            PythonLexer().lex(OtherState(), 'x')


class TestPythonParser:
    """Test the Python parser."""

    def test_function_call(self):
        """Test that identifiers before '(' are functions."""
        parser = PythonParser()
        parser.parse(None, 'print(len(items))')

        types = []
        while True:
            token = parser.get_next_token()
            if token is None:
                break

            types.append((token.type, token.value))

        assert (TokenType.FUNCTION_OR_METHOD, 'print') in types
        assert (TokenType.FUNCTION_OR_METHOD, 'len') in types
        assert (TokenType.IDENTIFIER, 'items') in types

    def test_continuation_state(self):
        """Test that the parser reports when a line ends inside a string."""
        parser = PythonParser()
        state = parser.parse(None, 'x = """open')

        assert state.parsing_continuation
        assert isinstance(state.lexer_state, PythonLexerState)

        state2 = PythonParser().parse(state, 'close"""')
        assert not state2.parsing_continuation
