"""Syntax framework."""

from syntax.lexer import Token, TokenType, Lexer, LexerState
from syntax.parser import Parser, ParserState
from syntax.parser_registry import ParserRegistry
from syntax.programming_language import ProgrammingLanguage
from syntax.programming_language_utils import ProgrammingLanguageUtils
from syntax.tokenizer import ParserTokenizer, StyledToken, Tokenizer


__all__ = [
    "Lexer",
    "LexerState",
    "Parser",
    "ParserRegistry",
    "ParserState",
    "ParserTokenizer",
    "ProgrammingLanguage",
    "ProgrammingLanguageUtils",
    "StyledToken",
    "Token",
    "TokenType",
    "Tokenizer"
]
