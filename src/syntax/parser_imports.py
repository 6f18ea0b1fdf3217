"""Imports all parsers to ensure they are registered in the ParserRegistry."""

# pylint: disable=unused-import
from syntax.python.python_parser import PythonParser
from syntax.text.text_parser import TextParser
from syntax.parser_registry import ParserRegistry
# pylint: enable=unused-import
