"""
Utilities for mapping language names and file paths onto ProgrammingLanguage values.

Diff headers only give us a file path, so this is how the diff view decides which
tokenizer to run for a hunk.
"""

import logging
import os
from typing import Dict, List

from syntax.programming_language import ProgrammingLanguage


class ProgrammingLanguageUtils:
    """Conversions between language names, file extensions and ProgrammingLanguage."""

    _logger = logging.getLogger("LanguageUtils")

    _NAME_TO_LANGUAGE: Dict[str, ProgrammingLanguage] = {
        "plaintext": ProgrammingLanguage.TEXT,
        "py": ProgrammingLanguage.PYTHON,
        "python": ProgrammingLanguage.PYTHON,
        "python3": ProgrammingLanguage.PYTHON,
        "text": ProgrammingLanguage.TEXT,
        "txt": ProgrammingLanguage.TEXT,
        "": ProgrammingLanguage.TEXT
    }

    _LANGUAGE_TO_NAME: Dict[ProgrammingLanguage, str] = {
        ProgrammingLanguage.PYTHON: "python",
        ProgrammingLanguage.TEXT: "text"
    }

    _EXTENSION_TO_LANGUAGE: Dict[str, ProgrammingLanguage] = {
        ".py": ProgrammingLanguage.PYTHON,
        ".pyi": ProgrammingLanguage.PYTHON,
        ".pyw": ProgrammingLanguage.PYTHON,
        ".txt": ProgrammingLanguage.TEXT
    }

    @classmethod
    def from_name(cls, name: str) -> ProgrammingLanguage:
        """
        Convert a language name string to a ProgrammingLanguage enum value.

        Args:
            name: The name of the programming language

        Returns:
            The corresponding ProgrammingLanguage enum value,
            or ProgrammingLanguage.TEXT if not found
        """
        if not name:
            return ProgrammingLanguage.TEXT

        normalized = name.strip().lower()
        language = cls._NAME_TO_LANGUAGE.get(normalized)
        if language is None:
            cls._logger.debug("Unknown language name '%s', using text", name)
            return ProgrammingLanguage.TEXT

        return language

    @classmethod
    def from_file_extension(cls, filename: str | None) -> ProgrammingLanguage:
        """
        Detect programming language from a file path.

        Args:
            filename: Path to file or None

        Returns:
            The detected programming language enum value,
            or ProgrammingLanguage.TEXT if not detected
        """
        if not filename:
            return ProgrammingLanguage.TEXT

        ext = os.path.splitext(filename)[1].lower()
        return cls._EXTENSION_TO_LANGUAGE.get(ext, ProgrammingLanguage.TEXT)

    @classmethod
    def get_name(cls, language: ProgrammingLanguage) -> str:
        """Get the lower-case name for a programming language."""
        return cls._LANGUAGE_TO_NAME.get(language, "")

    @classmethod
    def get_supported_file_extensions(cls) -> List[str]:
        """
        Get a list of all supported file extensions.

        Returns:
            List of supported file extensions with leading dots
        """
        return list(cls._EXTENSION_TO_LANGUAGE.keys())
