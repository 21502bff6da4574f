"""
Utility functions for the models builder.
"""

import re
import unicodedata

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def _transliterate(text: str) -> str:
    """Fold accented latin letters to their ASCII base letter."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _normalize_separators(text: str) -> str:
    """Replace anything that is not an ASCII letter or digit with a space."""
    return re.sub(r"[^A-Za-z0-9]+", " ", text)


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def to_pascal_case(text: str) -> str:
    """Clean an alias into a PascalCase identifier.

    Examples:
        "textPage" -> "TextPage"
        "body_text" -> "BodyText"
        "HTMLContent" -> "HtmlContent"
        "first 3 rows" -> "First3Rows"
        "3col-layout" -> "ColLayout"
        "Événement" -> "Evenement"

    Args:
        text: The alias to clean

    Returns:
        PascalCase string, empty if the alias holds no letter
    """
    if not text:
        return ""
    normalized = _normalize_separators(_transliterate(text))
    words = _split_into_words(normalized)

    # An identifier cannot start with a digit
    while words and words[0].isdigit():
        words.pop(0)

    return _capitalize_and_join(words)
