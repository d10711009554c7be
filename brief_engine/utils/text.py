"""
Text Cleanup Helpers

Small normalizers shared by the extractors and the summary generator.
"""
import re

LEADING_ARTICLES = re.compile(r"^(?:(?:my|our|the|a|an|this|these|their|your)\s+)+", re.IGNORECASE)

# Words that leave a fragment hanging when they end a phrase ("Of my")
DANGLING_WORDS = frozenset({
    "a", "an", "the", "my", "our", "your", "their", "this", "that",
    "of", "for", "to", "with", "and", "or", "on", "in", "at", "about",
    "by", "from", "into", "as", "so", "but",
})

_WHITESPACE = re.compile(r"\s+")
_EDGE_PUNCTUATION = " \t\n.,;:!?-–—\"'"


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def capitalize_first(text: str) -> str:
    """Uppercase the first character only; the rest keeps its casing."""
    return text[:1].upper() + text[1:] if text else text


def strip_leading_articles(text: str) -> str:
    return LEADING_ARTICLES.sub("", text).strip()


def strip_dangling_words(text: str) -> str:
    """
    Remove connective words from both ends of a phrase.

    Example:
        >>> strip_dangling_words("summer sale for")
        'summer sale'
    """
    words = text.strip(_EDGE_PUNCTUATION).split()
    while words and words[-1].lower().strip(_EDGE_PUNCTUATION) in DANGLING_WORDS:
        words.pop()
    while words and words[0].lower().strip(_EDGE_PUNCTUATION) in DANGLING_WORDS:
        words.pop(0)
    return " ".join(words).strip(_EDGE_PUNCTUATION)


def clean_phrase(text: str) -> str:
    """Whitespace, leading articles and dangling words in one pass."""
    return strip_dangling_words(strip_leading_articles(collapse_whitespace(text)))
