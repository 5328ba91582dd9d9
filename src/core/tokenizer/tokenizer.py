"""
Text normalization for lexical comparison and token estimation.

Turns raw document text into a set of comparable keyword tokens, and
provides the character-ratio token estimate used for collection stats.
"""

import math
import re

# Fixed heuristic, not a real model tokenizer
CHARS_PER_TOKEN = 4

# Tokens of this length or shorter are dropped
MIN_TOKEN_LENGTH = 2

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
        "for", "of", "with", "by", "is", "are", "was", "were", "be", "been",
        "being", "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "can", "this", "that", "these", "those", "it", "its",
        "you", "your", "we", "our", "they", "their", "what", "which", "who", "when",
        "where", "why", "how", "all", "each", "every", "both", "few", "more", "most",
        "other", "some", "such", "no", "nor", "not", "only", "own", "same", "so",
        "than", "too", "very", "just", "also",
    }
)

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")


def estimate_tokens_for_length(char_count: int) -> int:
    """Approximate language-model token count for a character count."""
    return math.ceil(char_count / CHARS_PER_TOKEN)


class Tokenizer:
    """
    Keyword tokenizer with stopword filtering.

    Usage:
        tokenizer = Tokenizer()
        tokens = tokenizer.tokenize("The Quick brown fox!")  # ["quick", "brown", "fox"]
        keywords = tokenizer.token_set(text)
        estimate = tokenizer.estimate_tokens(text)
    """

    def __init__(
        self,
        stop_words: frozenset[str] = STOP_WORDS,
        min_token_length: int = MIN_TOKEN_LENGTH,
    ):
        """
        Initialize tokenizer.

        Args:
            stop_words: Words dropped from the token stream
            min_token_length: Tokens of this length or shorter are dropped
        """
        self.stop_words = stop_words
        self.min_token_length = min_token_length

    def tokenize(self, text: str) -> list[str]:
        """
        Split text into normalized keyword tokens.

        Lower-cases, replaces every character outside [a-z0-9] and whitespace
        with a space, splits on whitespace, then drops short tokens and
        stopwords. Order and duplicates are preserved.

        Args:
            text: Raw text

        Returns:
            List of tokens
        """
        if not text:
            return []

        normalized = _NON_ALPHANUMERIC.sub(" ", text.lower())
        return [
            token
            for token in normalized.split()
            if len(token) > self.min_token_length and token not in self.stop_words
        ]

    def token_set(self, text: str) -> set[str]:
        """Distinct tokens of a text."""
        return set(self.tokenize(text))

    @staticmethod
    def estimate_tokens(text: str) -> int:
        """
        Approximate language-model token count.

        Args:
            text: Text to estimate tokens for

        Returns:
            ceil(len(text) / 4)
        """
        return estimate_tokens_for_length(len(text))
