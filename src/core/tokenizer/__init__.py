"""
Tokenizer module for keyword extraction and token estimation.

Normalizes text into stopword-filtered keyword sets for lexical similarity,
and estimates language-model token counts from character length.
"""

from src.core.tokenizer.tokenizer import (
    CHARS_PER_TOKEN,
    STOP_WORDS,
    Tokenizer,
    estimate_tokens_for_length,
)

__all__ = ["Tokenizer", "STOP_WORDS", "CHARS_PER_TOKEN", "estimate_tokens_for_length"]
