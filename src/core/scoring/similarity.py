"""Pairwise similarity primitives: lexical Jaccard and tag-set Jaccard."""

from collections.abc import Iterable

from src.core.tokenizer import Tokenizer

_default_tokenizer = Tokenizer()


def jaccard(set1: set[str], set2: set[str]) -> float:
    """
    Jaccard index of two sets.

    Args:
        set1: First set
        set2: Second set

    Returns:
        |intersection| / |union|, or 0.0 if either set is empty
    """
    if not set1 or not set2:
        return 0.0
    return len(set1 & set2) / len(set1 | set2)


def lexical_similarity(text1: str, text2: str, tokenizer: Tokenizer | None = None) -> float:
    """
    Keyword overlap between two texts.

    Args:
        text1: First text
        text2: Second text
        tokenizer: Optional tokenizer (defaults to the stopword-filtering one)

    Returns:
        Jaccard index of the two keyword sets (0-1)
    """
    tokenizer = tokenizer or _default_tokenizer
    return jaccard(tokenizer.token_set(text1), tokenizer.token_set(text2))


def tag_overlap(tags1: Iterable[str], tags2: Iterable[str]) -> float:
    """
    Case-insensitive overlap between two tag lists.

    Args:
        tags1: First tag list
        tags2: Second tag list

    Returns:
        Jaccard index of the lower-cased tag sets (0-1)
    """
    return jaccard({tag.lower() for tag in tags1}, {tag.lower() for tag in tags2})
