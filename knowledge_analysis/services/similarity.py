"""
Token-overlap text similarity.

Scores are normalised by the smaller token set, so a short text fully
contained in a longer one scores 1.0.
"""

DEFAULT_MIN_TOKEN_LENGTH = 3


def tokenize(text: str, min_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> set[str]:
    """Lowercased whitespace tokens of at least min_length characters."""
    return {word for word in text.lower().split() if len(word) >= min_length}


def overlap_score(a: set[str], b: set[str]) -> float:
    """|a & b| / max(1, min(|a|, |b|)). Zero when either set is empty."""
    if not a or not b:
        return 0.0
    return len(a & b) / max(1, min(len(a), len(b)))


def similarity(
    text_a: str,
    text_b: str,
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH
) -> float:
    """
    Symmetric similarity in [0, 1] between two text snippets.

    Args:
        text_a: First text (may be empty)
        text_b: Second text (may be empty)
        min_token_length: Shorter tokens are ignored

    Returns:
        Shared-token count over the smaller token set size
    """
    return overlap_score(
        tokenize(text_a or "", min_token_length),
        tokenize(text_b or "", min_token_length),
    )
