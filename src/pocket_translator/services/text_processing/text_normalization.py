"""Text normalization for raw model completions."""

import re

_EM_DASH = re.compile(r"\s*—\s*")
_EN_DASH = re.compile(r"\s*–\s*")
_HYPHEN = re.compile(r"\s*-\s*")
_WHITESPACE = re.compile(r"\s+")
_EDGE_DASHES = re.compile(r"^[\s\-—–]+|[\s\-—–]+$")


def normalize_completion(text: str) -> str:
    """
    Strip list markers and separators the model tends to add.

    Rules, applied in this order:
    - Replace em and en dashes (with any surrounding whitespace) by a space
    - Replace plain hyphens (with any surrounding whitespace) by a space;
      hyphenated words are split too, which is accepted
    - Collapse runs of whitespace to single spaces
    - Drop leading and trailing whitespace and dashes
    - Trim

    Args:
        text: Raw completion returned by the endpoint.

    Returns:
        Normalized text string.
    """
    text = _EM_DASH.sub(" ", text)
    text = _EN_DASH.sub(" ", text)
    text = _HYPHEN.sub(" ", text)
    text = _WHITESPACE.sub(" ", text)
    text = _EDGE_DASHES.sub("", text)
    return text.strip()
