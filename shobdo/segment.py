"""
Token segmentation for Shobdo.

Splits a typed token into leading decoration, the phonetic core and
trailing decoration, so that "(ami)" is looked up as "ami" and every
suggestion is wrapped back into "(...)".
"""

from typing import NamedTuple

from shobdo.characters import META_CHARACTERS


class SplitToken(NamedTuple):
    """A token split as prefix + middle + suffix."""
    prefix: str
    middle: str
    suffix: str

    def decorate(self, text: str) -> str:
        """Wrap text in this token's prefix and suffix."""
        return f"{self.prefix}{text}{self.suffix}"


def split_string(text: str, meta: str = META_CHARACTERS) -> SplitToken:
    """
    Split leading and trailing meta characters off a token.

    Args:
        text: Raw token as typed.
        meta: Characters treated as decoration.

    Returns:
        SplitToken whose parts concatenate back to text. When text holds no
        character outside meta, the whole of it becomes the prefix.
    """
    first_index = None
    for index, char in enumerate(text):
        if char not in meta:
            first_index = index
            break

    # No alphanumeric content at all
    if first_index is None:
        return SplitToken(text, "", "")

    last_index = first_index
    for index in range(len(text) - 1, first_index - 1, -1):
        if text[index] not in meta:
            last_index = index
            break

    return SplitToken(
        text[:first_index],
        text[first_index:last_index + 1],
        text[last_index + 1:],
    )
