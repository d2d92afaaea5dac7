"""
Word splitting for normalized text.
"""

import re
from typing import List

SPACE_RUN = re.compile(r" +")


def split_words(text: str) -> List[str]:
    """Split on runs of spaces, dropping empty fragments."""
    return [word for word in SPACE_RUN.split(text) if word]
