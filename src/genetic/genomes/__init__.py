"""
Ready-made genome encodings.
"""

from .bit_string import BitStringGenome
from .phrase import PhraseGenome

__all__ = [
    "BitStringGenome",
    "PhraseGenome",
]
