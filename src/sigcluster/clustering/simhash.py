"""64-bit weighted SimHash fingerprints.

Similar token sets produce fingerprints with a small Hamming distance.
Token order does not matter and there is no randomness: the same
(text, weight) pair always yields the same fingerprint.
"""

from __future__ import annotations

import unicodedata

import numpy as np

FINGERPRINT_BITS = 64

_MASK64 = (1 << FINGERPRINT_BITS) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3

_BIT_SHIFTS = np.arange(FINGERPRINT_BITS, dtype=np.uint64)
_BIT_VALUES = np.uint64(1) << _BIT_SHIFTS


def _is_token_char(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nd"


def _fold(ch: str) -> str:
    # "İ".lower() expands to two code points; keep one per character.
    return ch.lower()[:1]


def tokenize(text: str) -> list[str]:
    """Split *text* into lowercased runs of letters and decimal digits."""
    tokens: list[str] = []
    current: list[str] = []
    for ch in text:
        if _is_token_char(ch):
            current.append(_fold(ch))
        elif current:
            tokens.append("".join(current))
            current = []
    if current:
        tokens.append("".join(current))
    return tokens


def hash_token(token: str) -> int:
    """64-bit FNV-1a over the UTF-8 bytes of *token*."""
    h = _FNV_OFFSET
    for byte in token.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK64
    return h


def simhash(text: str, weight: int = 1) -> int:
    """Compute the fingerprint of *text*.

    Every token votes +weight on the bit positions set in its hash and
    -weight on the others; a bit is set in the result only when its total
    is strictly positive, so ties and token-less text map to 0. The weight
    is clamped to 1 and, being a common positive factor, never flips a
    sign, so the votes are summed unscaled.
    """
    weight = max(weight, 1)
    tokens = tokenize(text)
    if not tokens:
        return 0

    hashes = np.fromiter(
        (hash_token(token) for token in tokens), dtype=np.uint64, count=len(tokens)
    )
    bits = (hashes[:, None] >> _BIT_SHIFTS) & np.uint64(1)
    votes = bits.astype(np.int64) * 2 - 1
    accumulators = votes.sum(axis=0)
    return int(np.bitwise_or.reduce(_BIT_VALUES[accumulators > 0]))


def hamming_distance(a: int, b: int) -> int:
    return ((a ^ b) & _MASK64).bit_count()
