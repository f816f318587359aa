"""
Romanized Bengali (Banglish) to Bengali script transliteration.

This module maps Latin-script approximations of Bengali phonemes to Bengali
graphemes using longest-match lookup over a static symbol table. Consonants
written back to back are joined with a halant; vowels after a consonant are
written as their dependent sign (kar).

The map follows the usual Avro phonetic conventions:
t -> ত, T -> ট, d -> দ, D -> ড, s -> স, S/sh -> শ
"""

from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple

HALANT = "্"

# Independent forms (vowel letters and consonant letters)
SYMBOL_MAP = MappingProxyType({
    # Vowels
    "a": "আ",
    "A": "অ",
    "e": "এ",
    "E": "এ",
    "i": "ই",
    "I": "ঈ",
    "o": "ও",
    "O": "ও",
    "u": "উ",
    "U": "ঊ",
    "y": "এ",
    "Y": "ঐ",
    "ri": "ঋ",
    "oo": "ঊ",
    "oi": "ঐ",
    "ou": "ঔ",

    # Consonants
    "k": "ক",
    "kh": "খ",
    "K": "ক",
    "g": "গ",
    "gh": "ঘ",
    "G": "ঙ",
    "ng": "ঙ",
    "Ng": "ঙ",
    "ch": "চ",
    "Ch": "চ",
    "chh": "ছ",
    "j": "জ",
    "jh": "ঝ",
    "J": "জ",
    "t": "ত",
    "th": "থ",
    "T": "ট",
    "Th": "ঠ",
    "d": "দ",
    "dh": "ধ",
    "D": "ড",
    "Dh": "ঢ",
    "n": "ন",
    "N": "ণ",
    "p": "প",
    "ph": "ফ",
    "P": "প",
    "f": "ফ",
    "b": "ব",
    "B": "ব",
    "bh": "ভ",
    "v": "ভ",
    "m": "ম",
    "M": "ম",
    "z": "য",
    "Z": "জ",
    "r": "র",
    "R": "ড়",
    "l": "ল",
    "L": "ল",
    "sh": "শ",
    "S": "শ",
    "s": "স",
    "h": "হ",
    "H": "ঃ",
    "w": "ব",
    "X": "ক্স",
    "x": "ক্স",
})

# Dependent vowel signs; the inherent vowel has no sign
KAR_MAP = MappingProxyType({
    "a": "া",
    "A": "",
    "e": "ে",
    "E": "",
    "i": "ি",
    "I": "ী",
    "o": "ো",
    "O": "ো",
    "u": "ু",
    "U": "ূ",
    "y": "ে",
    "Y": "ৈ",
    "ri": "ৃ",
    "oo": "ূ",
    "oi": "ৈ",
    "ou": "ৌ",
})

VOWEL_KEYS = frozenset(KAR_MAP)

MAX_KEY_LENGTH = max(len(key) for key in SYMBOL_MAP)


class SymbolClass(Enum):
    """Class of the last symbol emitted during a scan."""
    VOWEL = "vowel"
    CONSONANT = "consonant"


def is_vowel(key: str) -> bool:
    """Return True if a symbol table key denotes a vowel."""
    return key in VOWEL_KEYS


def match_symbol(text: str, pos: int) -> Tuple[Optional[str], int]:
    """
    Find the longest symbol table key starting at a position.

    Args:
        text: Input text.
        pos: Scan position.

    Returns:
        Tuple of (key, consumed) or (None, 1) when nothing matches.
    """
    for size in range(MAX_KEY_LENGTH, 0, -1):
        if pos + size > len(text):
            continue
        candidate = text[pos:pos + size]
        if candidate in SYMBOL_MAP:
            return candidate, size
    return None, 1


def translate(text: str) -> str:
    """
    Transliterate Banglish text to Bengali script.

    Unmapped characters (digits, punctuation, spaces, Bengali script) are
    copied through and break any pending conjunct.

    Args:
        text: Latin-script text.

    Returns:
        Bengali-script text.
    """
    out = []
    last: Optional[SymbolClass] = None
    pos = 0

    while pos < len(text):
        key, consumed = match_symbol(text, pos)

        if key is None:
            out.append(text[pos])
            last = None
        elif is_vowel(key):
            if not out or out[-1].endswith(" "):
                out.append(SYMBOL_MAP[key])
            elif KAR_MAP.get(key):
                out.append(KAR_MAP[key])
            last = SymbolClass.VOWEL
        else:
            if last is SymbolClass.CONSONANT:
                out.append(HALANT)
            out.append(SYMBOL_MAP[key])
            last = SymbolClass.CONSONANT

        pos += consumed

    return "".join(out)
