"""Single-byte game character tables."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# Pokemon Red/Blue text encoding, in table order. Later entries for a
# repeated key replace earlier ones when folded into POKEMON_CHARS.
POKEMON_CHAR_PAIRS: Tuple[Tuple[str, str], ...] = (
    # Control characters
    ("00", "\0"),
    ("4A", "PKMN"),
    ("52", "[Player Name]"),
    ("53", "[Rival Name]"),
    ("54", "POKé"),
    ("56", "……"),
    ("5B", "PC"),
    ("5C", "TM"),
    ("5D", "TRAINER"),
    ("5E", "ROCKET"),
    # Normal characters
    ("7F", " "),
    ("80", "A"),
    ("81", "B"),
    ("82", "C"),
    ("83", "D"),
    ("84", "E"),
    ("85", "F"),
    ("86", "G"),
    ("87", "H"),
    ("88", "I"),
    ("89", "J"),
    ("8a", "K"),
    ("8b", "L"),
    ("8c", "M"),
    ("8d", "N"),
    ("8e", "O"),
    ("8f", "P"),
    ("90", "Q"),
    ("91", "R"),
    ("92", "S"),
    ("93", "T"),
    ("94", "U"),
    ("95", "V"),
    ("96", "W"),
    ("97", "X"),
    ("98", "Y"),
    ("99", "Z"),
    ("9A", "("),
    ("9B", ")"),
    ("9C", ":"),
    ("9D", ";"),
    ("9E", "["),
    ("9F", "]"),
    ("80", "A"),
    ("A1", "B"),
    ("A2", "C"),
    ("A3", "D"),
    ("A4", "E"),
    ("A5", "F"),
    ("A6", "G"),
    ("A7", "H"),
    ("A8", "I"),
    ("A9", "J"),
    ("AA", "K"),
    ("AB", "L"),
    ("AC", "M"),
    ("AD", "N"),
    ("AE", "O"),
    ("AF", "P"),
    ("B0", "Q"),
    ("B1", "R"),
    ("B2", "S"),
    ("B3", "T"),
    ("B4", "U"),
    ("B5", "V"),
    ("B6", "W"),
    ("B7", "X"),
    ("B8", "Y"),
    ("B9", "Z"),
    ("BA", "é"),
    ("BB", "'d"),
    ("BC", "'l"),
    ("BD", "'s"),
    ("BE", "'t"),
    ("BF", "'v"),
    ("E0", "'"),
    ("E1", "PK"),
    ("E2", "MN"),
    ("E3", "-"),
    ("E4", "'r"),
    ("E5", "'m"),
    ("E6", "?"),
    ("E7", "!"),
    ("E8", "."),
    ("EC", "▷"),
    ("ED", "▶"),
    ("EE", "▼"),
    ("EF", "♂"),
    ("F0", "$"),
    ("F1", "♂"),
    ("F2", "×"),
    ("F3", "."),
    ("F4", "/"),
    ("F5", ","),
    ("F6", "♀"),
    ("F7", "0"),
    ("F8", "1"),
    ("F8", "2"),
    ("F9", "3"),
    ("FA", "4"),
    ("FB", "5"),
    ("FC", "6"),
    ("FD", "7"),
    ("FE", "8"),
    ("FF", "9"),
)


def _fold(pairs: Tuple[Tuple[str, str], ...]) -> Dict[str, str]:
    table: Dict[str, str] = {}
    for key, glyph in pairs:
        table[key] = glyph
    return table


POKEMON_CHARS: Mapping[str, str] = MappingProxyType(_fold(POKEMON_CHAR_PAIRS))


def pokemon_char(byte: int) -> str:
    """Glyph for ``byte`` in the Pokemon table, or ``""`` when unmapped."""
    return POKEMON_CHARS.get(f"{byte & 0xFF:02X}", "")


__all__ = ["POKEMON_CHAR_PAIRS", "POKEMON_CHARS", "pokemon_char"]
