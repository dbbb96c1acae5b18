"""Spelling correction with SymSpell compound lookup.

Messages are corrected before intent classification so that typos like
"hackign rol" still reach the right intent. The dictionary combines the
game vocabulary shipped with the package and, optionally, symspellpy's
bundled English frequency dictionary.
"""

import logging
import re
from importlib import resources
from pathlib import Path

from symspellpy import SymSpell

logger = logging.getLogger(__name__)


MAX_EDIT_DISTANCE = 2
PREFIX_LENGTH = 7

ENGLISH_DICTIONARY = "frequency_dictionary_en_82_765.txt"

# Dice pool notation, kept out of correction: 3d, 2d6, d6, d6s
POOL_TOKEN_PATTERN = re.compile(r"\b(?:\d+d6?|d6s?)\b", re.IGNORECASE)


def default_dictionary_path() -> Path:
    """Path of the game vocabulary shipped with the package."""
    return Path(str(resources.files("scum_bot") / "data" / "dictionary.txt"))


def _new_sym_spell(max_edit_distance: int) -> SymSpell:
    return SymSpell(
        max_dictionary_edit_distance=max_edit_distance,
        prefix_length=PREFIX_LENGTH,
    )


class SymSpellCorrector:
    """SpellingCorrector backed by symspellpy.

    Build once at startup with load() or from_terms(); lookups do not
    modify the dictionary.

    Args:
        sym_spell: A SymSpell instance with its dictionary loaded.
        max_edit_distance: Maximum edit distance per corrected segment.
    """

    def __init__(self, sym_spell: SymSpell, max_edit_distance: int = MAX_EDIT_DISTANCE) -> None:
        self.sym_spell = sym_spell
        self.max_edit_distance = max_edit_distance

    @classmethod
    def load(
        cls,
        dictionary_path: Path | str | None = None,
        use_english_dictionary: bool = True,
        max_edit_distance: int = MAX_EDIT_DISTANCE,
    ) -> "SymSpellCorrector":
        """Load the game vocabulary and optionally the English dictionary.

        Args:
            dictionary_path: Vocabulary file, one "term count" per line.
                Defaults to the vocabulary shipped with the package.
            use_english_dictionary: Also load symspellpy's English dictionary.
            max_edit_distance: Maximum edit distance per corrected segment.

        Raises:
            FileNotFoundError: If a dictionary file cannot be loaded.
        """
        sym_spell = _new_sym_spell(max_edit_distance)

        paths = []
        if use_english_dictionary:
            paths.append(Path(str(resources.files("symspellpy") / ENGLISH_DICTIONARY)))
        paths.append(Path(dictionary_path) if dictionary_path else default_dictionary_path())

        for path in paths:
            if not sym_spell.load_dictionary(str(path), term_index=0, count_index=1):
                raise FileNotFoundError(f"Spelling dictionary not found: {path}")
            logger.info(f"Loaded spelling dictionary: {path}")

        return cls(sym_spell, max_edit_distance)

    @classmethod
    def from_terms(
        cls,
        terms: dict[str, int],
        max_edit_distance: int = MAX_EDIT_DISTANCE,
    ) -> "SymSpellCorrector":
        """Build a corrector from an in-memory term -> count mapping."""
        sym_spell = _new_sym_spell(max_edit_distance)
        for term, count in terms.items():
            sym_spell.create_dictionary_entry(term, count)
        return cls(sym_spell, max_edit_distance)

    def correct(self, text: str) -> str | None:
        """Correct text with compound lookup.

        Pool notation such as "3d", "2d6" or "d6" is passed through
        unchanged; only the words around it are corrected.

        Args:
            text: Text to correct.

        Returns:
            The corrected text, or None for blank text.

        Examples:
            "rol 3d" -> "roll 3d"
        """
        trimmed = text.strip()
        if not trimmed:
            return None

        parts = []
        position = 0
        for match in POOL_TOKEN_PATTERN.finditer(trimmed):
            parts.append(self._lookup(trimmed[position:match.start()]))
            parts.append(match.group(0).lower())
            position = match.end()
        parts.append(self._lookup(trimmed[position:]))

        corrected = " ".join(part for part in parts if part)
        return corrected or None

    def _lookup(self, segment: str) -> str:
        segment = segment.strip()
        if not segment:
            return ""

        suggestions = self.sym_spell.lookup_compound(
            segment,
            max_edit_distance=self.max_edit_distance,
            ignore_non_words=True,
        )
        if not suggestions:
            return segment
        return suggestions[0].term
