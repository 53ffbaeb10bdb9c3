"""
encounter – Wild encounter label generation.

``wildmon()`` picks a species from a catalog, resolves its gender against
the caller's allowed genders, rolls a level and formats the result::

    Wild_Pikachu♀_(lv42)

The random draws happen in a fixed order (species, gender ratio if any,
gender fallback if any, level) so a seeded source reproduces its output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from wildmon.config import LEVEL_RANGE, MISSINGNO
from wildmon.species_data import AGENDER, FEMALE, MALE, Gender, Species

if TYPE_CHECKING:
    from wildmon.rng_source import RandomSource

logger = logging.getLogger(__name__)


DEFAULT_GENDERS: Tuple[Gender, ...] = (MALE, FEMALE, AGENDER)


@dataclass
class WildmonSettings:
    """Options for ``wildmon()``. An empty ``allow_genders`` means no restriction."""
    canon: bool = True  # currently unused
    whitespace: bool = False
    allow_genders: List[Gender] = field(default_factory=list)

    def allow_gender(self, gender: Gender) -> None:
        self.allow_genders.append(gender)


def resolve_gender(
    rng: RandomSource,
    declared: Gender,
    allow_genders: Sequence[Gender],
) -> Gender:
    """
    Resolve a species' declared gender into one the caller accepts.

    The resolved gender is tested against ``allow_genders`` (or
    DEFAULT_GENDERS when that is empty). On a miss, a replacement is drawn
    from the raw ``allow_genders`` list, falling back to Agender when the
    list is empty.
    """
    allowed = allow_genders or DEFAULT_GENDERS
    gender = declared.randomize(rng)
    if gender in allowed:
        return gender

    if allow_genders:
        replacement = rng.choice(allow_genders)
    else:
        replacement = AGENDER
    logger.debug("Gender %s not allowed, using %s", gender, replacement)
    return replacement


def format_encounter(name: str, gender: Gender, level: int, whitespace: bool = False) -> str:
    label = f"Wild {name}{gender.symbol} (lv{level})"
    if not whitespace:
        label = label.replace(" ", "_")
    return label


def wildmon(
    rng: RandomSource,
    pokedex: Sequence[Species],
    opts: Optional[WildmonSettings] = None,
) -> str:
    """
    Generate one wild encounter label.

    Args:
        rng: Source of randomness (``random()`` and ``choice()``).
        pokedex: Ordered species catalog; each entry is equally likely.
        opts: Encounter options (defaults to ``WildmonSettings()``).

    Returns:
        The formatted label, or ``MISSINGNO`` alone if the catalog is empty.
    """
    if opts is None:
        opts = WildmonSettings()

    if not pokedex:
        return MISSINGNO

    species = rng.choice(pokedex)
    gender = resolve_gender(rng, species.gender, opts.allow_genders)
    level = rng.choice(LEVEL_RANGE)

    mon = format_encounter(species.name, gender, level, opts.whitespace)
    logger.debug("Generated encounter: %s", mon)
    return mon
