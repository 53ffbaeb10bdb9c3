"""
species_data – Species catalog and gender model for wild encounters.

The catalog is an ordered list of species records embedded as YAML
(``data/species.yaml``). Index 0 is Missingno.; every other index matches
the species' National Dex number.

Provides:
  - Gender: Agender / Male / Female / Ratio(p), with display symbols and
    ratio resolution
  - SpeciesTag: special-form eligibility (Mega, MegaXY, AlolaForm)
  - Species: one catalog entry
  - parse_catalog / load_catalog: YAML → tuple of Species
  - get_pokedex: the process-wide catalog, loaded once on first use
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Tuple, TYPE_CHECKING

import yaml

from wildmon.config import MISSINGNO, SPECIES_PATH

if TYPE_CHECKING:
    from wildmon.rng_source import RandomSource

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when the species catalog data is malformed."""


# ── Gender ──────────────────────────────────────────────────────────────────

class GenderKind(str, Enum):
    AGENDER = "Agender"
    MALE = "Male"
    FEMALE = "Female"
    RATIO = "Ratio"


GENDER_SYMBOLS = {
    GenderKind.AGENDER: "",
    GenderKind.MALE: "♂",
    GenderKind.FEMALE: "♀",
    GenderKind.RATIO: "?",
}


@dataclass(frozen=True)
class Gender:
    """
    Declared or resolved gender of a species.

    ``ratio`` is only set for ``GenderKind.RATIO`` and holds the chance
    (0.0–1.0) that the species resolves to Female.
    """
    kind: GenderKind
    ratio: Optional[float] = None

    def __post_init__(self):
        if self.kind is GenderKind.RATIO and self.ratio is None:
            raise ValueError("Ratio gender requires a ratio")
        if self.kind is not GenderKind.RATIO and self.ratio is not None:
            raise ValueError(f"{self.kind.value} gender takes no ratio")

    @classmethod
    def from_ratio(cls, ratio: float) -> Gender:
        return cls(GenderKind.RATIO, float(ratio))

    @property
    def is_ratio(self) -> bool:
        return self.kind is GenderKind.RATIO

    @property
    def symbol(self) -> str:
        return GENDER_SYMBOLS[self.kind]

    def randomize(self, rng: RandomSource) -> Gender:
        """
        Resolve a Ratio into Male or Female.

        Consumes exactly one ``rng.random()`` draw for a Ratio and none
        for any other kind, which is returned unchanged.
        """
        if self.kind is not GenderKind.RATIO:
            return self
        g = rng.random()
        return FEMALE if g < self.ratio else MALE

    def __str__(self) -> str:
        if self.is_ratio:
            return f"Ratio({self.ratio})"
        return self.kind.value


AGENDER = Gender(GenderKind.AGENDER)
MALE = Gender(GenderKind.MALE)
FEMALE = Gender(GenderKind.FEMALE)

FIXED_GENDERS = {g.kind.value: g for g in (AGENDER, MALE, FEMALE)}


# ── Species ─────────────────────────────────────────────────────────────────

class SpeciesTag(str, Enum):
    MEGA = "Mega"
    MEGA_XY = "MegaXY"
    ALOLA_FORM = "AlolaForm"


@dataclass(frozen=True)
class Species:
    """One catalog entry. ``names[0]`` is the display name."""
    names: Tuple[str, ...]
    gender: Gender
    tags: Tuple[SpeciesTag, ...] = ()

    @property
    def name(self) -> str:
        return self.names[0] if self.names else MISSINGNO

    def has_tag(self, tag: SpeciesTag) -> bool:
        return tag in self.tags


# ── Parsing ─────────────────────────────────────────────────────────────────

class _CatalogLoader(yaml.SafeLoader):
    """SafeLoader that also understands the ``!Ratio 0.5`` tagged form."""


def _construct_ratio(loader: yaml.SafeLoader, node: yaml.Node) -> dict:
    return {GenderKind.RATIO.value: loader.construct_scalar(node)}


_CatalogLoader.add_constructor("!Ratio", _construct_ratio)


def parse_gender(value: Any) -> Gender:
    """
    Parse a gender descriptor.

    Accepts ``"Agender"``, ``"Male"``, ``"Female"`` or a one-key mapping
    ``{"Ratio": p}`` with 0.0 <= p <= 1.0.
    """
    if isinstance(value, str):
        gender = FIXED_GENDERS.get(value)
        if gender is None:
            raise CatalogError(f"Unknown gender: {value!r}")
        return gender

    if isinstance(value, dict) and list(value) == [GenderKind.RATIO.value]:
        raw = value[GenderKind.RATIO.value]
        if isinstance(raw, bool):
            raise CatalogError(f"Gender ratio must be a number, got {raw!r}")
        try:
            ratio = float(raw)
        except (TypeError, ValueError):
            raise CatalogError(f"Gender ratio must be a number, got {raw!r}") from None
        if not 0.0 <= ratio <= 1.0:
            raise CatalogError(f"Gender ratio out of range [0, 1]: {ratio}")
        return Gender.from_ratio(ratio)

    raise CatalogError(f"Malformed gender descriptor: {value!r}")


def parse_species(record: Any) -> Species:
    """Build a Species from one decoded catalog record."""
    if not isinstance(record, dict):
        raise CatalogError(f"Species record must be a mapping, got {type(record).__name__}")

    names = record.get("names")
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise CatalogError(f"'names' must be a list of strings, got {names!r}")

    if "gender" not in record:
        raise CatalogError(f"Species {names!r} has no 'gender'")
    gender = parse_gender(record["gender"])

    raw_tags = record.get("tags") or []
    if not isinstance(raw_tags, list):
        raise CatalogError(f"'tags' must be a list, got {raw_tags!r}")
    try:
        tags = tuple(SpeciesTag(t) for t in raw_tags)
    except ValueError as exc:
        raise CatalogError(f"Unknown species tag in {raw_tags!r}") from exc

    return Species(names=tuple(names), gender=gender, tags=tags)


def parse_catalog(text: str) -> Tuple[Species, ...]:
    """Parse a YAML document holding a list of species records."""
    try:
        data = yaml.load(text, Loader=_CatalogLoader)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid catalog YAML: {exc}") from exc

    if data is None:
        return ()
    if not isinstance(data, list):
        raise CatalogError(f"Catalog must be a list of species, got {type(data).__name__}")

    species = []
    for index, record in enumerate(data):
        try:
            species.append(parse_species(record))
        except CatalogError as exc:
            raise CatalogError(f"Species #{index}: {exc}") from exc
    return tuple(species)


def load_catalog(path: Path = SPECIES_PATH) -> Tuple[Species, ...]:
    """Read and parse a catalog file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read species catalog {path}: {exc}") from exc

    try:
        catalog = parse_catalog(text)
    except CatalogError as exc:
        raise CatalogError(f"{path}: {exc}") from exc

    logger.info("Loaded %d species from %s", len(catalog), path)
    return catalog


# ── Module-level singleton ──────────────────────────────────────────────────

_pokedex: Optional[Tuple[Species, ...]] = None
_pokedex_lock = threading.Lock()


def get_pokedex() -> Tuple[Species, ...]:
    """
    Return the embedded catalog, loading it on first use.

    Loading runs exactly once even under concurrent first access; later
    calls return the shared immutable tuple without locking.
    """
    global _pokedex
    if _pokedex is None:
        with _pokedex_lock:
            if _pokedex is None:
                _pokedex = load_catalog()
    return _pokedex


def reset_pokedex() -> None:
    """Drop the cached catalog (useful for testing)."""
    global _pokedex
    with _pokedex_lock:
        _pokedex = None


# ── Helper functions ────────────────────────────────────────────────────────

def get_species(index: int) -> Optional[Species]:
    pokedex = get_pokedex()
    if 0 <= index < len(pokedex):
        return pokedex[index]
    return None


def get_species_by_name(name: str) -> Optional[Species]:
    wanted = name.lower()
    for species in get_pokedex():
        if any(n.lower() == wanted for n in species.names):
            return species
    return None


def species_with_tag(tag: SpeciesTag) -> Tuple[Species, ...]:
    return tuple(s for s in get_pokedex() if s.has_tag(tag))
