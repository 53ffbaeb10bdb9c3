"""
Global configuration for wildmon.
All paths, constants, and tunable parameters live here.
"""

from pathlib import Path

# ── Paths ────────────────────────────────────────────────────────────────────
PACKAGE_DIR = Path(__file__).resolve().parent
ROOT_DIR = PACKAGE_DIR.parent
DATA_DIR = PACKAGE_DIR / "data"
SPECIES_PATH = DATA_DIR / "species.yaml"

# ── Sentinel ─────────────────────────────────────────────────────────────────
# Name of catalog entry 0, fallback for nameless species, and the whole label
# returned for an empty catalog.
MISSINGNO = "Missingno."

# ── Encounter ────────────────────────────────────────────────────────────────
LEVEL_MIN = 1
LEVEL_MAX = 100
LEVEL_RANGE = range(LEVEL_MIN, LEVEL_MAX + 1)

# ── RNG Constants (Gen 3 LCRNG) ──────────────────────────────────────────────
LCRNG_MULT = 0x41C64E6D
LCRNG_ADD = 0x00006073
LCRNG_MOD = 0x100000000  # 2^32

# ── CLI ──────────────────────────────────────────────────────────────────────
DEFAULT_ENCOUNTER_COUNT = 1
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
