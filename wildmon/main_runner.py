"""
main_runner – Command-line entry point for wildmon.

Usage:
    python -m wildmon.main_runner
    python -m wildmon.main_runner --count 5 --seed 0x1234
    python -m wildmon.main_runner -g female -g agender --whitespace
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional, Sequence

from wildmon.config import DEFAULT_ENCOUNTER_COUNT, LOG_FORMAT
from wildmon.encounter import WildmonSettings, wildmon
from wildmon.rng_source import LCRNGRandom, RandomSource
from wildmon.species_data import AGENDER, FEMALE, MALE, get_pokedex

logger = logging.getLogger(__name__)

GENDER_CHOICES = {
    "male": MALE,
    "female": FEMALE,
    "agender": AGENDER,
}


def build_settings(args: argparse.Namespace) -> WildmonSettings:
    settings = WildmonSettings(canon=args.canon, whitespace=args.whitespace)
    for name in args.allow_gender or []:
        settings.allow_gender(GENDER_CHOICES[name])
    return settings


def build_rng(seed: Optional[int]) -> RandomSource:
    if seed is None:
        return random.Random()
    logger.debug("Using LCRNG seed 0x%08X", seed)
    return LCRNGRandom(seed)


def generate(count: int, rng: RandomSource, settings: WildmonSettings) -> List[str]:
    pokedex = get_pokedex()
    return [wildmon(rng, pokedex, settings) for _ in range(count)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate random wild Pokémon encounters",
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=DEFAULT_ENCOUNTER_COUNT,
        help=f"Number of encounters to generate (default: {DEFAULT_ENCOUNTER_COUNT})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=lambda x: int(x, 0),
        default=None,
        help="LCRNG seed, decimal or hex, for reproducible output",
    )
    parser.add_argument(
        "--allow-gender", "-g",
        action="append",
        choices=list(GENDER_CHOICES),
        help="Allowed gender in the output (repeatable; default: any)",
    )
    parser.add_argument(
        "--whitespace",
        action="store_true",
        help="Keep spaces instead of replacing them with underscores",
    )
    parser.add_argument(
        "--no-canon",
        dest="canon",
        action="store_false",
        help="Disable canon mode (currently has no effect)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    settings = build_settings(args)
    rng = build_rng(args.seed)

    for mon in generate(args.count, rng, settings):
        print(mon)


if __name__ == "__main__":
    main()
