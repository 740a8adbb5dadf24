"""Command line entry: shuffle a fresh deck and list it."""

from __future__ import annotations

import argparse
import random

from mutiny.deck import Deck


def main(argv=None) -> int:
    """Shuffle a new deck and print one card per line."""
    parser = argparse.ArgumentParser(prog="mutiny", description="Shuffle and list the card deck.")
    parser.add_argument("--seed", type=int, default=None, help="seed for a repeatable shuffle")
    args = parser.parse_args(argv)

    deck = Deck(random.Random(args.seed))
    deck.shuffle()
    deck.print()
    return 0