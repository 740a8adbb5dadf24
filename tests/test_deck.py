import io
import random
from collections import Counter

import pytest

from mutiny.deck import CARD_AMOUNTS, Action, Card, Deck, Navigation


def test_new_deck_holds_every_card_amount():
    deck = Deck(random.Random(0))
    assert Counter(deck.draw_deck) == Counter(CARD_AMOUNTS)
    assert len(deck) == sum(CARD_AMOUNTS.values())
    assert deck.sea_deck == []


def test_new_deck_is_sorted():
    deck = Deck(random.Random(0))
    assert deck.draw_deck == sorted(deck.draw_deck)
    assert deck.draw_deck[0] == Card(Navigation.PIRATE, Action.DRUNK)
    assert deck.draw_deck[-1] == Card(Navigation.CULT, Action.CULT_UPRISING)


def test_card_ordering_navigation_first():
    assert Card(Navigation.PIRATE, Action.CULT_UPRISING) < Card(Navigation.SAILOR, Action.DRUNK)
    assert Card(Navigation.PIRATE, Action.DRUNK) < Card(Navigation.PIRATE, Action.MERMAID)
    assert not Card(Navigation.CULT, Action.DRUNK) < Card(Navigation.CULT, Action.DRUNK)


def test_card_text():
    assert str(Card(Navigation.CULT, Action.CULT_UPRISING)) == "cult, cult uprising"
    assert str(Card(Navigation.SAILOR, Action.DISARMED)) == "sailor, disarmed"


def test_shuffle_keeps_the_same_cards():
    deck = Deck(random.Random(42))
    deck.shuffle()
    assert Counter(deck.draw_deck) == Counter(CARD_AMOUNTS)
    assert len(deck) == deck.total_cards


def test_shuffle_is_deterministic_for_a_seed():
    first = Deck(random.Random(7))
    second = Deck(random.Random(7))
    first.shuffle()
    second.shuffle()
    assert first.draw_deck == second.draw_deck


def test_swap_exchanges_cards():
    deck = Deck(random.Random(0))
    a, b = deck.draw_deck[0], deck.draw_deck[-1]
    deck.swap(0, len(deck) - 1)
    assert deck.draw_deck[0] == b
    assert deck.draw_deck[-1] == a


@pytest.mark.parametrize("i, j", [(0, 24), (-1, 0), (100, 3)])
def test_swap_out_of_range(i, j):
    deck = Deck(random.Random(0))
    with pytest.raises(IndexError):
        deck.swap(i, j)


def test_print_writes_one_line_per_card():
    deck = Deck(random.Random(0))
    buffer = io.StringIO()
    deck.print(buffer)
    written = buffer.getvalue().splitlines()
    assert written == list(deck.lines())
    assert written[0] == "pirate, drunk"
    assert len(written) == len(deck)


def test_print_defaults_to_stdout(capsys):
    deck = Deck(random.Random(0))
    deck.print()
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "cult, cult uprising"