import pytest

from mutiny.cli import main
from mutiny.deck import Deck


def _run(capsys, argv):
    code = main(argv)
    return code, capsys.readouterr().out.splitlines()


def test_prints_every_card(capsys):
    code, lines = _run(capsys, ["--seed", "1"])
    assert code == 0
    assert len(lines) == len(Deck())


def test_output_is_a_permutation_of_the_deck(capsys):
    _, lines = _run(capsys, ["--seed", "7"])
    assert sorted(lines) == sorted(Deck().lines())


def test_same_seed_same_order(capsys):
    _, first = _run(capsys, ["--seed", "42"])
    _, second = _run(capsys, ["--seed", "42"])
    assert first == second


def test_cult_uprising_cards_present(capsys):
    _, lines = _run(capsys, ["--seed", "3"])
    assert lines.count("cult, cult uprising") == 6


def test_bad_seed_is_rejected():
    with pytest.raises(SystemExit):
        main(["--seed", "not-a-number"])