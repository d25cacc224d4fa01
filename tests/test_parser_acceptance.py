import pytest

from dnd_dice_engine.models import DieKind, RollRequest
from dnd_dice_engine.parser import format_notation, parse, validate_die_kind


@pytest.mark.parametrize(
    ("notation", "request_"),
    [
        ("1d20", RollRequest(count=1, die=20, modifier=0)),
        ("d20", RollRequest(count=1, die=20, modifier=0)),
        ("D20", RollRequest(count=1, die=20, modifier=0)),
        ("2d6+3", RollRequest(count=2, die=6, modifier=3)),
        ("4d4-1", RollRequest(count=4, die=4, modifier=-1)),
        ("d100", RollRequest(count=1, die=100, modifier=0)),
        ("  3d8+0  ", RollRequest(count=3, die=8, modifier=0)),
        ("1d7", RollRequest(count=1, die=7, modifier=0)),
        ("10d10-12", RollRequest(count=10, die=10, modifier=-12)),
    ],
)
def test_parse_acceptance(notation, request_):
    assert parse(notation) == request_


@pytest.mark.parametrize(
    ("request_", "notation"),
    [
        (RollRequest(count=1, die=20), "1d20"),
        (RollRequest(count=2, die=6, modifier=3), "2d6+3"),
        (RollRequest(count=4, die=4, modifier=-1), "4d4-1"),
    ],
)
def test_format_notation(request_, notation):
    assert format_notation(request_) == notation


def test_strict_parse_accepts_standard_dice():
    for kind in DieKind:
        request = parse(f"2{kind.tag}", strict=True)
        assert request.kind is kind
        assert validate_die_kind(request) is kind


def test_homebrew_die_has_no_kind():
    assert parse("1d7").kind is None


def test_die_kind_tags():
    assert DieKind.D20.tag == "d20"
    assert DieKind.from_tag("D100") is DieKind.D100
    with pytest.raises(ValueError):
        DieKind.from_tag("d7")
