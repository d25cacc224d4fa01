from dnd_dice_engine.dice import roll
from dnd_dice_engine.parser import parse


def test_parse_is_deterministic():
    assert parse("4d4-1") == parse("4d4-1")


def test_roll_is_deterministic_for_same_draws(scripted):
    request = parse("3d6+2")
    a = roll(request, scripted([6, 1, 4], sides=6))
    b = roll(request, scripted([6, 1, 4], sides=6))
    assert a == b
