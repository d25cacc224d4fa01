import pytest

from dnd_dice_engine.character import (
    ABILITIES,
    SKILLS,
    ability_modifier,
    passive_score,
    proficiency_bonus,
    saving_throw_bonus,
    skill_ability,
    skill_bonus,
)


@pytest.mark.parametrize(
    ("score", "modifier"),
    [(1, -5), (3, -4), (8, -1), (9, -1), (10, 0), (11, 0), (12, 1), (15, 2), (20, 5), (30, 10)],
)
def test_ability_modifier(score, modifier):
    assert ability_modifier(score) == modifier


@pytest.mark.parametrize(
    ("level", "bonus"),
    [(1, 2), (4, 2), (5, 3), (8, 3), (9, 4), (13, 5), (17, 6), (20, 6)],
)
def test_proficiency_bonus(level, bonus):
    assert proficiency_bonus(level) == bonus


@pytest.mark.parametrize("level", [0, 21, -3])
def test_proficiency_bonus_rejects_bad_level(level):
    with pytest.raises(ValueError):
        proficiency_bonus(level)


def test_skill_bonus():
    assert skill_bonus(14) == 2
    assert skill_bonus(14, proficient=True, level=5) == 5
    assert saving_throw_bonus(8, proficient=True, level=1) == 1


def test_skill_table():
    assert len(SKILLS) == 18
    assert set(SKILLS.values()) <= set(ABILITIES)
    assert skill_ability("Stealth") == "DEX"
    with pytest.raises(ValueError):
        skill_ability("Juggling")


def test_passive_score():
    assert passive_score(skill_bonus(12, proficient=True, level=1)) == 13
