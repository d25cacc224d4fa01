"""Character-sheet arithmetic the dice engine's callers need.

The engine itself only ever sees a plain integer modifier; these helpers turn
ability scores, levels and proficiencies into that integer.
"""

from __future__ import annotations

from typing import Literal, TypeAlias


Ability: TypeAlias = Literal["STR", "DEX", "CON", "INT", "WIS", "CHA"]

ABILITIES: tuple[Ability, ...] = ("STR", "DEX", "CON", "INT", "WIS", "CHA")

SKILLS: dict[str, Ability] = {
    "Acrobatics": "DEX",
    "Animal Handling": "WIS",
    "Arcana": "INT",
    "Athletics": "STR",
    "Deception": "CHA",
    "History": "INT",
    "Insight": "WIS",
    "Intimidation": "CHA",
    "Investigation": "INT",
    "Medicine": "WIS",
    "Nature": "INT",
    "Perception": "WIS",
    "Performance": "CHA",
    "Persuasion": "CHA",
    "Religion": "INT",
    "Sleight of Hand": "DEX",
    "Stealth": "DEX",
    "Survival": "WIS",
}

MAX_LEVEL = 20


def ability_modifier(score: int) -> int:
    # Floor division rounds toward negative infinity: score 9 -> -1.
    return (score - 10) // 2


def proficiency_bonus(level: int) -> int:
    if not 1 <= level <= MAX_LEVEL:
        raise ValueError(f"Character level must be between 1 and {MAX_LEVEL}, got {level}")
    return (level - 1) // 4 + 2


def skill_bonus(score: int, *, proficient: bool = False, level: int = 1) -> int:
    """Ability modifier, plus the proficiency bonus when proficient."""
    bonus = ability_modifier(score)
    if proficient:
        bonus += proficiency_bonus(level)
    return bonus


# Saving throws add proficiency exactly the way skills do.
saving_throw_bonus = skill_bonus


def skill_ability(skill: str) -> Ability:
    try:
        return SKILLS[skill]
    except KeyError:
        raise ValueError(f"Unknown skill {skill!r}") from None


def passive_score(bonus: int) -> int:
    """Passive Perception, Investigation or Insight for a given check bonus."""
    return 10 + bonus
