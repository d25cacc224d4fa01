from .character import ability_modifier, proficiency_bonus
from .dice import (
    default_random_source,
    format_roll_result,
    resolve_mode,
    roll,
    roll_ability_check,
    roll_d20,
    roll_ability_score,
    roll_notation,
)
from .errors import DiceError, ParseError
from .models import DieKind, RollRequest, RollResult
from .parser import format_notation, parse

__all__ = [
    "DiceError",
    "DieKind",
    "ParseError",
    "RollRequest",
    "RollResult",
    "ability_modifier",
    "default_random_source",
    "format_notation",
    "format_roll_result",
    "parse",
    "proficiency_bonus",
    "resolve_mode",
    "roll",
    "roll_ability_check",
    "roll_d20",
    "roll_ability_score",
    "roll_notation",
]
