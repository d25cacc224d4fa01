from __future__ import annotations

import logging
import sys
from typing import Any

from mcp.server.fastmcp import FastMCP

from .character import ability_modifier, skill_bonus
from .config import load_settings
from .dice import DiceError, format_roll_result, resolve_mode, roll, roll_ability_check, roll_ability_score
from .dice import roll_d20 as roll_d20_check
from .models import RollResult
from .parser import parse, validate_dice_limit


logger = logging.getLogger(__name__)

settings = load_settings()

mcp = FastMCP(settings.server_name)


def _payload(result: RollResult) -> dict[str, Any]:
    out = result.to_dict()
    out["display"] = format_roll_result(result)
    return out


@mcp.tool()
def roll_dice(notation: str) -> dict[str, Any]:
    """Roll dice written in standard notation, e.g. '1d20', '2d6+3' or '4d4-1'.

    Raises a hard error (exception) on invalid input.
    """
    try:
        request = parse(notation, strict=settings.strict)
        validate_dice_limit(request, max_dice=settings.max_dice, max_sides=settings.max_sides)
        return _payload(roll(request))
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


@mcp.tool()
def roll_d20(modifier: int = 0, advantage: bool = False, disadvantage: bool = False) -> dict[str, Any]:
    """Roll a d20 plus a modifier. Advantage and disadvantage together cancel out."""
    try:
        return _payload(roll_d20_check(resolve_mode(advantage, disadvantage), modifier))
    except DiceError as e:
        raise ValueError(str(e)) from None


@mcp.tool()
def ability_check(
    score: int,
    proficient: bool = False,
    level: int = 1,
    advantage: bool = False,
    disadvantage: bool = False,
) -> dict[str, Any]:
    """Roll an ability, skill or saving-throw check from a raw ability score."""
    try:
        bonus = skill_bonus(score, proficient=proficient, level=level)
        result = roll_ability_check(bonus, resolve_mode(advantage, disadvantage))
    except DiceError as e:
        raise ValueError(str(e)) from None

    out = _payload(result)
    out["ability_modifier"] = ability_modifier(score)
    return out


@mcp.tool()
def roll_ability_scores(count: int = 6) -> list[dict[str, Any]]:
    """Generate ability scores by rolling 4d6 and dropping the lowest die, once per score."""
    if not 1 <= count <= 6:
        raise ValueError(f"count must be between 1 and 6, got {count}")

    scores = []
    for _ in range(count):
        out = _payload(roll_ability_score())
        out["ability_modifier"] = ability_modifier(out["total"])
        scores.append(out)
    return scores


def run() -> None:
    # stdout carries the stdio transport, so logs go to stderr.
    logging.basicConfig(stream=sys.stderr, level=settings.log_level)
    logger.info("starting %s (strict dice: %s)", settings.server_name, settings.strict)
    mcp.run()


if __name__ == "__main__":
    run()
