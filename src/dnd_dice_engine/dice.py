from __future__ import annotations

import logging
import math
import secrets

from .errors import DiceError
from .models import MODES, Critical, Mode, RandomSource, RollRequest, RollResult
from .parser import parse


logger = logging.getLogger(__name__)

_D20 = 20

# 4d6, drop the lowest.
_ABILITY_DICE = 4
_ABILITY_DIE = 6
_ABILITY_KEEP = 3


def default_random_source() -> RandomSource:
    """Uniform floats in [0, 1) from the OS generator."""
    return secrets.SystemRandom().random


def draw(sides: int, random_source: RandomSource) -> int:
    value = random_source()
    if not 0.0 <= value < 1.0:
        raise DiceError(
            f"[INVALID_RANDOM_SOURCE] Random source returned {value!r}; expected a float in [0, 1)."
        )
    return math.floor(value * sides) + 1


def _critical(face: int) -> Critical | None:
    if face == _D20:
        return "success"
    if face == 1:
        return "fail"
    return None


def roll(request: RollRequest, random_source: RandomSource | None = None) -> RollResult:
    """Roll ``request.count`` dice and add the modifier once.

    Only a lone d20 can be critical; a 1 or 20 inside a larger pool is just
    a face. Given the same sequence of draws the result is always the same.
    """
    source = default_random_source() if random_source is None else random_source

    results = tuple(draw(request.die, source) for _ in range(request.count))
    total = sum(results) + request.modifier

    critical = None
    if request.count == 1 and request.die == _D20:
        critical = _critical(results[0])

    logger.debug("rolled %dd%d: %s => %d", request.count, request.die, results, total)
    return RollResult(
        count=request.count,
        die=request.die,
        modifier=request.modifier,
        results=results,
        total=total,
        critical=critical,
    )


def roll_notation(
    notation: str,
    random_source: RandomSource | None = None,
    *,
    strict: bool = False,
) -> RollResult:
    """Parse, validate, then roll. Raises ParseError for invalid input."""
    return roll(parse(notation, strict=strict), random_source)


def resolve_mode(advantage: bool = False, disadvantage: bool = False) -> Mode:
    # Advantage and disadvantage together cancel to a plain roll.
    if advantage and disadvantage:
        return "normal"
    if advantage:
        return "advantage"
    if disadvantage:
        return "disadvantage"
    return "normal"


def roll_d20(
    mode: Mode = "normal",
    modifier: int = 0,
    random_source: RandomSource | None = None,
) -> RollResult:
    """Roll a d20 check, keeping the higher or lower of two for (dis)advantage.

    A normal roll draws exactly once. Advantage and disadvantage draw exactly
    twice; both faces are reported in ``results`` and critical is judged on
    the kept face only, so a discarded 20 never counts as a success.
    """
    if mode not in MODES:
        raise DiceError(
            f"[INVALID_MODE] Unknown roll mode {mode!r}. Use one of: {', '.join(MODES)}."
        )

    if mode == "normal":
        return roll(RollRequest(count=1, die=_D20, modifier=modifier), random_source)

    source = default_random_source() if random_source is None else random_source
    a = draw(_D20, source)
    b = draw(_D20, source)
    kept = max(a, b) if mode == "advantage" else min(a, b)

    logger.debug("d20 %s: rolls [%d, %d] -> keep %d", mode, a, b, kept)
    return RollResult(
        count=2,
        die=_D20,
        modifier=modifier,
        results=(a, b),
        total=kept + modifier,
        critical=_critical(kept),
        mode=mode,
        kept=(kept,),
    )


def roll_ability_check(
    modifier: int,
    mode: Mode = "normal",
    random_source: RandomSource | None = None,
) -> RollResult:
    """Skill check or saving throw: a d20 plus the ability's modifier."""
    return roll_d20(mode=mode, modifier=modifier, random_source=random_source)


def roll_ability_score(random_source: RandomSource | None = None) -> RollResult:
    """Roll 4d6 and keep the highest three, the usual way to generate a score."""
    source = default_random_source() if random_source is None else random_source

    results = tuple(draw(_ABILITY_DIE, source) for _ in range(_ABILITY_DICE))
    kept = tuple(sorted(results, reverse=True)[:_ABILITY_KEEP])

    logger.debug("ability score: rolls %s -> keep %s", results, kept)
    return RollResult(
        count=_ABILITY_DICE,
        die=_ABILITY_DIE,
        modifier=0,
        results=results,
        total=sum(kept),
        mode="drop_lowest",
        kept=kept,
    )


def _faces(faces: tuple[int, ...]) -> str:
    return "[" + ", ".join(str(f) for f in faces) + "]"


def format_roll_result(result: RollResult) -> str:
    modifier = f"{result.modifier:+d}" if result.modifier else ""

    if result.mode == "drop_lowest" and result.kept is not None:
        return f"{_faces(result.results)} (drop lowest) {_faces(result.kept)}{modifier} = {result.total}"

    if result.mode in ("advantage", "disadvantage"):
        short = "adv" if result.mode == "advantage" else "disadv"
        return f"{_faces(result.results)} ({short}) {result.natural}{modifier} = {result.total}"

    if result.natural is not None:
        return f"{result.natural}{modifier} = {result.total}"

    return f"{_faces(result.results)}{modifier} = {result.total}"
