from __future__ import annotations

import logging
import re

from .errors import DiceError, ParseError
from .models import ALLOWED_DIE_SIDES, DieKind, RollRequest


logger = logging.getLogger(__name__)

_NOTATION_RE = re.compile(
    r"(?P<count>[0-9]+)?d(?P<sides>[0-9]+)(?P<mod>[+-][0-9]+)?",
    re.IGNORECASE,
)


def parse(notation: str, *, strict: bool = False) -> RollRequest:
    """Parse ``[count]d<sides>[+|-modifier]`` into a RollRequest.

    Surrounding whitespace is ignored; whitespace inside the notation is not.
    Any positive number of sides is accepted unless ``strict`` is set, in
    which case only d4, d6, d8, d10, d12, d20 and d100 are.

    Raises ParseError for anything that does not match.
    """
    if not isinstance(notation, str):
        raise ParseError(
            f"[UNPARSEABLE_INPUT] Notation must be a string, got {type(notation).__name__}. Example: '2d6+3'."
        )

    text = notation.strip()
    if not text:
        raise ParseError("[UNPARSEABLE_INPUT] Empty input. Example: 'd20' or '2d6+3'.")

    m = _NOTATION_RE.fullmatch(text)
    if not m:
        raise ParseError(
            f"[UNPARSEABLE_INPUT] Could not understand {notation!r}. Example: '1d20', '2d6+3' or '4d4-1'."
        )

    count_str = m.group("count")
    count = int(count_str) if count_str else 1
    sides = int(m.group("sides"))
    modifier = int(m.group("mod") or 0)

    if count <= 0:
        raise ParseError(
            "[UNPARSEABLE_INPUT] Dice count must be a positive integer. Example: '2d6+3'."
        )
    if sides <= 0:
        raise ParseError(
            "[UNPARSEABLE_INPUT] Die sides must be a positive integer. Example: '1d20'."
        )

    request = RollRequest(count=count, die=sides, modifier=modifier)
    if strict:
        validate_die_kind(request)

    logger.debug("parsed %r -> %s", notation, request)
    return request


def validate_die_kind(request: RollRequest) -> DieKind:
    """Opt-in check that the request uses one of the standard tabletop dice."""
    if request.die not in ALLOWED_DIE_SIDES:
        raise ParseError(
            "[INVALID_DIE] Only d4,d6,d8,d10,d12,d20,d100 are supported. Example: '2d10+4'."
        )
    return DieKind(request.die)


def format_notation(request: RollRequest) -> str:
    """Canonical notation for a request, e.g. ``2d6+3`` or ``4d4-1``."""
    expr = f"{request.count}d{request.die}"
    if request.modifier:
        expr += f"{request.modifier:+d}"
    return expr


def validate_dice_limit(request: RollRequest, *, max_dice: int, max_sides: int) -> RollRequest:
    """Reject requests too large to roll, e.g. a typo like ``999999999d6``."""
    if request.count > max_dice:
        raise DiceError(
            f"[TOO_MANY_DICE] At most {max_dice} dice per roll, got {request.count}. Example: '8d6'."
        )
    if request.die > max_sides:
        raise DiceError(
            f"[TOO_MANY_DICE] Dice have at most {max_sides} sides, got d{request.die}. Example: '1d100'."
        )
    return request
