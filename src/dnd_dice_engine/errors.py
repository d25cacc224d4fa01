from __future__ import annotations


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, no roll performed)."""


class ParseError(DiceError):
    """Dice notation did not match ``[count]d<sides>[+|-modifier]``."""
