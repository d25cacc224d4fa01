from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Literal, TypeAlias

from .errors import DiceError


class DieKind(IntEnum):
    D4 = 4
    D6 = 6
    D8 = 8
    D10 = 10
    D12 = 12
    D20 = 20
    D100 = 100

    @property
    def tag(self) -> str:
        return f"d{self.value}"

    @classmethod
    def from_tag(cls, tag: str) -> "DieKind":
        """Look up a die by its tag, e.g. ``"d20"`` -> ``DieKind.D20``."""
        try:
            return _TAG_TO_KIND[tag.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown die tag {tag!r}") from None


_TAG_TO_KIND: dict[str, DieKind] = {kind.tag: kind for kind in DieKind}

ALLOWED_DIE_SIDES: frozenset[int] = frozenset(kind.value for kind in DieKind)

Mode: TypeAlias = Literal["normal", "advantage", "disadvantage"]
Critical: TypeAlias = Literal["success", "fail"]
ResultMode: TypeAlias = Literal["normal", "advantage", "disadvantage", "drop_lowest"]

# Must return a float in [0, 1). Thread safety is the source's concern.
RandomSource: TypeAlias = Callable[[], float]

MODES: tuple[Mode, ...] = ("normal", "advantage", "disadvantage")


@dataclass(frozen=True)
class RollRequest:
    count: int
    die: int
    modifier: int = 0

    def __post_init__(self) -> None:
        if self.count < 1:
            raise DiceError(
                "[INVALID_REQUEST] Dice count must be a positive integer. Example: '2d6+3'."
            )
        if self.die < 1:
            raise DiceError(
                "[INVALID_REQUEST] Die sides must be a positive integer. Example: '1d20'."
            )

    @property
    def kind(self) -> DieKind | None:
        """The canonical die for ``die``, or None for homebrew sizes like d7."""
        return DieKind(self.die) if self.die in ALLOWED_DIE_SIDES else None


@dataclass(frozen=True)
class RollResult:
    """Outcome of one roll.

    ``results`` holds every face drawn, in draw order. When only some faces
    count toward the total (advantage, disadvantage, dropping the lowest of
    4d6) ``kept`` holds those faces.
    """

    count: int
    die: int
    modifier: int
    results: tuple[int, ...]
    total: int
    critical: Critical | None = None
    mode: ResultMode = "normal"
    kept: tuple[int, ...] | None = None

    @property
    def natural(self) -> int | None:
        """The single unmodified face the total was built from, if there is one."""
        faces = self.results if self.kept is None else self.kept
        if len(faces) == 1:
            return faces[0]
        return None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "count": self.count,
            "die": f"d{self.die}",
            "sides": self.die,
            "modifier": self.modifier,
            "results": list(self.results),
            "total": self.total,
            "mode": self.mode,
        }
        if self.kept is not None:
            out["kept"] = list(self.kept)
        if self.natural is not None:
            out["natural"] = self.natural
        if self.critical is not None:
            out["critical"] = self.critical
        return out
