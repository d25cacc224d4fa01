from collections.abc import Callable

import pytest


class ScriptedSource:
    """Random source that yields chosen faces in order, then fails loudly."""

    def __init__(self, faces: list[int], sides: int):
        # Midpoint of each face's slice of [0, 1) so floor(v * sides) + 1 == face.
        self._values = [(face - 0.5) / sides for face in faces]
        self.calls = 0

    def __call__(self) -> float:
        if self.calls >= len(self._values):
            raise AssertionError("random source drawn more times than scripted")
        value = self._values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted() -> Callable[..., ScriptedSource]:
    def make(faces: list[int], sides: int = 20) -> ScriptedSource:
        return ScriptedSource(faces, sides)

    return make
