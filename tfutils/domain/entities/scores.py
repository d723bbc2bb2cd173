"""Score entities produced by top-k selection."""
from typing import NamedTuple


class ScoreEntry(NamedTuple):
    """A score together with its position in the original sequence."""

    score: float
    index: int


class TopKResult(NamedTuple):
    """
    The k highest scores, in descending order.

    ``indices[i]`` is the position of ``values[i]`` in the input sequence.
    Unpacks as ``indices, values = result``.
    """

    indices: list[int]
    values: list[float]

    def entries(self) -> list[ScoreEntry]:
        """Return the result as a list of ScoreEntry pairs."""
        return [ScoreEntry(v, i) for i, v in zip(self.indices, self.values)]
