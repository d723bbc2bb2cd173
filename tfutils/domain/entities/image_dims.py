"""Image dimensions entity."""
from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class ImageDims:
    """
    Image dimensions resolved from a tensor shape.

    Behaves like the tuple ``(width, height, channels)`` for unpacking,
    indexing and comparison against plain tuples.
    """

    width: int
    height: int
    channels: int

    def __iter__(self):
        return iter(astuple(self))

    def __getitem__(self, index: int) -> int:
        return astuple(self)[index]

    def __len__(self) -> int:
        return 3

    def __eq__(self, other) -> bool:
        if isinstance(other, ImageDims):
            return astuple(self) == astuple(other)
        if isinstance(other, (tuple, list)):
            return astuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(astuple(self))
