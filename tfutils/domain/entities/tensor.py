"""Tensor entity - framework-independent abstraction."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Tensor(Protocol):
    """Framework-independent tensor/array abstraction."""

    @property
    def shape(self):
        """
        Get the tensor's shape.

        Returns:
            shape: Sequence (tuple, TensorShape, ...) with the size of each dimension.
        """
        ...
