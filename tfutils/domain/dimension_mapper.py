"""
Dimension Mapper.

This module maps the axes of a tensor onto the semantic axes of an image
(width, height, channels). Which tensor axis plays which role is given by a
short role spec: one character per role, in (width, height, channels) order.

Role spec characters
--------------------
``'0'``-``'9'``
    Index of the tensor axis to use for the role.
``'x'``, ``'y'``, ``'z'``
    No axis for the role; its size resolves to 1. Role specs shorter than
    three characters are padded on the right with ``'z'``.

Characters are decoded with ``ord(c) - ord('0')``, so the placeholders decode
to indices (72 to 74) that are out of range for any real tensor.

Rank adjustment
---------------
Role specs are written for rank-3 tensors. For smaller ranks the decoded
indices are rewritten before resolution:

======  ==========================================  =====================
rank    condition                                   (width, height, ch)
======  ==========================================  =====================
>= 3    always                                      decoded, unchanged
2       decoded height index > decoded width index  (0, 1, out of range)
2       otherwise                                   (1, 0, out of range)
1       always                                      (out of range, h, c)
0       always                                      all out of range
======  ==========================================  =====================

Any index >= rank resolves to a size of 1.
"""
from collections.abc import Sequence

from tfutils.domain.entities.image_dims import ImageDims
from tfutils.domain.errors import InvalidArgument

ROLE_SPEC_LENGTH = 3
ROLE_SPEC_FILLER = "z"
ROLE_PLACEHOLDERS = frozenset("xyz")

# Decoded value of the filler; larger than any real tensor rank.
OUT_OF_RANGE = ord(ROLE_SPEC_FILLER) - ord("0")


def decode_role_spec(role_spec: str) -> tuple[int, int, int]:
    """
    Decode a role spec into (width, height, channel) axis indices.

    Parameters
    ----------
    role_spec : str
        Up to three characters, each a digit or one of 'x', 'y', 'z'.

    Returns
    -------
    tuple[int, int, int]
        Decoded axis indices. Placeholders decode to out-of-range indices.

    Raises
    ------
    InvalidArgument
        If the role spec is not a string, is longer than three characters,
        or contains any other character.
    """
    if not isinstance(role_spec, str):
        raise InvalidArgument(f"Role spec must be a string. Got: {role_spec!r}")
    if len(role_spec) > ROLE_SPEC_LENGTH:
        raise InvalidArgument(
            f"Role spec must have at most {ROLE_SPEC_LENGTH} characters. "
            f"Got: '{role_spec}'"
        )

    padded = role_spec.ljust(ROLE_SPEC_LENGTH, ROLE_SPEC_FILLER)
    for char in padded:
        if not ("0" <= char <= "9" or char in ROLE_PLACEHOLDERS):
            raise InvalidArgument(
                f"Invalid character '{char}' in role spec '{role_spec}'. "
                "Expected a digit 0-9 or one of 'x', 'y', 'z'."
            )

    width_index, height_index, channel_index = (ord(c) - ord("0") for c in padded)
    return width_index, height_index, channel_index


def adjust_indices_for_rank(
    indices: tuple[int, int, int], rank: int
) -> tuple[int, int, int]:
    """
    Rewrite decoded axis indices for tensors of rank below three.

    See the module docstring for the branch table.
    """
    width_index, height_index, channel_index = indices
    if rank == 2:
        if height_index > width_index:
            return 0, 1, OUT_OF_RANGE
        return 1, 0, OUT_OF_RANGE
    if rank == 1:
        return OUT_OF_RANGE, height_index, channel_index
    return indices


def map_tensor_to_image_dims(
    tensor_shape: Sequence[int], role_spec: str = "012"
) -> ImageDims:
    """
    Resolve the image (width, height, channels) of a tensor shape.

    Parameters
    ----------
    tensor_shape : Sequence[int]
        Size of each tensor axis. Its length is the tensor rank.
    role_spec : str
        Which axis to use for width, height and channels, e.g. "012" or "120".

    Returns
    -------
    ImageDims
        Image dimensions. Roles without an axis in range resolve to 1.

    Raises
    ------
    InvalidArgument
        If the role spec is malformed.
    """
    indices = decode_role_spec(role_spec)
    shape = tuple(int(size) for size in tensor_shape)
    rank = len(shape)

    indices = adjust_indices_for_rank(indices, rank)
    width, height, channels = (shape[i] if i < rank else 1 for i in indices)
    return ImageDims(width=width, height=height, channels=channels)


def get_image_dims_for_tensor_shape(
    tensor_shape: Sequence[int], shape_includes_batch: bool = True
) -> ImageDims:
    """
    Resolve image dimensions from a [batch, height, width, channels] shape.

    Parameters
    ----------
    tensor_shape : Sequence[int]
        Tensor shape in NHWC order, or HWC order if there is no batch axis.
    shape_includes_batch : bool
        Whether the first axis of the shape is the batch axis.

    Returns
    -------
    ImageDims
        Image dimensions. Axes missing from the shape resolve to 1.
    """
    offset = 1 if shape_includes_batch else 0
    shape = tuple(int(size) for size in tensor_shape)

    def size_at(index: int) -> int:
        return shape[index] if index < len(shape) else 1

    return ImageDims(
        width=size_at(offset + 1),
        height=size_at(offset),
        channels=size_at(offset + 2),
    )
