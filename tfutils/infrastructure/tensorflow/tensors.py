"""Accessors turning TensorFlow tensors into plain shapes and vectors."""
from __future__ import annotations

import numpy as np
import tensorflow as tf

from tfutils.domain.dimension_mapper import map_tensor_to_image_dims
from tfutils.domain.entities.image_dims import ImageDims
from tfutils.domain.entities.tensor import Tensor
from tfutils.domain.errors import InvalidArgument


def tensor_shape(tensor: Tensor) -> tuple[int, ...]:
    """
    Return the concrete size of each axis of a tensor.

    Parameters
    ----------
    tensor : Tensor
        A tf.Tensor, np.ndarray or any object with a `shape` attribute.

    Returns
    -------
    tuple[int, ...]
        Size of each axis.

    Raises
    ------
    InvalidArgument
        If the rank or any axis size is unknown (symbolic tensors).
    """
    shape = tf.TensorShape(tensor.shape)
    if shape.rank is None or not shape.is_fully_defined():
        raise InvalidArgument(f"Tensor shape {shape} is not fully defined")
    return tuple(shape.as_list())


def tensor_to_image_dims(tensor: Tensor, role_spec: str = "012") -> ImageDims:
    """
    Resolve the image (width, height, channels) of a tensor.

    Parameters
    ----------
    tensor : Tensor
        A tf.Tensor, np.ndarray or any object with a `shape` attribute.
    role_spec : str
        Which axis to use for width, height and channels,
        see `tfutils.domain.dimension_mapper`.

    Returns
    -------
    ImageDims
        Image dimensions of the tensor.
    """
    return map_tensor_to_image_dims(tensor_shape(tensor), role_spec)


def tensor_to_vector(tensor) -> np.ndarray:
    """Flatten a tensor (or array) into a 1-D numpy array."""
    if isinstance(tensor, tf.Tensor):
        tensor = tensor.numpy()
    return np.asarray(tensor).reshape(-1)
