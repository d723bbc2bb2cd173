"""Tests for tensor shape and vector accessors."""
import numpy as np
import pytest
import tensorflow as tf

from tfutils.domain.errors import InvalidArgument
from tfutils.infrastructure.tensorflow.tensors import (
    tensor_shape,
    tensor_to_image_dims,
    tensor_to_vector,
)


class TestTensorShape:
    """Tests for tensor_shape function."""

    def test_eager_tensor(self):
        assert tensor_shape(tf.zeros((2, 3, 4))) == (2, 3, 4)

    def test_numpy_array(self):
        assert tensor_shape(np.zeros((5,))) == (5,)

    def test_scalar(self):
        assert tensor_shape(tf.constant(1.0)) == ()

    def test_undefined_shape_raises(self):
        with tf.Graph().as_default():
            placeholder = tf.compat.v1.placeholder(tf.float32, shape=(None, 3))
            with pytest.raises(InvalidArgument):
                tensor_shape(placeholder)


class TestTensorToImageDims:
    """Tests for tensor_to_image_dims function."""

    def test_hwc_tensor(self):
        image = tf.zeros((480, 640, 3))
        assert tensor_to_image_dims(image, "102") == (640, 480, 3)

    def test_grayscale_array(self):
        assert tensor_to_image_dims(np.zeros((28, 32)), "10") == (32, 28, 1)

    def test_score_vector(self):
        assert tensor_to_image_dims(tf.zeros((1001,)), "012") == (1, 1, 1)


class TestTensorToVector:
    """Tests for tensor_to_vector function."""

    def test_flattens_eager_tensor(self):
        vector = tensor_to_vector(tf.constant([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_array_equal(vector, [1.0, 2.0, 3.0, 4.0])

    def test_flattens_array(self):
        assert tensor_to_vector(np.ones((1, 3))).shape == (3,)
