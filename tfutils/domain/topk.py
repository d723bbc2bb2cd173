"""Top-k selection over a flat vector of scores."""
import heapq
import numbers

import numpy as np

from tfutils.domain.entities.scores import TopKResult
from tfutils.domain.errors import InvalidArgument


def top_k(scores, k: int) -> TopKResult:
    """
    Select the k highest scores and their original positions.

    Uses a heap bounded to k entries, so selecting from large score vectors
    (e.g. a softmax over a big vocabulary) costs O(N log k).

    Parameters
    ----------
    scores : array-like
        Flat sequence of scores (list, tuple, 1-D numpy array, ...).
        It is not modified.
    k : int
        Number of entries to select, with 0 <= k <= len(scores).

    Returns
    -------
    TopKResult
        Indices and values of the selected entries, by descending score.
        Equal scores are ordered by ascending original index.

    Raises
    ------
    InvalidArgument
        If scores is not one-dimensional, contains NaN,
        or k is out of range.
    """
    values = np.asarray(scores, dtype=np.float64)
    if values.ndim != 1:
        raise InvalidArgument(
            f"Scores must be a flat sequence. Got shape {values.shape}"
        )
    if np.isnan(values).any():
        raise InvalidArgument("Scores contain NaN and cannot be ranked")
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidArgument(f"k must be an integer. Got: {k!r}")
    if not 0 <= k <= len(values):
        raise InvalidArgument(
            f"k must be between 0 and {len(values)} (number of scores). Got: {k}"
        )

    selected = heapq.nlargest(
        int(k),
        enumerate(values.tolist()),
        key=lambda entry: (entry[1], -entry[0]),
    )
    return TopKResult(
        indices=[index for index, _ in selected],
        values=[value for _, value in selected],
    )
