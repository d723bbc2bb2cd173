"""
Label Top Scores Use-Case.

This module provides a use-case for turning the score vector produced by a
classifier into its k best labelled predictions.
"""
import logging

from tfutils.domain.topk import top_k

logger = logging.getLogger(__name__)


class LabelTopScores:
    """
    Use-case mapping the top-k entries of a score vector to labels.

    Attributes
    ----------
    labels : list[str]
        Class labels, indexed like the score vector.
    k : int
        Number of predictions to return.
    """

    def __init__(self, labels: list[str], k: int = 5) -> None:
        self.labels = labels
        self.k = k

    def run(self, scores) -> list[tuple[str, int, float]]:
        """
        Select the top-k scores and attach their labels.

        Parameters
        ----------
        scores : array-like
            Flat score vector, one entry per class.

        Returns
        -------
        list[tuple[str, int, float]]
            (label, index, score) triples by descending score. Indices past
            the end of the label list get an empty label.
        """
        result = top_k(scores, self.k)
        predictions = []
        for index, score in zip(result.indices, result.values):
            label = self.labels[index] if index < len(self.labels) else ""
            predictions.append((label, index, score))

        if predictions:
            best_label, _, best_score = predictions[0]
            logger.info(f"Top prediction: '{best_label}' ({best_score:.4f})")
        return predictions
