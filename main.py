import argparse
import logging

import numpy as np

from tfutils.domain.dimension_mapper import map_tensor_to_image_dims
from tfutils.domain.use_cases.label_top_scores import LabelTopScores
from tfutils.infrastructure.configuration import PostprocessConfiguration
from tfutils.infrastructure.labels import read_labels_file
from tfutils.infrastructure.logging import setup_logging, suppress_tensorflow_logging
from tfutils.infrastructure.tensorflow.tensors import tensor_to_vector

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the labelled top-k predictions of a saved score tensor."
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        default="configuration.toml",
        help="Path to post-processing configuration TOML file (default: configuration.toml)",
    )
    return parser.parse_args(argv)


def format_predictions(predictions: list[tuple[str, int, float]]) -> list[str]:
    """
    Format labelled predictions as display lines.

    Parameters
    ----------
    predictions : list[tuple[str, int, float]]
        (label, index, score) triples.

    Returns
    -------
    list[str]
        One line per prediction, e.g. "1. cat (index 3): 0.912345".
    """
    lines = []
    for rank, (label, index, score) in enumerate(predictions, start=1):
        name = label or "<unlabelled>"
        lines.append(f"{rank}. {name} (index {index}): {score:.6f}")
    return lines


def main(config_path: str = None) -> list[tuple[str, int, float]]:
    # 1. Setup Logging
    setup_logging()
    suppress_tensorflow_logging()

    # 2. Load Configuration
    if config_path is None:
        config_path = "configuration.toml"
    config = PostprocessConfiguration.load(config_path)

    # 3. Load the score tensor and report its image layout
    scores = np.load(config.scores_path)
    dims = map_tensor_to_image_dims(scores.shape, config.role_spec)
    logger.info(
        f"Scores tensor {scores.shape}: width={dims.width}, "
        f"height={dims.height}, channels={dims.channels}"
    )

    # 4. Label the top-k scores
    labels = read_labels_file(config.labels_path)
    predictions = LabelTopScores(labels=labels, k=config.top_k).run(tensor_to_vector(scores))

    for line in format_predictions(predictions):
        print(line)
    return predictions


if __name__ == "__main__":
    args = parse_args()
    main(config_path=args.config)
