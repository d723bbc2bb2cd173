"""Label file loading for classifier outputs."""
import logging

from tfutils.domain.errors import InvalidArgument, NotFound

logger = logging.getLogger(__name__)

# Classifier output layers are sized in multiples of this
LABELS_PADDING = 16


def read_labels_file(path: str) -> list[str]:
    """
    Read a newline-delimited UTF-8 label file.

    The list is right-padded with empty strings until its length is a
    multiple of LABELS_PADDING.

    Parameters
    ----------
    path : str
        Path to the label file.

    Returns
    -------
    list[str]
        One label per line, then padding.

    Raises
    ------
    NotFound
        If no file exists at `path`.
    InvalidArgument
        If the file is not valid UTF-8.
    """
    try:
        with open(path, encoding="utf-8") as f:
            labels = [line.rstrip("\r\n") for line in f]
    except FileNotFoundError as e:
        logger.error(f"Labels file {path} not found.")
        raise NotFound(f"Labels file not found at {path}") from e
    except UnicodeDecodeError as e:
        logger.error(f"Labels file {path} is not valid UTF-8: {e}")
        raise InvalidArgument(f"Labels file {path} is not valid UTF-8") from e

    while len(labels) % LABELS_PADDING:
        labels.append("")

    logger.info(f"Loaded {len(labels)} labels from {path}")
    return labels
