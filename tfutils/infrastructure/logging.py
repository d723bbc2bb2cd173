import logging
import os
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """
    Send graph loading, session and post-processing logs to stdout.

    Failures wrapped as RuntimeFailure are logged at ERROR before they are
    raised, so they show up here even when the caller catches them.
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def suppress_tensorflow_logging() -> None:
    """
    Keep TensorFlow's own chatter out of the post-processing output.

    Raises the C++ runtime log level (only read when TensorFlow is first
    imported) and sets the `tensorflow` and `absl` loggers to ERROR, so
    session errors remain visible.
    """
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "2"  # 0=ALL, 1=WARNING+, 2=ERROR+, 3=FATAL

    logging.getLogger("tensorflow").setLevel(logging.ERROR)
    logging.getLogger("absl").setLevel(logging.ERROR)
