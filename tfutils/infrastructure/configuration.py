import os
import tomllib
from dataclasses import dataclass


def _load_table(config_path: str, table: str) -> dict:
    """
    Read one table from a TOML file.

    Parameters
    ----------
    config_path : str
        Filesystem path to a TOML file.
    table : str
        Name of the top-level table to return.

    Returns
    -------
    dict
        Contents of the table, or an empty dict if the file has no such table.

    Raises
    ------
    FileNotFoundError
        If no file exists at `config_path`.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return data.get(table, {})


@dataclass
class SessionConfiguration:
    """Configuration for loading a graph and opening a session on it."""

    graph_path: str
    device: str = ""
    allow_growth: bool = True
    log_device_placement: bool = False
    inter_op_parallelism_threads: int = 0  # 0 lets TensorFlow choose
    intra_op_parallelism_threads: int = 0

    def to_config_proto(self):
        """
        Build the TensorFlow session options for this configuration.

        Returns
        -------
        tf.compat.v1.ConfigProto
            Session options with GPU memory growth, device placement logging
            and thread pool sizes set.
        """
        import tensorflow as tf

        config = tf.compat.v1.ConfigProto(
            log_device_placement=self.log_device_placement,
            inter_op_parallelism_threads=self.inter_op_parallelism_threads,
            intra_op_parallelism_threads=self.intra_op_parallelism_threads,
        )
        config.gpu_options.allow_growth = self.allow_growth
        return config

    @classmethod
    def load(cls, config_path: str) -> "SessionConfiguration":
        """
        Load session configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "session" table.

        Returns
        -------
        SessionConfiguration
            Instance populated from the "session" table.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        return cls(**_load_table(config_path, "session"))


@dataclass
class PostprocessConfiguration:
    """Configuration for post-processing a saved score vector."""

    scores_path: str
    labels_path: str
    top_k: int = 5
    role_spec: str = "012"

    @classmethod
    def load(cls, config_path: str) -> "PostprocessConfiguration":
        """
        Load post-processing configuration from a TOML file.

        Parameters:
            config_path (str): Filesystem path to a TOML file containing a "postprocess" table.

        Returns:
            PostprocessConfiguration: Instance populated from the "postprocess" table; fields not present use their dataclass defaults.

        Raises:
            FileNotFoundError: If no file exists at `config_path`.
        """
        return cls(**_load_table(config_path, "postprocess"))
