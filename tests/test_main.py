"""End-to-end tests for the command-line entry point."""
from pathlib import Path

import numpy as np

from main import format_predictions, main, parse_args


def test_parse_args_default_config():
    assert parse_args([]).config == "configuration.toml"
    assert parse_args(["-c", "other.toml"]).config == "other.toml"


def test_format_predictions():
    lines = format_predictions([("cat", 3, 0.5), ("", 20, 0.25)])
    assert lines == [
        "1. cat (index 3): 0.500000",
        "2. <unlabelled> (index 20): 0.250000",
    ]


def test_main_prints_top_predictions(tmp_path, write_labels, capsys):
    scores_path = tmp_path / "scores.npy"
    np.save(scores_path, np.array([[0.05, 0.6, 0.1, 0.25]], dtype=np.float32))
    labels_path = write_labels(["background", "cat", "dog", "bird"])

    config_file = tmp_path / "configuration.toml"
    config_file.write_text(f"""
[postprocess]
scores_path = "{scores_path.as_posix()}"
labels_path = "{Path(labels_path).as_posix()}"
top_k = 2
""")

    predictions = main(config_path=str(config_file))

    assert [(label, index) for label, index, _ in predictions] == [("cat", 1), ("bird", 3)]
    output = capsys.readouterr().out
    assert "1. cat (index 1)" in output
    assert "2. bird (index 3)" in output


def test_main_flattens_batched_scores(tmp_path, write_labels):
    """A (batch, classes) score tensor is flattened before ranking."""
    scores_path = tmp_path / "scores.npy"
    np.save(scores_path, np.array([[0.1, 0.2], [0.9, 0.3]]))
    labels_path = write_labels(["a", "b", "c", "d"])

    config_file = tmp_path / "configuration.toml"
    config_file.write_text(f"""
[postprocess]
scores_path = "{scores_path.as_posix()}"
labels_path = "{Path(labels_path).as_posix()}"
top_k = 1
""")

    assert main(config_path=str(config_file)) == [("c", 2, 0.9)]
