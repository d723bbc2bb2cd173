"""Pytest configuration and shared fixtures."""
import pytest


@pytest.fixture
def linear_graph_path(tmp_path):
    """
    Provide a serialized linear graph on disk.

    Returns:
        str: Path to a binary GraphDef file, see `fixtures.graphs.build_linear_graph_def`.
    """
    from fixtures.graphs import build_linear_graph_def

    path = tmp_path / "linear.pb"
    path.write_bytes(build_linear_graph_def().SerializeToString())
    return str(path)


@pytest.fixture
def write_labels(tmp_path):
    """
    Provide a helper writing a label file.

    Returns:
        Callable[[list[str]], str]: Writes one label per line and returns the file path.
    """
    def _write(labels, name="labels.txt"):
        path = tmp_path / name
        path.write_text("".join(f"{label}\n" for label in labels), encoding="utf-8")
        return str(path)

    return _write
