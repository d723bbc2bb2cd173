"""
TensorFlow Graph and Session Management.

This module loads serialized GraphDef protos and opens tf.compat.v1 sessions
bound to them. Every failure reported by TensorFlow is logged with context
and raised as RuntimeFailure; no function here returns a half-built graph
or session.
"""
from __future__ import annotations

import contextlib
import logging
import os

import tensorflow as tf
from google.protobuf.message import DecodeError

from tfutils.domain.errors import RuntimeFailure
from tfutils.domain.interfaces.session_factory import SessionFactory

logger = logging.getLogger(__name__)


def log_error(context: str, error: BaseException) -> RuntimeFailure:
    """
    Log a TensorFlow failure and wrap it for re-raising.

    Parameters
    ----------
    context : str
        What was being attempted, e.g. "Error loading graph model.pb".
    error : BaseException
        The error raised by TensorFlow.

    Returns
    -------
    RuntimeFailure
        Exception to raise with `raise ... from error`.
    """
    failure = RuntimeFailure(context, error)
    logger.error(str(failure))
    return failure


def load_graph_def(path: str | os.PathLike) -> tf.compat.v1.GraphDef:
    """
    Read a binary GraphDef proto from disk.

    Parameters
    ----------
    path : str | os.PathLike
        Path to the serialized graph (usually a frozen `.pb` file). Any
        filesystem supported by tf.io.gfile can be used.

    Returns
    -------
    tf.compat.v1.GraphDef
        The parsed graph definition.

    Raises
    ------
    RuntimeFailure
        If the file cannot be read or does not contain a valid GraphDef.
    """
    path = os.fspath(path)
    graph_def = tf.compat.v1.GraphDef()
    try:
        with tf.io.gfile.GFile(path, "rb") as f:
            graph_def.ParseFromString(f.read())
    except (tf.errors.OpError, DecodeError) as e:
        raise log_error(f"Error loading graph {path}", e) from e

    logger.info(f"Loaded graph {path} ({len(graph_def.node)} nodes)")
    return graph_def


class GraphSession:
    """
    Owning handle on a TensorFlow session and the graph it runs.

    The handle is a context manager; leaving the `with` block closes the
    session. A closed handle cannot be run again.

    Attributes
    ----------
    graph : tf.Graph
        The graph the session was created with.
    """

    def __init__(self, session: tf.compat.v1.Session) -> None:
        self._session = session
        self.graph = session.graph

    @property
    def closed(self) -> bool:
        return self._session is None

    def run(self, fetches, feed_dict=None):
        """
        Run the session, see `tf.compat.v1.Session.run`.

        Parameters
        ----------
        fetches
            Tensor names, tensors or operations to evaluate.
        feed_dict : dict | None, optional
            Values to feed to placeholder tensors, keyed by tensor or name.

        Returns
        -------
        The evaluated fetches, with the same structure as `fetches`.

        Raises
        ------
        RuntimeFailure
            If the session is closed or TensorFlow fails to run the graph.
        """
        if self._session is None:
            raise RuntimeFailure("Session is closed")
        try:
            return self._session.run(fetches, feed_dict=feed_dict)
        except (tf.errors.OpError, ValueError, KeyError, TypeError) as e:
            raise log_error("Error running session", e) from e

    def close(self) -> None:
        """Release the TensorFlow session. Safe to call more than once."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> GraphSession:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def create_session_with_graph(
    graph_def: tf.compat.v1.GraphDef | str | os.PathLike,
    device: str = "",
    options: tf.compat.v1.ConfigProto | None = None,
) -> GraphSession:
    """
    Open a session on a graph.

    Parameters
    ----------
    graph_def : tf.compat.v1.GraphDef | str | os.PathLike
        Graph definition, or path to a serialized one to load first.
    device : str, optional
        Default device for the graph's nodes, e.g. "/cpu:0" or "/gpu:0".
        An empty string leaves placement to TensorFlow.
    options : tf.compat.v1.ConfigProto | None, optional
        Session options.

    Returns
    -------
    GraphSession
        Handle owning the new session.

    Raises
    ------
    RuntimeFailure
        If the graph cannot be loaded or imported, or the session cannot
        be created.
    """
    if isinstance(graph_def, (str, os.PathLike)):
        graph_def = load_graph_def(graph_def)

    graph = tf.Graph()
    try:
        with graph.as_default():
            placement = tf.device(device) if device else contextlib.nullcontext()
            with placement:
                tf.compat.v1.import_graph_def(graph_def, name="")
        session = tf.compat.v1.Session(graph=graph, config=options)
    except (tf.errors.OpError, ValueError, TypeError) as e:
        raise log_error("Error creating graph for session", e) from e

    logger.info(f"Created session on device '{device or 'default'}'")
    return GraphSession(session)


class TensorFlowSessionFactory(SessionFactory):
    """
    TensorFlow implementation of the SessionFactory interface.

    Parameters
    ----------
    device : str
        Default device used by `create_session`.
    options : tf.compat.v1.ConfigProto | None
        Session options used by `create_session`.
    """

    def __init__(
        self,
        device: str = "",
        options: tf.compat.v1.ConfigProto | None = None,
    ) -> None:
        self.device = device
        self.options = options

    @classmethod
    def from_configuration(cls, config) -> TensorFlowSessionFactory:
        """
        Build a factory from a SessionConfiguration.

        Parameters
        ----------
        config : SessionConfiguration
            Loaded session configuration.

        Returns
        -------
        TensorFlowSessionFactory
            Factory using the configured device and session options.
        """
        return cls(device=config.device, options=config.to_config_proto())

    def load_graph(self, path: str) -> tf.compat.v1.GraphDef:
        return load_graph_def(path)

    def create_session(
        self,
        graph: tf.compat.v1.GraphDef | str,
        device: str | None = None,
    ) -> GraphSession:
        if device is None:
            device = self.device
        return create_session_with_graph(graph, device=device, options=self.options)
