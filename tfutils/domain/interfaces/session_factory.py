"""
Session Factory Interface.

This module defines the abstract interface for loading serialized computation
graphs and opening execution sessions against them. Implementations delegate
to a machine-learning runtime; the domain layer only sees opaque handles.
"""
from abc import ABC, abstractmethod
from typing import Any


class SessionFactory(ABC):
    """
    Abstract interface for graph loading and session creation.

    Implementations must not return partially initialized objects: any
    runtime failure is raised to the caller.
    """

    @abstractmethod
    def load_graph(self, path: str) -> Any:
        """
        Load a serialized graph from disk.

        Parameters
        ----------
        path : str
            Path to the serialized graph.

        Returns
        -------
        Any
            Runtime-specific graph handle.
        """
        pass

    @abstractmethod
    def create_session(self, graph: Any, device: str | None = None) -> Any:
        """
        Open an execution session bound to a graph.

        Parameters
        ----------
        graph : Any
            Graph handle returned by `load_graph`, or a path to a serialized graph.
        device : str | None, optional
            Device to place the graph on. None uses the factory default.

        Returns
        -------
        Any
            Session handle, owned by the caller.
        """
        pass
