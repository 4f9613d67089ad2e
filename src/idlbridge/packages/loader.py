"""Dynamic compiler class loading.

This module isolates the translators from Python's default import rules:
compiler classes are named by dotted path and may live in archives that are
not on sys.path. The facade keeps its own list of extra search locations and
applies it only while a lookup is running.
"""

import importlib
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Sequence, Union

PathLike = Union[str, Path]


class ClassNotFoundError(LookupError):
    """Raised when a compiler class name cannot be resolved."""

    pass


@contextmanager
def extended_sys_path(paths: Sequence[PathLike]) -> Iterator[None]:
    """Temporarily prepend paths to sys.path.

    sys.path is restored to its previous contents on every exit path.

    Args:
        paths: Locations to search before the existing entries
    """
    saved = list(sys.path)
    entries = [entry for entry in dict.fromkeys(str(path) for path in paths) if entry not in saved]
    if entries:
        sys.path[:0] = entries
        importlib.invalidate_caches()
    try:
        yield
    finally:
        sys.path[:] = saved


class IClassLoaderFacade(ABC):
    """Interface for loading compiler classes by name."""

    @property
    @abstractmethod
    def search_path(self) -> List[str]:
        """Extra search locations, highest priority first."""
        pass

    @abstractmethod
    def load_class(self, class_name: str) -> object:
        """Load a class (or module) by dotted name.

        Args:
            class_name: Dotted name, e.g. "org.jacorb.idl.parser"

        Returns:
            The resolved object

        Raises:
            ClassNotFoundError: If the name cannot be resolved
        """
        pass

    @abstractmethod
    def prepend_paths(self, *paths: PathLike) -> None:
        """Add search locations ahead of the existing ones.

        Args:
            paths: One or more archive or directory locations
        """
        pass


class ModuleLoaderFacade(IClassLoaderFacade):
    """Loads compiler classes through importlib.

    A dotted name is resolved by importing its longest importable module
    prefix and walking the remaining parts as attributes, so both
    "pkg.module" and "pkg.module.Class" are accepted.
    """

    def __init__(self, search_path: Sequence[PathLike] = ()):
        """Initialize the facade.

        Args:
            search_path: Initial extra search locations
        """
        self._search_path: List[str] = [str(path) for path in search_path]

    @property
    def search_path(self) -> List[str]:
        """Extra search locations, highest priority first."""
        return list(self._search_path)

    def prepend_paths(self, *paths: PathLike) -> None:
        self._search_path[:0] = [str(path) for path in paths]

    def load_class(self, class_name: str) -> object:
        parts = class_name.split(".")
        if not class_name or not all(parts):
            raise ClassNotFoundError(f"Invalid class name: '{class_name}'")

        with extended_sys_path(self._search_path):
            for split in range(len(parts), 0, -1):
                module_name = ".".join(parts[:split])
                try:
                    module = importlib.import_module(module_name)
                except ModuleNotFoundError as e:
                    # A missing prefix of our own name means keep looking.
                    if e.name is None or not _is_prefix(e.name, module_name):
                        raise
                    continue
                return self._resolve_attributes(class_name, module, parts[split:])

        raise ClassNotFoundError(class_name)

    @staticmethod
    def _resolve_attributes(class_name: str, module: object, attributes: List[str]) -> object:
        """Walk attributes below an imported module."""
        resolved = module
        for attribute in attributes:
            try:
                resolved = getattr(resolved, attribute)
            except AttributeError as e:
                raise ClassNotFoundError(class_name) from e
        return resolved


def _is_prefix(candidate: str, dotted_name: str) -> bool:
    """Check whether candidate is dotted_name or one of its parent packages."""
    return dotted_name == candidate or dotted_name.startswith(candidate + ".")
