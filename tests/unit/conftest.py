"""
Shared fixtures for idlbridge unit tests.

Provides a fake IDL compiler that records its arguments and a loader facade
that records every lookup instead of importing anything.
"""

import sys
from typing import List, Optional, Set

import pytest

from idlbridge.packages.loader import ClassNotFoundError, IClassLoaderFacade
from idlbridge.packages.platform_utils import RuntimeProperties


class FakeIdlCompiler:
    """Stands in for a compiler class; records the arguments it was given."""

    def __init__(self):
        self.args: Optional[List[str]] = None
        self.output: Optional[str] = None
        self.error_message: Optional[str] = None
        self.return_value: object = None
        self.error: Optional[BaseException] = None

    def main(self, args):
        self.args = [arg.replace("\\", "/") for arg in args]
        if self.output is not None:
            print(self.output)
        if self.error_message is not None:
            print(self.error_message, file=sys.stderr)
        if self.error is not None:
            raise self.error
        return self.return_value

    def compile(self, args):
        return self.main(args)


class RecordingLoaderFacade(IClassLoaderFacade):
    """Loader facade that hands out the fake compiler for every name."""

    def __init__(self, compiler: FakeIdlCompiler):
        self.compiler = compiler
        self.loaded_classes: List[str] = []
        self.prepended_paths: List[str] = []
        self.missing: Set[str] = set()
        self.missing_until_prepended = False

    @property
    def compiler_class_name(self) -> Optional[str]:
        """Most recently requested class name."""
        return self.loaded_classes[-1] if self.loaded_classes else None

    @property
    def search_path(self):
        return list(self.prepended_paths)

    def prepend_paths(self, *paths):
        self.prepended_paths[:0] = [str(path) for path in paths]

    def load_class(self, class_name):
        self.loaded_classes.append(class_name)
        if class_name in self.missing:
            raise ClassNotFoundError(class_name)
        if self.missing_until_prepended and not self.prepended_paths:
            raise ClassNotFoundError(class_name)
        return self.compiler


def make_runtime(user_dir, **overrides) -> RuntimeProperties:
    """Build runtime properties for tests."""
    values = {
        "vendor": "Oracle Corporation",
        "vm_name": "OpenJDK 64-Bit Server VM",
        "specification_version": "1.8",
        "home": "/opt/jdk/jre",
        "user_dir": str(user_dir),
    }
    values.update(overrides)
    return RuntimeProperties(**values)


@pytest.fixture
def fake_compiler():
    """Fresh fake compiler."""
    return FakeIdlCompiler()


@pytest.fixture
def loader_facade(fake_compiler):
    """Recording loader facade returning the fake compiler."""
    return RecordingLoaderFacade(fake_compiler)


@pytest.fixture
def runtime(tmp_path):
    """Runtime with the temporary directory as working directory."""
    return make_runtime(tmp_path)


@pytest.fixture
def runtime_factory(tmp_path):
    """Build runtimes with overridden properties."""

    def factory(**overrides):
        return make_runtime(tmp_path, **overrides)

    return factory
