"""Compiler class resolution.

This module decides which compiler class to load for the current runtime
and, when the class is not on the default search path, retries after
injecting the vendor system archive (tools.jar / classes.jar).

Resolution order:
    1. Candidate name: explicit (alternate families) or vendor-derived
    2. Apple runtimes: inject classes.jar before the first attempt
    3. Load through the loader facade
    4. On ClassNotFoundError: inject the system archive and retry once
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..errors import CompilerUnavailable
from .loader import ClassNotFoundError, IClassLoaderFacade
from .platform_utils import RuntimeProperties

SUN_COMPILER_CLASS = "com.sun.tools.corba.se.idl.toJavaPortable.Compile"
IBM_COMPILER_CLASS = "com.ibm.idl.toJavaPortable.Compile"
HOTSPOT_LOCATOR_CLASS = "com.sun.tools.corba.se.idl.som.cff.FileLocator"


@dataclass
class CompilerHandle:
    """A resolved compiler class.

    Attributes:
        class_name: Dotted name the class was loaded under
        compiler_class: The loaded class or module
        class_path: Extra locations the compiler needs visible while it runs
    """

    class_name: str
    compiler_class: object
    class_path: List[str] = field(default_factory=list)


class CompilerResolver:
    """Resolves compiler classes through a loader facade.

    Nothing is cached: every call to resolve() performs a fresh lookup.
    """

    def __init__(
        self,
        loader: IClassLoaderFacade,
        runtime: RuntimeProperties,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize compiler resolver.

        Args:
            loader: Facade used for all class lookups
            runtime: Runtime identity driving vendor selection
            logger: Logger for diagnostics
        """
        self.loader = loader
        self.runtime = runtime
        self.log = logger or logging.getLogger(__name__)

    @staticmethod
    def compiler_class_name(runtime: RuntimeProperties) -> str:
        """Get the idlj compiler class name for a runtime vendor.

        Args:
            runtime: Runtime properties

        Returns:
            IBM compiler class for IBM runtimes, the Sun class otherwise
        """
        if runtime.is_ibm():
            return IBM_COMPILER_CLASS
        return SUN_COMPILER_CLASS

    def resolve(self, class_name: Optional[str] = None, allow_fallback: bool = True) -> CompilerHandle:
        """Load the compiler class.

        Args:
            class_name: Fixed class name; skips vendor detection when given
            allow_fallback: Whether to retry after injecting the system archive

        Returns:
            CompilerHandle for the loaded class

        Raises:
            CompilerUnavailable: If no strategy could load the class
        """
        name = class_name or self.compiler_class_name(self.runtime)
        class_path: List[str] = []

        try:
            if allow_fallback and self.runtime.is_apple():
                self._inject_system_archive(class_path)
            compiler_class = self.loader.load_class(name)
        except ClassNotFoundError as e:
            if not allow_fallback:
                raise CompilerUnavailable(f"IDL compiler not available: {name}") from e
            self.log.debug(f"{name} not found on the default path, trying the system archive")
            try:
                self._inject_system_archive(class_path)
                compiler_class = self.loader.load_class(name)
            except Exception:
                raise CompilerUnavailable(f"IDL compiler not available: {name}") from e
        except Exception as e:
            raise CompilerUnavailable(f"IDL compiler not available: {name}") from e

        self.log.debug(f"Loaded IDL compiler {name}")
        return CompilerHandle(class_name=name, compiler_class=compiler_class, class_path=class_path)

    def _inject_system_archive(self, class_path: List[str]) -> None:
        """Make the vendor system archive visible to the compiler.

        The archive is prepended to the facade and appended to the runtime
        class path, because the compiler looks up its own resources outside
        the facade. Each location holds the archive at most once. HotSpot runtimes
        also get their file locator pre-loaded.

        Args:
            class_path: Class path of the handle being resolved
        """
        archive = str(Path(self.runtime.system_archive()).absolute())
        if archive not in self.loader.search_path:
            self.loader.prepend_paths(archive)
        if archive not in self.runtime.class_path:
            self.runtime = self.runtime.with_class_path(archive)
            self.log.debug(f"Class path widened to: {self.runtime.class_path_string()}")
        if archive not in class_path:
            class_path.append(archive)

        if self.runtime.is_hotspot():
            self.loader.load_class(HOTSPOT_LOCATOR_CLASS)
