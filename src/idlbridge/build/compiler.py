"""Abstract base class for IDL compiler translators.

This module defines the interface shared by every compiler family
(idlj, JacORB) so the caller never branches on the vendor itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from ..config.source import CompilationRequest


@dataclass
class CompileResult:
    """Result of a single compiler invocation."""
    success: bool
    stdout: str
    stderr: str
    returncode: int


class ICompilerTranslator(ABC):
    """Interface for IDL compiler translators.

    Implementations:
    - IdljTranslator (Sun/IBM idlj)
    - JacorbTranslator (JacORB open-source compiler)
    """

    @abstractmethod
    def compile(self, request: CompilationRequest) -> None:
        """Compile a single IDL file.

        Args:
            request: Fully populated compilation request

        Raises:
            ConfigurationError: If the request cannot be expressed
            CompilerUnavailable: If the compiler cannot be located
            EntryPointMissing: If the compiler has no usable entry point
            CompilationFailed: If the compilation fails
        """
        pass

    @abstractmethod
    def build_arguments(self, request: CompilationRequest) -> List[str]:
        """Build the ordered argument vector for the compiler.

        Args:
            request: Compilation request

        Returns:
            List of command-line arguments

        Raises:
            ConfigurationError: If the request cannot be expressed
        """
        pass
