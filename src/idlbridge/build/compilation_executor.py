"""Compilation Executor.

This module runs a resolved compiler's entry point in-process, capturing
everything it writes to standard output and standard error.

Design:
    - Looks up the entry point (a callable taking the argument list)
    - Swaps sys.stdout/sys.stderr for in-memory buffers during the call
    - Widens sys.path with the compiler's extra class path during the call
    - Restores both on every exit path
    - Serializes invocations, since the redirected streams are process-wide
"""

import io
import logging
import threading
from contextlib import redirect_stderr, redirect_stdout
from typing import Callable, List, Optional, Tuple

from ..errors import CompilationFailed, EntryPointMissing
from ..packages.compiler_resolver import CompilerHandle
from ..packages.loader import extended_sys_path

# Guards the process-wide stream swap
_STREAM_LOCK = threading.Lock()


class CompilationExecutor:
    """Invokes compiler entry points with captured output.

    This class handles:
    - Locating the compiler entry point
    - Redirecting and restoring the standard streams
    - Mapping the entry point's return value to an exit code
    - Wrapping compiler crashes in CompilationFailed
    """

    def __init__(
        self,
        entry_point: str = "main",
        logger: Optional[logging.Logger] = None,
        exit_code: Optional[Callable[[object], int]] = None,
    ):
        """Initialize compilation executor.

        Args:
            entry_point: Name of the compiler's entry point attribute
            logger: Logger for diagnostics
            exit_code: Maps the entry point's return value to an exit code
                (exit_code_of when omitted)
        """
        self.entry_point = entry_point
        self.exit_code = exit_code or exit_code_of
        self.log = logger or logging.getLogger(__name__)

    def find_entry_point(self, handle: CompilerHandle) -> Callable:
        """Locate the compiler entry point.

        Args:
            handle: Resolved compiler

        Returns:
            The entry point callable

        Raises:
            EntryPointMissing: If the attribute is absent or not callable
        """
        entry = getattr(handle.compiler_class, self.entry_point, None)
        if entry is None or not callable(entry):
            raise EntryPointMissing(
                f"Error: Compiler {handle.class_name} had no {self.entry_point} method"
            )
        return entry

    def run(self, handle: CompilerHandle, arguments: List[str]) -> Tuple[int, str, str]:
        """Run the compiler with captured output.

        Args:
            handle: Resolved compiler
            arguments: Compiler arguments

        Returns:
            Tuple of (exit code, captured stdout, captured stderr)

        Raises:
            EntryPointMissing: If the compiler has no entry point
            CompilationFailed: If the entry point raised
        """
        entry = self.find_entry_point(handle)
        out = io.StringIO()
        err = io.StringIO()

        with _STREAM_LOCK:
            try:
                with extended_sys_path(handle.class_path), redirect_stdout(out), redirect_stderr(err):
                    exit_code = self._invoke(entry, arguments, err)
            except Exception as e:
                raise CompilationFailed(
                    "IDL compilation failed", stdout=out.getvalue(), stderr=err.getvalue()
                ) from e

        self.log.info(f"Completed with code {exit_code}")
        return exit_code, out.getvalue(), err.getvalue()

    def _invoke(self, entry: Callable, arguments: List[str], err: io.StringIO) -> int:
        """Call the entry point and map its outcome to an exit code."""
        try:
            result = entry(list(arguments))
        except SystemExit as e:
            if e.code is None:
                return 0
            if isinstance(e.code, int):
                return e.code
            err.write(f"{e.code}\n")
            return 1
        return self.exit_code(result)


def exit_code_of(result: object) -> int:
    """
    Map an entry point return value to an exit code.

    Args:
        result: Value returned by the entry point

    Returns:
        The value itself for integers, 0 for anything else (booleans
        included)
    """
    if isinstance(result, int) and not isinstance(result, bool):
        return result
    return 0


def boolean_exit_code(result: object) -> int:
    """
    Map a success flag returned by the entry point to an exit code.

    Args:
        result: Value returned by the entry point

    Returns:
        0 for True, 1 for False, exit_code_of(result) for anything else
    """
    if isinstance(result, bool):
        return 0 if result else 1
    return exit_code_of(result)
