"""Compiler outcome classification.

The wrapped compilers do not reliably report errors through their exit
code, so the captured text is inspected as well.
"""

import logging
from typing import Optional

from .compiler import CompileResult

# idlj exits 0 on some argument errors. This match is compiler specific
# and can misfire on unrelated text.
INVALID_ARGUMENT_MARKER = "Invalid argument"


class OutputClassifier:
    """Logs captured compiler output and decides pass/fail."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.log = logger or logging.getLogger(__name__)

    def classify(self, stdout: str, stderr: str, returncode: int, fail_on_error: bool) -> CompileResult:
        """Classify one compiler run.

        Captured text is always logged: stdout at info, stderr at error.

        Args:
            stdout: Captured standard output
            stderr: Captured standard error
            returncode: Compiler exit code
            fail_on_error: Whether errors fail the compilation

        Returns:
            CompileResult; success is False only when fail_on_error is set
            and the exit code is non-zero or stderr reports an invalid argument
        """
        if stdout:
            self.log.info(stdout)
        if stderr:
            self.log.error(stderr)

        failed = returncode != 0 or INVALID_ARGUMENT_MARKER in stderr
        return CompileResult(
            success=not (fail_on_error and failed),
            stdout=stdout,
            stderr=stderr,
            returncode=returncode,
        )
