"""Error taxonomy for idlbridge.

All translator failures derive from TranslatorError so the caller sees a
single failure signal. None of them are retried internally.
"""


class TranslatorError(Exception):
    """Base exception for translator errors."""
    pass


class ConfigurationError(TranslatorError):
    """Raised when the request asks for an option the compiler cannot express."""
    pass


class CompilerUnavailable(TranslatorError):
    """Raised when no compiler implementation could be located."""
    pass


class EntryPointMissing(TranslatorError):
    """Raised when the resolved compiler lacks the expected entry point."""
    pass


class CompilationFailed(TranslatorError):
    """Raised when the compiler raised during execution or was judged to fail.

    Attributes:
        stdout: Captured standard output, if any
        stderr: Captured standard error, if any
    """

    def __init__(self, message: str, stdout: str = "", stderr: str = ""):
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr


def describe_failure(error: TranslatorError) -> str:
    """Build a one-line description of a translator error and its cause.

    Args:
        error: Error raised by a translator

    Returns:
        Message including the chained cause, if any
    """
    cause = error.__cause__
    if cause is None:
        return str(error)
    return f"{error} ({type(cause).__name__}: {cause})"
