"""idlbridge - drives external IDL compilers and reports their outcome."""

from .build import IdljTranslator, JacorbTranslator, TranslatorFactory
from .config import CompilationRequest, Define, PackagePrefix, Source
from .errors import (
    CompilationFailed,
    CompilerUnavailable,
    ConfigurationError,
    EntryPointMissing,
    TranslatorError,
)

__version__ = "0.1.0"

__all__ = [
    "CompilationFailed",
    "CompilationRequest",
    "CompilerUnavailable",
    "ConfigurationError",
    "Define",
    "EntryPointMissing",
    "IdljTranslator",
    "JacorbTranslator",
    "PackagePrefix",
    "Source",
    "TranslatorError",
    "TranslatorFactory",
]
