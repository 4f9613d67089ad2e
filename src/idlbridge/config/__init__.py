"""Configuration parsing modules for idlbridge."""

from .ini_parser import IdlConfig, IdlConfigError, IdlSettings
from .source import CompilationRequest, Define, PackagePrefix, Source

__all__ = [
    "IdlConfig",
    "IdlConfigError",
    "IdlSettings",
    "CompilationRequest",
    "Define",
    "PackagePrefix",
    "Source",
]
