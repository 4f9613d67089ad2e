"""Compiler class loading and runtime detection for idlbridge."""

from .compiler_resolver import (
    HOTSPOT_LOCATOR_CLASS,
    IBM_COMPILER_CLASS,
    SUN_COMPILER_CLASS,
    CompilerHandle,
    CompilerResolver,
)
from .loader import ClassNotFoundError, IClassLoaderFacade, ModuleLoaderFacade
from .platform_utils import PlatformError, RuntimeDetector, RuntimeProperties

__all__ = [
    "ClassNotFoundError",
    "CompilerHandle",
    "CompilerResolver",
    "HOTSPOT_LOCATOR_CLASS",
    "IBM_COMPILER_CLASS",
    "IClassLoaderFacade",
    "ModuleLoaderFacade",
    "PlatformError",
    "RuntimeDetector",
    "RuntimeProperties",
    "SUN_COMPILER_CLASS",
]
