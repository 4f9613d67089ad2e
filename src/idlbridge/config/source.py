"""
IDL source configuration model.

These dataclasses describe what the translator consumes: a source block
(prefixes, defines, generation flags) and a per-file compilation request.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class PackagePrefix:
    """Maps an IDL type (module) name to a target package prefix."""

    type: str
    prefix: str


@dataclass(frozen=True)
class Define:
    """A preprocessor symbol, optionally carrying a value."""

    symbol: str
    value: Optional[str] = None


@dataclass
class Source:
    """
    One group of IDL files sharing the same generation options.

    Tri-state flags (emit_stubs, emit_skeletons, compatible) use None for
    "unset".
    """

    includes: List[str] = field(default_factory=lambda: ["**/*.idl"])
    excludes: List[str] = field(default_factory=list)
    package_prefix: Optional[str] = None
    package_prefixes: List[PackagePrefix] = field(default_factory=list)
    defines: List[Define] = field(default_factory=list)
    emit_stubs: Optional[bool] = None
    emit_skeletons: Optional[bool] = None
    compatible: Optional[bool] = None
    additional_arguments: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CompilationRequest:
    """Everything needed to compile one IDL file."""

    source_directory: str
    target_directory: str
    idl_file: str
    source: Source = field(default_factory=Source)
    include_dirs: List[str] = field(default_factory=list)
