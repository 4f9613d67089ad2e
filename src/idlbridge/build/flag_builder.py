"""Compiler Argument Builder.

This module turns a compilation request into the ordered argument vector
each compiler family expects.

Design:
    - Pure transformation: no process state is touched
    - Unsupported options raise ConfigurationError before anything runs
    - Argument order is fixed and mirrors the compiler's own parsing
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..config.source import CompilationRequest, Source
from ..errors import ConfigurationError
from ..packages.platform_utils import RuntimeProperties
from .build_utils import to_relative_and_fix_separator


class FlagBuilder(ABC):
    """Base class for compiler argument builders."""

    def __init__(self, runtime: RuntimeProperties, logger: Optional[logging.Logger] = None):
        """Initialize flag builder.

        Args:
            runtime: Runtime properties (working directory, specification version)
            logger: Logger for diagnostics
        """
        self.runtime = runtime
        self.log = logger or logging.getLogger(__name__)

    def target_directory(self, request: CompilationRequest) -> str:
        """Get the target directory relative to the working directory."""
        return to_relative_and_fix_separator(self.runtime.user_dir, request.target_directory)

    @abstractmethod
    def build(self, request: CompilationRequest, debug: bool = False) -> List[str]:
        """Build the argument vector.

        Args:
            request: Compilation request
            debug: Whether the compiler should run verbosely

        Returns:
            Ordered list of arguments

        Raises:
            ConfigurationError: If the request cannot be expressed
        """
        pass


class IdljFlagBuilder(FlagBuilder):
    """Builds arguments for the Sun/IBM idlj compiler.

    Order: include paths, target directory, package prefixes, defines,
    stub/skeleton mode, compatibility flag, additional arguments, IDL file.
    """

    def build(self, request: CompilationRequest, debug: bool = False) -> List[str]:
        source = request.source
        args = ["-i", request.source_directory]

        for include_dir in request.include_dirs:
            args.extend(["-i", str(include_dir)])

        args.extend(["-td", self.target_directory(request)])

        args.extend(self._package_prefix_flags(source))
        args.extend(self._define_flags(source))
        args.append(self._emit_flag(source))
        args.extend(self._compatibility_flags(source))
        args.extend(source.additional_arguments)
        args.append(request.idl_file)

        if debug:
            args.insert(0, "-verbose")

        return args

    @staticmethod
    def _package_prefix_flags(source: Source) -> List[str]:
        if source.package_prefix is not None:
            raise ConfigurationError("idlj compiler does not support packagePrefix")

        flags = []
        for prefix in source.package_prefixes:
            flags.extend(["-pkgPrefix", prefix.type, prefix.prefix])
        return flags

    @staticmethod
    def _define_flags(source: Source) -> List[str]:
        flags = []
        for define in source.defines:
            if define.value is not None:
                raise ConfigurationError("idlj compiler unable to define symbol values")
            flags.extend(["-d", define.symbol])
        return flags

    @staticmethod
    def _emit_flag(source: Source) -> str:
        """Select the generation mode from the stub/skeleton flags.

        | stubs | skeletons | flag        |
        |-------|-----------|-------------|
        | yes   | yes       | -fall       |
        | yes   | no/unset  | -fclient    |
        | no/unset | yes    | -fserver    |
        | no/unset | no/unset | -fserverTIE |
        """
        if source.emit_stubs:
            return "-fall" if source.emit_skeletons else "-fclient"
        return "-fserver" if source.emit_skeletons else "-fserverTIE"

    def _compatibility_flags(self, source: Source) -> List[str]:
        if not source.compatible:
            return []

        self.log.debug(f"Runtime specification version: {self.runtime.specification_version}")
        if self.runtime.is_legacy_specification():
            self.log.debug("OPTION IGNORED: compatible")
            return []
        return ["-oldImplBase"]


class JacorbFlagBuilder(FlagBuilder):
    """Builds arguments for the JacORB IDL compiler.

    JacORB accepts symbol values and a single package prefix, so nothing
    in a request is rejected. The compatibility flag has no JacORB
    equivalent and is ignored.
    """

    def build(self, request: CompilationRequest, debug: bool = False) -> List[str]:
        source = request.source
        args = [f"-I{request.source_directory}"]

        for include_dir in request.include_dirs:
            args.append(f"-I{include_dir}")

        args.extend(["-d", self.target_directory(request)])

        if source.emit_stubs is False:
            args.append("-nostub")
        if source.emit_skeletons is False:
            args.append("-noskel")

        if source.package_prefix is not None:
            args.extend(["-p", source.package_prefix])
        for prefix in source.package_prefixes:
            args.extend(["-i2jpackage", f"{prefix.type}:{prefix.prefix}.{prefix.type}"])

        for define in source.defines:
            if define.value is None:
                args.append(f"-D{define.symbol}")
            else:
                args.append(f"-D{define.symbol}={define.value}")

        if source.compatible:
            self.log.debug("OPTION IGNORED: compatible")

        args.extend(source.additional_arguments)
        args.append(request.idl_file)
        return args
