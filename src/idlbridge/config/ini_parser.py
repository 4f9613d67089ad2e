"""
idl.ini configuration parser.

This module parses idl.ini files describing IDL compilation: global
settings, optional runtime overrides, and one or more source groups.
"""

import configparser
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .source import Define, PackagePrefix, Source


class IdlConfigError(Exception):
    """Exception raised for idl.ini configuration errors."""

    pass


@dataclass
class IdlSettings:
    """Global [idl] settings."""

    compiler: Optional[str] = None
    source_directory: str = "src/main/idl"
    output_directory: str = "target/generated-sources/idl"
    include_dirs: List[str] = field(default_factory=list)
    fail_on_error: bool = False
    debug: bool = False


class IdlConfig:
    """
    Parser for idl.ini configuration files.

    Example idl.ini:
        [idl]
        compiler = idlj
        source_directory = src/main/idl
        include_dirs =
            src/main/idl-include
        fail_on_error = true

        [source:api]
        includes = api/*.idl
        emit_stubs = true
        package_prefixes =
            Foo com.a
            Bar com.b
        defines =
            WITH_EXTRAS

    Usage:
        config = IdlConfig(Path("idl.ini"))
        settings = config.get_settings()
        for name, source in config.get_sources().items():
            ...
    """

    SOURCE_SECTION_PREFIX = "source:"
    RUNTIME_KEYS = {"vendor", "vm_name", "specification_version", "home", "user_dir", "class_path"}

    def __init__(self, ini_path: Path):
        """
        Initialize the parser with an idl.ini file.

        Args:
            ini_path: Path to the idl.ini file

        Raises:
            IdlConfigError: If the file doesn't exist or cannot be parsed
        """
        self.ini_path = ini_path

        if not ini_path.exists():
            raise IdlConfigError(f"Configuration file not found: {ini_path}")

        self.config = configparser.ConfigParser(
            allow_no_value=True, interpolation=configparser.ExtendedInterpolation()
        )

        try:
            self.config.read(ini_path, encoding="utf-8")
        except configparser.Error as e:
            raise IdlConfigError(f"Failed to parse {ini_path}: {e}") from e

    def get_settings(self) -> IdlSettings:
        """
        Get the global [idl] settings, falling back to defaults.

        Returns:
            IdlSettings instance

        Raises:
            IdlConfigError: If a boolean value is malformed
        """
        settings = IdlSettings()
        if "idl" not in self.config:
            return settings

        section = self.config["idl"]
        compiler = (section.get("compiler") or "").strip()
        settings.compiler = compiler or None
        settings.source_directory = (
            section.get("source_directory") or settings.source_directory
        ).strip()
        settings.output_directory = (
            section.get("output_directory") or settings.output_directory
        ).strip()
        settings.include_dirs = self._split_lines(section.get("include_dirs") or "")
        settings.fail_on_error = bool(self._get_tristate("idl", "fail_on_error"))
        settings.debug = bool(self._get_tristate("idl", "debug"))
        return settings

    def get_runtime_overrides(self) -> Dict[str, str]:
        """
        Get runtime property overrides from the [runtime] section.

        Returns:
            Dictionary of overrides (empty if the section is absent)

        Raises:
            IdlConfigError: If an unknown key is present
        """
        if "runtime" not in self.config:
            return {}

        overrides = {}
        for key in self.config["runtime"]:
            if key not in self.RUNTIME_KEYS:
                raise IdlConfigError(
                    f"Unknown runtime property '{key}'. "
                    + f"Supported: {', '.join(sorted(self.RUNTIME_KEYS))}"
                )
            overrides[key] = (self.config["runtime"][key] or "").strip()
        return overrides

    def get_source_names(self) -> List[str]:
        """
        Get list of all source group names.

        Returns:
            List of names (e.g., ['api', 'internal'] for [source:api], [source:internal])
        """
        names = []
        for section in self.config.sections():
            if section.startswith(self.SOURCE_SECTION_PREFIX):
                names.append(section.split(":", 1)[1])
        return names

    def get_sources(self) -> Dict[str, Source]:
        """
        Get all source groups, in file order.

        A single default source (all *.idl files) is returned when the file
        declares none.

        Returns:
            Dictionary mapping source name to Source
        """
        names = self.get_source_names()
        if not names:
            return {"default": Source()}
        return {name: self.get_source(name) for name in names}

    def get_source(self, name: str) -> Source:
        """
        Get configuration for a specific source group.

        Args:
            name: Name of the source group (e.g., 'api')

        Returns:
            Source instance

        Raises:
            IdlConfigError: If the group is not found or a value is malformed
        """
        section_name = f"{self.SOURCE_SECTION_PREFIX}{name}"
        if section_name not in self.config:
            available = ", ".join(self.get_source_names())
            raise IdlConfigError(
                f"Source '{name}' not found. "
                + f"Available sources: {available or 'none'}"
            )

        section = self.config[section_name]
        source = Source()

        includes = self._split_lines(section.get("includes") or "")
        if includes:
            source.includes = includes
        source.excludes = self._split_lines(section.get("excludes") or "")

        package_prefix = (section.get("package_prefix") or "").strip()
        source.package_prefix = package_prefix or None
        source.package_prefixes = self._parse_package_prefixes(
            name, section.get("package_prefixes") or ""
        )
        source.defines = self._parse_defines(section.get("defines") or "")

        source.emit_stubs = self._get_tristate(section_name, "emit_stubs")
        source.emit_skeletons = self._get_tristate(section_name, "emit_skeletons")
        source.compatible = self._get_tristate(section_name, "compatible")

        additional = section.get("additional_arguments") or ""
        try:
            source.additional_arguments = shlex.split(additional)
        except ValueError as e:
            raise IdlConfigError(
                f"Source '{name}' has malformed additional_arguments: {e}"
            ) from e

        return source

    def _get_tristate(self, section: str, key: str) -> Optional[bool]:
        """Read a boolean that may be absent (None)."""
        value = self.config[section].get(key)
        if value is None or not value.strip():
            return None
        try:
            return self.config.getboolean(section, key)
        except ValueError as e:
            raise IdlConfigError(f"[{section}] {key} must be a boolean, got '{value}'") from e

    @staticmethod
    def _split_lines(value: str) -> List[str]:
        """Split a multi-line or comma separated value, dropping blanks."""
        items = []
        for line in value.split("\n"):
            for item in line.split(","):
                item = item.strip()
                if item:
                    items.append(item)
        return items

    @staticmethod
    def _parse_package_prefixes(name: str, value: str) -> List[PackagePrefix]:
        """
        Parse `Type prefix` lines.

        Example:
            Foo com.a
            Bar com.b
        """
        prefixes = []
        for line in value.split("\n"):
            parts = line.split()
            if not parts:
                continue
            if len(parts) != 2:
                raise IdlConfigError(
                    f"Source '{name}' has malformed package prefix '{line.strip()}'. "
                    + "Expected: <type> <prefix>"
                )
            prefixes.append(PackagePrefix(type=parts[0], prefix=parts[1]))
        return prefixes

    @staticmethod
    def _parse_defines(value: str) -> List[Define]:
        """
        Parse `SYMBOL` or `SYMBOL=value` lines.

        An explicit empty value (`SYMBOL=`) is kept as an empty string.
        """
        defines = []
        for line in value.split("\n"):
            line = line.strip()
            if not line:
                continue
            if "=" in line:
                symbol, define_value = line.split("=", 1)
                defines.append(Define(symbol=symbol.strip(), value=define_value.strip()))
            else:
                defines.append(Define(symbol=line))
        return defines
