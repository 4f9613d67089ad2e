"""Runtime Detection Utilities.

This module describes the host runtime the IDL compilers are loaded into:
vendor and VM identity, specification version, and home directory. These
drive compiler class selection and the system-archive fallback.

The properties are detected from the running interpreter and can be
overridden from the [runtime] section of idl.ini.
"""

import os
import platform
import re
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Optional


LEGACY_SPECIFICATION_PATTERN = re.compile(r"[0-1]\.[0-3]")


class PlatformError(Exception):
    """Raised when runtime properties are invalid."""

    pass


@dataclass(frozen=True)
class RuntimeProperties:
    """Identity of the host runtime."""

    vendor: str
    vm_name: str
    specification_version: str
    home: str
    user_dir: str
    class_path: List[str] = field(default_factory=list)
    path_separator: str = os.pathsep

    def is_ibm(self) -> bool:
        """Return True for an IBM-branded runtime."""
        return "IBM" in self.vendor

    def is_apple(self) -> bool:
        """Return True for an Apple-branded runtime."""
        return "Apple" in self.vendor

    def is_hotspot(self) -> bool:
        """Return True for a HotSpot VM."""
        return "HotSpot" in self.vm_name

    def is_legacy_specification(self) -> bool:
        """Return True for specification versions 0.0 through 1.3.

        Legacy runtimes already generate the old implementation base.
        """
        return LEGACY_SPECIFICATION_PATTERN.fullmatch(self.specification_version) is not None

    def system_archive(self) -> Path:
        """Get the vendor system archive holding the compiler classes.

        Returns:
            <home>/../Classes/classes.jar on Apple runtimes,
            <home>/../lib/tools.jar elsewhere
        """
        relative = "../Classes/classes.jar" if self.is_apple() else "../lib/tools.jar"
        return Path(self.home) / relative

    def with_class_path(self, *entries: str) -> "RuntimeProperties":
        """Return a copy with entries appended to the class path."""
        return replace(self, class_path=list(self.class_path) + list(entries))

    def class_path_string(self) -> str:
        """Class path joined with the path separator."""
        return self.path_separator.join(self.class_path)


class RuntimeDetector:
    """Detects the current runtime properties."""

    @staticmethod
    def detect(overrides: Optional[Dict[str, str]] = None) -> RuntimeProperties:
        """Detect runtime properties for the running interpreter.

        Args:
            overrides: Optional property overrides (e.g. from idl.ini [runtime])

        Returns:
            RuntimeProperties instance

        Raises:
            PlatformError: If an override names an unknown property
        """
        implementation = platform.python_implementation()
        class_path_env = os.environ.get("CLASSPATH", "")

        values = {
            "vendor": implementation,
            "vm_name": f"{implementation} {platform.python_version()}",
            "specification_version": f"{sys.version_info.major}.{sys.version_info.minor}",
            "home": sys.base_prefix,
            "user_dir": os.getcwd(),
        }
        class_path = [entry for entry in class_path_env.split(os.pathsep) if entry]

        for key, value in (overrides or {}).items():
            if key == "class_path":
                class_path = [entry for entry in value.split(os.pathsep) if entry]
            elif key in values:
                values[key] = value
            else:
                raise PlatformError(f"Unknown runtime property: {key}")

        return RuntimeProperties(class_path=class_path, **values)

    @staticmethod
    def get_runtime_info(runtime: Optional[RuntimeProperties] = None) -> dict:
        """Get a summary of the runtime for diagnostics.

        Args:
            runtime: Properties to describe (detected when omitted)

        Returns:
            Dictionary with runtime information
        """
        runtime = runtime or RuntimeDetector.detect()
        return {
            "vendor": runtime.vendor,
            "vm_name": runtime.vm_name,
            "specification_version": runtime.specification_version,
            "home": runtime.home,
            "user_dir": runtime.user_dir,
            "system_archive": str(runtime.system_archive()),
            "legacy_specification": runtime.is_legacy_specification(),
        }
