"""
End-to-end compilation through a real system archive.

A fake runtime home is laid out with a lib/tools.jar zip archive holding a
Python stand-in for the idlj compiler. The translator has to find it through
the real ModuleLoaderFacade fallback and run it with captured output.
"""

import logging
import sys
import zipfile

import pytest

from idlbridge.build import IdljTranslator
from idlbridge.config import CompilationRequest, Source
from idlbridge.errors import CompilationFailed, CompilerUnavailable
from idlbridge.packages import ModuleLoaderFacade, RuntimeDetector

COMPILER_PACKAGE = "com/sun/tools/corba/se/idl"

COMPILER_SOURCE = '''
import sys


class Compile:
    @staticmethod
    def main(args):
        print("Compiling " + args[-1])
        if "-bogus" in args:
            print("Invalid argument: -bogus", file=sys.stderr)
            return 1
        return 0
'''


def write_system_archive(archive):
    """Write a zip archive holding the stand-in compiler package."""
    archive.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(archive, "w") as zf:
        parts = COMPILER_PACKAGE.split("/")
        for depth in range(1, len(parts) + 1):
            zf.writestr("/".join(parts[:depth]) + "/__init__.py", "")
        zf.writestr(f"{COMPILER_PACKAGE}/toJavaPortable.py", COMPILER_SOURCE)


@pytest.fixture
def runtime_home(tmp_path):
    """Create <tmp>/jdk/jre with sibling lib/tools.jar and Classes/classes.jar."""
    home = tmp_path / "jdk" / "jre"
    home.mkdir(parents=True)
    write_system_archive(tmp_path / "jdk" / "lib" / "tools.jar")
    write_system_archive(tmp_path / "jdk" / "Classes" / "classes.jar")

    yield home

    for module in [m for m in sys.modules if m == "com" or m.startswith("com.")]:
        del sys.modules[module]


@pytest.fixture
def idl_request(tmp_path):
    idl_dir = tmp_path / "src" / "main" / "idl"
    idl_dir.mkdir(parents=True)
    idl_file = idl_dir / "bank.idl"
    idl_file.write_text("module bank { interface Account {}; };\n")
    return lambda source=None: CompilationRequest(
        source_directory=str(idl_dir),
        target_directory=str(tmp_path / "target" / "idl"),
        idl_file=str(idl_file),
        source=source or Source(),
    )


@pytest.mark.integration
class TestEndToEnd:
    """Compile through the tools.jar fallback."""

    def make_translator(self, tmp_path, home, vendor="Oracle Corporation", **options):
        runtime = RuntimeDetector.detect(
            {"vendor": vendor, "vm_name": "OpenJDK", "home": str(home), "user_dir": str(tmp_path)}
        )
        return IdljTranslator(
            loader_facade=ModuleLoaderFacade(),
            runtime=runtime,
            logger=logging.getLogger("test.end_to_end"),
            **options
        )

    def test_compiles_through_system_archive(self, tmp_path, runtime_home, idl_request, caplog):
        translator = self.make_translator(tmp_path, runtime_home, fail_on_error=True)

        with caplog.at_level(logging.INFO, logger="test.end_to_end"):
            translator.compile(idl_request())

        assert any("Compiling" in record.getMessage() for record in caplog.records)
        assert translator.runtime.class_path == []

    def test_invalid_argument_fails_build(self, tmp_path, runtime_home, idl_request):
        translator = self.make_translator(tmp_path, runtime_home, fail_on_error=True)

        with pytest.raises(CompilationFailed) as exc_info:
            translator.compile(idl_request(Source(additional_arguments=["-bogus"])))

        assert "Invalid argument: -bogus" in exc_info.value.stderr

    def test_missing_archive(self, tmp_path, idl_request):
        home = tmp_path / "empty" / "jre"
        home.mkdir(parents=True)

        with pytest.raises(CompilerUnavailable):
            self.make_translator(tmp_path, home).compile(idl_request())

    def test_apple_archive_added_once_for_many_files(self, tmp_path, runtime_home, idl_request):
        translator = self.make_translator(tmp_path, runtime_home, vendor="Apple Inc.")

        for _ in range(5):
            translator.compile(idl_request())

        search_path = translator.loader_facade.search_path
        assert len(search_path) == 1
        assert search_path[0].replace("\\", "/").endswith("Classes/classes.jar")
