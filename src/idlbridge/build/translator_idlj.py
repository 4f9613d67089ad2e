"""Translator for the Sun/IBM idlj IDL compiler.

The compiler class is chosen from the runtime vendor and, when it is not
on the default search path, loaded from the vendor system archive.
"""

from ..packages.compiler_resolver import CompilerHandle
from .flag_builder import FlagBuilder, IdljFlagBuilder
from .translator import AbstractTranslator


class IdljTranslator(AbstractTranslator):
    """Drives idlj through its `main` entry point."""

    ENTRY_POINT = "main"

    def create_flag_builder(self) -> FlagBuilder:
        return IdljFlagBuilder(self.runtime, logger=self.log)

    def resolve_compiler(self) -> CompilerHandle:
        return self.create_resolver().resolve()
