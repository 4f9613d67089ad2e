"""Translator for the JacORB IDL compiler."""

from ..packages.compiler_resolver import CompilerHandle
from .compilation_executor import boolean_exit_code
from .flag_builder import FlagBuilder, JacorbFlagBuilder
from .translator import AbstractTranslator

JACORB_COMPILER_CLASS = "org.jacorb.idl.parser"


class JacorbTranslator(AbstractTranslator):
    """Drives JacORB through its `compile` entry point.

    JacORB always lives under a fixed class name: no vendor detection and
    no system-archive fallback. Its entry point returns True on success.
    """

    ENTRY_POINT = "compile"

    def create_flag_builder(self) -> FlagBuilder:
        return JacorbFlagBuilder(self.runtime, logger=self.log)

    def resolve_compiler(self) -> CompilerHandle:
        return self.create_resolver().resolve(JACORB_COMPILER_CLASS, allow_fallback=False)

    def exit_code(self, result: object) -> int:
        return boolean_exit_code(result)
