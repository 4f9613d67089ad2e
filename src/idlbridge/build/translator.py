"""Shared translator behavior.

A translator turns a compilation request into one in-process compiler
run: build arguments, resolve the compiler, execute with captured output,
classify the outcome.
"""

import logging
from abc import abstractmethod
from typing import List, Optional

from ..config.source import CompilationRequest
from ..errors import CompilationFailed
from ..packages.compiler_resolver import CompilerHandle, CompilerResolver
from ..packages.loader import IClassLoaderFacade, ModuleLoaderFacade
from ..packages.platform_utils import RuntimeDetector, RuntimeProperties
from .build_utils import format_command_line
from .compilation_executor import CompilationExecutor, exit_code_of
from .compiler import ICompilerTranslator
from .flag_builder import FlagBuilder
from .output_classifier import OutputClassifier


class AbstractTranslator(ICompilerTranslator):
    """Base class for compiler family translators.

    Subclasses provide the argument builder, the compiler lookup and the
    entry point name. The debug and fail_on_error flags are read on every
    compile() call, so they may be changed between calls.
    """

    ENTRY_POINT = "main"

    def __init__(
        self,
        loader_facade: Optional[IClassLoaderFacade] = None,
        runtime: Optional[RuntimeProperties] = None,
        logger: Optional[logging.Logger] = None,
        debug: bool = False,
        fail_on_error: bool = False,
    ):
        """Initialize translator.

        Args:
            loader_facade: Facade used to load compiler classes
            runtime: Runtime properties (detected when omitted)
            logger: Logging sink for compiler output and diagnostics
            debug: Run the compiler verbosely and log its command line
            fail_on_error: Raise CompilationFailed when the compiler reports errors
        """
        self.loader_facade = loader_facade or ModuleLoaderFacade()
        self.runtime = runtime or RuntimeDetector.detect()
        self.log = logger or logging.getLogger(__name__)
        self.debug = debug
        self.fail_on_error = fail_on_error

    @abstractmethod
    def create_flag_builder(self) -> FlagBuilder:
        """Get the argument builder for this compiler family."""
        pass

    @abstractmethod
    def resolve_compiler(self) -> CompilerHandle:
        """Load the compiler class for this family.

        Raises:
            CompilerUnavailable: If the compiler cannot be located
        """
        pass

    def exit_code(self, result: object) -> int:
        """Map the entry point's return value to an exit code."""
        return exit_code_of(result)

    def build_arguments(self, request: CompilationRequest) -> List[str]:
        return self.create_flag_builder().build(request, debug=self.debug)

    def create_resolver(self) -> CompilerResolver:
        return CompilerResolver(self.loader_facade, self.runtime, logger=self.log)

    def compile(self, request: CompilationRequest) -> None:
        arguments = self.build_arguments(request)
        handle = self.resolve_compiler()

        self.log.debug(f"Current dir : {self.runtime.user_dir}")
        if self.debug:
            self.log.info(format_command_line(handle.class_name, arguments))

        executor = CompilationExecutor(
            entry_point=self.ENTRY_POINT, logger=self.log, exit_code=self.exit_code
        )
        try:
            returncode, stdout, stderr = executor.run(handle, arguments)
        except CompilationFailed as e:
            self._log_captured(e.stdout, e.stderr)
            raise

        classifier = OutputClassifier(logger=self.log)
        result = classifier.classify(stdout, stderr, returncode, self.fail_on_error)
        if not result.success:
            raise CompilationFailed(
                "IDL compilation failed", stdout=result.stdout, stderr=result.stderr
            )

    def _log_captured(self, stdout: str, stderr: str) -> None:
        """Log output captured before the compiler crashed."""
        if stdout:
            self.log.info(stdout)
        if stderr:
            self.log.error(stderr)
