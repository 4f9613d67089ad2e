"""
Command-line interface for idlbridge.

This module provides the `idlbridge` CLI tool for compiling IDL files with
an external IDL compiler.
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from idlbridge import __version__
from idlbridge.build import TranslatorFactory
from idlbridge.cli_utils import ErrorFormatter, IdlFileScanner, PathValidator, setup_logging
from idlbridge.config import CompilationRequest, IdlConfig, IdlConfigError, IdlSettings, Source
from idlbridge.errors import TranslatorError, describe_failure
from idlbridge.packages import CompilerResolver, RuntimeDetector
from idlbridge.packages.platform_utils import PlatformError

DEFAULT_CONFIG_NAME = "idl.ini"


@dataclass
class CompileArgs:
    """Arguments for the compile command."""

    project_dir: Path
    config: Optional[Path] = None
    compiler: Optional[str] = None
    fail_on_error: bool = False
    debug: bool = False
    verbose: bool = False


@dataclass
class InfoArgs:
    """Arguments for the info command."""

    project_dir: Path
    config: Optional[Path] = None


def load_config(project_dir: Path, config_path: Optional[Path]) -> Optional[IdlConfig]:
    """Load idl.ini, which is optional unless given explicitly.

    Args:
        project_dir: Project directory
        config_path: Explicit configuration file, if any

    Returns:
        IdlConfig, or None when no default idl.ini exists

    Raises:
        IdlConfigError: If an explicit file is missing or any file is invalid
    """
    if config_path is not None:
        return IdlConfig(config_path)
    default_path = project_dir / DEFAULT_CONFIG_NAME
    if default_path.exists():
        return IdlConfig(default_path)
    return None


def collect_requests(
    project_dir: Path, settings: IdlSettings, sources: List[Tuple[str, Source]]
) -> List[CompilationRequest]:
    """Build one compilation request per selected IDL file.

    Args:
        project_dir: Project directory the settings are relative to
        settings: Global settings
        sources: (name, source) pairs in configuration order

    Returns:
        List of compilation requests
    """
    source_dir = project_dir / settings.source_directory
    target_dir = project_dir / settings.output_directory
    include_dirs = [str(project_dir / include_dir) for include_dir in settings.include_dirs]

    requests = []
    for _name, source in sources:
        for idl_file in IdlFileScanner.scan(source_dir, source):
            requests.append(
                CompilationRequest(
                    source_directory=str(source_dir),
                    target_directory=str(target_dir),
                    idl_file=str(idl_file),
                    source=source,
                    include_dirs=include_dirs,
                )
            )
    return requests


def compile_command(args: CompileArgs) -> None:
    """Compile every IDL file selected by idl.ini.

    Examples:
        idlbridge compile                       # Compile current project
        idlbridge compile path/to/project      # Compile specific project
        idlbridge compile --compiler jacorb    # Use the JacORB compiler
        idlbridge compile --fail-on-error      # Fail on compiler errors
        idlbridge compile --debug              # Verbose compiler output
    """
    setup_logging(verbose=args.verbose)

    try:
        config = load_config(args.project_dir, args.config)
        settings = config.get_settings() if config else IdlSettings()
        sources = list(config.get_sources().items()) if config else [("default", Source())]
        runtime = RuntimeDetector.detect(config.get_runtime_overrides() if config else None)

        translator = TranslatorFactory.create_translator(
            args.compiler or settings.compiler,
            runtime=runtime,
            logger=logging.getLogger("idlbridge"),
            debug=args.debug or settings.debug,
            fail_on_error=args.fail_on_error or settings.fail_on_error,
        )

        requests = collect_requests(args.project_dir, settings, sources)
        if not requests:
            ErrorFormatter.print_warning(
                f"No IDL files found in {args.project_dir / settings.source_directory}"
            )
            sys.exit(0)

        start_time = time.time()
        with tqdm(
            total=len(requests), desc="Compiling", unit="file", file=sys.stderr, disable=args.verbose
        ) as progress:
            for request in requests:
                progress.set_postfix_str(Path(request.idl_file).name)
                translator.compile(request)
                progress.update(1)
        compile_time = time.time() - start_time

        ErrorFormatter.print_success(f"Compiled {len(requests)} IDL file(s)")
        print(f"Compile time: {compile_time:.2f}s")
        sys.exit(0)

    except (IdlConfigError, PlatformError) as e:
        ErrorFormatter.print_error("Configuration error", str(e))
        sys.exit(1)
    except TranslatorError as e:
        ErrorFormatter.print_error("IDL compilation failed", describe_failure(e))
        sys.exit(1)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def info_command(args: InfoArgs) -> None:
    """Show the detected runtime and the compiler class it selects."""
    try:
        config = load_config(args.project_dir, args.config)
        runtime = RuntimeDetector.detect(config.get_runtime_overrides() if config else None)
    except (IdlConfigError, PlatformError) as e:
        ErrorFormatter.print_error("Configuration error", str(e))
        sys.exit(1)

    for key, value in RuntimeDetector.get_runtime_info(runtime).items():
        print(f"{key:>22}: {value}")
    print(f"{'idlj_compiler_class':>22}: {CompilerResolver.compiler_class_name(runtime)}")
    print(f"{'supported_compilers':>22}: {', '.join(TranslatorFactory.supported_compilers())}")
    sys.exit(0)


def main() -> None:
    """idlbridge - drive external IDL compilers."""
    parser = argparse.ArgumentParser(
        prog="idlbridge",
        description="idlbridge - drive external IDL compilers",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"idlbridge {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Compile command
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile IDL files",
    )
    compile_parser.add_argument(
        "project_dir",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Project directory (default: current directory)",
    )
    compile_parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Configuration file (default: {DEFAULT_CONFIG_NAME} in the project directory)",
    )
    compile_parser.add_argument(
        "--compiler",
        default=None,
        choices=TranslatorFactory.supported_compilers(),
        help="IDL compiler family (default: from configuration, else idlj)",
    )
    compile_parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Fail when the compiler reports errors",
    )
    compile_parser.add_argument(
        "--debug",
        action="store_true",
        help="Run the compiler verbosely and log its command line",
    )
    compile_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show runtime and compiler selection",
    )
    info_parser.add_argument(
        "project_dir",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Project directory (default: current directory)",
    )
    info_parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Configuration file (default: {DEFAULT_CONFIG_NAME} in the project directory)",
    )

    # Parse arguments
    parsed_args = parser.parse_args()

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    PathValidator.validate_project_dir(parsed_args.project_dir)

    if parsed_args.command == "compile":
        compile_args = CompileArgs(
            project_dir=parsed_args.project_dir,
            config=parsed_args.config,
            compiler=parsed_args.compiler,
            fail_on_error=parsed_args.fail_on_error,
            debug=parsed_args.debug,
            verbose=parsed_args.verbose,
        )
        compile_command(compile_args)
    elif parsed_args.command == "info":
        info_args = InfoArgs(
            project_dir=parsed_args.project_dir,
            config=parsed_args.config,
        )
        info_command(info_args)


if __name__ == "__main__":
    main()
