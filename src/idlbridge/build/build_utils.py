"""Build utilities for idlbridge.

This module provides path helpers used when building compiler arguments
and formatting compiler command lines for logs.
"""

import os
from pathlib import Path
from typing import Sequence, Union

from ..errors import TranslatorError

PathLike = Union[str, Path]


def fix_separator(filename: str) -> str:
    """
    Convert Windows separators to forward slashes.

    Args:
        filename: File name to fix

    Returns:
        filename with every backslash replaced by a forward slash
    """
    return filename.replace("\\", "/")


def get_canonical_path(path: PathLike) -> str:
    """
    Get the canonical absolute path of a file or directory.

    Args:
        path: Path to canonicalize (need not exist)

    Returns:
        Canonical path string

    Raises:
        TranslatorError: If the path cannot be canonicalized
    """
    try:
        return str(Path(path).resolve())
    except (OSError, RuntimeError) as e:
        raise TranslatorError(
            f"Can't canonicalize system path: {Path(path).absolute()}"
        ) from e


def to_relative_and_fix_separator(
    from_dir: PathLike,
    to_dir: PathLike,
    replace_slashes_with_dashes: bool = False
) -> str:
    """
    Express to_dir relative to from_dir with forward slashes.

    Relative to_dir values are taken relative to from_dir. The result is "."
    when both name the same directory, the path below from_dir when to_dir
    is a descendant, and the canonical absolute path otherwise.

    Args:
        from_dir: Base directory (usually the working directory)
        to_dir: Directory to express
        replace_slashes_with_dashes: Also replace "/" and ":" with "-" so the
            result can be used as a single file name

    Returns:
        Relative (or absolute) path string

    Example:
        >>> to_relative_and_fix_separator("/work", "/work/target/idl")
        'target/idl'
    """
    to_path = Path(to_dir)
    if not to_path.is_absolute():
        to_path = Path(from_dir) / to_path

    basedir_path = get_canonical_path(from_dir)
    absolute_path = get_canonical_path(to_path)

    # Canonical roots ("/", "C:\\") already end with a separator
    prefix = basedir_path if basedir_path.endswith(os.sep) else basedir_path + os.sep

    if absolute_path == basedir_path:
        relative = "."
    elif absolute_path.startswith(prefix):
        relative = absolute_path[len(prefix):]
    else:
        relative = absolute_path

    relative = fix_separator(relative)

    if replace_slashes_with_dashes:
        relative = relative.replace("/", "-")
        relative = relative.replace(":", "-")

    return relative


def format_command_line(class_name: str, arguments: Sequence[str]) -> str:
    """
    Format a compiler invocation for logging.

    Args:
        class_name: Compiler class name
        arguments: Compiler arguments

    Returns:
        Space separated command line
    """
    return " ".join([class_name, *arguments])
