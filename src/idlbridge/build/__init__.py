"""
Build system components for idlbridge.

This module provides the translator implementation including:
- Argument building for each compiler family
- In-process compiler execution with captured output
- Outcome classification
- Translator selection by compiler name
"""

from .build_utils import fix_separator, to_relative_and_fix_separator
from .compilation_executor import CompilationExecutor
from .compiler import CompileResult, ICompilerTranslator
from .flag_builder import FlagBuilder, IdljFlagBuilder, JacorbFlagBuilder
from .output_classifier import OutputClassifier
from .translator import AbstractTranslator
from .translator_factory import TranslatorFactory
from .translator_idlj import IdljTranslator
from .translator_jacorb import JacorbTranslator

__all__ = [
    'AbstractTranslator',
    'CompilationExecutor',
    'CompileResult',
    'FlagBuilder',
    'ICompilerTranslator',
    'IdljFlagBuilder',
    'IdljTranslator',
    'JacorbFlagBuilder',
    'JacorbTranslator',
    'OutputClassifier',
    'TranslatorFactory',
    'fix_separator',
    'to_relative_and_fix_separator',
]
