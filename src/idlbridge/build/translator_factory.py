"""
Translator factory for idlbridge.

This module maps the configured compiler name to a translator. The choice
is made once per build, not per file.
"""

from typing import Dict, Optional, Type

from ..errors import ConfigurationError
from .translator import AbstractTranslator
from .translator_idlj import IdljTranslator
from .translator_jacorb import JacorbTranslator


class TranslatorFactory:
    """
    Factory for creating compiler translators.

    Example usage:
        translator = TranslatorFactory.create_translator(
            "jacorb",
            fail_on_error=True,
        )
        translator.compile(request)
    """

    DEFAULT_COMPILER = "idlj"

    TRANSLATORS: Dict[str, Type[AbstractTranslator]] = {
        "idlj": IdljTranslator,
        "jacorb": JacorbTranslator,
    }

    @classmethod
    def supported_compilers(cls) -> list:
        """Names accepted by create_translator()."""
        return sorted(cls.TRANSLATORS)

    @classmethod
    def create_translator(cls, compiler: Optional[str] = None, **options) -> AbstractTranslator:
        """
        Create the translator for a compiler family.

        Args:
            compiler: Compiler name ("idlj" or "jacorb"); idlj when None
            **options: Forwarded to the translator constructor
                (loader_facade, runtime, logger, debug, fail_on_error)

        Returns:
            Translator instance

        Raises:
            ConfigurationError: If the compiler is not supported
        """
        name = compiler or cls.DEFAULT_COMPILER
        translator_class = cls.TRANSLATORS.get(name)
        if translator_class is None:
            raise ConfigurationError(f"Compiler not supported: {name}")
        return translator_class(**options)
