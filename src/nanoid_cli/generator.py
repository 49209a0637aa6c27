"""
This module configures the nanoid library and hands out generator instances.

The library itself accepts any alphabet and size; the checks below reject
alphabets it cannot draw uniformly from before any ID is produced.
"""

import math
from typing import Optional

from nanoid import generate
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError, GenerationError
from .logger import logger

DEFAULT_ALPHABET = "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_LENGTH = 21

MIN_ALPHABET_LENGTH = 2
MAX_ALPHABET_LENGTH = 256


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    alphabet: str = DEFAULT_ALPHABET
    length_hint: int = Field(default=DEFAULT_LENGTH)

    @field_validator("length_hint")
    @classmethod
    def _check_length_hint(cls, value: int) -> int:
        if value < 1:
            raise ValueError("invalid length")
        return value

    @field_validator("alphabet", mode="before")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        if not isinstance(value, str) or not value:
            raise ValueError("invalid alphabet")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("alphabet contains invalid UTF-8 characters") from None
        if len(set(value)) != len(value):
            raise ValueError("duplicate characters in alphabet")
        if len(value) > MAX_ALPHABET_LENGTH:
            raise ValueError(f"alphabet length exceeds {MAX_ALPHABET_LENGTH}")
        if len(value) < MIN_ALPHABET_LENGTH:
            raise ValueError(f"alphabet length is less than {MIN_ALPHABET_LENGTH}")
        return value


class Generator:
    """A configured, reusable source of Nano IDs."""

    def __init__(self, config: GeneratorConfig):
        self._config = config

    @property
    def alphabet(self) -> str:
        return self._config.alphabet

    @property
    def length_hint(self) -> int:
        return self._config.length_hint

    def new(self, length: int) -> str:
        if length < 1:
            raise GenerationError("invalid length")
        try:
            return generate(alphabet=self.alphabet, size=length)
        except (ValueError, OSError) as e:
            raise GenerationError(str(e)) from e

    def entropy_bits(self, length: int) -> float:
        return math.log2(len(self.alphabet)) * length


def _first_error(exc: ValidationError) -> str:
    # pydantic prefixes messages raised from validators with "Value error, "
    message = exc.errors()[0]["msg"]
    return message.removeprefix("Value error, ")


def new_generator(*, length_hint: Optional[int] = None, alphabet: Optional[str] = None) -> Generator:
    """
    Build a generator from named options.

    Args:
        length_hint: Typical length of the IDs to generate
        alphabet: Custom alphabet overriding the default one

    Raises:
        ConfigurationError: If the options are rejected
    """
    options = {}
    if length_hint is not None:
        options["length_hint"] = length_hint
    if alphabet is not None:
        options["alphabet"] = alphabet
    try:
        config = GeneratorConfig(**options)
    except ValidationError as e:
        raise ConfigurationError(_first_error(e)) from e
    logger.debug("Configured generator: alphabet size %d, length hint %d", len(config.alphabet), config.length_hint)
    return Generator(config)
