"""
spg.generator
Random string generator bound to a default safety mode.
"""

import logging
import math
import numbers
from collections.abc import Mapping
from typing import Optional

from .config import Settings, load_config
from .errors import InvalidArgument
from .resolver import ConfigInput, GenerationConfig, ResolvedConfig, resolve
from .sampler import sample

logger = logging.getLogger(__name__)


def _check_length(length) -> int:
    if length is None:
        raise InvalidArgument("missing parameter: length")
    if isinstance(length, bool) or not isinstance(length, numbers.Real):
        raise InvalidArgument(f"expected length to be a number, but got {type(length).__name__}")
    if math.isnan(length) or math.isinf(length):
        raise InvalidArgument(f"expected length to be finite, but got {length}")
    if length < 0:
        raise InvalidArgument(f"expected length to be non-negative, but got {length}")
    return int(length)


class Generator:
    """
    Generates random strings from a mini-language string or a structured config.

    `default_safe` picks the random source when the config does not say;
    `unbiased` and `strict_safe` fall back to `settings` when omitted, and
    `settings` falls back to load_config() (environment only).
    """

    def __init__(
        self,
        default_safe: bool = False,
        unbiased: Optional[bool] = None,
        strict_safe: Optional[bool] = None,
        settings: Optional[Settings] = None,
    ):
        if settings is None and (unbiased is None or strict_safe is None):
            settings = load_config()
        self._default_safe = default_safe if isinstance(default_safe, bool) else False
        self._unbiased = settings.unbiased if unbiased is None else bool(unbiased)
        self._strict_safe = settings.strict_safe if strict_safe is None else bool(strict_safe)

    @property
    def default_safe(self) -> bool:
        return self._default_safe

    @property
    def unbiased(self) -> bool:
        return self._unbiased

    @property
    def strict_safe(self) -> bool:
        return self._strict_safe

    def __repr__(self) -> str:
        return (
            f"Generator(default_safe={self._default_safe}, "
            f"unbiased={self._unbiased}, strict_safe={self._strict_safe})"
        )

    def resolve(self, config: ConfigInput) -> ResolvedConfig:
        return resolve(config, self._default_safe, strict_safe=self._strict_safe)

    def generate(self, config: Optional[ConfigInput] = None, length=None) -> str:
        """
        Generate a random string of `length` characters.

        `config` is either a mini-language string such as "aA0." or a
        GenerationConfig / mapping with "characters" and optional "safe".
        An empty pool logs a warning and returns "".
        Raises InvalidArgument on missing or malformed arguments.
        """
        if config is None:
            raise InvalidArgument("missing parameter: config")
        if not isinstance(config, (str, GenerationConfig, Mapping)):
            raise InvalidArgument(
                f"expected config to be a string or a mapping, but got {type(config).__name__}"
            )
        n = _check_length(length)

        resolved = self.resolve(config)
        if not resolved.characters:
            logger.warning("got empty config string, ignoring generation...")
            return ""
        return sample(resolved.characters, n, resolved.safe, unbiased=self._unbiased)

    gen = generate


def create(
    default_safe: bool = False,
    *,
    unbiased: Optional[bool] = None,
    strict_safe: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> Generator:
    """
    Create a new Generator. A non-bool `default_safe` falls back to False.
    Pass `settings=load_config(path)` to apply a settings file.
    """
    return Generator(default_safe, unbiased=unbiased, strict_safe=strict_safe, settings=settings)


unsafe = Generator(False)
safe = Generator(True)
default = unsafe

gen = unsafe.generate
gens = safe.generate
