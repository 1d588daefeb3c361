"""
spg.resolver

Turns a generation config into a concrete character pool and safety flag.

Two input forms are accepted:
- a structured config (GenerationConfig or a mapping with "characters" and optional "safe")
- a mini-language string, one directive per character:
    a A 0 . - _ [ ]   append a character class (see spg.charsets)
    u / s             use the fast / secure random source
    c                 stop; everything after the first "c" is appended verbatim
  Any other character is logged and skipped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from . import charsets
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    characters: str
    safe: Optional[bool] = None


@dataclass(frozen=True)
class ResolvedConfig:
    safe: bool
    characters: str


ConfigInput = Union[str, GenerationConfig, Mapping[str, Any]]


def _type_name(value: Any) -> str:
    return type(value).__name__


def parse_spec(spec: str, default_safe: bool) -> GenerationConfig:
    """
    Parse a mini-language string into a GenerationConfig.
    The last "u"/"s" seen before "c" (or the end) decides safety.
    """
    characters = ""
    safe = default_safe
    stopped = False
    for ch in spec:
        if ch in charsets.CLASSES:
            characters += charsets.CLASSES[ch]
        elif ch == charsets.UNSAFE:
            safe = False
        elif ch == charsets.SAFE:
            safe = True
        elif ch == charsets.ESCAPE:
            stopped = True
            break
        else:
            logger.warning("unrecognized character %s", ch)

    if stopped:
        characters += spec[spec.index(charsets.ESCAPE) + 1:]
    return GenerationConfig(characters=characters, safe=safe)


def _fields(config: Union[GenerationConfig, Mapping[str, Any]]):
    if isinstance(config, GenerationConfig):
        return config.characters, config.safe
    return config.get("characters"), config.get("safe")


def resolve(config: ConfigInput, default_safe: bool, strict_safe: bool = False) -> ResolvedConfig:
    """
    Validate `config` and return the ResolvedConfig it describes.
    Strings are parsed first and then validated like structured input.
    An empty pool is returned as-is; sampling it is the caller's decision.
    """
    if isinstance(config, str):
        config = parse_spec(config, default_safe)
    elif not isinstance(config, (GenerationConfig, Mapping)):
        raise InvalidArgument(
            f"expected config to be a string or a mapping, but got {_type_name(config)}"
        )

    characters, safe = _fields(config)

    if safe is not None and not isinstance(safe, bool):
        # falsy non-bools (0, "") are read as False unless strict,
        # so a safe-default generator uses the fast RNG for them
        if strict_safe or safe:
            raise InvalidArgument(
                f"expected config.safe to be a boolean, but got {_type_name(safe)}"
            )
        safe = False
    if not isinstance(characters, str):
        raise InvalidArgument(
            f"expected config.characters to be a string, but got {_type_name(characters)}"
        )

    return ResolvedConfig(
        safe=default_safe if safe is None else safe,
        characters=characters,
    )
