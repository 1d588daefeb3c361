"""
spg - the Simplest strong Password Generator.

Usage:
    import spg
    spg.gen("aA0", 16)             # fast PRNG
    spg.gens("aA0.", 24)           # secrets module
    spg.create(True).gen({"characters": "abc123"}, 8)
"""

from .errors import InvalidArgument
from .resolver import GenerationConfig, ResolvedConfig, parse_spec, resolve
from .sampler import sample
from .config import Settings, load_config
from .log import setup_logging
from .generator import Generator, create, default, gen, gens, safe, unsafe

__all__ = [
    "InvalidArgument",
    "GenerationConfig",
    "ResolvedConfig",
    "parse_spec",
    "resolve",
    "sample",
    "Settings",
    "load_config",
    "setup_logging",
    "Generator",
    "create",
    "default",
    "gen",
    "gens",
    "safe",
    "unsafe",
]
