"""
spg.sampler
Draws characters from a pool with the fast PRNG or the secrets module.
"""

import random
from secrets import choice, token_bytes

from .errors import InvalidArgument


def _sample_fast(pool: str, length: int) -> str:
    n = len(pool)
    return "".join(pool[random.randrange(n)] for _ in range(length))


def _sample_secure_modulo(pool: str, length: int) -> str:
    n = len(pool)
    return "".join(pool[b % n] for b in token_bytes(length))


def _sample_secure_uniform(pool: str, length: int) -> str:
    return "".join(choice(pool) for _ in range(length))


def sample(pool: str, length: int, safe: bool, unbiased: bool = False) -> str:
    """
    Return `length` characters drawn with replacement from `pool`.

    safe=False uses the `random` module (not suitable for secrets).
    safe=True reads one byte per character from `secrets.token_bytes` and indexes
    with `byte % len(pool)`. That is biased whenever len(pool) does not divide 256
    (e.g. with 62 characters the first 8 are slightly more likely). A pool longer
    than 256 characters is worse: a byte is at most 255, so characters past index
    255 are never drawn. Pass unbiased=True to use `secrets.choice` instead,
    which is uniform for any pool size.
    """
    if not pool:
        raise InvalidArgument("cannot sample from an empty pool")
    if length == 0:
        return ""
    if not safe:
        return _sample_fast(pool, length)
    if unbiased:
        return _sample_secure_uniform(pool, length)
    return _sample_secure_modulo(pool, length)
