import pytest

from spg import sampler
from spg.errors import InvalidArgument
from spg.sampler import sample


def test_exact_length_and_membership():
    for safe in (False, True):
        for unbiased in (False, True):
            out = sample("abc", 25, safe, unbiased=unbiased)
            assert len(out) == 25
            assert set(out) <= set("abc")


def test_zero_length():
    assert sample("abc", 0, True) == ""
    assert sample("abc", 0, False) == ""


def test_empty_pool_rejected():
    with pytest.raises(InvalidArgument):
        sample("", 3, False)


def test_secure_modulo_indexing(monkeypatch):
    monkeypatch.setattr(sampler, "token_bytes", lambda n: bytes([0, 1, 2, 255, 4])[:n])
    assert sample("abc", 5, True) == "abcab"


def test_secure_modulo_indexes_code_points(monkeypatch):
    monkeypatch.setattr(sampler, "token_bytes", lambda n: bytes([1, 2])[:n])
    assert sample("🔑é密", 2, True) == "é密"


def test_fast_mode_indexes_uniformly(monkeypatch):
    seen = []

    def fake_randrange(n):
        seen.append(n)
        return n - 1

    monkeypatch.setattr(sampler.random, "randrange", fake_randrange)
    assert sample("xyz", 3, False) == "zzz"
    assert seen == [3, 3, 3]


def test_duplicates_weight_selection(monkeypatch):
    monkeypatch.setattr(sampler, "token_bytes", lambda n: bytes(range(n)))
    out = sample("aab", 30, True)
    assert out.count("a") == 20
    assert out.count("b") == 10


def test_modulo_mode_never_reaches_past_byte_range(monkeypatch):
    pool = "a" * 256 + "b" * 744
    monkeypatch.setattr(sampler, "token_bytes", lambda n: bytes([255] * n))
    assert sample(pool, 4, True) == "aaaa"


def test_unbiased_mode_reaches_whole_pool(monkeypatch):
    pool = "a" * 256 + "b" * 744
    monkeypatch.setattr(sampler, "choice", lambda p: p[-1])
    assert sample(pool, 4, True, unbiased=True) == "bbbb"
