"""Tests for random byte sources."""

import pytest
from octcore import PRNGByteSource, ConstantByteSource, SequenceByteSource


def test_prng_is_deterministic_per_seed():
    first = PRNGByteSource(42)
    second = PRNGByteSource(42)
    draws = [first() for _ in range(8)]
    assert draws == [second() for _ in range(8)]
    assert all(0 <= b <= 255 for b in draws)


def test_prng_advances():
    source = PRNGByteSource(0)
    assert len({source() for _ in range(32)}) > 1


def test_constant_source():
    source = ConstantByteSource(0x1FF)
    assert source() == 0xFF
    assert source() == 0xFF


def test_sequence_source_cycles():
    source = SequenceByteSource([1, 2, 3])
    assert [source() for _ in range(5)] == [1, 2, 3, 1, 2]


def test_sequence_source_requires_values():
    with pytest.raises(ValueError):
        SequenceByteSource([])
