"""Tests for differentiation capability markers."""

from sciproblem import AbstractADType, AutoFiniteDiff, AutoTorch, NoAD


def test_markers_are_ad_types():
    for marker in (NoAD(), AutoFiniteDiff(), AutoTorch()):
        assert isinstance(marker, AbstractADType)


def test_same_marker_compares_equal():
    assert NoAD() == NoAD()
    assert hash(NoAD()) == hash(NoAD())
    assert len({NoAD(), NoAD(), AutoTorch()}) == 2


def test_different_markers_differ():
    assert NoAD() != AutoFiniteDiff()
    assert AutoFiniteDiff() != AutoTorch()


def test_marker_repr():
    assert repr(NoAD()) == "NoAD()"
    assert repr(AutoTorch()) == "AutoTorch()"
