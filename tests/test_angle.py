from colorchannels.types import Deg
import pytest


def test_construction_does_not_wrap():
    assert Deg(450).value == 450
    assert Deg(-30.5).value == -30.5


def test_wrap():
    assert Deg(-90).wrap() == Deg(270)
    assert Deg(725.5).wrap() == Deg(5.5)
    assert Deg(120).wrap() == Deg(120)


def test_wrap_keeps_number_kind():
    assert isinstance(Deg(400).wrap().value, int)
    assert Deg(400).wrap().value == 40
    assert isinstance(Deg(400.0).wrap().value, float)


def test_arithmetic_does_not_wrap():
    assert Deg(10) + Deg(20) == Deg(30)
    assert Deg(350) + 20 == Deg(370)
    assert 20 + Deg(350) == Deg(370)
    assert Deg(10) - 40 == Deg(-30)
    assert -Deg(45.0) == Deg(-45.0)


def test_equality_with_numbers():
    assert Deg(120) == 120
    assert Deg(120) == Deg(120.0)
    assert hash(Deg(120)) == hash(Deg(120.0))


def test_rejects_non_numbers():
    with pytest.raises(TypeError):
        Deg("90")
    with pytest.raises(TypeError):
        Deg(True)


def test_immutable():
    angle = Deg(10)
    with pytest.raises(AttributeError):
        angle._value = 20


def test_conversions():
    assert float(Deg(90)) == 90.0
    assert int(Deg(90.9)) == 90
    assert repr(Deg(90)) == "Deg(90)"


def test_wrap_tiny_negative_stays_below_full_turn():
    wrapped = Deg(-1e-20).wrap()
    assert 0.0 <= wrapped.value < 360.0
    assert wrapped == Deg(0.0)
    assert Deg(-360.0).wrap() == Deg(0.0)
