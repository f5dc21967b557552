from colorchannels.colors import Hsv, Rgb, Color, FloatColor
from colorchannels.channels import U8, U16, F32, F64
from colorchannels.types import Deg
import pytest


def test_new_is_plain_constructor():
    hsv = Hsv.new(Deg(450.0), F64(0.5), F64(0.25))
    assert hsv == Hsv(Deg(450.0), F64(0.5), F64(0.25))
    assert hsv.h == Deg(450.0)  # not wrapped
    assert hsv.s == 0.5
    assert hsv.v == 0.25
    assert hsv.channel is F64


def test_number_hue_becomes_deg():
    hsv = Hsv(120, U8(255), U8(153))
    assert isinstance(hsv.h, Deg)
    assert hsv.h == Deg(120)


def test_channels_must_match():
    with pytest.raises(TypeError):
        Hsv(Deg(0), U8(1), U16(1))
    with pytest.raises(TypeError):
        Hsv(Deg(0), 0.5, 0.5)


def test_capabilities():
    hsv = Hsv(Deg(0.0), F64(0.0), F64(0.0))
    assert isinstance(hsv, Color)
    assert isinstance(hsv, FloatColor)


def test_immutable():
    hsv = Hsv(Deg(0), U8(10), U8(20))
    with pytest.raises(AttributeError):
        hsv.s = U8(30)
    with pytest.raises(AttributeError):
        hsv.extra = 1


def test_equality_checks_channel_type():
    assert Hsv(Deg(0), U8(0), U8(0)) != Hsv(Deg(0), U16(0), U16(0))
    assert len({Hsv(Deg(0), U8(1), U8(2)), Hsv(Deg(0), U8(1), U8(2))}) == 1


def test_iter_and_repr():
    h, s, v = Hsv(Deg(10), U8(20), U8(30))
    assert (h, s, v) == (Deg(10), U8(20), U8(30))
    assert repr(Hsv(Deg(10), U8(20), U8(30))) == "Hsv(h=Deg(10), s=U8(20), v=U8(30))"


def test_clamp_s_leaves_hue():
    hsv = Hsv(Deg(400.0), F64(0.1), F64(0.9)).clamp_s(0.2, 0.8)
    assert hsv == Hsv(Deg(400.0), F64(0.2), F64(0.8))


def test_clamp_c():
    lo = Hsv(Deg(0), U8(10), U8(20))
    hi = Hsv(Deg(0), U8(100), U8(200))
    hsv = Hsv(Deg(500), U8(5), U8(250)).clamp_c(lo, hi)
    assert hsv == Hsv(Deg(500), U8(10), U8(200))


def test_inverse():
    assert Hsv(Deg(300), U8(200), U8(55)).inverse() == Hsv(Deg(120), U8(55), U8(200))
    assert Hsv(Deg(0), U16(65535), U16(39321)).inverse() == Hsv(Deg(180), U16(0), U16(26214))


def test_inverse_involution():
    for hsv in (
        Hsv(Deg(30.0), F64(0.25), F64(0.75)),
        Hsv(Deg(200), U16(12345), U16(54321)),
        Hsv(Deg(-90), U8(0), U8(255)),
    ):
        twice = hsv.inverse().inverse()
        assert twice.s == hsv.s
        assert twice.v == hsv.v
        assert float(twice.h) % 360 == pytest.approx(float(hsv.h) % 360)


def test_mix_goes_through_rgb():
    red = Hsv(Deg(0.0), F64(1.0), F64(0.5))
    blue = Hsv(Deg(240.0), F64(1.0), F64(0.5))
    assert red.mix(blue, F64(0.5)) == Hsv(Deg(300.0), F64(1.0), F64(0.25))


def test_mix_endpoints():
    a = Hsv(Deg(0), U8(255), U8(153))
    b = Hsv(Deg(120), U8(255), U8(153))
    assert a.mix(b, U8(0)) == a
    assert a.mix(b, U8(255)) == b


def test_saturate():
    hsv = Hsv(Deg(-30.0), F64(1.4), F64(-0.1)).saturate()
    assert hsv == Hsv(Deg(330.0), F64(1.0), F64(0.0))


def test_saturate_needs_float_channel():
    with pytest.raises(TypeError):
        Hsv(Deg(0), U8(1), U8(1)).saturate()


def test_to_hsv_float():
    assert Hsv(Deg(0.0), F64(0.0), F64(1.0)).to_hsv(F32) == Hsv(Deg(0.0), F32(0.0), F32(1.0))
    assert Hsv(Deg(0.0), F64(1.0), F64(0.6)).to_hsv(F32) == Hsv(Deg(0.0), F32(1.0), F32(0.6))
    assert Hsv(Deg(120.0), F64(1.0), F64(0.6)).to_hsv(F32) == Hsv(Deg(120.0), F32(1.0), F32(0.6))
    assert Hsv(Deg(240.0), F64(1.0), F64(0.6)).to_hsv(F32) == Hsv(Deg(240.0), F32(1.0), F32(0.6))


def test_to_hsv_does_not_wrap():
    assert Hsv(Deg(400.0), F64(1.0), F64(0.5)).to_hsv(F32).h == Deg(400.0)


def test_to_hsv_integer_casts_hue():
    hsv = Hsv(Deg(120.7), F64(1.0), F64(0.6)).to_hsv(U8)
    assert hsv == Hsv(Deg(120), U8(255), U8(153))


def test_to_hsv_default_channel():
    hsv = Hsv(Deg(10), U16(1), U16(2))
    assert hsv.to_hsv() == hsv


def test_to_hsv_round_trip():
    hsv = Hsv(Deg(200), U16(12345), U16(54321))
    back = hsv.to_hsv(U8).to_hsv(U16)
    assert back.h == hsv.h
    assert abs(back.s - hsv.s) <= 129
    assert abs(back.v - hsv.v) <= 129


def test_to_rgb_default_channel():
    rgb = Hsv(Deg(0), U16(65535), U16(39321)).to_rgb()
    assert rgb == Rgb(U16(39321), U16(0), U16(0))


def test_packed_constructors_not_implemented():
    with pytest.raises(NotImplementedError):
        Hsv.from_u32(0xFF9900, U8)
    with pytest.raises(NotImplementedError):
        Hsv.from_u64(0xFFFF99990000, U16)


def test_mix_with_plain_fraction_on_integer_channels():
    black = Hsv(Deg(0), U8(0), U8(0))
    white = Hsv(Deg(0), U8(0), U8(255))
    assert black.mix(white, 0.5) == Hsv(Deg(0), U8(0), U8(128))


def test_mix_of_unsaturated_value():
    hsv = Hsv(Deg(0.0), F64(0.5), F64(-0.5))
    assert hsv.mix(hsv, F64(0.5)) == Hsv(Deg(180.0), F64(0.0), F64(0.0))
