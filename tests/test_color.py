"""Tests for shade_probe.core.color — channel arithmetic and hex forms."""

import dataclasses
import math

import pytest
from shade_probe.core.color import BLACK, TRANSPARENT, WHITE, Color


class TestConstruction:
    def test_alpha_defaults_to_opaque(self):
        assert Color(1, 2, 3).a == 0xFF

    def test_from_argb(self):
        assert Color.from_argb(0x80, 1, 2, 3) == Color(r=1, g=2, b=3, a=0x80)

    def test_from_pixel_is_bgrx(self):
        assert Color.from_pixel(bytes([0x56, 0x34, 0x12, 0x00])) == Color(r=0x12, g=0x34, b=0x56, a=0xFF)

    def test_from_pixel_ignores_padding(self):
        assert Color.from_pixel(bytes([1, 2, 3, 0xAA])).a == 0xFF

    def test_constants(self):
        assert TRANSPARENT.a == 0
        assert BLACK == Color(0, 0, 0, 0xFF)
        assert WHITE == Color(0xFF, 0xFF, 0xFF, 0xFF)

    def test_frozen(self):
        c = Color(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.r = 9  # type: ignore[misc]

    def test_equality_is_per_channel(self):
        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert Color(1, 2, 3) != Color(1, 2, 3, a=0)
        assert len({Color(1, 2, 3), Color(1, 2, 3)}) == 1


class TestHex:
    def test_short(self):
        assert Color.from_hex('#fff') == WHITE

    def test_long(self):
        assert Color.from_hex('#0e737b') == Color(14, 115, 123)

    def test_with_alpha_no_hash(self):
        assert Color.from_hex('80ff0000') == Color(255, 0, 0, a=0x80)

    def test_uppercase(self):
        assert Color.from_hex('#ABCDEF') == Color(0xAB, 0xCD, 0xEF)

    def test_invalid(self):
        for text in ('invalid', '#ff', '#fffff', ''):
            with pytest.raises(ValueError):
                Color.from_hex(text)

    def test_to_hex(self):
        assert Color(0x12, 0x34, 0x56).to_hex() == '#123456'

    def test_to_hex_alpha(self):
        assert Color(0x12, 0x34, 0x56).to_hex(alpha=True) == '#ff123456'

    def test_compact_form(self):
        assert Color(0xEE, 0xEE, 0xEE).to_hex(compact=True) == '#eee'
        assert Color(0x00, 0x33, 0xFF).to_hex(compact=True) == '#03f'

    def test_compact_falls_back_to_long(self):
        assert Color(0xF7, 0xF7, 0xF7).to_hex(compact=True) == '#f7f7f7'


class TestPacked:
    def test_argb_layout(self):
        assert int(Color.from_argb(0xFF, 0x12, 0x34, 0x56)) == 0xFF123456

    def test_transparent(self):
        assert int(TRANSPARENT) == 0

    def test_alpha_in_high_byte(self):
        assert int(Color(0, 0, 0, a=0x80)) == 0x80000000


class TestCompactable:
    def test_compactable(self):
        assert Color(0xFF, 0xFF, 0xFF).is_compactable()
        assert Color(0xEE, 0xEE, 0xEE).is_compactable()
        assert Color(0x00, 0x00, 0x00).is_compactable()

    def test_not_compactable(self):
        assert not Color(0xF7, 0xF7, 0xF7).is_compactable()

    def test_one_channel_is_enough_to_fail(self):
        assert not Color(0xFF, 0xF7, 0xFF).is_compactable()

    def test_alpha_ignored(self):
        assert Color(0x11, 0x22, 0x33, a=0x12).is_compactable()


class TestDistance:
    def test_same_colour(self):
        assert Color(10, 20, 30).distance(Color(10, 20, 30)) == 0.0

    def test_black_white(self):
        assert BLACK.distance(WHITE) == pytest.approx(math.sqrt(3 * 255**2))

    def test_symmetry(self):
        a = Color(100, 50, 200)
        b = Color(120, 60, 180)
        assert a.distance(b) == b.distance(a)

    def test_alpha_excluded(self):
        assert Color(1, 2, 3, a=0).distance(Color(1, 2, 3)) == 0.0

    def test_single_channel(self):
        assert Color(0, 0, 0).distance(Color(0, 3, 4)) == 5.0


class TestIsDark:
    def test_black_and_white(self):
        assert BLACK.is_dark()
        assert not WHITE.is_dark()

    def test_mid_grey_boundary(self):
        assert Color(127, 127, 127).is_dark()
        assert not Color(128, 128, 128).is_dark()

    def test_pure_green_counts_as_dark(self):
        # nearer to black (255) than to white (~360.6) despite high luminance
        assert Color(0, 255, 0).is_dark()


class TestInterpolate:
    def test_amount_zero_is_self(self):
        a = Color(10, 20, 30)
        assert a.interpolate(Color(200, 100, 50), 0.0) == a

    def test_amount_one_is_other(self):
        b = Color(200, 100, 50)
        assert Color(10, 20, 30).interpolate(b, 1.0) == b

    def test_alpha_from_self(self):
        a = Color(10, 20, 30, a=0x80)
        assert a.interpolate(Color(200, 100, 50, a=0), 1.0) == Color(200, 100, 50, a=0x80)

    def test_rounds_up(self):
        # 0.5 -> 1, 1.5 -> 2, 127.5 -> 128
        assert BLACK.interpolate(Color(1, 3, 255), 0.5) == Color(1, 2, 128)

    def test_small_step_rounds_up(self):
        assert BLACK.interpolate(Color(10, 10, 10), 0.01) == Color(1, 1, 1)

    def test_out_of_range_amount_saturates(self):
        assert BLACK.interpolate(WHITE, 2.0) == WHITE
        assert WHITE.interpolate(BLACK, 2.0) == BLACK

    def test_lighten(self):
        assert BLACK.lighten(0.5) == Color(128, 128, 128)
        assert Color(10, 20, 30).lighten(1.0) == WHITE

    def test_darken(self):
        assert WHITE.darken(0.5) == Color(128, 128, 128)
        assert Color(10, 10, 10).darken(0.1) == Color(9, 9, 9)
        assert Color(10, 20, 30).darken(1.0) == BLACK

    def test_lighten_keeps_alpha(self):
        assert Color(0, 0, 0, a=0x40).lighten(1.0).a == 0x40
