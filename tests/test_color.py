"""
Tests for the color package: value object, conversions and hex notation.
"""

import pytest

from cistools.color import (
    Color, rgb_to_int, int_to_rgb, hsl_to_rgb, rgb_to_hsl, hsv_to_rgb,
    rgb_to_hsv, rgb_to_cmyk, cmyk_to_rgb, sanitize_hex_string, hex_to_alpha,
    alpha_to_hex, parse_hex_color, DEFAULT_HEX_COLOR
)


class TestColorState:
    """Test construction and clamping of the stored state."""
    
    def test_new_color_is_opaque_black(self):
        """Test the empty color."""
        color = Color()
        assert color.get_packed_int() == 0
        assert color.alpha == 1.0
        assert color.get_rgba() == (0, 0, 0, 1.0)
    
    def test_packed_int_is_clamped(self):
        """Test that out-of-range packed values are clamped, not rejected."""
        color = Color()
        color.set_from_packed_int(-5, alpha=2.0)
        assert color.get_packed_int() == 0
        assert color.alpha == 1.0
        
        color.set_from_packed_int(2 ** 30, alpha=-1.0)
        assert color.get_packed_int() == 0xFFFFFF
        assert color.alpha == 0.0
    
    def test_constructor_clamps(self):
        """Test that direct construction keeps the invariants."""
        color = Color(value=0x1FFFFFF, alpha=7)
        assert color.value == 0xFFFFFF
        assert color.alpha == 1.0
    
    def test_rgba_channels_are_clamped(self):
        """Test that each channel is clamped to [0, 255]."""
        color = Color.from_rgba(300, -20, 128, 0.5)
        assert color.get_rgba() == (255, 0, 128, 0.5)
    
    def test_copy_is_independent(self):
        """Test that copies do not share state."""
        original = Color.from_rgba(10, 20, 30)
        duplicate = original.copy()
        assert duplicate == original
        
        duplicate.set_from_rgba(1, 2, 3)
        assert original.get_rgb() == (10, 20, 30)
        assert duplicate != original
    
    def test_set_alpha(self):
        """Test alpha updates keep the color."""
        color = Color.from_hex("#123456")
        color.set_alpha(0.25)
        assert color.get_rgba() == (0x12, 0x34, 0x56, 0.25)
        color.set_alpha(3)
        assert color.alpha == 1.0

    def test_non_finite_input_is_clamped(self):
        """Test that NaN and infinities never leave the valid range."""
        nan = float('nan')
        inf = float('inf')

        color = Color.from_rgba(1, 2, 3, nan)
        assert color.alpha == 0.0
        color.set_alpha(inf)
        assert color.alpha == 1.0

        color.set_from_packed_int(inf)
        assert color.get_packed_int() == 0xFFFFFF
        color.set_from_packed_int(-inf, alpha=nan)
        assert color.get_rgba() == (0, 0, 0, 0.0)

        color.set_from_hsla(nan, 50, 50)
        assert color.get_rgb() == (191, 63, 63)

        color.set_from_hsv(0.5, nan, 1)
        assert color.get_rgba() == (255, 255, 255, 1.0)

        color.set_from_cmyk(nan, nan, nan, inf)
        assert color.get_rgb() == (0, 0, 0)

        assert Color(value=nan, alpha=-inf).get_rgba() == (0, 0, 0, 0.0)


class TestPackedConversions:
    """Test packing and unpacking of RGB channels."""
    
    def test_rgb_to_int(self):
        """Test channel packing."""
        assert rgb_to_int(0x12, 0x34, 0x56) == 0x123456
        assert rgb_to_int(255, 255, 255) == 16777215
        assert rgb_to_int(255, 0, 0) == 255 * 65536
    
    def test_round_trip(self):
        """Test that unpacking reverses packing."""
        samples = [(0, 0, 0), (255, 255, 255), (1, 2, 3), (18, 52, 86), (255, 0, 170), (0, 128, 255)]
        for rgb in samples:
            assert int_to_rgb(rgb_to_int(*rgb)) == rgb
        
        for value in (0, 1, 255, 256, 65535, 65536, 0x123456, 16777215):
            assert rgb_to_int(*int_to_rgb(value)) == value


class TestHexNotation:
    """Test parsing and formatting of hex colors."""
    
    def test_short_white(self):
        """Test the three digit white form."""
        color = Color.from_hex("#fff")
        assert color.get_packed_int() == 16777215
        assert color.alpha == 1.0
    
    def test_without_hashtag(self):
        """Test that the hashtag is optional."""
        assert Color.from_hex("f00").get_rgb() == (255, 0, 0)
        assert Color.from_hex("f0a").get_rgb() == (255, 0, 170)
        assert Color.from_hex("  #00FF00  ").get_rgb() == (0, 255, 0)
    
    def test_invalid_falls_back_to_white(self):
        """Test that unusable strings never raise."""
        for bad in ("not-a-color", "", "#", "#12345", "#gggggg", "#123456789", None, 42):
            color = Color()
            color.set_from_hex_string(bad)
            assert color.get_packed_int() == 0xFFFFFF
            assert color.alpha == 1.0
    
    def test_custom_default(self):
        """Test fallback to a caller supplied default."""
        color = Color()
        color.set_from_hex_string("xyz", default="#000")
        assert color.get_rgb() == (0, 0, 0)

        # An unusable default falls back to white
        color.set_from_hex_string("xyz", default="nope")
        assert color.get_packed_int() == 0xFFFFFF

    def test_three_letter_word_can_be_hex(self):
        """Test that words made of hex digits parse as colors."""
        color = Color()
        color.set_from_hex_string("bad", default="#000")
        assert color.get_rgb() == (0xBB, 0xAA, 0xDD)

    def test_repeated_hashtags(self):
        """Test that every leading hashtag is stripped."""
        assert Color.from_hex("##fff").get_packed_int() == 0xFFFFFF
        assert Color.from_hex("###f00").get_rgb() == (255, 0, 0)
        assert sanitize_hex_string("##A1B2C3") == "#a1b2c3"
        assert parse_hex_color("##ff000032") == (0xFF0000, 0.5)
    
    def test_alpha_is_a_percentage(self):
        """Test that alpha digits are read as a hex percentage."""
        assert parse_hex_color("#ff000032") == (0xFF0000, 0.5)
        assert parse_hex_color("#ff000064") == (0xFF0000, 1.0)
        assert parse_hex_color("#ff0000ff") == (0xFF0000, 1.0)
        assert parse_hex_color("#ff000000") == (0xFF0000, 0.0)
    
    def test_single_alpha_digit_is_doubled(self):
        """Test the four and seven digit forms."""
        assert parse_hex_color("#f003") == (0xFF0000, 0.51)
        assert parse_hex_color("#f008") == (0xFF0000, 1.0)
        assert parse_hex_color("ff00001") == (0xFF0000, 0.17)
    
    def test_sanitize_hex_string(self):
        """Test sanitizing of hex notation."""
        assert sanitize_hex_string("abc") == "#abc"
        assert sanitize_hex_string("#A1B2C3") == "#a1b2c3"
        assert sanitize_hex_string("zzz") == DEFAULT_HEX_COLOR
        assert sanitize_hex_string("zzz", "#000000") == "#000000"
    
    def test_alpha_digits(self):
        """Test alpha digit conversions."""
        assert hex_to_alpha("32") == 0.5
        assert hex_to_alpha("#0") == 0.0
        assert hex_to_alpha("a") == 1.0
        assert alpha_to_hex(0.5) == "32"
        assert alpha_to_hex(0.29) == "1d"
        assert alpha_to_hex(1.0) == "64"
        assert alpha_to_hex(0.0) == "00"
    
    def test_hex_output(self):
        """Test hex formatting is zero padded."""
        color = Color.from_rgba(0, 255, 0, 0.5)
        assert color.get_hex_string() == "00ff00"
        assert color.get_hex_string(with_alpha=True) == "00ff0032"
        assert color.get_css_hex() == "#00ff00"
        assert Color(value=0x0000FF).get_css_hex() == "#0000ff"
    
    def test_hex_output_round_trip(self):
        """Test that formatted hex parses back to the same color."""
        color = Color.from_rgba(18, 52, 86, 0.29)
        assert Color.from_hex(color.get_css_hex(with_alpha=True)) == color
    
    def test_css_rgba(self):
        """Test CSS rgba formatting."""
        assert Color.from_rgba(255, 0, 170, 0.5).get_css_rgba() == "rgba(255,0,170,0.5)"
        assert Color.from_rgba(255, 0, 170).get_css_rgba() == "rgba(255,0,170,1)"
        assert Color.from_rgba(255, 0, 170, 0).get_css_rgba() == "rgba(255,0,170,0)"

    def test_css_rgba_keeps_alpha_precision(self):
        """Test that alpha is printed without losing digits."""
        color = Color.from_rgba(1, 2, 3, 0.123456789)
        assert color.get_css_rgba() == "rgba(1,2,3,0.123456789)"


class TestHsl:
    """Test HSL conversions."""
    
    def test_hsl_to_rgb_primaries(self):
        """Test hue sextants at full saturation."""
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(60, 100, 50) == (255, 255, 0)
        assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
        assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)
        assert hsl_to_rgb(360, 100, 50) == (255, 0, 0)
    
    def test_hsl_to_rgb_grays(self):
        """Test achromatic colors."""
        assert hsl_to_rgb(0, 0, 0) == (0, 0, 0)
        assert hsl_to_rgb(0, 0, 100) == (255, 255, 255)
        assert hsl_to_rgb(200, 0, 100) == (255, 255, 255)
    
    def test_hsl_inputs_are_clamped(self):
        """Test out-of-range HSL input."""
        assert hsl_to_rgb(-30, 150, 50) == (255, 0, 0)
        assert hsl_to_rgb(0, 0, 120) == (255, 255, 255)
    
    def test_rgb_to_hsl(self):
        """Test RGB to HSL."""
        assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == (240, 100, 50)
        assert rgb_to_hsl(255, 0, 255) == (300, 100, 50)
        assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)
        assert rgb_to_hsl(0, 0, 0) == (0, 0, 0)
        assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)
    
    def test_round_trip_within_tolerance(self):
        """Test that HSL survives the 8-bit round trip within one unit."""
        samples = [(0, 100, 50), (120, 100, 50), (210, 50, 40), (30, 80, 60), (300, 60, 25)]
        for hsl in samples:
            result = rgb_to_hsl(*hsl_to_rgb(*hsl))
            for expected, actual in zip(hsl, result):
                assert abs(expected - actual) <= 1, (hsl, result)
    
    def test_color_hsla(self):
        """Test HSLA setter and getters."""
        color = Color()
        color.set_from_hsla(0, 100, 50, 0.25)
        assert color.get_rgba() == (255, 0, 0, 0.25)
        assert color.get_hsl() == (0, 100, 50)
        assert color.get_hsla() == (0, 100, 50, 0.25)


class TestHsv:
    """Test HSV conversions."""
    
    def test_hsv_to_rgb(self):
        """Test HSV to RGB."""
        assert hsv_to_rgb(0, 1, 1) == (255, 0, 0)
        assert hsv_to_rgb(1 / 3, 1, 1) == (0, 255, 0)
        assert hsv_to_rgb(1, 1, 1) == (255, 0, 0)
        assert hsv_to_rgb(0, 0, 0.5) == (128, 128, 128)
    
    def test_rgb_to_hsv(self):
        """Test RGB to HSV."""
        assert rgb_to_hsv(255, 0, 0) == (0.0, 1.0, 1.0)
        assert rgb_to_hsv(0, 0, 0) == (0.0, 0.0, 0.0)
        assert rgb_to_hsv(255, 255, 255) == (0.0, 0.0, 1.0)
        assert rgb_to_hsv(0, 0, 255) == pytest.approx((2 / 3, 1.0, 1.0))
        assert rgb_to_hsv(255, 0, 128)[0] == pytest.approx((6 - 128 / 255) / 6)
    
    def test_color_hsv_resets_alpha(self):
        """Test that the HSV setter makes the color opaque."""
        color = Color.from_rgba(0, 0, 0, 0.3)
        color.set_from_hsv(0, 1, 1)
        assert color.get_rgba() == (255, 0, 0, 1.0)
        assert color.get_hsv() == (0.0, 1.0, 1.0)


class TestCmyk:
    """Test CMYK conversions."""
    
    def test_rgb_to_cmyk(self):
        """Test RGB to CMYK."""
        assert rgb_to_cmyk(255, 0, 0) == {'c': 0.0, 'm': 100.0, 'y': 100.0, 'k': 0.0}
        assert rgb_to_cmyk(0, 0, 0) == {'c': 0.0, 'm': 0.0, 'y': 0.0, 'k': 100.0}
        assert rgb_to_cmyk(255, 255, 255) == {'c': 0.0, 'm': 0.0, 'y': 0.0, 'k': 0.0}
    
    def test_cmyk_to_rgb(self):
        """Test CMYK to RGB."""
        assert cmyk_to_rgb(0, 100, 100, 0) == (255, 0, 0)
        assert cmyk_to_rgb(0, 0, 0, 100) == (0, 0, 0)
        assert cmyk_to_rgb(0, 0, 0, 50) == (128, 128, 128)
    
    def test_color_cmyk(self):
        """Test the CMYK setter clamps and resets alpha."""
        color = Color.from_rgba(0, 0, 0, 0.3)
        color.set_from_cmyk(200, -5, 0, 0)
        assert color.get_rgba() == (0, 255, 255, 1.0)
        assert color.get_cmyk() == {'c': 100.0, 'm': 0.0, 'y': 0.0, 'k': 0.0}


class TestIsDark:
    """Test dark color detection."""
    
    def test_black_and_white(self):
        """Test the extremes."""
        black = Color()
        white = Color.from_hex("#fff")
        
        for threshold in (0, 50, 127, 200, 255):
            assert black.is_dark(threshold) is True
            assert white.is_dark(threshold) is False
    
    def test_boundary_is_dark(self):
        """Test that lightness equal to the scaled threshold counts as dark."""
        gray = Color.from_rgba(128, 128, 128)
        assert gray.get_hsl()[2] == 50
        # 128 * 100 / 256 == 50
        assert gray.is_dark(128) is True
        assert gray.is_dark(127) is False
    
    def test_threshold_is_clamped(self):
        """Test out-of-range thresholds."""
        assert Color().is_dark(-10) is True
        assert Color.from_hex("#fff").is_dark(1000) is True
        assert Color.from_hex("#ccc").is_dark(-10) is False
