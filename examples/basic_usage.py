"""
Basic cistools usage example.

This example demonstrates the fundamental cistools operations:
- Generating secure random strings with character class minimums
- Converting colors between representations
- Clamping and splitting numbers
"""

from cistools import (
    CharacterClass,
    Color,
    GoldenRatioMode,
    InvalidParameterError,
    clamp_int,
    generate_secure_random_string,
    golden_ratio,
    secure_password,
    secure_url_token,
)


def generator_example():
    """Demonstrate secure random strings"""
    print("Secure Random Strings")
    print("=" * 30)
    
    # 1. Password with the default length
    print(f"✓ Password: {secure_password()}")
    
    # 2. URL token
    print(f"✓ URL token: {secure_url_token(16)}")
    
    # 3. Custom classes with minimums
    pin = generate_secure_random_string(
        12,
        CharacterClass.UPPERCASE | CharacterClass.DIGITS,
        minimum_per_class={CharacterClass.DIGITS: 6},
    )
    print(f"✓ Code with at least 6 digits: {pin}")
    
    # 4. Unsatisfiable constraints
    try:
        generate_secure_random_string(
            4, CharacterClass.LOWERCASE, minimum_per_class={CharacterClass.LOWERCASE: 8}
        )
    except InvalidParameterError as e:
        print(f"✓ Rejected: {e}")


def color_example():
    """Demonstrate color conversions"""
    print("\nColors")
    print("=" * 30)
    
    color = Color.from_hex("#f0a8")
    print(f"✓ RGBA: {color.get_rgba()}")
    print(f"✓ HSL: {color.get_hsl()}")
    print(f"✓ HSV: {color.get_hsv()}")
    print(f"✓ CMYK: {color.get_cmyk()}")
    print(f"✓ CSS: {color.get_css_hex()} / {color.get_css_rgba()}")
    print(f"✓ Dark: {color.is_dark()}")
    
    color.set_from_hsla(210, 50, 40, 0.5)
    print(f"✓ From HSLA: {color.get_css_hex(with_alpha=True)}")
    
    color.set_from_hex_string("not-a-color")
    print(f"✓ Fallback: {color.get_css_hex()}")


def numeric_example():
    """Demonstrate numeric helpers"""
    print("\nNumbers")
    print("=" * 30)
    
    print(f"✓ Clamped: {clamp_int(300, 0, 255)}")
    print(f"✓ Golden cut of 100: {golden_ratio(100, max_decimal_places=2)}")
    print(f"✓ Long side for 100: {golden_ratio(100, GoldenRatioMode.SHORTSIDE_GIVEN, rounded=True)}")


if __name__ == "__main__":
    generator_example()
    color_example()
    numeric_example()
