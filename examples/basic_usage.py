"""Basic chromalab usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromalab import Color, chroma


def demonstrate_conversions() -> None:
    # Parse hex and read the color back in other spaces.
    accent = Color("#3498db")
    print("RGB:", accent.rgb())
    print("HSL:", accent.hsl())
    print("LCH:", accent.lch())
    print("Lab:", accent.lab())

    red = chroma(0, 1.0, 0.5, mode="hsl")
    print("HSL -> hex:", red.hex())


def demonstrate_channels() -> None:
    accent = Color("#3498db80")

    lighter = accent.set("hsl.l", "*1.3")
    print("Lighter:", lighter.hex(), "alpha kept:", lighter.alpha())

    muted = accent.desaturate(0.5)
    print("Muted:", muted.hex("rgb"))

    # In-place edits return the same object.
    accent.update("rgb.r", "+40")
    print("Edited in place:", accent)


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_channels()
