from __future__ import annotations
import logging
import math
from typing import Any, Iterable, Optional, Tuple, Union

from boundednumbers import clamp

from ..conversions import rgb_to_hex, rgb_to_hsl, rgb_to_lch, rgb_to_lab
from ..conversions.constants import KN
from ..errors import UnknownChannelError, UnknownFormatError, UnsupportedValueError
from ..types.color_types import (
    ColorMode,
    HSLTuple,
    LabTuple,
    LCHTuple,
    RGBATuple,
    RGBTuple,
    is_missing_hue,
)
from ..utils import is_number, trailing_mode
from .registry import FormatRegistry, ModeLike, as_mode, default_registry

logger = logging.getLogger(__name__)

ChannelValue = Union[int, float, str]


def clip_rgba(values: Iterable[Any]) -> Tuple[RGBATuple, bool, RGBATuple]:
    """
    Clamp r, g, b to [0, 255] and alpha to [0, 1].

    Returns:
        (rgba, clipped, unclipped): ``clipped`` is True when r, g or b was out
        of range; alpha clamping is silent. ``unclipped`` holds the raw values.
    """
    values = tuple(values)
    if len(values) == 3:
        values = values + (1.0,)
    if len(values) != 4:
        raise UnknownFormatError(f"rgba expects 3 or 4 components, got {len(values)}")
    unclipped = tuple(float(v) for v in values)
    if any(math.isnan(v) for v in unclipped):
        raise UnsupportedValueError(f"color components must not be NaN, got {unclipped!r}")
    clipped = any(v < 0 or v > 255 for v in unclipped[:3])
    rgba = (
        float(clamp(unclipped[0], 0, 255)),
        float(clamp(unclipped[1], 0, 255)),
        float(clamp(unclipped[2], 0, 255)),
        float(clamp(unclipped[3], 0, 1)),
    )
    return rgba, clipped, unclipped  # type: ignore[return-value]


class Color:
    """
    A color value stored as one clamped RGBA tuple.

    Every other representation (hex, HSL, LCH, Lab) is computed from that tuple
    on each call, so nothing derived can go stale.

    Construction
    ------------
    >>> Color("#3498db")                 # autodetected hex
    >>> Color(200, 0, 0, "rgb")          # components plus trailing mode
    >>> Color([60, 40, 250], mode="lch") # one sequence plus mode keyword
    >>> Color(existing) is existing      # Color input is returned as is

    Copy vs in place
    ----------------
    ``with_alpha``, ``set``, ``saturate`` and ``desaturate`` return new colors.
    ``update_alpha`` and ``update`` overwrite this instance; they need exclusive
    access, so do not call them on one instance from several threads at once.
    """

    __slots__ = ("_rgba", "_clipped", "_unclipped")

    def __new__(
        cls,
        *args: Any,
        mode: Optional[ModeLike] = None,
        registry: Optional[FormatRegistry] = None,
    ) -> "Color":
        if len(args) == 1 and isinstance(args[0], Color) and mode is None:
            return args[0]

        if mode is None:
            mode = trailing_mode(args)
            if mode is not None:
                args = args[:-1]
        if not args:
            raise UnknownFormatError("unknown format: no color arguments given")

        rgba = (registry or default_registry).decode(mode, *args)

        self = super().__new__(cls)
        self._store(*clip_rgba(rgba))
        return self

    def __setattr__(self, name, value):
        """Block attribute changes; in-place updates go through ``_store``."""
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def _store(self, rgba: RGBATuple, clipped: bool, unclipped: RGBATuple) -> None:
        if clipped:
            logger.debug("clamped rgb %r to %r", unclipped[:3], rgba[:3])
        object.__setattr__(self, "_rgba", rgba)
        object.__setattr__(self, "_clipped", clipped)
        object.__setattr__(self, "_unclipped", unclipped)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def clipped(self) -> bool:
        """True if r, g or b had to be clamped into [0, 255]."""
        return self._clipped

    @property
    def unclipped(self) -> RGBATuple:
        """The RGBA values as decoded, before clamping."""
        return self._unclipped

    # ------------------ REPRESENTATIONS ------------------
    def rgba(self) -> RGBATuple:
        return self._rgba

    def rgb(self) -> RGBTuple:
        r, g, b, _ = self._rgba
        return r, g, b

    def hex(self, mode: str = "auto") -> str:
        """Hex text; ``mode`` is "auto", "rgb", "rgba" or "argb"."""
        return rgb_to_hex(*self._rgba, mode=mode)

    def hsl(self) -> HSLTuple:
        return rgb_to_hsl(*self.rgb())

    def lch(self) -> LCHTuple:
        return rgb_to_lch(*self.rgb())

    def lab(self) -> LabTuple:
        return rgb_to_lab(*self.rgb())

    def to(self, mode: ModeLike) -> Any:
        """Representation named by ``mode`` (e.g. ``"hsl"`` -> ``self.hsl()``)."""
        return _ENCODERS[as_mode(mode)](self)

    # ------------------ ALPHA ------------------
    def alpha(self, value: Optional[float] = None, mutate: bool = False) -> Union[float, "Color"]:
        """
        Without ``value``, return the alpha channel. With ``value``, return a
        copy carrying that alpha, or set it in place when ``mutate`` is True.
        """
        if value is None:
            return self._rgba[3]
        if mutate:
            return self.update_alpha(value)
        return self.with_alpha(value)

    def with_alpha(self, value: float) -> "Color":
        """Return a new color with ``value`` as alpha; this one is left untouched."""
        if not is_number(value):
            raise UnsupportedValueError(f"alpha must be a number, got {type(value).__name__}")
        return Color(list(self.rgb()) + [value], mode=ColorMode.RGB)

    def update_alpha(self, value: float) -> "Color":
        """Set alpha in place and return this color. Single writer per instance."""
        if not is_number(value):
            raise UnsupportedValueError(f"alpha must be a number, got {type(value).__name__}")
        if math.isnan(value):
            raise UnsupportedValueError("alpha must not be NaN")
        rgba = self._rgba[:3] + (float(clamp(value, 0, 1)),)
        unclipped = self._unclipped[:3] + (float(value),)
        self._store(rgba, self._clipped, unclipped)  # type: ignore[arg-type]
        return self

    # ------------------ CHANNELS ------------------
    def get(self, path: str) -> Any:
        """
        Read one channel, e.g. ``color.get("hsl.l")``.

        A path without a channel (``"lch"``) returns the whole representation.

        Raises:
            UnknownFormatError: the mode is not known
            UnknownChannelError: the channel is not part of the mode
        """
        mode, channel = _parse_path(path)
        src = self.to(mode)
        if channel is None:
            return src
        return src[_channel_index(mode, channel)]

    def set(self, path: str, value: ChannelValue, mutate: bool = False) -> "Color":
        """
        Return a copy with one channel replaced, or update in place when
        ``mutate`` is True.

        ``value`` is either a number (absolute) or a string. A string starting
        with ``+``, ``-``, ``*`` or ``/`` is applied relative to the current
        channel value (``"*1.2"`` scales it by 1.2); any other string is parsed
        as an absolute number.

        Raises:
            UnknownChannelError: the channel is not part of the mode
            UnsupportedValueError: ``value`` is not a number or numeric string
        """
        if mutate:
            return self.update(path, value)
        return self._with_channel(path, value)

    def update(self, path: str, value: ChannelValue) -> "Color":
        """In-place :meth:`set`. Single writer per instance."""
        out = self._with_channel(path, value)
        self._store(out._rgba, out._clipped, out._unclipped)
        return self

    def _with_channel(self, path: str, value: ChannelValue) -> "Color":
        mode, channel = _parse_path(path)
        if channel is None:
            raise UnknownChannelError(f"no channel given in {path!r}, expected '<mode>.<channel>'")
        index = _channel_index(mode, channel)
        src = list(self.to(mode))
        src[index] = _apply_value(src[index], value)
        return Color(src + [self._rgba[3]], mode=mode)

    # ------------------ SATURATION ------------------
    def saturate(self, amount: float = 1) -> "Color":
        """Raise LCH chroma by ``amount * KN``; chroma never drops below 0."""
        L, c, h = self.lch()
        c = max(c + KN * amount, 0.0)
        return Color(L, c, h, mode=ColorMode.LCH).update_alpha(self._rgba[3])

    def desaturate(self, amount: float = 1) -> "Color":
        return self.saturate(-amount)

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgba == other._rgba

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Color(rgba={self._rgba!r}, clipped={self._clipped})"

    def __str__(self) -> str:
        return self.hex()


_ENCODERS = {
    ColorMode.RGB: Color.rgb,
    ColorMode.HSL: Color.hsl,
    ColorMode.LCH: Color.lch,
    ColorMode.LAB: Color.lab,
    ColorMode.HEX: Color.hex,
}


def _parse_path(path: str) -> Tuple[ColorMode, Optional[str]]:
    mode_name, _, channel = path.partition(".")
    return as_mode(mode_name), channel or None


def _channel_index(mode: ColorMode, channel: str) -> int:
    index = mode.channel_index(channel)
    if index < 0:
        raise UnknownChannelError(f"unknown channel {channel!r} in mode {mode.value!r}")
    return index


def _apply_value(current: Optional[float], value: ChannelValue) -> float:
    if is_number(value):
        return value  # type: ignore[return-value]
    if not isinstance(value, str):
        raise UnsupportedValueError(f"unsupported value for Color.set: {value!r}")

    text = value.strip()
    base = 0.0 if is_missing_hue(current) else current
    try:
        operand = float(text[1:] if text[:1] in ("*", "/") else text)
    except ValueError:
        raise UnsupportedValueError(f"unsupported value for Color.set: {value!r}") from None
    if not math.isfinite(operand):
        raise UnsupportedValueError(f"unsupported value for Color.set: {value!r}")
    if text[:1] in ("+", "-"):
        return base + operand
    if text[:1] == "*":
        return base * operand
    if text[:1] == "/":
        return base / operand
    return operand


def chroma(*args: Any, **kwargs: Any) -> Color:
    """Shorthand for ``Color(*args, **kwargs)``."""
    return Color(*args, **kwargs)
