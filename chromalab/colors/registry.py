"""
Input format registry.

Maps each :class:`ColorMode` to a decoder (raw constructor arguments -> RGBA
components) and keeps the autodetection probes ordered by priority. The
default registry is built and sorted once, at import, and is frozen from then
on; lookups never re-sort.
"""
from __future__ import annotations
import logging
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..conversions import hex_to_rgb, hsl_to_rgb, lch_to_rgb, lab_to_rgb, is_hex
from ..errors import HexFormatError, UnknownFormatError
from ..types.color_types import ColorMode
from ..utils import unpack

logger = logging.getLogger(__name__)

Decoder = Callable[..., Tuple[Any, ...]]
Probe = Callable[..., bool]
ModeLike = Union[ColorMode, str]


def as_mode(mode: ModeLike) -> ColorMode:
    """Resolve a mode name (case-insensitive) or member to a :class:`ColorMode`."""
    if isinstance(mode, ColorMode):
        return mode
    try:
        return ColorMode(str(mode).lower())
    except ValueError:
        raise UnknownFormatError(f"unknown format: {mode!r}") from None


@dataclass(frozen=True)
class FormatEntry:
    mode: ColorMode
    decoder: Decoder
    probe: Optional[Probe] = None
    priority: int = 0


class FormatRegistry:
    """Named decoders plus priority-ordered autodetection probes."""

    def __init__(self) -> None:
        self._formats: Dict[ColorMode, FormatEntry] = {}
        self._probes: List[FormatEntry] = []
        self._sorted = False

    @property
    def is_finalized(self) -> bool:
        return self._sorted

    @property
    def modes(self) -> Tuple[ColorMode, ...]:
        return tuple(self._formats)

    @property
    def probe_order(self) -> Tuple[ColorMode, ...]:
        """Modes in the order autodetection tries them."""
        return tuple(entry.mode for entry in self._probes)

    def register(
        self,
        mode: ModeLike,
        decoder: Decoder,
        probe: Optional[Probe] = None,
        priority: int = 0,
    ) -> FormatEntry:
        if self._sorted:
            raise RuntimeError("format registry is finalized; register formats before first use")
        mode = as_mode(mode)
        if mode in self._formats:
            warnings.warn(f"format {mode.value!r} is already registered and will be replaced")
            self._probes = [entry for entry in self._probes if entry.mode != mode]
        entry = FormatEntry(mode, decoder, probe, priority)
        self._formats[mode] = entry
        if probe is not None:
            self._probes.append(entry)
        logger.debug("registered format %s (priority %d)", mode.value, priority)
        return entry

    def finalize(self) -> "FormatRegistry":
        """Sort probes by descending priority, once. Ties keep registration order."""
        if not self._sorted:
            self._probes.sort(key=lambda entry: entry.priority, reverse=True)
            self._sorted = True
            logger.debug("format registry finalized, probe order: %s",
                         [entry.mode.value for entry in self._probes])
        return self

    def decoder(self, mode: ModeLike) -> Decoder:
        mode = as_mode(mode)
        entry = self._formats.get(mode)
        if entry is None:
            raise UnknownFormatError(f"unknown format: {mode.value!r}")
        return entry.decoder

    def detect(self, *args: Any) -> ColorMode:
        """
        Infer the format of raw constructor arguments.

        Raises:
            UnknownFormatError: no probe accepts the arguments
        """
        self.finalize()
        for entry in self._probes:
            if entry.probe is not None and entry.probe(*args):
                logger.debug("autodetected format %s for %r", entry.mode.value, args)
                return entry.mode
        raise UnknownFormatError(f"unknown format: {args!r}")

    def decode(self, mode: Optional[ModeLike], *args: Any) -> Tuple[Any, ...]:
        """Decode ``args`` with ``mode``'s decoder, autodetecting when ``mode`` is None."""
        if mode is None:
            mode = self.detect(*args)
        return self.decoder(mode)(*args)


## decoders

def _components(mode: ColorMode, args: Tuple[Any, ...]) -> Tuple[Any, ...]:
    values = unpack(args)
    if len(values) not in (3, 4):
        raise UnknownFormatError(f"{mode.value} expects 3 or 4 components, got {len(values)}")
    return values


def decode_hex(*args: Any) -> Tuple[Any, ...]:
    if len(args) != 1:
        raise HexFormatError(f"hex expects a single string, got {len(args)} arguments")
    return hex_to_rgb(args[0])


def decode_rgb(*args: Any) -> Tuple[Any, ...]:
    return tuple(float(v) for v in _components(ColorMode.RGB, args))


def decode_hsl(*args: Any) -> Tuple[Any, ...]:
    return hsl_to_rgb(*_components(ColorMode.HSL, args))


def decode_lch(*args: Any) -> Tuple[Any, ...]:
    return lch_to_rgb(*_components(ColorMode.LCH, args))


def decode_lab(*args: Any) -> Tuple[Any, ...]:
    return lab_to_rgb(*_components(ColorMode.LAB, args))

## probes

def probe_hex(*args: Any) -> bool:
    return len(args) == 1 and is_hex(args[0])


def probe_triple(*args: Any) -> bool:
    return len(unpack(args)) == 3


def build_default_registry() -> FormatRegistry:
    registry = FormatRegistry()
    registry.register(ColorMode.HEX, decode_hex, probe_hex, priority=4)
    registry.register(ColorMode.RGB, decode_rgb)
    registry.register(ColorMode.HSL, decode_hsl, probe_triple, priority=2)
    registry.register(ColorMode.LCH, decode_lch, probe_triple, priority=2)
    registry.register(ColorMode.LAB, decode_lab)
    return registry.finalize()


default_registry = build_default_registry()
