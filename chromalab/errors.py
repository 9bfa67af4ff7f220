"""Exceptions raised by chromalab.

Every error subclasses :class:`ChromaError` and also the builtin exception a
caller would naturally catch (``ValueError``, ``KeyError``, ``TypeError``).
"""


class ChromaError(Exception):
    """Base class for all chromalab errors."""


class HexFormatError(ChromaError, ValueError):
    """A string matches none of the accepted hex color patterns."""


class UnknownFormatError(ChromaError, ValueError):
    """No decoder is registered for the requested or detected mode."""


class UnknownChannelError(ChromaError, KeyError):
    """The requested channel letter is not part of the mode."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class UnsupportedValueError(ChromaError, TypeError):
    """``Color.set`` got a value that is neither a number nor a numeric string."""
