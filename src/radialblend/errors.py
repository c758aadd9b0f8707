"""Exceptions raised by the radialblend package."""


class RadialBlendError(Exception):
    """Base class for all radialblend errors."""


class MissingArgumentError(RadialBlendError):
    """A required command line argument was not provided."""


class ParseError(RadialBlendError):
    """A numeric argument could not be parsed as a finite float."""


class UsageError(RadialBlendError):
    """The command line could not be parsed."""


class DecodeError(RadialBlendError):
    """An input image could not be read or decoded."""


class EncodeError(RadialBlendError):
    """The output image could not be encoded or written."""
