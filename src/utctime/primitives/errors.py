"""
Errors Primitive

Exception hierarchy shared by every utctime module.
"""


class UtcTimeError(Exception):
    """Base exception for utctime errors"""

    pass


class ParseError(UtcTimeError, ValueError):
    """Raised when text does not conform to the layout being attempted"""

    pass


class ZoneResolutionError(UtcTimeError):
    """Raised when the named civil zones could not be loaded from the zone database"""

    pass


class ZoneNotFoundError(UtcTimeError, LookupError):
    """Raised when a caller-supplied zone name cannot be resolved"""

    pass


class CodecInputError(UtcTimeError, ValueError):
    """Raised when a decoder receives a type, None or empty input it cannot handle"""

    pass


class NilReceiverError(UtcTimeError):
    """Raised when an encoder is called without a value to encode"""

    pass


class ConfigError(UtcTimeError, ValueError):
    """Raised when a settings file fails validation"""

    pass
