class TLDSplitError(Exception):
    """Base class for tldsplit errors"""


class InvalidSourceError(TLDSplitError):
    """Public suffix list data is missing, not text, or empty"""


class SourceError(TLDSplitError):
    """Public suffix list data could not be acquired"""


class ConfigError(TLDSplitError):
    """Configuration file is unreadable or malformed"""
