class SpriteTrimError(Exception):
    """Base class for every error raised on purpose by sprite_trim."""


class ConfigurationError(SpriteTrimError):
    """Bad CLI arguments, unusable output directory or worker pool."""


class DecodeError(SpriteTrimError):
    """Input file is missing, unreadable or not an image."""


class EncodeError(SpriteTrimError):
    """Output file could not be written."""
