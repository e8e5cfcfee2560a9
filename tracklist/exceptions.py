class ConfigError(Exception):
    """Raised when required configuration value is missing or invalid"""


class InvalidTrackError(ValueError):
    """Raised when a track is created with an empty title or a bad duration"""


class EmptyTrackListError(LookupError):
    """Raised when an operation needs at least one track but the list is empty"""
