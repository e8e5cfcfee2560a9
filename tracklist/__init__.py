from .track import Track
from .playlist import TrackList
from .exceptions import ConfigError, EmptyTrackListError, InvalidTrackError

__all__ = [
    "Track",
    "TrackList",
    "ConfigError",
    "EmptyTrackListError",
    "InvalidTrackError",
]
