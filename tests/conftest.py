import sys
from pathlib import Path
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from tracklist.playlist import TrackList
from tracklist.track import Track

DURATIONS = [7, 1, 6, 7, 5, 8, 7]


@pytest.fixture
def tracks() -> list:
    """Seven tracks with durations 7, 1, 6, 7, 5, 8, 7"""
    return [Track(title=f"t{i}", duration=d) for i, d in enumerate(DURATIONS)]


@pytest.fixture
def full_list(tracks) -> TrackList:
    """A track list filled to its capacity with the seven tracks"""
    playlist = TrackList(len(tracks))
    for track in tracks:
        playlist.add(track)
    return playlist


@pytest.fixture
def empty_list() -> TrackList:
    return TrackList(5)
