from typing import Iterator, Optional
import logging

from .track import Track
from .exceptions import EmptyTrackListError

log = logging.getLogger("tracklist")


class TrackList:
    """
    Ordered list of tracks with a fixed capacity.

    The list holds at most `max_size` tracks. Tracks occupy the slots
    [0, size) contiguously; the remaining slots are empty. Operations that
    would exceed the capacity or use a bad index are rejected and leave the
    list untouched, reporting the rejection through their return value.
    :param `max_size`: Maximum number of tracks the list can hold
    """

    def __init__(self, max_size: int):
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            raise ValueError(f"max_size must be an integer: {max_size!r}")
        if max_size < 0:
            raise ValueError(f"max_size cannot be negative: {max_size}")
        self._max_size = max_size
        self._tracks: list[Optional[Track]] = [None] * max_size
        self._size = 0

    @property
    def max_size(self) -> int:
        """Maximum number of tracks in this list"""
        return self._max_size

    @property
    def size(self) -> int:
        """Current number of tracks in this list"""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Track]:
        for i in range(self._size):
            yield self._tracks[i]

    def __contains__(self, title) -> bool:
        return self.index_of(title) != -1

    def __str__(self) -> str:
        return "\n".join(str(track) for track in self)

    def __repr__(self) -> str:
        return f"TrackList(max_size={self._max_size}, size={self._size})"

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._max_size

    def get_track(self, index: int) -> Optional[Track]:
        """
        Returns the track at `index`, or None if there is no track there.
        """
        if 0 <= index < self._size:
            return self._tracks[index]
        return None

    def add(self, track: Track) -> bool:
        """
        Appends the given track to the end of this list.
        Returns False, without changing the list, if the list is full.
        """
        self._check_track(track)
        if self.is_full():
            log.debug(f"List is full ({self._max_size}), not adding: {track}")
            return False
        self._tracks[self._size] = track
        self._size += 1
        return True

    def insert(self, index: int, track: Track) -> bool:
        """
        Inserts the given track at `index`, moving the tracks from `index`
        onwards one slot to the right. For example, if the list is
        (t5, t3, t1), then just after insert(1, t4) it becomes
        (t5, t4, t3, t1). Inserting at index == size appends.

        Returns False, without changing the list, if `index` is negative or
        greater than the size, or if the list is full.
        """
        self._check_track(track)
        if index < 0 or index > self._size:
            log.debug(f"Insert index {index} out of range for size {self._size}")
            return False
        if self.is_full():
            log.debug(f"List is full ({self._max_size}), not inserting: {track}")
            return False

        for j in range(self._size, index, -1):
            self._tracks[j] = self._tracks[j - 1]
        self._tracks[index] = track
        self._size += 1
        return True

    def remove_at(self, index: int) -> None:
        """
        Removes the track at `index` and closes the gap.
        Does nothing if the list is empty or `index` is out of range.
        """
        if index < 0 or index >= self._size:
            log.debug(f"Remove index {index} out of range for size {self._size}")
            return

        for j in range(index, self._size - 1):
            self._tracks[j] = self._tracks[j + 1]
        self._tracks[self._size - 1] = None
        self._size -= 1

    def remove_last(self) -> None:
        """Removes the last track. Does nothing if the list is empty."""
        self.remove_at(self._size - 1)

    def remove_first(self) -> None:
        """Removes the first track. Does nothing if the list is empty."""
        self.remove_at(0)

    def remove_title(self, title: str) -> None:
        """
        Removes the first track with the given title.
        Does nothing if no such track is found.
        """
        index = self.index_of(title)
        if index == -1:
            log.debug(f"No track titled '{title}' to remove")
            return
        self.remove_at(index)

    def index_of(self, title: str) -> int:
        """
        Returns the index of the first track with exactly the given title,
        or -1 if there is none. Matching is case-sensitive.
        """
        for i in range(self._size):
            if self._tracks[i].title == title:
                return i
        return -1

    def total_duration(self) -> int:
        """Returns the total duration (in seconds) of all tracks in this list"""
        return sum(track.duration for track in self)

    def min_index(self, start: int) -> int:
        """
        Returns the index of the shortest track, searching from `start` to
        the end of the list. On ties the first one found wins. For example,
        if the durations are 7, 1, 6, 7, 5, 8, 7 then min_index(2) returns 4.

        Returns -1 if `start` is negative or not less than the size.
        """
        if start < 0 or start >= self._size:
            return -1

        index = start
        shortest = self._tracks[start].duration
        for i in range(start + 1, self._size):
            if self._tracks[i].duration < shortest:
                index = i
                shortest = self._tracks[i].duration
        return index

    def title_of_shortest_track(self) -> str:
        """
        Returns the title of the shortest track in this list.
        Raises EmptyTrackListError if the list has no tracks.
        """
        index = self.min_index(0)
        if index == -1:
            raise EmptyTrackListError(
                "Cannot find the shortest track of an empty list"
            )
        return self._tracks[index].title

    def sort_in_place(self) -> None:
        """
        Sorts this list by increasing duration using selection sort.
        """
        log.debug(f"Sorting {self._size} tracks by duration")
        for i in range(self._size):
            smallest = self.min_index(i)
            if smallest != i:
                self._tracks[i], self._tracks[smallest] = (
                    self._tracks[smallest],
                    self._tracks[i],
                )

    def concat(self, other: "TrackList") -> bool:
        """
        Appends all tracks of `other` to the end of this list, in order.

        If the combined size is larger than this list's capacity, neither
        list is changed and False is returned.
        """
        if self._size + other.size > self._max_size:
            log.debug(
                f"Cannot concat {other.size} tracks onto {self._size} "
                f"with capacity {self._max_size}"
            )
            return False

        # snapshot first; other may be this list
        incoming = list(other)
        for track in incoming:
            self._tracks[self._size] = track
            self._size += 1
        return True

    @staticmethod
    def _check_track(track) -> None:
        if not isinstance(track, Track):
            raise TypeError(f"Expected a Track, got {type(track).__name__}")
