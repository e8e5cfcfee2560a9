from dataclasses import dataclass

from .exceptions import InvalidTrackError


@dataclass(frozen=True)
class Track:
    """Track object"""

    title: str
    duration: int

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidTrackError(
                f"Track title must be a non-empty string: {self.title!r}"
            )
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise InvalidTrackError(
                f"Track duration must be an integer number of seconds: {self.duration!r}"
            )
        if self.duration < 0:
            raise InvalidTrackError(
                f"Track duration cannot be negative: {self.duration}"
            )

    def __str__(self) -> str:
        minutes, seconds = divmod(self.duration, 60)
        return f"{self.title} ({minutes}:{seconds:02d})"
