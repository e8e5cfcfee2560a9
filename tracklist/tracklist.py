import time

from rich import print
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt

from .config import settings, log, Settings
from .exceptions import ConfigError, InvalidTrackError
from .playlist import TrackList
from .track import Track


def setup_tracklist(config: Settings) -> TrackList:
    """
    Create an empty track list. The capacity comes from the settings unless
    `prompt_capacity` is set, in which case the user is asked for it.
    """
    if config.prompt_capacity:
        max_size = IntPrompt.ask(
            "Maximum number of tracks", default=config.default_max_size
        )
    else:
        max_size = config.default_max_size

    if max_size < 0:
        raise ConfigError(f"Track list capacity cannot be negative, got {max_size}")
    log.info(f"Creating track list with capacity {max_size}")
    return TrackList(max_size)


def read_tracks(tracks: TrackList) -> None:
    """
    Prompt for tracks until an empty title is entered or the list is full.
    """
    while not tracks.is_full():
        title = Prompt.ask("Track title (leave empty to finish)", default="")
        if not title.strip():
            break
        duration = IntPrompt.ask("Duration in seconds")
        try:
            track = Track(title=title, duration=duration)
        except InvalidTrackError as e:
            print(f"[red]{escape(str(e))}[/red]")
            continue
        tracks.add(track)
        log.info(f"Added track {tracks.size}/{tracks.max_size}: {track}")

    if tracks.is_full():
        print(f"[yellow]Track list is full ({tracks.max_size} tracks).[/yellow]")


def print_summary(tracks: TrackList) -> None:
    """Print the tracks, their total duration and the shortest track"""
    if tracks.is_empty():
        print("No tracks.")
        return

    print(f"[bold]Tracks ({tracks.size}/{tracks.max_size}):[/bold]")
    print(escape(str(tracks)))
    print(f"Total duration: {tracks.total_duration()} seconds")
    print(f"Shortest track: {escape(tracks.title_of_shortest_track())}")

    tracks.sort_in_place()
    print("[bold]Sorted by duration:[/bold]")
    print(escape(str(tracks)))


def main():
    """main"""
    start_time = time.perf_counter()

    settings_json = settings.model_dump_json(indent=2)
    log.debug(f"Configured settings:\n{settings_json}")

    try:
        tracks = setup_tracklist(settings)
    except ConfigError as e:
        log.error(f"Failed to create track list: {e}")
        print(f"[red]{escape(str(e))}[/red]")
        return
    read_tracks(tracks)
    print_summary(tracks)

    exec_time = time.perf_counter() - start_time
    log.info(f"TrackList finished in {exec_time:2f} seconds.")
