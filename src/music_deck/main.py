"""
Music Deck - interactive shell and demo runner.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from music_deck import router
from music_deck.context import AppContext
from music_deck.core import config as config_module
from music_deck.core.console import get_console
from music_deck.core.output import log, set_console_output, setup_loguru
from music_deck.domain.library import Track
from music_deck.domain.playback import create_source, list_sources
from music_deck.utils import parsers

DEMO_TRACKS = [
    Track(title="Song1.mp3", artist="ArtistA", locator="file:///local/song1.mp3"),
    Track(title="Song2.mp3", artist="ArtistB", locator="file:///local/song2.mp3"),
    Track(title="Song3.mp3", artist="ArtistC", locator="spotify://track/123"),
]


def setup_context(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    quiet: bool = False,
) -> AppContext:
    """Load configuration, configure logging and build the application context.

    Args:
        config_path: Optional explicit config.toml path
        log_level: Overrides the configured log level
        quiet: Suppress user-facing console messages

    Returns:
        New AppContext
    """
    current_config = config_module.load_config(Path(config_path) if config_path else None)
    if log_level:
        current_config.logging.level = log_level.upper()

    setup_loguru(
        config_module.get_log_file_path(current_config),
        level=current_config.logging.level,
    )
    set_console_output(current_config.logging.console_output and not quiet)

    return AppContext.create(current_config, console=get_console())


def run_demo(ctx: AppContext) -> int:
    """Queue three tracks, play through them and swap backends mid-playback.

    Returns:
        Exit code
    """
    controller = ctx.controller
    console = ctx.console or get_console()

    for track in DEMO_TRACKS:
        controller.add_to_queue(track)

    first = controller.source.name if controller.source else "none"
    console.print(f"[cyan]Source: {first}[/cyan]\n")

    controller.play()
    controller.next()

    # Swap to the other backend while a track is playing
    other = next((name for name in list_sources() if name != first), first)
    controller.set_source(create_source(other, announce=ctx.config.player.announce))
    console.print(f"\n[cyan]Switched source to {other}[/cyan]\n")

    controller.next()
    controller.next()  # End of queue
    controller.pause()
    controller.stop()

    if ctx.now_playing is not None:
        info = ctx.now_playing.as_dict()
        console.print(
            f"\n[green]Last track: {info['title']} by {info['artist']} ({info['state']})[/green]"
        )
    logger.info("Demo finished")
    return 0


def interactive_mode(ctx: AppContext) -> int:
    """Run the read-eval loop until the user quits.

    Returns:
        Exit code
    """
    console = ctx.console or get_console()
    console.print("[bold green]Music Deck[/bold green] - type 'help' for commands")
    log(f"Source: {ctx.controller.source.name if ctx.controller.source else 'none'}")

    while True:
        try:
            user_input = input("music-deck> ").strip()
            command, args = parsers.parse_command(user_input)

            ctx, should_continue = router.handle_command(ctx, command, args)
            if not should_continue:
                break

        except KeyboardInterrupt:
            console.print("\n[yellow]Use 'quit' or 'exit' to leave gracefully.[/yellow]")
        except EOFError:
            console.print("\n[green]Goodbye![/green]")
            break

    return 0
