"""
Command routing for the Music Deck shell.

Routes user commands to the shared playback controller. Queue positions are
1-based in the shell and converted to 0-based indices here.
"""

from typing import List, Tuple

from rich.table import Table

from music_deck.context import AppContext
from music_deck.core.console import get_console, safe_print
from music_deck.core.output import log
from music_deck.domain.library import Track, get_display_name, track_from_locator
from music_deck.domain.playback import PlaybackStatus, create_source, list_sources
from music_deck.utils.parsers import parse_position


def print_help() -> None:
    """Display help information for available commands."""
    help_text = """
Music Deck - Playback Controller

Queue commands:
  add <locator> [title] [artist]  Append a track (quote titles with spaces)
  remove <n>                      Remove the track at position n
  move <from> <to>                Move a track to a new position
  queue                           Show the queue

Transport commands:
  play              Play the selected track (first track if none selected)
  pause             Pause playback
  stop              Stop playback
  next              Play the next track
  prev              Play the previous track
  status            Show current track and playback state

Backend commands:
  source            Show the active source and available sources
  source <name>     Switch source (takes effect on the next transport command)

  help              Show this help
  quit              Exit
"""
    get_console().print(help_text.strip())


def handle_add_command(ctx: AppContext, args: List[str]) -> Tuple[AppContext, bool]:
    """Handle: add <locator> [title] [artist]"""
    if not args:
        log("Usage: add <locator> [title] [artist]", level="warning")
        return ctx, True

    locator = args[0]
    if len(args) >= 2:
        track = Track(
            title=args[1],
            artist=" ".join(args[2:]),
            locator=locator,
        )
    else:
        track = track_from_locator(locator, artist="")

    ctx.controller.add_to_queue(track)
    log(f"➕ Queued at #{len(ctx.controller.queue)}: {get_display_name(track)}")
    return ctx, True


def handle_remove_command(ctx: AppContext, args: List[str]) -> Tuple[AppContext, bool]:
    """Handle: remove <n>"""
    index = parse_position(args[0]) if args else None
    if index is None:
        log("Usage: remove <position>", level="warning")
        return ctx, True

    status = ctx.controller.remove_from_queue(index)
    if status is PlaybackStatus.INDEX_OUT_OF_RANGE:
        log(f"No track at position {args[0]}", level="warning")
    else:
        log(f"➖ Removed track #{args[0]}")
    return ctx, True


def handle_move_command(ctx: AppContext, args: List[str]) -> Tuple[AppContext, bool]:
    """Handle: move <from> <to>"""
    if len(args) < 2:
        log("Usage: move <from> <to>", level="warning")
        return ctx, True

    from_index = parse_position(args[0])
    to_index = parse_position(args[1])
    if from_index is None or to_index is None:
        log("Usage: move <from> <to>", level="warning")
        return ctx, True

    status = ctx.controller.move_in_queue(from_index, to_index)
    if status is PlaybackStatus.INDEX_OUT_OF_RANGE:
        log(f"Cannot move {args[0]} -> {args[1]}: position out of range", level="warning")
    else:
        log(f"↕ Moved track #{args[0]} to #{args[1]}")
    return ctx, True


def handle_queue_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Show the queue with the selected track marked."""
    queue = ctx.controller.queue
    if not queue:
        log("Queue is empty")
        return ctx, True

    cursor = ctx.controller.cursor
    table = Table(title=f"Queue ({len(queue)} tracks)")
    table.add_column("#", justify="right")
    table.add_column("")
    table.add_column("Title")
    table.add_column("Artist")
    table.add_column("Locator", style="dim")

    for i, track in enumerate(queue):
        marker = "▶" if i == cursor else ""
        table.add_row(str(i + 1), marker, track.title, track.artist, track.locator)

    get_console().print(table)
    return ctx, True


def handle_status_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Show current track and playback state."""
    status = ctx.controller.get_status()
    console = get_console()

    if status["title"] is None:
        safe_print("No track selected", style="dim")
    else:
        console.print(
            f"🎵 [bold]{status['title']}[/bold]"
            + (f" - {status['artist']}" if status["artist"] else "")
        )
        console.print(f"   Position: {status['cursor'] + 1}/{status['queue_length']}")

    console.print(f"   State: {status['state']}")
    console.print(f"   Source: {status['source'] or 'none'}")
    return ctx, True


def handle_source_command(ctx: AppContext, args: List[str]) -> Tuple[AppContext, bool]:
    """Handle: source [name]"""
    if not args:
        source = ctx.controller.source
        log(f"Active source: {source.name if source else 'none'}")
        log(f"Available sources: {', '.join(list_sources())}")
        return ctx, True

    name = args[0].lower()
    try:
        source = create_source(name, announce=ctx.config.player.announce)
    except ValueError as e:
        log(f"❌ {e}", level="error")
        return ctx, True

    ctx.controller.set_source(source)
    log(f"🔀 Switched source to {name}")
    return ctx, True


def handle_command(ctx: AppContext, command: str, args: List[str]) -> Tuple[AppContext, bool]:
    """
    Handle a single command with explicit state passing.

    Args:
        ctx: Application context
        command: Command name
        args: Command arguments

    Returns:
        (updated_context, should_continue) - Updated context and whether to continue
    """
    if command in ['quit', 'exit']:
        ctx.controller.stop()
        if ctx.now_playing is not None:
            ctx.now_playing.close()
        print("Goodbye!")
        return ctx, False

    elif command == 'help':
        print_help()
        return ctx, True

    elif command == 'add':
        return handle_add_command(ctx, args)

    elif command in ['remove', 'rm']:
        return handle_remove_command(ctx, args)

    elif command in ['move', 'mv']:
        return handle_move_command(ctx, args)

    elif command in ['queue', 'ls']:
        return handle_queue_command(ctx)

    elif command == 'play':
        ctx.controller.play()
        return ctx, True

    elif command == 'pause':
        ctx.controller.pause()
        return ctx, True

    elif command == 'stop':
        ctx.controller.stop()
        return ctx, True

    elif command in ['next', 'skip']:
        ctx.controller.next()
        return ctx, True

    elif command in ['prev', 'previous', 'back']:
        ctx.controller.previous()
        return ctx, True

    elif command == 'status':
        return handle_status_command(ctx)

    elif command == 'source':
        return handle_source_command(ctx, args)

    elif command == '':
        return ctx, True

    else:
        log(f"Unknown command: '{command}'. Type 'help' for available commands.", level="warning")
        return ctx, True
