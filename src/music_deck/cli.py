"""
Music Deck CLI - Entry point

Starts the interactive shell by default, or runs the scripted demo.
"""

import argparse
import sys

from music_deck.domain.playback import create_source, list_sources


def main() -> None:
    """Main entry point for the music-deck command."""
    parser = argparse.ArgumentParser(
        description="Music Deck - Playlist and playback controller",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    # Add global options
    parser.add_argument(
        '--config',
        help='Path to config.toml (default: ./config.toml or ~/.config/music-deck/config.toml)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        type=str.upper,
        help='Override the configured log level'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress console messages (still written to the log file)'
    )

    subparsers = parser.add_subparsers(dest='subcommand', help='Available commands')

    demo_parser = subparsers.add_parser(
        'demo',
        help='Queue sample tracks, play through them and swap sources mid-playback'
    )
    demo_parser.add_argument(
        '--source',
        choices=list_sources(),
        help='Source to start with (default: from config)'
    )

    subparsers.add_parser('shell', help='Interactive shell (default)')

    args = parser.parse_args()

    from .main import interactive_mode, run_demo, setup_context

    ctx = setup_context(config_path=args.config, log_level=args.log_level, quiet=args.quiet)

    if args.subcommand == 'demo':
        if args.source:
            ctx.controller.set_source(
                create_source(args.source, announce=ctx.config.player.announce)
            )
        sys.exit(run_demo(ctx))

    sys.exit(interactive_mode(ctx))


if __name__ == "__main__":
    main()
