"""
numguess CLI - Command-line entry point.

Usage:
    numguess play [--max N]           Play in the terminal
    numguess serve [--host H] [--port P]  Run the web API
"""

import argparse
import logging
import sys

from .config import GameConfig
from .game.session import InvalidConfiguration


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Guess the Number",
        prog="numguess",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--max", type=int, dest="upper_bound", help="Highest possible number")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the web API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig.from_env()
        if args.command == "play":
            return cmd_play(args, config)
        elif args.command == "serve":
            return cmd_serve(args, config)
    except InvalidConfiguration as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    parser.print_help()
    return 1


def cmd_play(args, config: GameConfig) -> int:
    """Play a terminal game."""
    from .session import SessionController
    from .frontend import TerminalFrontend

    upper_bound = args.upper_bound if args.upper_bound is not None else config.upper_bound
    controller = SessionController(labels=config.labels)
    frontend = TerminalFrontend(controller, upper_bound)
    return frontend.run()


def cmd_serve(args, config: GameConfig) -> int:
    """Run the web API under uvicorn."""
    import uvicorn
    from .api import APIService, create_app

    app = create_app(service=APIService(config=config))
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
