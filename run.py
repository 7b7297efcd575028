"""Party Board CLI entry point.

Provides subcommands for running the Socket.IO server and for generating a
board or a bomber arena straight to the terminal. Accepts configuration via
flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import random
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except (AttributeError, ValueError):  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False


def _load_version() -> str:
    try:
        with open("VERSION", "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Party Board Game Server

    Run the real-time Flask-SocketIO server, or generate a board / bomber arena
    and print it. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                 Bind address for the web server (default: 0.0.0.0)
          PORT                 Port for the web server (default: 5000)
          BOARD_DEFAULT_SIZE   Board size used when none is requested (default: default)
          PARTY_LOG_LEVEL      debug | info | warn | error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Load variables from .env then run the server on a custom port
          python run.py --env-file .env server --port 8080

          # Print a large board generated from a fixed seed
          python run.py board --size large --seed 42

          # Dump the board as JSON
          python run.py board --json

          # Print a four player bomber arena
          python run.py bomber --players 4
        """
    )

    parser = argparse.ArgumentParser(
        prog="partyboard",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Party Board Server {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the Socket.IO web server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the real-time Flask/Socket.IO server",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # board subcommand
    board_parser = subparsers.add_parser(
        "board",
        help="Generate a board and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate one board and print the grid view (or JSON).",
    )
    board_parser.add_argument("--size", default=None, help="small | default | large (default: env BOARD_DEFAULT_SIZE)")
    board_parser.add_argument("--seed", default=None, help="Integer or string seed for a reproducible board")
    board_parser.add_argument("--id", dest="board_id", default=None, help="Board id (default: board-<epoch ms>)")
    board_parser.add_argument("--json", action="store_true", help="Print the board as JSON instead of the grid view")
    board_parser.set_defaults(command="board")

    # bomber subcommand
    bomber_parser = subparsers.add_parser(
        "bomber",
        help="Generate a bomber arena and print it",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    bomber_parser.add_argument("--players", type=int, default=2, help="Player count, clamped to 2..8 (default: 2)")
    bomber_parser.add_argument("--seed", default=None, help="Integer or string seed")
    bomber_parser.set_defaults(command="bomber")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "server"
    return args


def _run_board(args) -> int:
    from partygame.board import generate_board
    from partygame.board.render import render_board

    size = args.size or os.getenv("BOARD_DEFAULT_SIZE")
    board = generate_board(args.board_id, size, seed=args.seed)
    if args.json:
        print(json.dumps(board.to_dict(), indent=2))
    else:
        print(render_board(board))
    return 0


def _run_bomber(args) -> int:
    from partygame.board.generator import coerce_seed
    from partygame.bomber import generate_bomber_map, render_bomber_map

    seed = coerce_seed(args.seed)
    rng = random.Random(seed) if seed is not None else None
    arena = generate_bomber_map(args.players, rng)
    print(f"Bomber arena {arena.width}x{arena.height}, {len(arena.spawns)} players, "
          f"{arena.hidden_power_up_count()} hidden power-ups")
    print(render_bomber_map(arena))
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "board":
        return _run_board(args)
    if mode == "bomber":
        return _run_bomber(args)

    # Resolve configuration from CLI flags or env vars
    env_host = os.getenv("HOST", "0.0.0.0")
    env_port = int(os.getenv("PORT", "5000"))

    host = getattr(args, "host", None) or env_host
    port = int(getattr(args, "port", None) or env_port)

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from partygame.logging_utils import log
    from partygame.server import start_server

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Party Board Server Bootup{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Party Board Server Bootup"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Board size:'):12} {value(os.getenv('BOARD_DEFAULT_SIZE', 'default'))}",
        f"  {label('WebSockets:'):12} {value('enabled')}",
        divider,
        "",
    ]
    print("\n".join(lines))

    info_prefix = f"{Fore.CYAN}[INFO]{Style.RESET_ALL}" if _COLOR_ENABLED else "[INFO]"
    print(f"{info_prefix} Listening for connections... Press Ctrl+C to stop.")
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")
    log.info(event="startup", mode=mode, host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
