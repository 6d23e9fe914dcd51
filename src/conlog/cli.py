"""CLI entry point for conlog.

Handy for shell scripts that want to share a program's log files, and for
cleaning up captured console output:

    conlog emit error "backup failed: %s" "disk full"
    conlog strip session.txt
"""

import argparse
import sys
from datetime import datetime

from . import get_logger_instance
from .ansi import strip_ansi
from .config import ensure_config_exists, get_config_path
from .files import log_filename
from .severity import Severity


def cmd_emit(args: argparse.Namespace) -> None:
    """Log a message through the default logger."""
    try:
        level = Severity.from_name(args.level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    logger = get_logger_instance()
    if level is Severity.DEBUG:
        logger.debug(args.format, *args.args)
    else:
        logger.log(level, args.format, *args.args)


def cmd_raw(args: argparse.Namespace) -> None:
    """Print raw text through the default logger."""
    text = args.text if args.no_newline else args.text + "\n"
    get_logger_instance().print_raw(text)


def cmd_strip(args: argparse.Namespace) -> None:
    """Strip ANSI escapes from a file (or stdin) to stdout."""
    if args.file == "-":
        sys.stdout.write(strip_ansi(sys.stdin.read()))
        return
    try:
        with open(args.file, encoding="utf-8", errors="replace") as f:
            sys.stdout.write(strip_ansi(f.read()))
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_path(args: argparse.Namespace) -> None:
    """Print the log directory and today's log file."""
    logger = get_logger_instance()
    if logger.log_dir is None:
        print("File logging is disabled", file=sys.stderr)
        sys.exit(1)
    print(logger.log_dir)
    print(logger.log_dir / log_filename(datetime.now().date()))


def cmd_config_init(args: argparse.Namespace) -> None:
    """Initialize config file with defaults."""
    config_path = ensure_config_exists()
    print(f"Config file at: {config_path}")


def cmd_config_path(args: argparse.Namespace) -> None:
    """Print config file path."""
    print(get_config_path())


def cmd_config_show(args: argparse.Namespace) -> None:
    """Show current config."""
    config_path = get_config_path()
    if config_path.exists():
        print(config_path.read_text())
    else:
        print(f"No config file at {config_path}")
        print("Run 'conlog config init' to create one.")


def setup_config_parser(subparsers: argparse._SubParsersAction) -> None:
    """Set up the config subcommand."""
    config_parser = subparsers.add_parser(
        "config",
        help="Manage conlog configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    # config init
    init_parser = config_subparsers.add_parser("init", help="Create default config file")
    init_parser.set_defaults(func=cmd_config_init)

    # config path
    path_parser = config_subparsers.add_parser("path", help="Print config file path")
    path_parser.set_defaults(func=cmd_config_path)

    # config show
    show_parser = config_subparsers.add_parser("show", help="Show current config")
    show_parser.set_defaults(func=cmd_config_show)

    config_parser.set_defaults(func=cmd_config_show, config_command=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conlog",
        description="Colorized console logging with daily plain-text log files",
    )
    subparsers = parser.add_subparsers(dest="command")

    levels = ", ".join(level.name.lower() for level in Severity)
    emit_parser = subparsers.add_parser("emit", help="Log one message")
    emit_parser.add_argument("level", help=f"Severity ({levels})")
    emit_parser.add_argument("format", help="Message, optionally with %%-placeholders")
    emit_parser.add_argument("args", nargs="*", help="Values for the placeholders")
    emit_parser.set_defaults(func=cmd_emit)

    raw_parser = subparsers.add_parser("raw", help="Print undecorated text")
    raw_parser.add_argument("text")
    raw_parser.add_argument("-n", "--no-newline", action="store_true", help="Don't add a newline")
    raw_parser.set_defaults(func=cmd_raw)

    strip_parser = subparsers.add_parser("strip", help="Strip ANSI escapes from a file")
    strip_parser.add_argument("file", nargs="?", default="-", help="File to read (default: stdin)")
    strip_parser.set_defaults(func=cmd_strip)

    path_parser = subparsers.add_parser("path", help="Print the log directory and today's file")
    path_parser.set_defaults(func=cmd_path)

    setup_config_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
    elif hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
