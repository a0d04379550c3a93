import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from . import cmd_clone, cmd_config
from .clipboard import ClipboardReader, PyperclipReader
from .config import ConfigStore
from .errors import CloneProcessError, GitSiteCloneError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Clone repositories from a given URL (or the clipboard) into
<base>/<host>/<path>, with per-host directory mappings.
"""

COMMANDS = ("clone", "config")
GLOBAL_FLAGS = ("-v", "--verbose")
HELP_FLAGS = ("-h", "--help")


@dataclass
class Context:
    store: ConfigStore
    cloner: cmd_clone.Cloner
    clipboard: ClipboardReader


def run_clone(args, ctx: Context) -> None:
    cmd_clone.clone(
        args.url,
        args.base,
        args.no_cwd,
        store=ctx.store,
        cloner=ctx.cloner,
        clipboard=ctx.clipboard,
    )


def run_config_show(args, ctx: Context) -> None:
    print(cmd_config.show(ctx.store))


def run_config_base(args, ctx: Context) -> None:
    cmd_config.set_base(ctx.store, args.base)


def run_mappings_add(args, ctx: Context) -> None:
    cmd_config.add_mapping(ctx.store, args.host, args.path)


def run_mappings_remove(args, ctx: Context) -> None:
    cmd_config.remove_mapping(ctx.store, args.host)


def build_parser() -> argparse.ArgumentParser:
    # -v is accepted after the command too, SUPPRESS keeps the global value
    verbose = argparse.ArgumentParser(add_help=False)
    verbose.add_argument(
        *GLOBAL_FLAGS, action="store_true", default=argparse.SUPPRESS
    )

    parser = argparse.ArgumentParser(
        prog="git-site-clone",
        description=DESCRIPTION,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        *GLOBAL_FLAGS,
        dest="verbose",
        action="store_true",
        help="Print diagnostics to stderr",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    p_clone = commands.add_parser(
        "clone",
        parents=[verbose],
        help="Clone a repository (default command)",
    )
    p_clone.add_argument(
        "url", nargs="?", help="Repository URL, read from the clipboard if omitted"
    )
    p_clone.add_argument(
        "--base", type=Path, help="Base directory for this clone, overrides config"
    )
    p_clone.add_argument(
        "--no-cwd",
        action="store_true",
        help="Do not change the current directory after cloning",
    )
    p_clone.set_defaults(func=run_clone)

    p_config = commands.add_parser(
        "config", parents=[verbose], help="Configure base directory and mappings"
    )
    config_commands = p_config.add_subparsers(dest="config_command", required=True)

    p_show = config_commands.add_parser(
        "show", parents=[verbose], help="Show the current configuration"
    )
    p_show.set_defaults(func=run_config_show)

    p_base = config_commands.add_parser(
        "base", parents=[verbose], help="Set the base directory"
    )
    p_base.add_argument("base", type=Path)
    p_base.set_defaults(func=run_config_base)

    p_mappings = config_commands.add_parser(
        "mappings", parents=[verbose], help="Configure per-host mappings"
    )
    mappings_commands = p_mappings.add_subparsers(
        dest="mappings_command", required=True
    )

    p_add = mappings_commands.add_parser(
        "add", parents=[verbose], help="Add or replace a mapping"
    )
    p_add.add_argument("host", help="Hostname (key) of the mapping")
    p_add.add_argument("path", type=Path, help="Directory for repositories of host")
    p_add.set_defaults(func=run_mappings_add)

    p_remove = mappings_commands.add_parser(
        "remove", parents=[verbose], help="Remove a mapping"
    )
    p_remove.add_argument("host")
    p_remove.set_defaults(func=run_mappings_remove)

    return parser


def insert_default_command(argv: Sequence[str]) -> list[str]:
    """`git-site-clone URL` means `git-site-clone clone URL`"""
    argv = list(argv)
    i = 0
    while i < len(argv) and argv[i] in GLOBAL_FLAGS:
        i += 1
    if i < len(argv) and argv[i] in (*COMMANDS, *HELP_FLAGS):
        return argv
    return [*argv[:i], "clone", *argv[i:]]


def main(
    argv: Sequence[str] | None = None,
    *,
    store: ConfigStore | None = None,
    cloner: cmd_clone.Cloner | None = None,
    clipboard: ClipboardReader | None = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(insert_default_command(argv))

    setup_logging(args.verbose)
    logger.debug(f"{args=}")

    if store is None:
        store = ConfigStore()
    if cloner is None:
        cloner = cmd_clone.GitCloner()
    if clipboard is None:
        clipboard = PyperclipReader()

    if args.command == "config":
        logger.info(f"Configuration path: {store.path}")

    try:
        args.func(args, Context(store, cloner, clipboard))
    except CloneProcessError as e:
        logger.error(f"Error: {e}")
        return e.exit_code
    except GitSiteCloneError as e:
        logger.error(f"Error: {e}")
        return 1

    return 0
