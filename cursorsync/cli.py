"""Command-line entry point for ``cursor-sync``."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence
from functools import partial

from cursorsync import banner, listing, settings
from cursorsync.clone import looks_like_repo_url, run_clone
from cursorsync.errors import CursorSyncError
from cursorsync.pull import run_pull

PROG = "cursor-sync"
VERSION = "0.3.1"
TAGLINE = "cursor-sync keeps your local .cursor config in sync with a remote Git repository."
SHORT = "Sync .cursor rules/skills/commands from a remote git repo"

BARE_HEADER = f"{banner.CYAN}{TAGLINE}{banner.RESET}\n\033[2mVersion {VERSION}\033[0m"

_EXAMPLES = """Examples:
  cursor-sync clone <repo-url> [directory]
  cursor-sync clone <repo-url> --branch [branch-name] --folder [folder-path]

Use "cursor-sync [command] --help" for more information about a command."""

_CLONE_DESCRIPTION = """Shallow-clones the given repo, lets you select which rules/skills/commands
to import, copies them into <directory>/.cursor/, and writes
<directory>/.cursor-sync/{config.yaml,manifest.yaml}.

By default the source layout is auto-detected on the remote, in order:
  - .cursor/{rules,skills,commands}/   (preferred)
  - cursor/{rules,skills,commands}/
  - {rules,skills,commands}/           (at the repo root)

Pass --folder <path> to skip auto-detection and read from a specific folder
relative to the repo root (e.g. --folder configs/cursor). The chosen folder
is recorded in .cursor-sync/config.yaml and reused by later pulls.

If [directory] is omitted, the current folder (.) is used."""

_PULL_DESCRIPTION = """Re-syncs only the entries already tracked in .cursor-sync/manifest.yaml.
On per-file conflicts the user is prompted (y/N/a/s); pass --yes to overwrite all.

The remote source folder defaults to the "folder" value recorded in
.cursor-sync/config.yaml; if that is empty it's auto-detected among
.cursor/, cursor/, or the repo root. Pass --folder to override it; the
new value is written back into config.yaml."""

_LIST_DESCRIPTION = """Lists rules/skills/commands under ./.cursor/ in the current directory.
Entries whose top-level name is recorded in .cursor-sync/manifest.yaml are
tagged [remote]; user-added entries are tagged [local]. Offline; no network call."""

_CONFIG_DESCRIPTION = """Examples:
  cursor-sync config --show remote
  cursor-sync config --set remote https://example.com/owner/repo.git
  cursor-sync config --set branch main
  cursor-sync config --set folder configs/cursor"""


def _cmd_clone(args: argparse.Namespace) -> None:
    run_clone(args.repo_url, args.directory, args.all, args.branch, args.folder)


def _cmd_pull(args: argparse.Namespace) -> None:
    run_pull(os.getcwd(), args.yes, args.folder)


def _cmd_list(args: argparse.Namespace) -> None:
    listing.run_list(os.getcwd())


def _cmd_config(args: argparse.Namespace) -> None:
    if not args.show and not args.set:
        raise CursorSyncError("must pass --show <field> or --set <field> <value>")
    if args.show and args.set:
        raise CursorSyncError("--show and --set are mutually exclusive")
    cwd = os.getcwd()
    if args.show:
        print(settings.show_field(cwd, args.show))
        return
    if args.value is None:
        raise CursorSyncError(f"--set {args.set} requires a value argument")
    settings.update_field(cwd, args.set, args.value)


def _cmd_help(
    root: argparse.ArgumentParser,
    commands: Mapping[str, argparse.ArgumentParser],
    args: argparse.Namespace,
) -> None:
    if args.topic is None:
        sys.stdout.write(root.format_help())
        return
    target = commands.get(args.topic)
    if target is None:
        sys.stderr.write(f'Unknown help topic "{args.topic}"\n')
        sys.stderr.write(root.format_usage())
        return
    sys.stdout.write(target.format_help())


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    raw = argparse.RawDescriptionHelpFormatter
    parser = argparse.ArgumentParser(
        prog=PROG, description=SHORT, epilog=_EXAMPLES, formatter_class=raw
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"{PROG} version {VERSION}"
    )
    sub = parser.add_subparsers(title="Available Commands", metavar="[command]")

    clone = sub.add_parser(
        "clone",
        help="Clone .cursor config from a remote repo into a project directory",
        description=_CLONE_DESCRIPTION,
        formatter_class=raw,
    )
    clone.add_argument("repo_url", metavar="repo-url")
    clone.add_argument("directory", nargs="?", default=".")
    clone.add_argument(
        "-a", "--all", action="store_true", help="Skip the multi-select and import everything"
    )
    clone.add_argument(
        "-b", "--branch", default="",
        help="Branch of the remote repo to use (default: try main, then master)",
    )
    clone.add_argument(
        "-f", "--folder", default="",
        help="Remote folder (relative to repo root) containing rules/skills/commands "
        "(default: auto-detect .cursor, cursor, or repo root)",
    )
    clone.set_defaults(func=_cmd_clone)

    pull = sub.add_parser(
        "pull",
        help="Pull the latest .cursor entries previously synced into this project",
        description=_PULL_DESCRIPTION,
        formatter_class=raw,
    )
    pull.add_argument(
        "-y", "--yes", action="store_true",
        help="Overwrite all conflicting files without prompting",
    )
    pull.add_argument(
        "-f", "--folder", default="",
        help="Remote folder (relative to repo root) containing rules/skills/commands "
        "(default: value from config.yaml, else auto-detect)",
    )
    pull.set_defaults(func=_cmd_pull)

    list_cmd = sub.add_parser(
        "list",
        aliases=["ls"],
        help="List local .cursor entries and tag them as [remote] or [local]",
        description=_LIST_DESCRIPTION,
        formatter_class=raw,
    )
    list_cmd.set_defaults(func=_cmd_list)

    config_cmd = sub.add_parser(
        "config",
        help="Show or update fields in .cursor-sync/config.yaml",
        description=_CONFIG_DESCRIPTION,
        formatter_class=raw,
    )
    config_cmd.add_argument(
        "--show", default="", metavar="FIELD",
        help="Show the value of a config field (e.g. remote, branch, folder)",
    )
    config_cmd.add_argument(
        "--set", default="", metavar="FIELD",
        help="Set a config field; pass the new value as a positional argument",
    )
    config_cmd.add_argument("value", nargs="?")
    config_cmd.set_defaults(func=_cmd_config)

    help_cmd = sub.add_parser("help", help="Help about any command")
    help_cmd.add_argument("topic", nargs="?")
    help_cmd.set_defaults(func=partial(_cmd_help, parser, sub.choices))

    return parser


def _command_names(parser: argparse.ArgumentParser) -> set[str]:
    names: set[str] = set()
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            names.update(action.choices)
    return names


def _run_bare(parser: argparse.ArgumentParser) -> None:
    banner.print_banner(sys.stdout)
    print(BARE_HEADER)
    print()
    sys.stdout.write(parser.format_help())


def _report_unknown(arg: str) -> None:
    sys.stderr.write(f'Unknown command or argument: "{arg}"\n')
    if looks_like_repo_url(arg):
        sys.stderr.write(f"\nDid you mean:\n  {PROG} clone {arg}\n\n")
    sys.stderr.write(f"Run `{PROG} --help` to see available commands.\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not args_list:
        _run_bare(parser)
        return 0
    first = args_list[0]
    if not first.startswith("-") and first not in _command_names(parser):
        _report_unknown(first)
        return 0

    args = parser.parse_args(args_list)
    handler = getattr(args, "func", None)
    if handler is None:
        sys.stdout.write(parser.format_help())
        return 0
    try:
        handler(args)
    except (CursorSyncError, OSError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())