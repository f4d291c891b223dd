# cursorsync

`cursor-sync` keeps a project's local `.cursor/` configuration (rules, skills
and commands) in sync with a remote Git repository.

It makes a shallow clone of the remote (`git clone --depth 1`) into a temporary
directory, lets you choose which entries to import, copies them into
`<project>/.cursor/`, and records what it did in
`<project>/.cursor-sync/config.yaml` and `<project>/.cursor-sync/manifest.yaml`.
Git must be installed and on your `PATH`.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install .[test]
pytest
```

## Usage

Running `cursor-sync` with no arguments prints a banner, the version and the
available commands. `cursor-sync --help` prints the help without the banner,
`cursor-sync --version` prints the version, and `cursor-sync help <command>`
prints the help of one command.

If the first argument is not a known command, `cursor-sync` says so; when that
argument looks like a repository URL it suggests `cursor-sync clone <url>`.

Errors are printed as `error: <message>` and the exit status is 1.

### clone

```
cursor-sync clone <repo-url> [directory] [--all] [--branch NAME] [--folder PATH]
```

This imports entries from the remote into `directory`, which defaults to the
current folder and is created if missing. The first argument must look like a
repository URL: it starts with `http://`, `https://`, `ssh://`, `git://`,
`file://` or `git@`, or ends with `.git`.

- `-a`, `--all` imports everything and skips the interactive selection.
- `-b`, `--branch` sets the branch to use. Without it, `main` is tried first, then `master`.
- `-f`, `--folder` names a folder, relative to the repo root, that holds
  `rules/`, `skills/` and `commands/`. Without it, the source layout is found
  automatically by checking these places in order:
  1. `.cursor/`
  2. `cursor/`
  3. the repo root

Without `--all`, the entries are shown as a numbered list whose first item is
`[Select All]`. Type the numbers you want, separated by spaces or commas;
ranges such as `2-4` are allowed. A blank answer selects nothing and the clone
stops without writing anything.

The remote URL, the branch that was cloned and the folder you chose are saved
in `config.yaml` and reused by later pulls.

### pull

```
cursor-sync pull [--yes] [--folder PATH]
```

This syncs again only the entries already recorded in the manifest, from the
remote and branch in the config (the branch is `master` if none is recorded).
Tracked entries that no longer exist on the remote are reported and kept
locally. When a local file differs from the remote version, you are asked what
to do:

- `y` overwrites this file.
- `N` keeps the local file. This is the default.
- `a` overwrites this file and every later one.
- `s` skips this file and every later one.
- `?` shows a short reminder of these answers.

`-y`, `--yes` overwrites every conflicting file without asking. `-f`,
`--folder` overrides the saved source folder and writes the new value back to
the config.

### list

```
cursor-sync list
cursor-sync ls
```

This lists the entries under `./.cursor/`, grouped by `rules/`, `skills/` and
`commands/`, and works offline. An entry tracked in the manifest is tagged
`[remote]`. An entry you added yourself is tagged `[local]`.

### config

```
cursor-sync config --show remote
cursor-sync config --set branch main
cursor-sync config --set folder configs/cursor
```

This reads or updates the `remote`, `branch` and `folder` fields of
`.cursor-sync/config.yaml` in the current directory. `--show` and `--set`
cannot be used together.

## Library use

The same operations can be called from Python:

- `cursorsync.clone.run_clone(repo_url, target_dir=".", select_all=False, branch="", folder="")`
  returns the files written, relative to `.cursor/`.
- `cursorsync.pull.run_pull(project_dir=".", assume_yes=False, folder="")`
  returns the files recorded in the new manifest.
- `cursorsync.listing.format_listing(project_dir=".")` returns the listing as text.
- `cursorsync.settings.show_field(project_dir, field)` and
  `cursorsync.settings.update_field(project_dir, field, value)` read and change
  the config.

`cursorsync.config` reads and writes the `Config` and `Manifest` files, and
`cursorsync.fsutil` holds the helpers for finding, listing and copying entries.

On failure these raise `cursorsync.errors.CursorSyncError`.

## Limitations

- Selection and overwrite prompts are plain line input on the terminal; there
  is no arrow-key menu.
- Only Git remotes reachable by the installed `git` command are supported;
  nothing is pushed back to the remote.