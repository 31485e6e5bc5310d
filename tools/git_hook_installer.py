#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import json
import os
import shutil
import sys
from collections import namedtuple
from pathlib import Path

from rich.console import Console
from rich.markup import escape

# Git Hook Installer
# Copies the repository's shared hooks from .hooks/ into .git/hooks/.
# Paths are anchored to this script's location, never the working directory.

# --- CONFIGURATION ---
PROGRAM_PATH = Path(__file__)
SOURCE_DIR_NAME = ".hooks"
DESTINATION_PARTS = (".git", "hooks")

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

HookPaths = namedtuple("HookPaths", ["anchor", "source", "destination"])


class InstallReport(namedtuple("InstallReport", ["installed", "dry_run"])):
    __slots__ = ()

    @property
    def count(self):
        return len(self.installed)

    def summary(self):
        noun = "file" if self.count == 1 else "files"
        verb = "would be installed" if self.dry_run else "installed"
        return f"{self.count} {noun} {verb}"


class HookInstallError(Exception):
    exit_code = 1


class SourceMissing(HookInstallError):
    def __init__(self, path):
        self.path = Path(path)
        super().__init__(f"Hook source directory not found: {self.path}")


class DestinationMissing(HookInstallError):
    def __init__(self, path):
        self.path = Path(path)
        super().__init__(
            f"Git hooks directory not found: {self.path} (is this an initialized git repository?)"
        )


class CopyFailed(HookInstallError):
    exit_code = 2

    def __init__(self, filename, step, cause):
        self.filename = filename
        self.step = step
        self.cause = cause
        super().__init__(f"Failed to install hook '{filename}' during {step}: {cause}")


def resolve_paths(program_path):
    """Anchor is the directory one level above the program's own directory."""
    anchor = Path(program_path).resolve().parent.parent
    return HookPaths(
        anchor=anchor,
        source=anchor / SOURCE_DIR_NAME,
        destination=anchor.joinpath(*DESTINATION_PARTS),
    )


def discover_hooks(source):
    """
    Lists the hooks in a source directory: regular files directly inside it,
    sorted by name. Subdirectories are skipped, and so are dot-files, matching
    what a shell `cp .hooks/*` would pick up.
    """
    try:
        entries = list(Path(source).iterdir())
    except OSError as e:
        raise CopyFailed(Path(source).name, "list", e) from e
    return sorted(
        (p for p in entries if p.is_file() and not p.name.startswith(".")),
        key=lambda p: p.name,
    )


def copy_hook(src, destination):
    dst = Path(destination) / src.name
    try:
        # Read-only hooks from an earlier run can't be opened for writing.
        if dst.is_file() and not os.access(dst, os.W_OK):
            dst.unlink()
        shutil.copyfile(src, dst)
    except OSError as e:
        raise CopyFailed(src.name, "copy", e) from e
    try:
        shutil.copymode(src, dst)
    except OSError as e:
        raise CopyFailed(src.name, "chmod", e) from e
    return dst


def install(program_path, dry_run=False, on_installed=None):
    """
    Installs every hook from <anchor>/.hooks into <anchor>/.git/hooks.

    Both directories are validated before anything is written. The first
    failing copy aborts the run; hooks copied before it are left in place.
    """
    paths = resolve_paths(program_path)

    if not paths.source.is_dir():
        raise SourceMissing(paths.source)
    if not paths.destination.is_dir():
        raise DestinationMissing(paths.destination)

    installed = []
    for hook in discover_hooks(paths.source):
        if not dry_run:
            dst = copy_hook(hook, paths.destination)
        else:
            dst = paths.destination / hook.name
        installed.append(hook.name)
        if on_installed:
            on_installed(hook.name, dst)

    return InstallReport(installed=installed, dry_run=dry_run)


def report_to_dict(report):
    return {
        "status": "ok",
        "dry_run": report.dry_run,
        "count": report.count,
        "installed": list(report.installed),
    }


def error_to_dict(error):
    data = {"status": "error", "error": type(error).__name__, "message": str(error), "exit_code": error.exit_code}
    if isinstance(error, CopyFailed):
        data.update({"file": error.filename, "step": error.step})
    elif isinstance(error, (SourceMissing, DestinationMissing)):
        data["path"] = str(error.path)
    return data


def main(argv=None):
    parser = argparse.ArgumentParser(description="Install the repository's shared git hooks")
    parser.add_argument("--dry-run", action="store_true", help="List hooks that would be installed without copying")
    parser.add_argument("--json", action="store_true", help="Print a JSON report instead of console output")
    args = parser.parse_args(argv)

    def announce(name, dst):
        prefix = escape("[DRY-RUN] Would install") if args.dry_run else "✅ Installed"
        console.print(f"  [bold green]{prefix}[/]: {escape(name)} -> {escape(str(dst))}")

    try:
        report = install(PROGRAM_PATH, dry_run=args.dry_run, on_installed=None if args.json else announce)
    except HookInstallError as e:
        if args.json:
            print(json.dumps(error_to_dict(e), indent=4))
        else:
            err_console.print(f"[bold red]❌ {escape(str(e))}[/]")
        return e.exit_code

    if args.json:
        print(json.dumps(report_to_dict(report), indent=4))
    else:
        console.print(f"\n[bold green]✨ {report.summary()}[/]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
