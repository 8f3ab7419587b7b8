from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Optional


class GitCommandError(RuntimeError):
    def __init__(self, args: list[str], cwd: Path, returncode: int, stderr: str) -> None:
        self.args_list = list(args)
        self.cwd = cwd
        self.returncode = returncode
        self.stderr = stderr
        detail = (stderr or "").strip() or f"exit status {returncode}"
        super().__init__(f"git {' '.join(args)} failed in {cwd}: {detail}")


def run_git(args: list[str], cwd: Path, timeout_s: int | None = None) -> tuple[int, str, str]:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        timeout=timeout_s,
    )
    return proc.returncode, proc.stdout, proc.stderr


def git_output(args: list[str], cwd: Path, timeout_s: int | None = None) -> str:
    """Run git and return stdout without the trailing newline; raise GitCommandError on failure."""
    try:
        code, out, err = run_git(args, cwd=cwd, timeout_s=timeout_s)
    except OSError as e:
        # Missing or unreadable working tree.
        raise GitCommandError(args, cwd, -1, str(e)) from e
    if code != 0:
        raise GitCommandError(args, cwd, code, err)
    return out.rstrip("\n")


def get_user_email(cwd: Path) -> str:
    code, out, _ = run_git(["config", "user.email"], cwd=cwd)
    if code != 0:
        return ""
    return out.strip()


def discover_git_roots(root: Path, exclude_dirnames: set[str]) -> list[Path]:
    roots: list[Path] = []

    def onerror(err: OSError) -> None:
        _ = err

    for dirpath, dirnames, filenames in os.walk(root, onerror=onerror):
        has_git = ".git" in dirnames or ".git" in filenames
        if has_git:
            roots.append(Path(dirpath))
        dirnames[:] = sorted(d for d in dirnames if d not in exclude_dirnames and d != ".git")
    return roots


def get_repo_toplevel(candidate: Path) -> Optional[Path]:
    code, out, _ = run_git(["rev-parse", "--show-toplevel"], cwd=candidate)
    if code != 0:
        return None
    try:
        return Path(out.strip()).resolve()
    except OSError:
        return None
