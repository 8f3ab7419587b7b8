from __future__ import annotations

import json
from pathlib import Path

from .models import Repo

DEFAULT_EXCLUDE_DIRNAMES = {
    ".git",
    ".venv",
    "node_modules",
    "vendor",
    "dist",
    "build",
    "target",
    ".idea",
    ".pytest_cache",
    "__pycache__",
}


def load_config(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    data = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise SystemExit(f"Invalid config (expected a JSON object): {config_path}")
    return data


def exclude_dirnames_from_config(config: dict) -> set[str]:
    names = set(config.get("exclude_dirnames", []) or [])
    return names or set(DEFAULT_EXCLUDE_DIRNAMES)


def repos_from_config(config: dict, *, config_path: Path) -> list[Repo]:
    """
    Build repo descriptors from the `repos` list of a config dict.

    `repo_root` is relative to the config file's directory, each repo `path`
    relative to `repo_root`. Entries may be plain strings (just a path).
    """
    base = config_path.resolve().parent
    repo_root = (base / str(config.get("repo_root", "") or ".")).resolve()

    repos: list[Repo] = []
    seen: set[str] = set()
    for i, entry in enumerate(config.get("repos", []) or []):
        if isinstance(entry, str):
            entry = {"path": entry}
        if not isinstance(entry, dict):
            raise SystemExit(f"Invalid repo entry #{i} in {config_path}: {entry!r}")
        raw_path = str(entry.get("path", "") or "").strip()
        if not raw_path:
            raise SystemExit(f"Repo entry #{i} in {config_path} has no path.")
        path = (repo_root / raw_path).resolve()
        repo_id = str(entry.get("id", "") or "").strip() or path.name
        if repo_id in seen:
            raise SystemExit(f"Duplicate repo id in {config_path}: {repo_id!r}")
        seen.add(repo_id)
        include_paths = entry.get("include_paths", []) or []
        if isinstance(include_paths, str):
            include_paths = [include_paths]
        groups = entry.get("groups", []) or []
        repos.append(
            Repo(
                id=repo_id,
                path=path,
                include_paths=tuple(str(p) for p in include_paths if str(p).strip()),
                groups=tuple(str(g) for g in groups if str(g).strip()),
            )
        )
    return repos


def default_repo_selectors(config: dict) -> list[str]:
    return [str(s) for s in (config.get("default_repos", []) or []) if str(s).strip()]
