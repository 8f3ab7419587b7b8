from __future__ import annotations

from pathlib import Path

from .config import default_repo_selectors, exclude_dirnames_from_config, load_config, repos_from_config
from .git import discover_git_roots, get_repo_toplevel
from .models import Repo


def discover_repos(scan_root: Path, exclude_dirnames: set[str]) -> list[Repo]:
    candidates = discover_git_roots(scan_root, exclude_dirnames)

    by_top: dict[Path, Repo] = {}
    used_ids: set[str] = set()
    for cand in candidates:
        top = get_repo_toplevel(cand)
        if top is None or top in by_top:
            continue
        repo_id = top.name or str(top)
        # Clones sharing a directory name get a numeric suffix.
        n = 2
        base_id = repo_id
        while repo_id in used_ids:
            repo_id = f"{base_id}-{n}"
            n += 1
        used_ids.add(repo_id)
        by_top[top] = Repo(id=repo_id, path=top)

    return sorted(by_top.values(), key=lambda r: r.path.as_posix())


def split_selectors(values: list[str] | None) -> list[str]:
    out: list[str] = []
    for v in values or []:
        for part in str(v).split(","):
            part = part.strip()
            if part:
                out.append(part)
    return out


def compute_repos_from_flag(selectors: list[str], repos: list[Repo]) -> list[Repo]:
    """
    Resolve `--repo` selectors (ids, group names or `all`) into repos.

    No selectors means all repos. Order follows `repos`; duplicates are dropped.
    """
    if not selectors:
        return list(repos)

    by_id = {r.id: r for r in repos}
    groups: dict[str, list[str]] = {}
    for r in repos:
        for g in r.groups:
            groups.setdefault(g, []).append(r.id)

    wanted: set[str] = set()
    unknown: list[str] = []
    for sel in selectors:
        if sel == "all":
            wanted.update(by_id)
        elif sel in by_id:
            wanted.add(sel)
        elif sel in groups:
            wanted.update(groups[sel])
        else:
            unknown.append(sel)

    if unknown:
        known = sorted(by_id)
        msg = f"Unknown repo(s): {', '.join(unknown)}. Known repos: {', '.join(known) or '(none)'}"
        if groups:
            msg += f". Groups: {', '.join(sorted(groups))}"
        raise SystemExit(msg)

    return [r for r in repos if r.id in wanted]


def resolve_repos(*, config_path: Path, scan_root: Path, selectors: list[str]) -> list[Repo]:
    config = load_config(config_path)
    if config.get("repos"):
        repos = repos_from_config(config, config_path=config_path)
    else:
        repos = discover_repos(scan_root.resolve(), exclude_dirnames_from_config(config))
    if not selectors:
        selectors = default_repo_selectors(config)
    return compute_repos_from_flag(selectors, repos)
