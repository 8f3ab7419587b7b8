from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Callable, Iterator

from .git import git_output
from .identity import authored_by, split_author_prefix
from .models import Repo, ReportOptions, ReportTotals


def since_arg(days: int) -> str:
    return f"--since={days} days ago"


def commit_log_base(options: ReportOptions) -> list[str]:
    cmd = ["log", "--no-merges", "--date=short", "--all-match", "--fixed-strings"]
    if options.filter_by_email:
        cmd.append(f"--author={options.user_email}")
        if not options.show_cherry_picks:
            cmd.append(f"--committer={options.user_email}")
    return cmd


def commit_format(repo: Repo, options: ReportOptions) -> str:
    fmt = "--format=" + repo.label
    if not options.filter_by_email:
        fmt += " %an - "
    return fmt + "%cd %s"


def commit_log_args(repo: Repo, options: ReportOptions) -> list[str]:
    return [*commit_log_base(options), commit_format(repo, options), since_arg(options.days), *repo.pathspec_args()]


def pull_request_log_args(repo: Repo, options: ReportOptions) -> list[str]:
    return [
        "log",
        "--no-merges",
        "--date=short",
        "--fixed-strings",
        f"--committer={options.user_email}",
        f"--format=%ae|{repo.label} %cd %s",
        since_arg(options.days),
        *repo.pathspec_args(),
    ]


def describe_command(options: ReportOptions) -> str:
    base = " ".join(["git", *commit_log_base(options)])
    return f'Running command: {base} --format="$REPO_NAME %s" --since="{options.days} days ago"'


def for_each_repo(
    repos: list[Repo],
    build_args: Callable[[Repo], list[str]],
    *,
    jobs: int,
) -> Iterator[tuple[Repo, str]]:
    """
    Run one git command per repo on a thread pool and yield (repo, stdout)
    in completion order. The first failure cancels queued work and propagates.
    """
    with ThreadPoolExecutor(max_workers=max(1, jobs)) as ex:
        futs: dict[Future[str], Repo] = {ex.submit(git_output, build_args(repo), repo.path): repo for repo in repos}
        try:
            for fut in as_completed(futs):
                yield futs[fut], fut.result()
        except BaseException:
            for f in futs:
                f.cancel()
            raise


def run_commit_pass(repos: list[Repo], options: ReportOptions, *, jobs: int) -> int:
    commits = 0
    for _repo, output in for_each_repo(repos, lambda r: commit_log_args(r, options), jobs=jobs):
        if output:
            print(output)
            commits += len(output.split("\n"))
    return commits


def pull_request_lines(output: str, user_email: str) -> list[str]:
    lines: list[str] = []
    for line in output.split("\n"):
        author_email, rest = split_author_prefix(line)
        if not authored_by(author_email, user_email):
            lines.append(rest)
    return lines


def run_pull_request_pass(repos: list[Repo], options: ReportOptions, *, jobs: int) -> int:
    pull_requests = 0
    for _repo, output in for_each_repo(repos, lambda r: pull_request_log_args(r, options), jobs=jobs):
        if not output:
            continue
        for line in pull_request_lines(output, options.user_email):
            print(line)
            pull_requests += 1
    return pull_requests


def format_summary(totals: ReportTotals, options: ReportOptions) -> str:
    if options.filter_by_email:
        return f"Total Commits: {totals.commits} Total Pull Requests: {totals.pull_requests}"
    return f"Total Commits: {totals.commits}"


def run_report(repos: list[Repo], options: ReportOptions, *, jobs: int) -> ReportTotals:
    totals = ReportTotals()

    print(describe_command(options))
    totals.commits = run_commit_pass(repos, options, jobs=jobs)

    if options.filter_by_email:
        print("\nPull requests:")
        totals.pull_requests = run_pull_request_pass(repos, options, jobs=jobs)

    print("")
    print(format_summary(totals, options))
    return totals
