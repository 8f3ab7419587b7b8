from __future__ import annotations

import re

_AUTHOR_PREFIX_RE = re.compile(r"^(.*?)\|(.*)$")


def split_author_prefix(line: str) -> tuple[str, str]:
    """
    Split a `%ae|<rest>` log line into (author_email, rest).
    Lines without the separator come back unchanged with an empty email.
    """
    m = _AUTHOR_PREFIX_RE.match(line)
    if m is None:
        return "", line
    return m.group(1), m.group(2)


def authored_by(author_email: str, filter_email: str) -> bool:
    # Same substring semantics as `git log --fixed-strings --author=...`.
    if not filter_email:
        return True
    return filter_email in author_email
