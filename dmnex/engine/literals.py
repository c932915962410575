from __future__ import annotations

import re
from typing import Iterable

# Double-quoted tokens only; no escape handling and empty quotes never match.
QUOTED = re.compile(r'"([^"]+)"')


def quoted_literals(texts: Iterable[str]) -> list[str]:
    """Return every quoted literal across `texts`, in order, quotes stripped.

    >>> quoted_literals(['"Active","Inactive"'])
    ['Active', 'Inactive']
    """
    out: list[str] = []
    for t in texts:
        out.extend(QUOTED.findall(t or ""))
    return out


def first_literal(texts: Iterable[str]) -> str | None:
    lits = quoted_literals(texts)
    return lits[0] if lits else None
