from typing import Callable

import ulid

def new_id(prefix: str = "") -> str:
    """ULID string (sortable by creation time), e.g. ``req_01H...``."""
    return prefix + str(ulid.new())

def sequential_key(prefix: str, start: int, is_taken: Callable[[str], bool]) -> str:
    """
    First free key of the form ``{prefix}-{n}`` with ``n >= start``.

    Graph keys used to be generated by the dashboard from its own node/edge
    count, which collides as soon as two editors are open. The store now hands
    them out instead.
    """
    n = max(start, 1)
    while is_taken(f"{prefix}-{n}"):
        n += 1
    return f"{prefix}-{n}"
