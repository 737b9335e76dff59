"""Group a flat line stream into candidate transaction blocks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .lines import is_metadata_line, is_transaction_start

MAX_CONTINUATION_LINES = 5


def assemble_blocks(
    lines: Sequence[str], *, max_continuation: int = MAX_CONTINUATION_LINES
) -> Iterator[list[str]]:
    """Yield one list of lines per candidate transaction.

    A block opens on a transaction-start line and collects the lines below it
    until the next start line (left for the next block), a metadata line
    (dropped), or ``max_continuation`` continuation lines. Lines that do not
    follow a start line are skipped.
    """

    i = 0
    n = len(lines)
    while i < n:
        if not is_transaction_start(lines[i]):
            i += 1
            continue

        block = [lines[i]]
        j = i + 1
        while j < n and len(block) <= max_continuation:
            nxt = lines[j]
            if is_transaction_start(nxt):
                break
            j += 1
            if is_metadata_line(nxt):
                break
            block.append(nxt)

        yield block
        i = j


__all__ = ["MAX_CONTINUATION_LINES", "assemble_blocks"]
