# src/h5dumpview/core/folding.py
import logging
from typing import Iterable, List

from h5dumpview.models import FoldRegion, FoldScan

logger = logging.getLogger(__name__)

OPEN_MARK = "{"
CLOSE_MARK = "}"


def scan_folds(text: str) -> FoldScan:
    """
    Derives fold regions from brace pairs.

    Each `{` opens a region and each `}` closes the innermost open one.
    A `}` with nothing open is recorded in `unbalanced` and skipped.
    A `{` still open at the end of the text stays unterminated.
    """
    stack: List[int] = []
    closed: List[FoldRegion] = []
    unbalanced: List[int] = []

    for offset, ch in enumerate(text):
        if ch == OPEN_MARK:
            stack.append(offset)
        elif ch == CLOSE_MARK:
            if not stack:
                unbalanced.append(offset)
                continue
            open_offset = stack.pop()
            closed.append(FoldRegion(open_offset, offset, depth=len(stack)))

    dangling = [FoldRegion(o, None, depth=d) for d, o in enumerate(stack)]

    if unbalanced or dangling:
        logger.debug(
            f"Unbalanced braces: {len(unbalanced)} stray '}}', {len(dangling)} unterminated '{{'"
        )

    regions = sorted(closed + dangling, key=lambda r: r.open_offset)
    return FoldScan(regions=tuple(regions), unbalanced=tuple(unbalanced))


def collapse(text: str, regions: Iterable[FoldRegion], placeholder: str = "...") -> str:
    """
    Hides the interior of each closed region, keeping its braces.
    Nested regions are absorbed by the outermost one given.
    """
    hidden = sorted((r for r in regions if r.is_closed), key=lambda r: r.open_offset)

    parts: List[str] = []
    cursor = 0
    for region in hidden:
        if region.open_offset < cursor:
            continue
        parts.append(text[cursor:region.open_offset + 1])
        parts.append(placeholder)
        cursor = region.close_offset
    parts.append(text[cursor:])
    return "".join(parts)
