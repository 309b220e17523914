# src/h5dumpview/core/outline.py
from typing import List, Optional, Tuple

from h5dumpview.config import OUTLINE_KINDS
from h5dumpview.core.folding import scan_folds
from h5dumpview.models import FoldRegion, FoldScan, OutlineEntry

_HEADER_STOPS = "\n{}"


def _read_header(text: str, open_offset: int) -> Tuple[str, str]:
    """Splits the text before a `{` into (kind, name)."""
    start = max(text.rfind(ch, 0, open_offset) for ch in _HEADER_STOPS) + 1
    header = text[start:open_offset].strip()
    if not header:
        return "", ""
    kind, *rest = header.split(None, 1)
    name = rest[0].strip() if rest else ""
    if len(name) >= 2 and name[0] == name[-1] == '"':
        name = name[1:-1]
    return kind, name


def _encloses(outer: FoldRegion, inner: FoldRegion) -> bool:
    return inner.open_offset > outer.open_offset and outer.contains(inner.open_offset)


def build_outline(text: str, fold_scan: Optional[FoldScan] = None) -> List[OutlineEntry]:
    """
    Lists keyword-headed blocks (HDF5, GROUP, DATASET, ...) as a tree.
    Blocks with other headers are skipped, their children attach upward.
    """
    if fold_scan is None:
        fold_scan = scan_folds(text)

    # Mutable nodes first, frozen entries are built bottom-up at the end
    roots: List[dict] = []
    stack: List[dict] = []

    for region in fold_scan.regions:
        kind, name = _read_header(text, region.open_offset)
        if kind not in OUTLINE_KINDS:
            continue

        while stack and not _encloses(stack[-1]["region"], region):
            stack.pop()

        node = {"kind": kind, "name": name, "region": region, "children": []}
        if stack:
            stack[-1]["children"].append(node)
        else:
            roots.append(node)
        stack.append(node)

    def _freeze(node: dict) -> OutlineEntry:
        return OutlineEntry(
            kind=node["kind"],
            name=node["name"],
            region=node["region"],
            children=tuple(_freeze(child) for child in node["children"]),
        )

    return [_freeze(node) for node in roots]


def render_outline(entries: List[OutlineEntry], root_name: str) -> str:
    """Generates a string representation of the outline tree."""
    lines = [f"{root_name}/"]

    def _generate_lines_recursive(subtree, prefix: str):
        for i, entry in enumerate(subtree):
            is_last = (i == len(subtree) - 1)
            connector = "└── " if is_last else "├── "
            lines.append(f"{prefix}{connector}{entry.label}")

            if entry.children:
                new_prefix = prefix + ("    " if is_last else "│   ")
                _generate_lines_recursive(entry.children, new_prefix)

    _generate_lines_recursive(entries, "")
    return "\n".join(lines) + "\n"
