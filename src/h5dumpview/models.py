# src/h5dumpview/models.py
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class TokenClass:
    """A named set of exact-match literals sharing one display style."""
    name: str
    literals: Tuple[str, ...]
    style: str = ""

    def __post_init__(self):
        # Accept any iterable of literals but store an immutable tuple
        object.__setattr__(self, "literals", tuple(self.literals))
        if not self.style:
            object.__setattr__(self, "style", self.name)


@dataclass(frozen=True)
class ClassifiedMatch:
    """One literal found in the scanned text."""
    text: str
    start: int
    end: int
    token_class: TokenClass

    @property
    def class_name(self) -> str:
        return self.token_class.name

    def as_tag(self) -> Tuple[int, int, str]:
        return (self.start, self.end, self.token_class.name)


@dataclass(frozen=True)
class FoldRegion:
    """
    Span between a `{` and its matching `}`.
    close_offset is None while the region is unterminated.
    """
    open_offset: int
    close_offset: Optional[int]
    depth: int = 0

    @property
    def is_closed(self) -> bool:
        return self.close_offset is not None

    def contains(self, offset: int) -> bool:
        if offset < self.open_offset:
            return False
        return self.close_offset is None or offset <= self.close_offset

    def as_span(self) -> Tuple[int, Optional[int]]:
        return (self.open_offset, self.close_offset)


@dataclass(frozen=True)
class FoldScan:
    """Result of one fold scan: regions in open order plus stray `}` offsets."""
    regions: Tuple[FoldRegion, ...] = ()
    unbalanced: Tuple[int, ...] = ()

    @property
    def balanced(self) -> bool:
        return not self.unbalanced and all(r.is_closed for r in self.regions)

    def spans(self):
        return [r.as_span() for r in self.regions]

    def region_at(self, offset: int) -> Optional[FoldRegion]:
        """Returns the innermost region containing offset, or None."""
        innermost = None
        for region in self.regions:
            if region.contains(offset):
                if innermost is None or region.depth > innermost.depth:
                    innermost = region
        return innermost

    def at_depth(self, depth: int) -> Tuple[FoldRegion, ...]:
        return tuple(r for r in self.regions if r.depth == depth)


@dataclass(frozen=True)
class OutlineEntry:
    """A keyword-headed block such as `GROUP "/" { ... }`."""
    kind: str
    name: str
    region: FoldRegion
    children: Tuple["OutlineEntry", ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return f"{self.kind} {self.name}" if self.name else self.kind
