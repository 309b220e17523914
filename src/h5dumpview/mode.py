# src/h5dumpview/mode.py
import logging
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Iterable, List, Optional, Tuple, Union

import pathspec

from h5dumpview.config import DEFAULT_FILE_PATTERNS
from h5dumpview.core.classifier import DEFAULT_CLASSIFIER, Classifier
from h5dumpview.core.folding import scan_folds
from h5dumpview.core.outline import build_outline
from h5dumpview.models import FoldScan, OutlineEntry

logger = logging.getLogger(__name__)


def load_file_spec(patterns: Iterable[str], extra_patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """
    Creates the PathSpec deciding which files open in this mode.
    Falls back to an empty spec if the patterns cannot be parsed.
    """
    lines = list(patterns)

    if extra_patterns:
        lines.extend(extra_patterns)

    try:
        return pathspec.GitIgnoreSpec.from_lines(lines)
    except Exception as e:
        logger.error(f"Error parsing file patterns: {e}")
        return pathspec.GitIgnoreSpec([])


@dataclass(frozen=True)
class DumpMode:
    """
    Registration value handed to a host editor.
    Bundles the classifier, the fold rule and the file association.
    """
    name: str
    classifier: Classifier = DEFAULT_CLASSIFIER
    file_spec: pathspec.PathSpec = field(default_factory=lambda: load_file_spec(DEFAULT_FILE_PATTERNS))

    @classmethod
    def default(cls, extra_patterns: Optional[List[str]] = None) -> "DumpMode":
        return cls(
            name="h5dump",
            file_spec=load_file_spec(DEFAULT_FILE_PATTERNS, extra_patterns=extra_patterns),
        )

    def handles(self, path: Union[str, PurePath]) -> bool:
        return self.file_spec.match_file(PurePath(path).as_posix())

    def highlight(self, text: str) -> List[Tuple[int, int, str]]:
        return self.classifier.classify(text).tags()

    def folds(self, text: str) -> FoldScan:
        return scan_folds(text)

    def outline(self, text: str) -> List[OutlineEntry]:
        return build_outline(text, self.folds(text))
