# src/h5dumpview/core/classifier.py
import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from h5dumpview.config import DEFAULT_TOKEN_CLASSES
from h5dumpview.models import ClassifiedMatch, TokenClass

logger = logging.getLogger(__name__)

# Table literals are ASCII; text boundaries use Unicode \w
_LITERAL_RE = re.compile(r"[A-Za-z0-9_]+")


class TokenTableError(ValueError):
    """Raised when token classes cannot be combined into a classifier."""


class Classification:
    """
    Lazy view over the matches of one text.
    Every iteration rescans the text, so the view can be consumed repeatedly.
    """

    def __init__(self, classifier: "Classifier", text: str):
        self.classifier = classifier
        self.text = text

    def __iter__(self) -> Iterator[ClassifiedMatch]:
        owner = self.classifier._owner
        for m in self.classifier._pattern.finditer(self.text):
            literal = m.group(0)
            yield ClassifiedMatch(
                text=literal,
                start=m.start(),
                end=m.end(),
                token_class=owner[literal],
            )

    def __len__(self) -> int:
        return sum(1 for _ in self.classifier._pattern.finditer(self.text))

    def tags(self) -> List[Tuple[int, int, str]]:
        return [m.as_tag() for m in self]


class Classifier:
    """Immutable matcher built once from a set of token classes."""

    def __init__(self, classes: Tuple[TokenClass, ...], owner: Mapping[str, TokenClass], pattern: "re.Pattern"):
        self._classes = classes
        self._owner = owner
        self._pattern = pattern

    @classmethod
    def build(cls, token_classes: Iterable[TokenClass] = DEFAULT_TOKEN_CLASSES) -> "Classifier":
        classes = tuple(token_classes)
        owner: Dict[str, TokenClass] = {}
        names = set()

        for tc in classes:
            if tc.name in names:
                raise TokenTableError(f"Duplicate token class name '{tc.name}'")
            names.add(tc.name)

            if not tc.literals:
                raise TokenTableError(f"Token class '{tc.name}' has no literals")

            for literal in tc.literals:
                if not isinstance(literal, str) or not _LITERAL_RE.fullmatch(literal):
                    raise TokenTableError(
                        f"Invalid literal {literal!r} in class '{tc.name}' "
                        f"(only letters, digits and '_' are allowed)"
                    )
                previous = owner.get(literal)
                if previous is not None and previous is not tc:
                    raise TokenTableError(
                        f"Literal '{literal}' appears in both '{previous.name}' and '{tc.name}'"
                    )
                owner[literal] = tc

        # Longest first so the alternation never stops at a shorter prefix
        alternatives = sorted(owner, key=lambda s: (-len(s), s))
        body = "|".join(re.escape(s) for s in alternatives)
        pattern = re.compile(rf"(?<!\w)(?:{body})(?!\w)")

        logger.debug(f"Built classifier: {len(classes)} classes, {len(owner)} literals")
        return cls(classes, MappingProxyType(owner), pattern)

    @property
    def classes(self) -> Tuple[TokenClass, ...]:
        return self._classes

    @property
    def literals(self) -> Mapping[str, TokenClass]:
        return self._owner

    def class_of(self, literal: str) -> Optional[TokenClass]:
        return self._owner.get(literal)

    def classify(self, text: str) -> Classification:
        return Classification(self, text)


DEFAULT_CLASSIFIER = Classifier.build()


def classify(text: str, classifier: Classifier = DEFAULT_CLASSIFIER) -> Classification:
    return classifier.classify(text)
