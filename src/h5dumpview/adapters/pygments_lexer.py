# src/h5dumpview/adapters/pygments_lexer.py
import re
from typing import ClassVar, Dict, List

from pygments.filter import apply_filters
from pygments.lexer import Lexer
from pygments.token import Generic, Keyword, Name, Punctuation, Text

from h5dumpview.core.classifier import DEFAULT_CLASSIFIER

STYLE_TOKENS: Dict[str, object] = {
    "warning": Generic.Error,
    "keyword": Keyword,
    "type": Keyword.Type,
    "constant": Name.Constant,
    "variable": Name.Variable,
}

_GAP_RE = re.compile(r"[{}]|[^{}]+")


class H5DumpLexer(Lexer):
    """Pygments lexer for h5dump textual output (.h5dump)."""

    name = "H5Dump"
    aliases: ClassVar[List[str]] = ["h5dump"]
    filenames: ClassVar[List[str]] = ["*.h5dump"]
    mimetypes: ClassVar[List[str]] = ["text/x-h5dump"]

    def __init__(self, **options):
        self.classifier = options.pop("classifier", DEFAULT_CLASSIFIER)
        super().__init__(**options)

    def get_tokens(self, text, unfiltered=False):
        """
        Yields (tokentype, value) pairs without Pygments' input preprocessing.
        Line endings and trailing newlines are kept, so offsets match the classifier's.
        """
        stream = ((token, value) for _, token, value in self.get_tokens_unprocessed(text))
        if not unfiltered:
            stream = apply_filters(stream, self.filters, self)
        return stream

    def _gap_tokens(self, text: str, offset: int):
        for m in _GAP_RE.finditer(text):
            value = m.group(0)
            token = Punctuation if value in ("{", "}") else Text
            yield offset + m.start(), token, value

    def get_tokens_unprocessed(self, text):
        cursor = 0
        for match in self.classifier.classify(text):
            if match.start > cursor:
                yield from self._gap_tokens(text[cursor:match.start], cursor)
            yield match.start, STYLE_TOKENS.get(match.token_class.style, Text), match.text
            cursor = match.end
        if cursor < len(text):
            yield from self._gap_tokens(text[cursor:], cursor)
