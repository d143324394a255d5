"""
Document types consumed by the Corpus.

A document is anything that can report term frequencies, its length and its
unique terms (see BaseDocument). Document works from an already tokenized
word list; TextDocument runs raw text through the tokenizer first.

Documents are never filtered for stopwords: that happens at the Corpus level,
so stopwords still count towards length and term frequency.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, Iterable, Optional, Set, Tuple, Union

from .tokenizer import tokenize


class BaseDocument(ABC):
    """
    Capability set required by the Corpus.

    Implement these three methods to plug in other token sources
    (e.g. a different language's segmenter).
    """

    @abstractmethod
    def term_frequency(self, term: str) -> int:
        """Number of occurrences of the term (0 if absent)."""
        pass

    @abstractmethod
    def length(self) -> int:
        """Total number of tokens, duplicates and stopwords included."""
        pass

    @abstractmethod
    def unique_terms(self) -> Set[str]:
        """Distinct tokens in the document, stopwords included."""
        pass


class Document(BaseDocument):
    """Document built from a list of individual, already normalized words."""

    def __init__(self, words: Iterable[str]):
        self._words: Tuple[str, ...] = tuple(words)
        self._term_frequencies: Optional[Dict[str, int]] = None

    def _get_term_frequencies(self) -> Dict[str, int]:
        # Words never change, so the counts are computed once
        if self._term_frequencies is None:
            self._term_frequencies = dict(Counter(self._words))
        return self._term_frequencies

    def term_frequency(self, term: str) -> int:
        return self._get_term_frequencies().get(term, 0)

    def length(self) -> int:
        return len(self._words)

    def unique_terms(self) -> Set[str]:
        return set(self._get_term_frequencies())

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self.length()})"


class TextDocument(Document):
    """
    Document built from raw text via the tokenizer.

    Example:
        >>> doc = TextDocument("Test document number three is a tiny bit longer.")
        >>> doc.term_frequency("bit"), doc.term_frequency("a")
        (1, 0)
    """

    def __init__(self, text: str):
        super().__init__(tokenize(text))
        self._text = text

    def get_text(self) -> str:
        """Full text of this document (e.g. for display)."""
        return self._text

    @classmethod
    def from_value(cls, text_or_document: Union[str, BaseDocument]) -> BaseDocument:
        """Return documents unchanged; build a TextDocument from anything else."""
        if isinstance(text_or_document, BaseDocument):
            return text_or_document
        return cls(text_or_document)
