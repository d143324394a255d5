"""
Stopword lists for collection-level filtering.

A Stopwords instance is an immutable term set that doubles as a
``term -> bool`` predicate, so a Corpus can accept either an instance or any
other callable with the same signature.

The default English list is based on the NLTK stopword list
(https://gist.github.com/sebleier/554280) with 1-letter words left out,
since the tokenizer never produces them.
"""

from typing import Callable, Iterable, Iterator, List, Optional, Union

StopwordPredicate = Callable[[str], bool]

_DEFAULT_WORDS = (
    'me', 'my', 'myself', 'we', 'our', 'ours', 'ourselves', 'you', 'your', 'yours', 'yourself',
    'yourselves', 'he', 'him', 'his', 'himself', 'she', 'her', 'hers', 'herself', 'it', 'its',
    'itself', 'they', 'them', 'their', 'theirs', 'themselves', 'what', 'which', 'who', 'whom',
    'this', 'that', 'these', 'those', 'am', 'is', 'are', 'was', 'were', 'be', 'been', 'being',
    'have', 'has', 'had', 'having', 'do', 'does', 'did', 'doing', 'an', 'the', 'and', 'but',
    'if', 'or', 'because', 'as', 'until', 'while', 'of', 'at', 'by', 'for', 'with', 'about',
    'against', 'between', 'into', 'through', 'during', 'before', 'after', 'above', 'below',
    'to', 'from', 'up', 'down', 'in', 'out', 'on', 'off', 'over', 'under', 'again', 'further',
    'then', 'once', 'here', 'there', 'when', 'where', 'why', 'how', 'all', 'any', 'both', 'each',
    'few', 'more', 'most', 'other', 'some', 'such', 'no', 'nor', 'not', 'only', 'own', 'same', 'so',
    'than', 'too', 'very', 'can', 'will', 'just', 'don', 'could', 'should', 'would', 'now', 'll',
    're', 've', 'aren', 'couldn', 'didn', 'doesn', 'hadn', 'hasn', 'haven', 'isn', 'mustn', 'needn',
    'shouldn', 'wasn', 'weren', 'won', 'wouldn',
)


class Stopwords:
    """Immutable stopword list usable as a predicate."""

    def __init__(self, words: Iterable[str] = ()):
        # dict keeps insertion order for get_stopword_list()
        self._words = dict.fromkeys(words)

    def includes(self, term: str) -> bool:
        """Return True if the term is in this stopword list."""
        return term in self._words

    def with_words(self, extra: Iterable[str]) -> "Stopwords":
        """
        Build a new list from this one plus extra words.

        Example:
            >>> custom = DEFAULT_STOPWORDS.with_words(["test", "words"])
            >>> custom.includes("the"), custom.includes("test")
            (True, True)
        """
        return Stopwords(list(self._words) + list(extra))

    def get_stopword_list(self) -> List[str]:
        """Return the words in use (for inspection or debugging)."""
        return list(self._words)

    @classmethod
    def from_value(cls, value: Optional[Union["Stopwords", Iterable[str]]]) -> "Stopwords":
        """
        Coerce a configuration value into a Stopwords instance.

        None means no stopwords; an existing instance is returned as is.
        """
        if value is None:
            return cls()
        if isinstance(value, Stopwords):
            return value
        if isinstance(value, str):
            raise TypeError("stopwords must be an iterable of words, not a single string")
        return cls(value)

    def __call__(self, term: str) -> bool:
        return self.includes(term)

    def __contains__(self, term: object) -> bool:
        return term in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Stopwords({len(self._words)} words)"


DEFAULT_STOPWORDS = Stopwords(_DEFAULT_WORDS)


def as_predicate(value) -> StopwordPredicate:
    """
    Resolve the ``stopwords`` option into a predicate.

    Accepts None, a Stopwords instance, an iterable of words, or any callable
    ``term -> bool`` (used unchanged).
    """
    if callable(value) and not isinstance(value, Stopwords):
        return value
    return Stopwords.from_value(value)
