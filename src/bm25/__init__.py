"""
BM25 (Best Match 25) term weighting over an in-memory document collection.

This package computes BM25 combined weights for every term of every document
in a small collection and derives document similarity from those weights.
It builds no persistent index: the collection is rebuilt whenever it changes.

Components:
- tokenizer: Text tokenization for term extraction
- stopwords: Stopword lists used as collection-level filters
- document: Per-document term frequencies (pre-tokenized or from text)
- corpus: Collection frequencies, IDF weights, document vectors, queries
- similarity: Cosine similarity and pairwise distance matrix
- options: Corpus options (stopwords, K1, b)

Key choice: IDF uses ln(N + 1) - ln(cf)
- Terms present in every document keep a small positive weight
- They remain retrievable by queries and count in similarity
"""

from .errors import InvalidInput
from .tokenizer import tokenize
from .stopwords import DEFAULT_STOPWORDS, Stopwords
from .document import BaseDocument, Document, TextDocument
from .options import CorpusOptions
from .corpus import Corpus
from .similarity import DistanceMatrix, Similarity, cosine_similarity

__all__ = [
    "InvalidInput",
    "tokenize",
    "DEFAULT_STOPWORDS",
    "Stopwords",
    "BaseDocument",
    "Document",
    "TextDocument",
    "CorpusOptions",
    "Corpus",
    "DistanceMatrix",
    "Similarity",
    "cosine_similarity",
]
