"""
BM25 weighted corpus.

Implements TF-IDF with BM25 weighting, from:
https://www.cl.cam.ac.uk/techreports/UCAM-CL-TR-356.pdf

Formula (combined weight of term t in document d):
    cw(t, d) = idf(t) × tf × (K1 + 1) / (K1 × (1 - b + b × ndl) + tf)

Where:
    tf  = term frequency of t in d
    ndl = length(d) / average document length
    idf = ln(N + 1) - ln(cf(t))
    N   = number of documents
    cf  = number of documents containing t (stopwords excluded)

The collection is immutable after construction, so collection frequencies,
IDF weights and document vectors are computed lazily once and never
invalidated. Each cache is built in a local variable and assigned in one step:
concurrent first access may compute it twice but never exposes a partial one.

Ties in ranked outputs are broken by term (or by document insertion order for
query results) so results are reproducible.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .document import BaseDocument, TextDocument
from .errors import InvalidInput
from .options import CorpusOptions
from .stopwords import StopwordPredicate, as_predicate

logger = logging.getLogger(__name__)

DocumentPairs = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _iter_pairs(documents: DocumentPairs) -> Iterable[Tuple[str, Any]]:
    if isinstance(documents, Mapping):
        return documents.items()
    return documents


class Corpus:
    """
    Collection of identified documents with BM25 term weights.

    Args:
        documents: Mapping or iterable of (identifier, BaseDocument) pairs
        options: CorpusOptions, a mapping with keys stopwords / K1 (or k1) / b,
            or None for the defaults (no stopwords, K1=2.0, b=0.75)

    Raises:
        InvalidInput: options are out of range
    """

    def __init__(self, documents: DocumentPairs, options: Any = None):
        config = CorpusOptions.coerce(options)
        self._stopwords = as_predicate(config.stopwords)
        self._k1 = config.k1
        self._b = config.b

        self._documents: Dict[str, BaseDocument] = {}
        for identifier, document in _iter_pairs(documents):
            if identifier in self._documents:
                logger.warning(f"Duplicate document identifier {identifier!r}: later document wins")
            self._documents[identifier] = document

        self._collection_frequencies: Optional[Dict[str, int]] = None
        self._collection_frequency_weights: Optional[Dict[str, float]] = None
        self._average_length: Optional[float] = None
        self._document_vectors: Optional[Dict[str, Dict[str, float]]] = None

        logger.debug(f"Corpus created: {len(self._documents)} documents (K1={self._k1}, b={self._b})")

    @classmethod
    def from_parallel(cls, names: Sequence[str], texts: Sequence[Any], options: Any = None) -> "Corpus":
        """
        Build a Corpus from two parallel lists of identifiers and texts.

        Raises:
            InvalidInput: names and texts have different lengths
        """
        if len(names) != len(texts):
            raise InvalidInput(
                f"expected names to have same length as texts ({len(names)} != {len(texts)})"
            )
        # Goes through from_pairs so subclasses only override one builder
        return cls.from_pairs(zip(names, texts), options)

    @classmethod
    def from_pairs(cls, document_pairs: DocumentPairs, options: Any = None) -> "Corpus":
        """
        Build a Corpus from (identifier, text-or-document) pairs.

        Strings become TextDocuments; BaseDocument values are kept as they are.
        """
        documents = [
            (identifier, TextDocument.from_value(contents))
            for identifier, contents in _iter_pairs(document_pairs)
        ]
        return cls(documents, options)

    @property
    def k1(self) -> float:
        return self._k1

    @property
    def b(self) -> float:
        return self._b

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._documents

    def get_stopwords(self) -> StopwordPredicate:
        """Stopword predicate used by this corpus (for inspection or debugging)."""
        return self._stopwords

    def get_document(self, identifier: str) -> Optional[BaseDocument]:
        return self._documents.get(identifier)

    def get_document_identifiers(self) -> List[str]:
        return list(self._documents)

    # ------------------------------------------------------------------
    # Collection statistics
    # ------------------------------------------------------------------

    def _get_collection_frequencies(self) -> Dict[str, int]:
        if self._collection_frequencies is None:
            frequencies: Dict[str, int] = {}
            for document in self._documents.values():
                # Sorted so the vocabulary order does not depend on set hashing
                for term in sorted(document.unique_terms()):
                    if self._stopwords(term):
                        continue
                    frequencies[term] = frequencies.get(term, 0) + 1
            self._collection_frequencies = frequencies
            logger.debug(f"Collection frequencies: {len(frequencies)} terms")
        return self._collection_frequencies

    def get_terms(self) -> List[str]:
        """Unique terms used in the corpus, stopwords excluded."""
        return list(self._get_collection_frequencies())

    def get_collection_frequency(self, term: str) -> int:
        """Number of documents containing the term (0 for stopwords and unknown terms)."""
        return self._get_collection_frequencies().get(term, 0)

    def _get_collection_frequency_weights(self) -> Dict[str, float]:
        # N + 1 instead of N: a term found in every document gets a small
        # positive weight instead of zero, so it can still be retrieved by
        # queries and still counts in similarity.
        if self._collection_frequency_weights is None:
            n_plus_one = math.log(len(self._documents) + 1)
            self._collection_frequency_weights = {
                term: n_plus_one - math.log(cf)
                for term, cf in self._get_collection_frequencies().items()
            }
            logger.debug(f"Collection frequency weights: {len(self._collection_frequency_weights)} terms")
        return self._collection_frequency_weights

    def get_collection_frequency_weight(self, term: str) -> Optional[float]:
        """
        Collection frequency weight (inverse document frequency) of a term.

        Returns:
            The weight, or None if the term is a stopword or never occurs
        """
        return self._get_collection_frequency_weights().get(term)

    def get_average_document_length(self) -> float:
        """Mean token count over all documents (0.0 for an empty corpus)."""
        if self._average_length is None:
            total_length = sum(document.length() for document in self._documents.values())
            self._average_length = total_length / len(self._documents) if self._documents else 0.0
        return self._average_length

    # ------------------------------------------------------------------
    # Document vectors
    # ------------------------------------------------------------------

    def _get_document_vectors(self) -> Dict[str, Dict[str, float]]:
        if self._document_vectors is None:
            idf_weights = self._get_collection_frequency_weights()
            avg_length = self.get_average_document_length()
            k1 = self._k1
            b = self._b

            vectors: Dict[str, Dict[str, float]] = {}
            for identifier, document in self._documents.items():
                ndl = document.length() / avg_length if avg_length > 0 else 0.0
                norm = k1 * (1 - b + b * ndl)
                vector: Dict[str, float] = {}
                for term, idf in idf_weights.items():
                    tf = document.term_frequency(term)
                    # Absent terms get an explicit 0.0 so vectors are dense over the vocabulary
                    vector[term] = idf * tf * (k1 + 1) / (norm + tf) if tf else 0.0
                vectors[identifier] = vector

            self._document_vectors = vectors
            logger.debug(
                f"Document vectors: {len(vectors)} documents x {len(idf_weights)} terms "
                f"(avg length {avg_length:.2f})"
            )
        return self._document_vectors

    def get_document_vector(self, identifier: str) -> Optional[Dict[str, float]]:
        """
        Combined (BM25) weight of every corpus term for one document.

        Returns:
            Term -> weight mapping, or None for an unknown identifier
        """
        return self._get_document_vectors().get(identifier)

    def get_top_terms_for_document(self, identifier: str, max_terms: int = 30) -> List[Tuple[str, float]]:
        """
        Terms with the highest combined weights for a document.

        Args:
            identifier: Document identifier
            max_terms: Maximum number of terms to return

        Returns:
            (term, weight) pairs with weight > 0, by descending weight
            (ties by term); empty for an unknown identifier
        """
        vector = self.get_document_vector(identifier)
        if not vector:
            return []
        weighted = [(term, weight) for term, weight in vector.items() if weight > 0.0]
        weighted.sort(key=lambda item: (-item[1], item[0]))
        return weighted[:max_terms]

    def get_common_terms(self, identifier1: str, identifier2: str, max_terms: int = 10) -> List[Tuple[str, float]]:
        """
        Terms two documents have in common, scored by the product of their weights.

        Returns:
            (term, score) pairs with score > 0, by descending score (ties by term);
            empty if either identifier is unknown
        """
        vector1 = self.get_document_vector(identifier1)
        vector2 = self.get_document_vector(identifier2)
        if not vector1 or not vector2:
            return []
        common = [(term, weight * vector2.get(term, 0.0)) for term, weight in vector1.items()]
        common = [item for item in common if item[1] > 0]
        common.sort(key=lambda item: (-item[1], item[0]))
        return common[:max_terms]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _query_to_unique_terms(self, query: Any) -> List[str]:
        # Only string queries are supported; anything else has no terms
        if isinstance(query, str) and query:
            return sorted(TextDocument(query).unique_terms())
        return []

    def get_results_for_query(self, query: Any, max_results: Optional[int] = None) -> List[Tuple[str, float]]:
        """
        Rank documents for a free-text query.

        The score of a document is the sum of the combined weights of the
        unique query terms. Terms outside the corpus vocabulary add nothing.

        Args:
            query: Query text (non-string or empty queries return no results)
            max_results: Optional cap on the number of results

        Returns:
            (identifier, score) pairs with score > 0, by descending score
        """
        terms = self._query_to_unique_terms(query)
        if not terms:
            return []

        scores = []
        for identifier, vector in self._get_document_vectors().items():
            score = sum(vector.get(term, 0.0) for term in terms)
            if score > 0:
                scores.append((identifier, score))

        # Stable sort keeps document insertion order for equal scores
        scores.sort(key=lambda item: item[1], reverse=True)

        logger.debug(f"Query {query!r}: {len(terms)} terms, {len(scores)} matching documents")

        if max_results is not None:
            return scores[:max_results]
        return scores
