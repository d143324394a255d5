"""
Cosine similarity between BM25 document vectors.

Distance is 1 - cosine similarity. BM25 weights are never negative, so both
values stay in [0, 1]; lower distances mean more similar documents.
"""

import logging
from dataclasses import dataclass
from typing import List, Mapping, Tuple

import numpy as np

from .corpus import Corpus

logger = logging.getLogger(__name__)


@dataclass
class DistanceMatrix:
    """Pairwise distances; row/column i belongs to identifiers[i]"""
    identifiers: List[str]
    matrix: np.ndarray


def cosine_similarity(vector_a: Mapping[str, float], vector_b: Mapping[str, float]) -> float:
    """
    Cosine similarity of two term -> weight vectors.

    Only terms with a non-zero weight in either vector are considered.
    Returns 0.0 when either vector has no weight at all.

    Example:
        >>> cosine_similarity({"bit": 1.0, "tiny": 1.0}, {"bit": 2.0})
        0.7071...
    """
    terms = sorted({t for t, w in vector_a.items() if w} | {t for t, w in vector_b.items() if w})
    if not terms:
        return 0.0

    a = np.array([vector_a.get(t, 0.0) for t in terms], dtype=float)
    b = np.array([vector_b.get(t, 0.0) for t in terms], dtype=float)
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    # Rounding can push identical vectors slightly above 1
    return float(np.clip(np.dot(a, b) / (norm_a * norm_b), 0.0, 1.0))


class Similarity:
    """
    Document similarity over a Corpus.

    Holds a reference to the corpus (never a copy) and only reads its vectors.
    """

    def __init__(self, corpus: Corpus):
        self.corpus = corpus

    def _weight_matrix(self, identifiers: List[str]) -> np.ndarray:
        terms = self.corpus.get_terms()
        weights = np.zeros((len(identifiers), len(terms)), dtype=float)
        for row, identifier in enumerate(identifiers):
            vector = self.corpus.get_document_vector(identifier)
            weights[row] = [vector.get(term, 0.0) for term in terms]
        return weights

    def get_distance_matrix(self) -> DistanceMatrix:
        """
        Distances (1 - cosine similarity) between every pair of documents.

        Returns:
            DistanceMatrix with identifiers in corpus order and an (n, n)
            symmetric matrix with a zero diagonal
        """
        identifiers = self.corpus.get_document_identifiers()
        weights = self._weight_matrix(identifiers)

        norms = np.linalg.norm(weights, axis=1)
        # Zero vectors stay zero after normalization, giving similarity 0
        safe_norms = np.where(norms > 0, norms, 1.0)
        unit = weights / safe_norms[:, np.newaxis]

        similarities = np.clip(unit @ unit.T, 0.0, 1.0)
        matrix = 1.0 - similarities
        matrix = (matrix + matrix.T) / 2.0
        np.fill_diagonal(matrix, 0.0)

        logger.debug(f"Distance matrix: {len(identifiers)}x{len(identifiers)}")

        return DistanceMatrix(identifiers=identifiers, matrix=matrix)

    def get_most_similar(self, identifier: str, max_results: int = 10) -> List[Tuple[str, float]]:
        """
        Other documents ordered by ascending distance to one document.

        Returns:
            (identifier, distance) pairs by ascending distance (ties keep
            corpus order); empty for an unknown identifier
        """
        vector = self.corpus.get_document_vector(identifier)
        if vector is None:
            return []

        distances = []
        for other in self.corpus.get_document_identifiers():
            if other == identifier:
                continue
            other_vector = self.corpus.get_document_vector(other)
            distances.append((other, 1.0 - cosine_similarity(vector, other_vector)))

        distances.sort(key=lambda item: item[1])
        return distances[:max_results]
