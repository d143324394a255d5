#!/usr/bin/env python3
"""
Rank a directory of .txt files with BM25 weights.
Each file is one document; its identifier is the file name without extension.
Options (K1, b, stopwords) come from the environment, see src/config.py.
"""

import logging
import sys
from pathlib import Path

# Add project root to path for src imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.bm25 import Corpus, Similarity
from src.config import get_log_level, load_corpus_options
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def load_corpus(directory: Path) -> Corpus:
    """Build a Corpus from every .txt file in a directory."""
    paths = sorted(directory.glob("*.txt"))
    names = [path.stem for path in paths]
    texts = [path.read_text(encoding="utf-8") for path in paths]
    logger.info(f"Loaded {len(paths)} documents from {directory}")
    return Corpus.from_parallel(names, texts, load_corpus_options())


def print_top_terms(corpus: Corpus, max_terms: int = 10) -> None:
    """Print the highest weighted terms of every document."""
    for identifier in corpus.get_document_identifiers():
        terms = corpus.get_top_terms_for_document(identifier, max_terms)
        print(f"{identifier}: " + ", ".join(f"{term} ({weight:.3f})" for term, weight in terms))


def print_query_results(corpus: Corpus, query: str) -> None:
    """Print documents matching a query, best first."""
    results = corpus.get_results_for_query(query)
    if not results:
        print(f"No documents match {query!r}")
        return
    print(f"\nResults for {query!r}:")
    print("=" * 80)
    for identifier, score in results:
        print(f"  {score:8.3f}  {identifier}")
    print("=" * 80)


def print_nearest(corpus: Corpus) -> None:
    """Print the closest other document for every document."""
    similarity = Similarity(corpus)
    for identifier in corpus.get_document_identifiers():
        nearest = similarity.get_most_similar(identifier, max_results=1)
        if nearest:
            other, distance = nearest[0]
            print(f"{identifier} -> {other} (distance {distance:.3f})")


def main():
    """Main entry point."""
    if len(sys.argv) < 2:
        print("Usage:")
        print("  python scripts/rank_documents.py DIRECTORY")
        print('  python scripts/rank_documents.py DIRECTORY "query text"')
        sys.exit(1)

    setup_logging(log_file=None, console_level=get_log_level())

    directory = Path(sys.argv[1])
    if not directory.is_dir():
        print(f"Not a directory: {directory}", file=sys.stderr)
        sys.exit(1)

    corpus = load_corpus(directory)
    if len(sys.argv) > 2:
        print_query_results(corpus, sys.argv[2])
    else:
        print_top_terms(corpus)
        print()
        print_nearest(corpus)


if __name__ == "__main__":
    main()
