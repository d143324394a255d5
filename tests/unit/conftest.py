"""Unit test fixtures - a small three-document collection"""

import pytest

from src.bm25 import DEFAULT_STOPWORDS, Corpus


@pytest.fixture
def docs_by_id():
    """Three short documents; 1 and 2 share 'quite' and 'short', 3 does not."""
    return {
        "document1": "This is test document number 1. It is quite a short document.",
        "document2": "This is test document 2. It is also quite short, and is a test.",
        "document3": "Test document number three is a bit different and is also a tiny bit longer.",
    }


@pytest.fixture
def corpus(docs_by_id):
    """Corpus over docs_by_id with the default English stopwords."""
    return Corpus.from_pairs(docs_by_id, {"stopwords": DEFAULT_STOPWORDS})
