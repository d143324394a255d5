"""
Unit tests for BM25 tokenizer.
"""

import pytest
from src.bm25.tokenizer import tokenize


class TestTokenizer:
    """Test tokenization logic"""

    def test_basic_tokenization(self):
        """Test basic word extraction keeps document order and duplicates"""
        tokens = tokenize("quite a short document, a short one")
        assert tokens == ["quite", "short", "document", "short", "one"]

    def test_lowercase_conversion(self):
        """Test that all tokens are lowercased"""
        tokens = tokenize("PostgreSQL Cloud SQL")
        assert tokens == ["postgresql", "cloud", "sql"]

    def test_short_tokens_removed(self):
        """Test that 1-character tokens are dropped"""
        tokens = tokenize("a b c is ok")
        assert tokens == ["is", "ok"]

    def test_numbers(self):
        """Test that tokens starting with a digit are filtered out"""
        tokens = tokenize("This is test document number 1. Version 15 of the 2nd bm25 draft")
        assert "1" not in tokens
        assert "15" not in tokens
        assert "2nd" not in tokens
        # Digits after the first character are kept
        assert "bm25" in tokens
        assert "number" in tokens

    def test_stopwords_are_kept(self):
        """Test that stopwords are not removed at this level"""
        tokens = tokenize("this is the test")
        assert tokens == ["this", "is", "the", "test"]

    def test_punctuation_splits_tokens(self):
        """Test that punctuation and symbols separate words"""
        tokens = tokenize("user@example.com file_name.txt path/to/file blue-green")
        assert tokens == [
            "user", "example", "com", "file", "name", "txt",
            "path", "to", "file", "blue", "green",
        ]

    def test_accented_letters(self):
        """Test Latin-1 accented letters stay inside words"""
        tokens = tokenize("Café crème à Zürich")
        assert tokens == ["café", "crème", "zürich"]

    def test_empty_string(self):
        """Test empty string returns empty list"""
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize("\n\t") == []

    @pytest.mark.parametrize("value", [None, 2, 3.5, ["a", "list"], b"bytes"])
    def test_non_string_input(self, value):
        """Test that non-text input yields no tokens instead of failing"""
        assert tokenize(value) == []
