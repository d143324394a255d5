"""Unit tests for environment configuration"""

import logging

import pytest

from src.bm25 import DEFAULT_STOPWORDS, InvalidInput
from src.config import get_log_level, load_corpus_options, load_environment

ENV_VARS = ["BM25_K1", "BM25_B", "BM25_USE_DEFAULT_STOPWORDS", "BM25_EXTRA_STOPWORDS", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test without BM25 variables set"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadCorpusOptions:
    """Test CorpusOptions built from environment variables"""

    def test_defaults(self, tmp_path):
        options = load_corpus_options(root=tmp_path)
        assert options.k1 == 2.0
        assert options.b == 0.75
        assert len(options.stopwords) == 0

    def test_tuning_constants(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BM25_K1", "1.2")
        monkeypatch.setenv("BM25_B", "0.5")
        options = load_corpus_options(root=tmp_path)
        assert options.k1 == 1.2
        assert options.b == 0.5

    def test_default_stopwords(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BM25_USE_DEFAULT_STOPWORDS", "true")
        options = load_corpus_options(root=tmp_path)
        assert options.stopwords is DEFAULT_STOPWORDS

    def test_extra_stopwords(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BM25_USE_DEFAULT_STOPWORDS", "TRUE")
        monkeypatch.setenv("BM25_EXTRA_STOPWORDS", "Test, words ,")
        stopwords = load_corpus_options(root=tmp_path).stopwords
        assert stopwords.includes("test")
        assert stopwords.includes("words")
        assert stopwords.includes("the")

    def test_not_a_number(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BM25_K1", "high")
        with pytest.raises(InvalidInput):
            load_corpus_options(root=tmp_path)

    def test_out_of_range(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BM25_B", "1.5")
        with pytest.raises(InvalidInput):
            load_corpus_options(root=tmp_path)

    def test_infinite_k1(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BM25_K1", "inf")
        with pytest.raises(InvalidInput):
            load_corpus_options(root=tmp_path)


class TestLoadEnvironment:
    """Test .env.local / .env discovery"""

    def test_no_env_files(self, tmp_path):
        assert load_environment(tmp_path) is None

    def test_env_file(self, tmp_path, monkeypatch):
        # Set first so monkeypatch restores the variable after load_dotenv overrides it
        monkeypatch.setenv("BM25_K1", "9.9")
        (tmp_path / ".env").write_text("BM25_K1=1.5\n")
        assert load_environment(tmp_path) == tmp_path / ".env"
        assert load_corpus_options(root=tmp_path).k1 == 1.5

    def test_env_local_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BM25_B", "0.1")
        (tmp_path / ".env").write_text("BM25_B=0.2\n")
        (tmp_path / ".env.local").write_text("BM25_B=0.3\n")
        assert load_environment(tmp_path) == tmp_path / ".env.local"
        assert load_corpus_options(root=tmp_path).b == 0.3


class TestLogLevel:
    """Test LOG_LEVEL parsing"""

    def test_default(self):
        assert get_log_level() == logging.INFO

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    def test_unknown_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert get_log_level() == logging.INFO
