"""
Configuration from environment variables.

Loads .env.local (local dev) or .env from the project root, then reads:
    BM25_K1                     Term frequency saturation (default: 2.0)
    BM25_B                      Document length normalization (default: 0.75)
    BM25_USE_DEFAULT_STOPWORDS  "true" to filter the default English stopwords
    BM25_EXTRA_STOPWORDS        Comma-separated words added to the stopword list
    LOG_LEVEL                   Console log level (default: INFO)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.bm25.errors import InvalidInput
from src.bm25.options import DEFAULT_B, DEFAULT_K1, CorpusOptions
from src.bm25.stopwords import DEFAULT_STOPWORDS, Stopwords

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(root: Optional[Path] = None) -> Optional[Path]:
    """
    Load .env.local first (highest priority), then .env as fallback.

    Returns:
        The file that was loaded, or None if only system variables are used
    """
    root = root or PROJECT_ROOT
    env_local = root / ".env.local"
    env_file = root / ".env"

    if env_local.exists():
        load_dotenv(env_local, override=True)
        return env_local
    if env_file.exists():
        load_dotenv(env_file, override=True)
        return env_file
    return None


def _float_from_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError as e:
        raise InvalidInput(f"{name} must be a number, got {value!r}") from e


def load_corpus_options(root: Optional[Path] = None) -> CorpusOptions:
    """
    Build CorpusOptions from the environment.

    Raises:
        InvalidInput: a variable is not a number or is out of range
    """
    loaded = load_environment(root)
    if loaded:
        logger.info(f"Loaded environment from: {loaded}")

    use_defaults = os.getenv("BM25_USE_DEFAULT_STOPWORDS", "false").lower() == "true"
    extra = [w.strip().lower() for w in os.getenv("BM25_EXTRA_STOPWORDS", "").split(",") if w.strip()]
    stopwords = DEFAULT_STOPWORDS if use_defaults else Stopwords()
    if extra:
        stopwords = stopwords.with_words(extra)

    options = CorpusOptions.coerce({
        "stopwords": stopwords,
        "K1": _float_from_env("BM25_K1", DEFAULT_K1),
        "b": _float_from_env("BM25_B", DEFAULT_B),
    })
    logger.debug(
        f"Corpus options: K1={options.k1}, b={options.b}, "
        f"stopwords={len(stopwords)} (defaults={use_defaults})"
    )
    return options


def get_log_level() -> int:
    """Console log level from LOG_LEVEL (unknown names fall back to INFO)."""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, log_level, logging.INFO)
