"""Corpus options (stopwords and BM25 tuning constants)."""

from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidInput

DEFAULT_K1 = 2.0
DEFAULT_B = 0.75


class CorpusOptions(BaseModel):
    """
    Options for building a Corpus.

    Fields:
        stopwords: None, a Stopwords instance, a list of words, or a predicate
        k1 (alias "K1"): term frequency saturation, higher values increase its influence
        b: document length normalization, 1 treats long documents as repetitive
            and 0 treats them as multitopic
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    stopwords: Any = Field(default=None, description="Stopword list or predicate (default: none)")
    k1: float = Field(default=DEFAULT_K1, ge=0.0, alias="K1", description="Term frequency saturation")
    b: float = Field(default=DEFAULT_B, ge=0.0, le=1.0, description="Document length normalization")

    @field_validator("stopwords")
    @classmethod
    def _check_stopwords(cls, value: Any) -> Any:
        if isinstance(value, str):
            raise ValueError("stopwords must be a list of words or a predicate, not a single string")
        if value is not None and not callable(value) and not isinstance(value, Iterable):
            raise ValueError(f"stopwords must be a list of words or a predicate, got {type(value).__name__}")
        return value

    @classmethod
    def coerce(cls, options: Optional[Union["CorpusOptions", Mapping[str, Any]]]) -> "CorpusOptions":
        """
        Normalize the options argument accepted by Corpus.

        Raises:
            InvalidInput: unknown keys or out-of-range values
        """
        if options is None:
            return cls()
        if isinstance(options, CorpusOptions):
            return options
        try:
            return cls.model_validate(dict(options))
        except (ValidationError, TypeError, ValueError) as e:
            raise InvalidInput(f"Invalid corpus options: {e}") from e
