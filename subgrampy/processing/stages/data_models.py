"""Data models for passing information between pipeline stages."""

from pydantic import BaseModel, Field


class StageResult(BaseModel):
    """Base class for stage results with timing."""

    elapsed_time: float = Field(0.0, ge=0)


class DictionaryData(StageResult):
    """Output from dictionary loading stage."""

    words: list[str] = Field(default_factory=list)
    source: str = "built-in"


class SubsetGenerationResult(StageResult):
    """Output from subset generation stage."""

    letters: str
    subsets: list[str] = Field(default_factory=list)
    candidate_count: int = Field(0, ge=0)


class MatchResult(StageResult):
    """Output from matching and finalizing stages."""

    words: list[str] = Field(default_factory=list)
    count: int = Field(0, ge=0)


class SolveResult(StageResult):
    """Outcome of a full pipeline run."""

    letters: str
    words: list[str] = Field(default_factory=list)
    count: int = Field(0, ge=0)
    candidate_count: int = Field(0, ge=0)
