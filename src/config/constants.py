"""
Constants, enums, and static values.
"""

from enum import Enum


class QuestionKind(str, Enum):
    """Answer domain of the questions a persona asks."""

    BINARY = "binary"  # Yes / No
    CHOICE = "choice"  # exactly four free-text options


class Phase(str, Enum):
    """The two sequential interactions of a session."""

    ANALYZE = "analyze"
    VERDICT = "verdict"


class PipelineStep(str, Enum):
    """Pipeline execution steps."""

    GATEWAY = "gateway"
    EXTRACT = "extract"


CHOICE_OPTION_COUNT = 4
QUESTION_COUNT = 5

# Media types accepted by the model endpoint for image blocks
ALLOWED_IMAGE_TYPES: frozenset[str] = frozenset({
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
})

YES_ANSWERS: frozenset[str] = frozenset({"yes", "y", "true"})
NO_ANSWERS: frozenset[str] = frozenset({"no", "n", "false"})

# Upper bound on how much of a raw completion goes into a log line
RAW_LOG_CHARS = 2000
