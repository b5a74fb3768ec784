"""Persona prompt texts."""

from src.config.prompts.dating import (
    DATING_ANALYSIS_RULES,
    DATING_ANALYSIS_SCHEMA,
    DATING_EXPERIENCE_LEVELS,
    DATING_MOTIVATIONS,
    DATING_SYSTEM_PROMPT,
    DATING_VERDICT_RULES,
    DATING_VERDICT_SCHEMA,
)
from src.config.prompts.trades import (
    TRADES_ANALYSIS_RULES,
    TRADES_ANALYSIS_SCHEMA,
    TRADES_EXPERIENCE_LEVELS,
    TRADES_MOTIVATIONS,
    TRADES_SYSTEM_PROMPT,
    TRADES_VERDICT_RULES,
    TRADES_VERDICT_SCHEMA,
)

__all__ = [
    "DATING_ANALYSIS_RULES",
    "DATING_ANALYSIS_SCHEMA",
    "DATING_EXPERIENCE_LEVELS",
    "DATING_MOTIVATIONS",
    "DATING_SYSTEM_PROMPT",
    "DATING_VERDICT_RULES",
    "DATING_VERDICT_SCHEMA",
    "TRADES_ANALYSIS_RULES",
    "TRADES_ANALYSIS_SCHEMA",
    "TRADES_EXPERIENCE_LEVELS",
    "TRADES_MOTIVATIONS",
    "TRADES_SYSTEM_PROMPT",
    "TRADES_VERDICT_RULES",
    "TRADES_VERDICT_SCHEMA",
]
