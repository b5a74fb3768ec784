"""
Persona descriptors for the analyze/verdict pipeline.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from src.config.constants import QuestionKind
from src.config.prompts import (
    DATING_ANALYSIS_RULES,
    DATING_ANALYSIS_SCHEMA,
    DATING_EXPERIENCE_LEVELS,
    DATING_MOTIVATIONS,
    DATING_SYSTEM_PROMPT,
    DATING_VERDICT_RULES,
    DATING_VERDICT_SCHEMA,
    TRADES_ANALYSIS_RULES,
    TRADES_ANALYSIS_SCHEMA,
    TRADES_EXPERIENCE_LEVELS,
    TRADES_MOTIVATIONS,
    TRADES_SYSTEM_PROMPT,
    TRADES_VERDICT_RULES,
    TRADES_VERDICT_SCHEMA,
)


@dataclass(frozen=True)
class Persona:
    """Everything the pipeline needs to run one product variant."""

    name: str
    title: str
    subject_label: str
    system_prompt: str
    analysis_rules: str
    analysis_schema: str
    verdict_rules: str
    verdict_schema: str
    question_kind: QuestionKind
    verdict_values: tuple[str, ...]
    max_images: int
    experience_levels: Mapping[str, str]
    motivations: Mapping[str, str]

    def describe_experience(self, key: str) -> str:
        """Map an experience key to its phrase; unknown keys pass through."""
        return self.experience_levels.get(key, key)

    def describe_motivation(self, key: str) -> str:
        """Map a motivation tag to its phrase; unknown tags pass through."""
        return self.motivations.get(key, key)

    def to_dict(self) -> dict:
        """Public summary of the persona, without prompt text."""
        return {
            "name": self.name,
            "title": self.title,
            "question_kind": self.question_kind.value,
            "verdict_values": list(self.verdict_values),
            "max_images": self.max_images,
            "experience_levels": sorted(self.experience_levels),
            "motivations": sorted(self.motivations),
        }


TRADES = Persona(
    name="trades",
    title="DIY Decider",
    subject_label="Someone wants to",
    system_prompt=TRADES_SYSTEM_PROMPT,
    analysis_rules=TRADES_ANALYSIS_RULES,
    analysis_schema=TRADES_ANALYSIS_SCHEMA,
    verdict_rules=TRADES_VERDICT_RULES,
    verdict_schema=TRADES_VERDICT_SCHEMA,
    question_kind=QuestionKind.BINARY,
    verdict_values=("DIY", "PRO"),
    max_images=5,
    experience_levels=MappingProxyType(TRADES_EXPERIENCE_LEVELS),
    motivations=MappingProxyType(TRADES_MOTIVATIONS),
)

DATING = Persona(
    name="dating",
    title="Signal Check",
    subject_label="Here's the situation",
    system_prompt=DATING_SYSTEM_PROMPT,
    analysis_rules=DATING_ANALYSIS_RULES,
    analysis_schema=DATING_ANALYSIS_SCHEMA,
    verdict_rules=DATING_VERDICT_RULES,
    verdict_schema=DATING_VERDICT_SCHEMA,
    question_kind=QuestionKind.CHOICE,
    verdict_values=(
        "NOT_INTERESTED",
        "PROBABLY_NOT",
        "MIXED_SIGNALS",
        "PROBABLY_INTERESTED",
        "INTERESTED",
    ),
    max_images=10,
    experience_levels=MappingProxyType(DATING_EXPERIENCE_LEVELS),
    motivations=MappingProxyType(DATING_MOTIVATIONS),
)

PERSONAS: Mapping[str, Persona] = MappingProxyType({
    TRADES.name: TRADES,
    DATING.name: DATING,
})


def get_persona(name: str) -> Persona | None:
    """Look up a persona by name (case-insensitive)."""
    return PERSONAS.get(name.strip().lower())
