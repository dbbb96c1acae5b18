"""Intent classification types and collaborator interfaces.

The natural-language path depends on two collaborators, both loaded once
at startup and read-only afterwards:
- an IntentClassifier, which guesses the intent and slots of a message
- a SpellingCorrector, which fixes typos before classification
"""

from typing import Literal, Protocol, runtime_checkable

from pydantic import BaseModel, Field


class NumberValue(BaseModel):
    """A numeric slot value, e.g. "three" -> 3.0."""

    kind: Literal["number"] = "number"
    value: float


class CustomValue(BaseModel):
    """A categorical slot value, resolved to its canonical name."""

    kind: Literal["custom"] = "custom"
    value: str


class Slot(BaseModel):
    """A named value extracted from the input."""

    slot_name: str = Field(description="Slot name, e.g. 'rolls' or 'action'")
    raw_value: str = Field(
        default="",
        description="The text the value was extracted from",
    )
    value: NumberValue | CustomValue = Field(discriminator="kind")


class IntentResult(BaseModel):
    """Result of classifying one input."""

    input: str
    intent_name: str | None = Field(
        default=None,
        description="Best-guess intent, or None if the classifier abstained",
    )
    probability: float = 0.0
    slots: list[Slot] = Field(default_factory=list)

    def find_slot(self, slot_name: str) -> Slot | None:
        for slot in self.slots:
            if slot.slot_name == slot_name:
                return slot
        return None


@runtime_checkable
class IntentClassifier(Protocol):
    """Protocol for intent classifiers."""

    def classify(self, text: str) -> IntentResult:
        """Classify text into an intent with slots.

        Raises:
            Exception: Any internal failure. Callers wrap it.
        """
        ...


@runtime_checkable
class SpellingCorrector(Protocol):
    """Protocol for spelling correctors."""

    def correct(self, text: str) -> str | None:
        """Return the best correction of text, or None if there is none."""
        ...
