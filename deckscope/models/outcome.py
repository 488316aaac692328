"""
Action outcome envelope for the sample hand simulator.

Every state transition reports its outcome through ActionResult instead of
raising. A bad request is a local, recoverable event: the caller shows the
advisory message and the session keeps its previous state.

Outcome types:
- Success: Transition applied
- Refusal: Transition rejected, state unchanged
"""

from enum import Enum

from pydantic import BaseModel, Field


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    REFUSAL = "refusal"


class AdvisoryKind(str, Enum):
    """Why a transition was refused."""

    NOTHING_TO_DRAW = "nothing_to_draw"
    NO_HAND = "no_hand"
    MULLIGAN_LIMIT = "mulligan_limit"
    NO_MULLIGAN = "no_mulligan"
    BOTTOM_LIMIT = "bottom_limit"
    BOTTOM_COUNT_MISMATCH = "bottom_count_mismatch"
    INVALID_INDEX = "invalid_index"


STANDARD_MESSAGES: dict[AdvisoryKind, str] = {
    AdvisoryKind.NOTHING_TO_DRAW: "No cards available to draw",
    AdvisoryKind.NO_HAND: "Draw your opening hand first",
    AdvisoryKind.MULLIGAN_LIMIT: "Maximum mulligans reached",
    AdvisoryKind.NO_MULLIGAN: "No mulligan taken, nothing to put on the bottom",
    AdvisoryKind.BOTTOM_LIMIT: "Too many cards selected for the bottom",
    AdvisoryKind.BOTTOM_COUNT_MISMATCH: "Wrong number of cards selected for the bottom",
    AdvisoryKind.INVALID_INDEX: "No card at that position in hand",
}


class Advisory(BaseModel):
    """User-facing explanation of a refused transition."""

    kind: AdvisoryKind = Field(
        ...,
        description="Classification of the refusal",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional detail (optional)",
    )


class ActionResult(BaseModel):
    """Outcome of one simulator transition."""

    outcome: OutcomeType = Field(
        ...,
        description="Whether the transition was applied",
    )
    message: str = Field(
        ...,
        description="Short status line for the user",
    )
    advisory: Advisory | None = Field(
        default=None,
        description="Refusal details (present on refusal)",
    )

    @property
    def ok(self) -> bool:
        return self.outcome == OutcomeType.SUCCESS

    @classmethod
    def success(cls, message: str) -> "ActionResult":
        """Create a success result."""
        return cls(outcome=OutcomeType.SUCCESS, message=message)

    @classmethod
    def refusal(
        cls,
        kind: AdvisoryKind,
        message: str | None = None,
        detail: str | None = None,
    ) -> "ActionResult":
        """
        Create a refusal result.

        Falls back to the standard message for the advisory kind.
        """
        text = message or STANDARD_MESSAGES[kind]
        return cls(
            outcome=OutcomeType.REFUSAL,
            message=text,
            advisory=Advisory(kind=kind, message=text, detail=detail),
        )
