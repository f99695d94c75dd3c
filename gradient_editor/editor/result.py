from __future__ import annotations
from enum import Enum
from typing import Callable, NamedTuple, Optional
from ..models.scheme import GradientColorScheme


class EditorOutcome(str, Enum):
    SAVED = "saved"
    CANCELLED = "cancelled"


class EditorResult(NamedTuple):
    """What the editor hands back when editing ends."""
    outcome: EditorOutcome
    scheme: Optional[GradientColorScheme] = None

    @classmethod
    def saved(cls, scheme: GradientColorScheme) -> EditorResult:
        return cls(EditorOutcome.SAVED, scheme)

    @classmethod
    def cancelled(cls) -> EditorResult:
        return cls(EditorOutcome.CANCELLED)

    @property
    def is_saved(self) -> bool:
        return self.outcome is EditorOutcome.SAVED


CompletionHandler = Callable[[EditorResult], None]
