"""
Headless editing session: the stop inspector and the gradient edit state
that reacts to it.
"""

from .result import EditorOutcome, EditorResult, CompletionHandler
from .stop_editor import ColorStopEditor, StopEditorAction, StopEditorEvent
from .state import GradientEditState

__all__ = [
    "EditorOutcome",
    "EditorResult",
    "CompletionHandler",
    "ColorStopEditor",
    "StopEditorAction",
    "StopEditorEvent",
    "GradientEditState",
]
