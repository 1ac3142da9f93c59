"""Shell: line evaluation, caret rendering and the archcalc command."""

from .evaluate import evaluate_line, render_caret

__all__ = [
    "evaluate_line",
    "render_caret",
]
