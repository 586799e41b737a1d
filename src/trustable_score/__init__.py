"""Trustable Score - AI visibility measurement.

Measures how often a brand appears in AI-generated responses across ChatGPT,
Claude, Perplexity and Gemini. Includes an async client for the Trustable API
and an offline score estimator.
"""

__version__ = "1.0.0"

from .core.client import TRUSTABLE_API, TrustableClient, TrustableError
from .core.models import Platform, QuickWin, Rating, ScoreSignals
from .core.scoring import QUICK_WINS, estimate_score, get_quick_wins, rating_for_score

__all__ = [
    "QUICK_WINS",
    "TRUSTABLE_API",
    "Platform",
    "QuickWin",
    "Rating",
    "ScoreSignals",
    "TrustableClient",
    "TrustableError",
    "estimate_score",
    "get_quick_wins",
    "rating_for_score",
]
