from .feedback import LetterStatus, RejectionReason, RoundResult, SessionState
from .scoring import score, score_statuses, to_pattern
from .constraints import filter_candidates
from .validation import validate_guess
from .session import GameSession

__all__ = [
    "LetterStatus", "RejectionReason", "RoundResult", "SessionState",
    "score", "score_statuses", "to_pattern", "filter_candidates",
    "validate_guess", "GameSession",
]
