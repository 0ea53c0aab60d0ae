from .errors import AdversaryError, MalformedWordError, EmptyCandidateSetError
from .validation import WORD_LENGTH, ALPHABET, normalize_word, is_well_formed, validate_guess
from .feedback import FeedbackLabel, FeedbackPattern, ALL_CORRECT, enumerate_patterns
from .scoring import score
from .consistency import is_consistent
from .partition import partition, bucket_sizes
from .constraints import filter_candidates

__all__ = [
    "AdversaryError", "MalformedWordError", "EmptyCandidateSetError",
    "WORD_LENGTH", "ALPHABET", "normalize_word", "is_well_formed", "validate_guess",
    "FeedbackLabel", "FeedbackPattern", "ALL_CORRECT", "enumerate_patterns",
    "score", "is_consistent", "partition", "bucket_sizes", "filter_candidates",
]
