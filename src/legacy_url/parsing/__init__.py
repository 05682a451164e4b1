"""
URL parsing pipeline.

Preprocessing, delegate parsing, reconciliation and record assembly.
"""

from .delegate import BASE_URL, HOST, AttemptStatus, ParseAttempt, attempt_parse
from .parser import parse
from .postprocessor import decode_path, reconcile
from .preprocessor import Preprocessed, is_slashed_protocol, preprocess

__all__ = [
    "parse",
    "preprocess",
    "Preprocessed",
    "is_slashed_protocol",
    "attempt_parse",
    "AttemptStatus",
    "ParseAttempt",
    "BASE_URL",
    "HOST",
    "decode_path",
    "reconcile",
]
