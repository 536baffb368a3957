"""
Contract Analyzer Package

Extracts parties, price, deadlines and addresses from real-estate contract
text by segmenting the document, sending only the relevant sections to an
LLM, and validating the structured reply.
"""

from .exceptions import (
    ContractAnalysisError,
    MalformedReplyError,
    SchemaViolationError
)
from .models import DeadlineSet, ExtractionRecord
from .segmenter import segment
from .assembler import assemble
from .sanitizer import sanitize
from .dates import normalize, normalize_date
from .analyzer import ContractAnalyzer

__version__ = "1.0.0"
__all__ = [
    "ContractAnalysisError",
    "MalformedReplyError",
    "SchemaViolationError",
    "DeadlineSet",
    "ExtractionRecord",
    "segment",
    "assemble",
    "sanitize",
    "normalize",
    "normalize_date",
    "ContractAnalyzer",
]
