"""
Custom exceptions for contract analysis.
"""

from typing import List


class ContractAnalysisError(Exception):
    """Base exception for contract analysis errors"""
    pass


class MalformedReplyError(ContractAnalysisError):
    """Raised when the cleaned extraction reply is not parseable JSON"""

    def __init__(self, message: str, cleaned_text: str):
        super().__init__(message)
        self.cleaned_text = cleaned_text


class SchemaViolationError(ContractAnalysisError):
    """Raised when the extraction reply is missing required top-level fields"""

    def __init__(self, message: str, missing_fields: List[str]):
        super().__init__(message)
        self.missing_fields = missing_fields
