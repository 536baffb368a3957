"""
Data models for contract analysis.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# Wire key -> attribute name for the ten contract deadlines
DEADLINE_FIELDS = {
    'inspectionTermination': 'inspection_termination',
    'inspectionObjection': 'inspection_objection',
    'inspectionResolution': 'inspection_resolution',
    'appraisalDeadline': 'appraisal_deadline',
    'appraisalObjection': 'appraisal_objection',
    'appraisalResolution': 'appraisal_resolution',
    'loanTerms': 'loan_terms',
    'loanAvailability': 'loan_availability',
    'closingDate': 'closing_date',
    'possessionDate': 'possession_date',
}

# Wire keys every extraction reply must carry
RECORD_FIELDS = (
    'propertyAddress',
    'isFullySigned',
    'buyerNames',
    'sellerNames',
    'purchasePrice',
    'titleCompany',
    'loanType',
    'agentNames',
    'deadlines',
)


@dataclass
class DeadlineSet:
    """The ten named contract deadlines, each a date string or None"""
    inspection_termination: Optional[str] = None
    inspection_objection: Optional[str] = None
    inspection_resolution: Optional[str] = None
    appraisal_deadline: Optional[str] = None
    appraisal_objection: Optional[str] = None
    appraisal_resolution: Optional[str] = None
    loan_terms: Optional[str] = None
    loan_availability: Optional[str] = None
    closing_date: Optional[str] = None
    possession_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DeadlineSet':
        """Build from camelCase keys; absent keys become None."""
        return cls(**{attr: data.get(key) for key, attr in DEADLINE_FIELDS.items()})

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {key: getattr(self, attr) for key, attr in DEADLINE_FIELDS.items()}


@dataclass
class ExtractionRecord:
    """Structured facts extracted from a real-estate contract"""
    property_address: Optional[str]
    is_fully_signed: Optional[bool]
    buyer_names: List[str]
    seller_names: List[str]
    purchase_price: Optional[str]
    title_company: Optional[str]
    loan_type: Optional[str]
    agent_names: List[str]
    deadlines: DeadlineSet = field(default_factory=DeadlineSet)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'propertyAddress': self.property_address,
            'isFullySigned': self.is_fully_signed,
            'buyerNames': self.buyer_names,
            'sellerNames': self.seller_names,
            'purchasePrice': self.purchase_price,
            'titleCompany': self.title_company,
            'loanType': self.loan_type,
            'agentNames': self.agent_names,
            'deadlines': self.deadlines.to_dict(),
        }
