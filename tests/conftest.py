"""
Shared fixtures for contract analyzer tests.
"""

import json

import pytest


@pytest.fixture
def reply_data():
    """A complete extraction reply as the model would return it"""
    return {
        "propertyAddress": "123 Main St, Denver, CO 80202",
        "isFullySigned": True,
        "buyerNames": ["John Doe"],
        "sellerNames": ["Jane Smith"],
        "purchasePrice": "$500,000",
        "titleCompany": "ABC Title",
        "loanType": "Conventional",
        "agentNames": ["Bob Agent", "Sally Realtor"],
        "deadlines": {
            "inspectionTermination": "2/1/2025",
            "inspectionObjection": "2025-02-03",
            "inspectionResolution": None,
            "appraisalDeadline": "02/10/2025",
            "appraisalObjection": "TBD",
            "appraisalResolution": None,
            "loanTerms": None,
            "loanAvailability": None,
            "closingDate": "3/1/2025",
            "possessionDate": "3/1/2025",
        },
    }


@pytest.fixture
def reply_text(reply_data):
    return json.dumps(reply_data, indent=2)


@pytest.fixture
def contract_text():
    return """
COLORADO CONTRACT TO BUY AND SELL REAL ESTATE
This form has important legal consequences.

1. PARTIES AND PROPERTY.
1.1. Buyer: John Doe
1.2. Seller: Jane Smith
2.4 Property known as:
123 Main St, Denver, CO 80202

3. DATES, DEADLINES AND APPLICABILITY
Inspection Termination Deadline 2/1/2025
Closing Date 3/1/2025

4. PURCHASE PRICE AND TERMS
Earnest Money $10,000
"""
