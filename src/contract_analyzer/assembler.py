"""
Renders segmented buckets into the context body sent for extraction.
"""

from typing import List, Mapping, Sequence

# Fixed (label, bucket) order; parties and purchase lines reach the prompt
# through their fan-out into the property and financial buckets.
CONTEXT_SECTIONS = (
    ('PROPERTY AND PARTIES INFORMATION', 'property'),
    ('IDENTIFICATION', 'identification'),
    ('FINANCIAL DETAILS', 'financial'),
    ('DATES AND DEADLINES', 'dates'),
    ('LOAN INFORMATION', 'loan'),
    ('CLOSING INFORMATION', 'closing'),
)


def assemble(buckets: Mapping[str, Sequence[str]]) -> str:
    """
    Serialize buckets under stable labels.

    Every label is always rendered, even for an empty or missing bucket, so
    the prompt keeps the same shape whatever the document contained.
    """
    groups: List[str] = []
    for label, name in CONTEXT_SECTIONS:
        lines = buckets.get(name) or []
        groups.append(f"{label}:\n" + "\n".join(lines))
    return "\n\n".join(groups).strip()
