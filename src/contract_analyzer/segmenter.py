"""
Section segmentation for contract text.

Classifies document lines into semantic buckets in a single left-to-right
pass so that only the relevant parts of a contract reach the extraction
prompt.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

BUCKETS = (
    'identification',
    'property',
    'parties',
    'dates',
    'financial',
    'purchase',
    'loan',
    'closing',
)

# Ordered heading triggers; the first match sets the current section
HEADING_TRIGGERS: List[Tuple[str, Callable[[str], bool]]] = [
    ('identification', lambda line: 'identification' in line),
    ('parties', lambda line: 'parties and property' in line),
    ('dates', lambda line: 'dates, deadlines' in line),
    ('purchase', lambda line: 'purchase price' in line),
    ('loan', lambda line: 'loan' in line and 'limitations' in line),
    ('closing', lambda line: 'closing' in line),
]

# Section -> buckets its lines are appended to (primary bucket first)
SECTION_TARGETS: Dict[str, Tuple[str, ...]] = {
    'identification': ('identification',),
    'parties': ('parties', 'property'),
    'dates': ('dates',),
    'purchase': ('purchase', 'financial'),
    'loan': ('loan',),
    'closing': ('closing',),
}

ANCHOR_PHRASE = 'known as:'

FINANCIAL_KEYWORDS = ('price', 'payment', 'earnest money', 'loan amount')


@dataclass
class _ScanState:
    current_section: Optional[str] = None
    in_section: bool = False


def _split_lines(text: str) -> List[str]:
    stripped = (line.strip() for line in (text or '').split('\n'))
    return [line for line in stripped if line]


def _match_heading(lowered: str) -> Optional[str]:
    for section, trigger in HEADING_TRIGGERS:
        if trigger(lowered):
            return section
    return None


def segment(text: str) -> Dict[str, List[str]]:
    """
    Split contract text into semantic buckets.

    Lines can land in several buckets: heading state, the property anchor
    phrase and financial keywords are each tested independently on every
    line, and duplicates are kept.

    Args:
        text: Full document text

    Returns:
        Mapping of bucket name to the lines assigned to it, in document order
    """
    buckets: Dict[str, List[str]] = {name: [] for name in BUCKETS}
    lines = _split_lines(text)
    state = _ScanState()

    for index, line in enumerate(lines):
        lowered = line.lower()

        section = _match_heading(lowered)
        if section is not None:
            state.current_section = section
            state.in_section = True

        if ANCHOR_PHRASE in lowered:
            buckets['property'].append(line)
            if index + 1 < len(lines):
                buckets['property'].append(lines[index + 1])

        if state.in_section:
            targets = SECTION_TARGETS.get(state.current_section)
            if targets is None:
                logger.warning(f"Unknown section '{state.current_section}', skipping line")
            else:
                for bucket in targets:
                    buckets[bucket].append(line)

        if any(keyword in lowered for keyword in FINANCIAL_KEYWORDS):
            buckets['financial'].append(line)

    sizes = {name: len(bucket) for name, bucket in buckets.items()}
    logger.debug(f"Segmented {len(lines)} lines into buckets: {sizes}")
    return buckets
