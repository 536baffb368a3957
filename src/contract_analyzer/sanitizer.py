"""
Cleans and validates the raw text returned by the extraction model.

Models sometimes wrap their JSON in markdown code fences despite being told
not to. The cleanup is a fixed sequence of small string transforms applied
in order, followed by a JSON parse and a top-level shape check.
"""

import json
import logging
from typing import Any, Callable, Dict, List

from .exceptions import MalformedReplyError, SchemaViolationError
from .models import RECORD_FIELDS, DeadlineSet, ExtractionRecord

logger = logging.getLogger(__name__)

JSON_FENCE = '```json'
FENCE = '```'


def strip_whitespace(text: str) -> str:
    return text.strip()


def strip_opening_fence(text: str) -> str:
    """Drop a leading ```json fence, or failing that a bare ``` fence."""
    if text.startswith(JSON_FENCE):
        return text[len(JSON_FENCE):]
    if text.startswith(FENCE):
        return text[len(FENCE):]
    return text


def strip_closing_fence(text: str) -> str:
    if text.endswith(FENCE):
        return text[:-len(FENCE)]
    return text


def strip_backticks(text: str) -> str:
    """Remove any backtick left anywhere in the text."""
    return text.replace('`', '').strip()


CLEANUP_STEPS: List[Callable[[str], str]] = [
    strip_whitespace,
    strip_opening_fence,
    strip_closing_fence,
    strip_backticks,
]


def clean_reply(raw: str) -> str:
    """Apply every cleanup step in order."""
    text = raw or ''
    for step in CLEANUP_STEPS:
        text = step(text)
    return text


def parse_reply(raw: str) -> Dict[str, Any]:
    """
    Clean a raw reply and parse it as a JSON object.

    Raises:
        MalformedReplyError: If the cleaned text is not a JSON object
    """
    cleaned = clean_reply(raw)
    try:
        data = json.loads(cleaned)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.error(f"Could not parse extraction reply: {e}. Raw reply: {raw!r}")
        raise MalformedReplyError(f"Extraction reply is not valid JSON: {e}", cleaned) from e

    if not isinstance(data, dict):
        logger.error(f"Extraction reply is not a JSON object. Raw reply: {raw!r}")
        raise MalformedReplyError(
            f"Extraction reply must be a JSON object, got {type(data).__name__}",
            cleaned,
        )
    return data


def validate_shape(data: Dict[str, Any]) -> None:
    """
    Check that every top-level record field is present.

    Deadline sub-fields are not checked; missing ones become None later.

    Raises:
        SchemaViolationError: If fields are missing or deadlines is not an object
    """
    missing = [key for key in RECORD_FIELDS if key not in data]
    if missing:
        logger.warning(f"Extraction reply is missing fields: {missing}")
        raise SchemaViolationError(
            f"Extraction reply is missing required fields: {', '.join(missing)}",
            missing,
        )
    if not isinstance(data['deadlines'], dict):
        logger.warning("Extraction reply has a non-object 'deadlines' field")
        raise SchemaViolationError("Field 'deadlines' must be an object", ['deadlines'])


def sanitize(raw: str) -> ExtractionRecord:
    """
    Turn a raw extraction reply into an ExtractionRecord.

    Args:
        raw: Text returned by the extraction model

    Returns:
        ExtractionRecord with un-normalized deadline values

    Raises:
        MalformedReplyError: If the reply is not parseable JSON
        SchemaViolationError: If required top-level fields are missing
    """
    data = parse_reply(raw)
    validate_shape(data)

    return ExtractionRecord(
        property_address=data['propertyAddress'],
        is_fully_signed=data['isFullySigned'],
        buyer_names=data['buyerNames'],
        seller_names=data['sellerNames'],
        purchase_price=data['purchasePrice'],
        title_company=data['titleCompany'],
        loan_type=data['loanType'],
        agent_names=data['agentNames'],
        deadlines=DeadlineSet.from_dict(data['deadlines']),
    )
