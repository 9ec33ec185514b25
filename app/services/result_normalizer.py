"""Collapse a raw CompareFaces response into a MatchResult."""
from app.core.logging import get_logger
from app.domain.value_objects.recognition import CompareFacesResponse, MatchResult

logger = get_logger(__name__)


def normalize(response: CompareFacesResponse) -> MatchResult:
    """Build the normalized verdict from a CompareFaces response.

    Candidates are trusted to arrive ranked, so only the first one is read.
    A missing and an empty candidate list are equivalent. A top similarity of
    exactly 0 is not a match even though a candidate exists.

    Args:
        response: Decoded CompareFaces response

    Returns:
        MatchResult with ``most_matched_face`` set only when ``has_match`` is true
    """
    logger.debug(
        "Normalizing CompareFaces response",
        raw_response=response.model_dump(by_alias=True, exclude_none=True),
    )

    candidates = response.face_matches or []
    if not candidates:
        return MatchResult(has_match=False, score=0.0, raw_response=response)

    top = candidates[0]
    score = top.similarity or 0.0
    has_match = score > 0
    return MatchResult(
        has_match=has_match,
        score=score,
        most_matched_face=top.face if has_match else None,
        raw_response=response,
    )
