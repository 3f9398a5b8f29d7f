"""Recover structured search results and generated pages from LLM completions.

Completions are free text. Models wrap JSON in code fences, add commentary,
emit stray control characters or stop mid-array, so both extractors scan for
the parts they need instead of parsing the whole completion.
"""

import json
import re
from typing import Any

from models.errors import PageExtractionError
from models.search import GeneratedPage, SearchResult
from utils.logger import get_logger

logger = get_logger(__name__)

PAGE_FIELDS = ("html", "css", "title", "url")

_HEX_ENTITY_RE = re.compile(r"&#x[\da-f]+;", re.IGNORECASE)
_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\n\r\t]")
_JSON_STRING = r'"((?:[^"\\]|\\.)+)"'
_RESULT_OBJECT_RE = re.compile(
    r"\{\s*\"title\":\s*" + _JSON_STRING
    + r",\s*\"description\":\s*" + _JSON_STRING
    + r",\s*\"url\":\s*" + _JSON_STRING
    + r"\s*\}"
)
_OPENING_FENCE_RE = re.compile(r"^```(?:json)?\s*")
_CLOSING_FENCE_RE = re.compile(r"\s*```$")


def clean_completion(text: str) -> str:
    """Drop hex HTML entities and anything outside printable ASCII plus whitespace."""
    return _NON_PRINTABLE_RE.sub("", _HEX_ENTITY_RE.sub("", text))


def placeholder_result(query: str, page: int) -> SearchResult:
    return SearchResult(
        title=f'Results for "{query}" - Page {page}',
        description="Error parsing LLM response. Sample result.",
        url=f"https://example.com/page/{page}",
    )


def _unescape(value: str) -> str:
    try:
        return json.loads(f'"{value}"')
    except json.JSONDecodeError:
        return value


def _coerce_result(item: Any) -> SearchResult | None:
    if not isinstance(item, dict):
        return None
    values = [item.get(name) for name in ("title", "description", "url")]
    if not all(isinstance(value, str) and value for value in values):
        return None
    return SearchResult(*values)


def _scan_result_objects(cleaned: str) -> list[SearchResult]:
    return [
        SearchResult(
            title=_unescape(match.group(1)),
            description=_unescape(match.group(2)),
            url=_unescape(match.group(3)),
        )
        for match in _RESULT_OBJECT_RE.finditer(cleaned)
    ]


def _parse_array_span(cleaned: str) -> list[SearchResult]:
    start = cleaned.find("[")
    end = cleaned.rfind("]")
    if start == -1 or end <= start:
        return []

    try:
        parsed = json.loads(cleaned[start : end + 1])
    except json.JSONDecodeError:
        return []
    if not isinstance(parsed, list):
        return []

    results = []
    for item in parsed:
        result = _coerce_result(item)
        if result is not None:
            results.append(result)
    return results


def extract_results(text: str, query: str, page: int) -> list[SearchResult]:
    """
    Extract search results from a completion.

    Individual result objects are collected wherever they appear, so a
    truncated array or objects mixed with prose still yield results. When no
    object matches, the span from the first ``[`` to the last ``]`` is parsed
    as a JSON array. When that fails too, a single placeholder result is
    returned so callers never receive an unexplained empty page.

    Args:
        text: Raw completion text
        query: Query the completion answers (used for the placeholder)
        page: Page number the completion answers (used for the placeholder)

    Returns:
        Results in the order they appear in the completion
    """
    cleaned = clean_completion(text or "")

    results = _scan_result_objects(cleaned)
    strategy = "object_scan"
    if not results:
        results = _parse_array_span(cleaned)
        strategy = "array_span"

    if not results:
        logger.warning(
            "No search results recovered from completion, using placeholder",
            extra={
                "extra_fields": {
                    "query": query,
                    "page": page,
                    "completion_chars": len(text or ""),
                }
            },
        )
        return [placeholder_result(query, page)]

    logger.debug(
        "Search results extracted",
        extra={"extra_fields": {"strategy": strategy, "count": len(results), "page": page}},
    )
    return results


def strip_code_fence(text: str) -> str:
    text = text.strip()
    text = _CLOSING_FENCE_RE.sub("", _OPENING_FENCE_RE.sub("", text))
    return text


def find_balanced_object(text: str) -> str | None:
    """
    Return the first ``{...}`` span with balanced braces.

    Braces are counted without regard to string literals. If the object never
    closes, everything from the first ``{`` is returned so the JSON parser can
    report where it broke.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return text[start:]


def _describe_decode_error(candidate: str, error: json.JSONDecodeError) -> dict[str, Any]:
    lines = candidate.split("\n")
    error_line = lines[error.lineno - 1] if 0 < error.lineno <= len(lines) else ""
    column = error.colno
    return {
        "line": error.lineno,
        "column": column,
        "context": error_line[max(0, column - 50) : column + 50],
    }


def extract_page(text: str) -> GeneratedPage:
    """
    Extract a generated page from a completion.

    Raises:
        PageExtractionError: If no JSON object can be parsed, or if any of
            html, css, title or url is missing or empty. Unlike result
            extraction there is no placeholder for a page.
    """
    candidate = strip_code_fence(text or "")
    candidate = find_balanced_object(candidate) or candidate

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        details = _describe_decode_error(candidate, e)
        logger.error(
            f"Generated page is not valid JSON: {e.msg}",
            extra={"extra_fields": {**details, "completion_chars": len(text or "")}},
        )
        raise PageExtractionError(
            f"Error parsing JSON from LLM response at line {e.lineno} column {e.colno}"
        ) from e

    if not isinstance(parsed, dict):
        raise PageExtractionError(
            "Invalid page structure - expected a JSON object", missing_fields=list(PAGE_FIELDS)
        )

    missing = [
        name for name in PAGE_FIELDS if not (isinstance(parsed.get(name), str) and parsed[name])
    ]
    if missing:
        logger.error(
            "Generated page is missing required fields",
            extra={"extra_fields": {"missing_fields": missing}},
        )
        raise PageExtractionError(
            f"Invalid page structure - missing: {', '.join(missing)}", missing_fields=missing
        )

    return GeneratedPage(**{name: parsed[name] for name in PAGE_FIELDS})
