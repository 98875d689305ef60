"""
Field Extractor - Map a Lighthouse report onto the fixed scan fields.

The report is parsed once into ``LighthouseReport``, where every value the
scan consults is optional. Defaulting and score scaling then happen in one
place, ``extract``. Nothing here raises.
"""
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional


NO_TITLE = "No title found"
NO_META = "No meta description found"
NO_H1 = "No H1 heading found"

TITLE_AUDIT = "document-title"
META_AUDIT = "meta-description"
HEADING_AUDIT = "heading-order"

# Text between the first '>' and the next '<'. Best effort only: nested markup
# such as <h1><span>Text</span></h1> captures an empty string.
_SNIPPET_TEXT = re.compile(r">([^<]*)<")


@dataclass
class LighthouseReport:
    """The parts of a Lighthouse result the scan reads."""
    title: Optional[str] = None
    meta_description: Optional[str] = None
    heading_snippet: Optional[str] = None
    performance_score: Optional[float] = None
    seo_score: Optional[float] = None
    
    @classmethod
    def from_dict(cls, data: Any) -> "LighthouseReport":
        """Parse a ``lighthouseResult`` object. Unknown shapes become ``None``."""
        if not isinstance(data, dict):
            return cls()
        
        audits = _as_dict(data.get("audits"))
        categories = _as_dict(data.get("categories"))
        
        heading_item = _first_item(audits, HEADING_AUDIT)
        node = _as_dict(heading_item.get("node")) if heading_item else {}
        
        return cls(
            title=_as_str((_first_item(audits, TITLE_AUDIT) or {}).get("title")),
            meta_description=_as_str((_first_item(audits, META_AUDIT) or {}).get("description")),
            heading_snippet=_as_str(node.get("snippet")),
            performance_score=_as_score(_as_dict(categories.get("performance")).get("score")),
            seo_score=_as_score(_as_dict(categories.get("seo")).get("score")),
        )


@dataclass
class ExtractedFields:
    """Resolved scan fields, defaults applied."""
    title: str
    meta: str
    h1: str
    performance_score: int
    seo_score: int


def extract(report: Any) -> ExtractedFields:
    """Resolve the scan fields from a report (parsed or raw dict)."""
    if not isinstance(report, LighthouseReport):
        report = LighthouseReport.from_dict(report)
    
    return ExtractedFields(
        title=_non_blank(report.title) or NO_TITLE,
        meta=_non_blank(report.meta_description) or NO_META,
        h1=heading_text(report.heading_snippet) or NO_H1,
        performance_score=scale_score(report.performance_score),
        seo_score=scale_score(report.seo_score),
    )


def heading_text(snippet: Optional[str]) -> Optional[str]:
    """Text between the first '>' and the following '<', trimmed."""
    if not snippet:
        return None
    
    match = _SNIPPET_TEXT.search(snippet)
    if not match:
        return None
    return match.group(1).strip() or None


def scale_score(raw: Optional[float]) -> int:
    """Scale a [0, 1] category score to 0-100, rounding half up."""
    if raw is None:
        return 0
    
    try:
        value = Decimal(str(raw))
    except InvalidOperation:
        return 0
    
    if not value.is_finite():
        return 0
    
    value = min(max(value, Decimal(0)), Decimal(1))
    return int((value * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_score(value: Any) -> Optional[float]:
    # bool is an int subclass; a True/False score is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _first_item(audits: dict, audit_id: str) -> Optional[dict]:
    details = _as_dict(_as_dict(audits.get(audit_id)).get("details"))
    items = details.get("items")
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


def _non_blank(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
