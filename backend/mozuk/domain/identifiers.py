"""Composite display-id derivation for projects and documents.

A project id is ``<clientCode>-<NNN>``; a document id is
``<clientCode>-<projectCode>-<NN>``. The numeric suffix is sequential per
parent and derived from the ids of the parent's existing children.

Suggestions are advisory: they are computed from a snapshot, so two
concurrent callers can receive the same suffix. Collisions are left to the
storage layer's unique constraint.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from mozuk.domain.formatting import (
    SEGMENT_SEPARATOR,
    extract_suffix_number,
    extract_suffix_segment,
    pad_number,
)

PROJECT_SUFFIX_DIGITS = 3
DOCUMENT_SUFFIX_DIGITS = 2
PLACEHOLDER_CODE = "XXXX"


class NumberedChild(Protocol):
    """Anything carrying a (possibly missing) composite display id."""

    display_id: str | None


@dataclass(frozen=True)
class IdentifierSuggestion:
    """A proposed suffix and the display id composed from it."""

    suffix: str
    display_id: str


def next_suffix(children: Iterable[NumberedChild], digits: int) -> str:
    """Return the next zero-padded suffix after the highest existing one.

    Children without a parsable numeric suffix (or with suffix 0) are
    ignored. An empty or fully malformed collection yields ``1``.
    """
    numbers = [
        number
        for number in (extract_suffix_number(getattr(c, "display_id", None)) for c in children)
        if number
    ]
    next_number = max(numbers) + 1 if numbers else 1
    return pad_number(next_number, digits)


def compose_display_id(
    parent_code: str | None,
    suffix: str,
    extra_segment: str | None = None,
) -> str:
    """Join parent code, optional extra segment and suffix with ``-``.

    An empty suffix still produces the trailing separator (``"1000-"``),
    meaning the numeric part is awaiting input.
    """
    segments = [parent_code or PLACEHOLDER_CODE]
    if extra_segment:
        segments.append(extra_segment)
    segments.append(suffix or "")
    return SEGMENT_SEPARATOR.join(segments)


def project_code(display_id: str | None) -> str | None:
    """The project's own segment used inside document ids (``"1000-003"`` -> ``"003"``)."""
    return extract_suffix_segment(display_id)


def suggest_display_id(
    parent_code: str | None,
    siblings: Iterable[NumberedChild],
    digits: int,
    *,
    extra_segment: str | None = None,
    suffix: str | None = None,
) -> IdentifierSuggestion:
    """Propose a display id for a new child.

    When ``suffix`` is given (the user edited the numeric part) only the
    composition is re-run; the sibling scan is skipped so the edit is kept.
    """
    if suffix is None:
        suffix = next_suffix(siblings, digits)
    return IdentifierSuggestion(
        suffix=suffix,
        display_id=compose_display_id(parent_code, suffix, extra_segment),
    )
