"""
Separator inference.

The separator may be any sequence of non-alphanumeric characters. Candidates
are taken from the first line; the chosen one is the candidate which occurs
most frequently there and the same number of times on every line. Ties are
broken by length. If several candidates are still left, an AmbiguityError is
raised unless ambiguity is suppressed, in which case the first one encountered
is returned.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from itertools import groupby
from typing import Iterable, List, Optional, Sequence

from .errors import AmbiguityError, NoSeparatorError
from .rules import DEFAULT_HAS_HEADERS, DEFAULT_SUPPRESS_AMBIGUITY

logger = logging.getLogger(__name__)

_ALPHANUMERIC_RUN = re.compile(r"\w+")


def infer_separator(
    lines: Sequence[str],
    has_headers: bool = DEFAULT_HAS_HEADERS,
    suppress_ambiguity: bool = DEFAULT_SUPPRESS_AMBIGUITY,
) -> str:
    """
    Return the separator used by `lines`.

    Rules:
    - Candidates are all substrings of the non-alphanumeric runs of the first line.
    - With headers, candidates that would split the first line into repeated names are dropped.
    - Candidates are grouped by how often they were enumerated; most frequent group first.
    - Within a group, only candidates occurring equally often on every line are kept.
    - One left: chosen. Several: the longest. Several of the same length: ambiguous.
    """
    if not lines:
        raise NoSeparatorError("No lines to infer a separator from")

    for count, candidates in frequency_classes(lines[0], has_headers):
        consistent = [c for c in candidates if occurs_equally_on_each_line(lines, c)]
        logger.debug("tier %d: %d candidates, %d consistent", count, len(candidates), len(consistent))

        if len(consistent) == 1:
            return _chosen(consistent[0])

        if len(consistent) > 1:
            longest = _longest(consistent)
            if longest is not None:
                return _chosen(longest)
            if suppress_ambiguity:
                tied = _tied_for_longest(consistent)
                logger.warning("ambiguous separator %r suppressed, using %r", tied, tied[0])
                return tied[0]
            raise AmbiguityError(_tied_for_longest(consistent))

        # nothing consistent at this frequency, fall through to the less frequent tier

    raise NoSeparatorError("Unable to determine separator: no candidate occurs equally often on every line")


def frequency_classes(first_line: str, has_headers: bool = DEFAULT_HAS_HEADERS) -> List[tuple[int, List[str]]]:
    """
    Group the candidate separators of `first_line` by enumeration count.

    Returns (count, candidates) pairs sorted by descending count; candidates
    keep the order in which they were first encountered.
    """
    candidates = all_substrings(non_alphanumeric_runs(first_line))

    if has_headers:
        unique_headers = {c: not _contains_duplicates(first_line.split(c)) for c in set(candidates)}
        candidates = [c for c in candidates if unique_headers[c]]

    tally = Counter(candidates)
    ordered = sorted(tally.items(), key=lambda item: -item[1])
    return [
        (count, [candidate for candidate, _ in group])
        for count, group in groupby(ordered, key=lambda item: item[1])
    ]


def non_alphanumeric_runs(line: str) -> List[str]:
    return [run for run in _ALPHANUMERIC_RUN.split(line) if run]


def all_substrings(runs: Iterable[str]) -> List[str]:
    """
    Every contiguous substring of every run, duplicates included.

    "#,;" yields "#", "#,", "#,;", ",", ",;", ";".
    """
    result: List[str] = []
    for run in runs:
        for start in range(len(run)):
            for end in range(start + 1, len(run) + 1):
                result.append(run[start:end])
    return result


def count_occurrences(line: str, substring: str) -> int:
    """Number of positions at which `substring` starts in `line`; overlaps count."""
    return sum(1 for i in range(len(line)) if line.startswith(substring, i))


def occurs_equally_on_each_line(lines: Sequence[str], substring: str) -> bool:
    expected = count_occurrences(lines[0], substring)
    return all(count_occurrences(line, substring) == expected for line in lines[1:])


def _tied_for_longest(candidates: Sequence[str]) -> List[str]:
    max_len = max(len(c) for c in candidates)
    return [c for c in candidates if len(c) == max_len]


def _longest(candidates: Sequence[str]) -> Optional[str]:
    tied = _tied_for_longest(candidates)
    return tied[0] if len(tied) == 1 else None


def _contains_duplicates(values: Sequence[str]) -> bool:
    return len(set(values)) != len(values)


def _chosen(separator: str) -> str:
    logger.debug("inferred separator %r", separator)
    return separator
