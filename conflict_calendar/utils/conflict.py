# conflict_calendar/utils/conflict.py
from typing import Iterable, List, Sequence, Set, Tuple

from conflict_calendar.models.course import Course


def is_conflict(a: Course, b: Course) -> bool:
    """
    Two courses clash when both hold:
    1. at least one shared weekday
    2. the [start, end) intervals overlap; back-to-back does not count
    """
    if not (a.days & b.days):
        return False
    return a.interval.overlaps(b.interval)


def find_conflicting_pairs(courses: Sequence[Course]) -> List[Tuple[Course, Course]]:
    """
    Every unordered pair (i < j) that clashes, in input order.

    Plain O(n^2) scan: a single user's course load is small.
    """
    pairs = []
    for i in range(len(courses)):
        for j in range(i + 1, len(courses)):
            if is_conflict(courses[i], courses[j]):
                pairs.append((courses[i], courses[j]))
    return pairs


def compute_conflicts(courses: Sequence[Course]) -> Set[str]:
    """
    Ids of the courses that take part in at least one conflict.
    Independent of the order of `courses`.
    """
    conflict_ids = set()
    for a, b in find_conflicting_pairs(courses):
        conflict_ids.add(a.id)
        conflict_ids.add(b.id)
    return conflict_ids


def conflicts_with(candidate: Course, courses: Iterable[Course]) -> List[Course]:
    """
    Existing courses the candidate would clash with.
    A course sharing the candidate's id is the candidate itself (update case) and is skipped.
    """
    return [c for c in courses if c.id != candidate.id and is_conflict(candidate, c)]
