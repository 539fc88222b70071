import itertools

from conflict_calendar.utils.conflict import (
    compute_conflicts,
    conflicts_with,
    find_conflicting_pairs,
    is_conflict,
)


def test_back_to_back_is_not_a_conflict(course_factory):
    a = course_factory("A", "09:00", "10:00", "Monday")
    b = course_factory("B", "10:00", "11:00", "Monday")
    assert not is_conflict(a, b)
    assert compute_conflicts([a, b]) == set()


def test_strict_overlap_on_shared_day(course_factory):
    a = course_factory("A", "09:00", "10:30", "Monday", "Wednesday")
    b = course_factory("B", "10:00", "11:00", "Monday")
    assert is_conflict(a, b)
    assert compute_conflicts([a, b]) == {"A", "B"}


def test_disjoint_days_never_conflict(course_factory):
    a = course_factory("A", "09:00", "10:00", "Monday")
    b = course_factory("B", "09:00", "10:00", "Tuesday")
    assert not is_conflict(a, b)


def test_containment_is_a_conflict(course_factory):
    a = course_factory("A", "08:00", "12:00", "Friday")
    b = course_factory("B", "09:00", "10:00", "Friday")
    assert is_conflict(a, b)


def test_predicate_is_symmetric(course_factory):
    courses = [
        course_factory("A", "09:00", "10:30", "Monday", "Wednesday"),
        course_factory("B", "10:00", "11:00", "Monday"),
        course_factory("C", "10:30", "12:00", "Wednesday"),
        course_factory("D", "09:00", "10:00", "Tuesday"),
    ]
    for a, b in itertools.permutations(courses, 2):
        assert is_conflict(a, b) == is_conflict(b, a)


def test_single_course_has_no_self_conflict(course_factory):
    a = course_factory("A", "09:00", "10:00", "Monday")
    assert compute_conflicts([a]) == set()
    assert compute_conflicts([]) == set()


def test_three_way_propagation(course_factory):
    a = course_factory("A", "09:00", "10:00", "Monday")
    b = course_factory("B", "09:30", "10:30", "Monday")
    c = course_factory("C", "10:15", "11:00", "Monday")

    assert not is_conflict(a, c)
    assert compute_conflicts([a, b, c]) == {"A", "B", "C"}
    assert [(x.id, y.id) for x, y in find_conflicting_pairs([a, b, c])] == [("A", "B"), ("B", "C")]


def test_result_is_independent_of_input_order(course_factory):
    courses = [
        course_factory("A", "09:00", "10:00", "Monday"),
        course_factory("B", "09:30", "10:30", "Monday"),
        course_factory("C", "13:00", "14:00", "Tuesday", "Thursday"),
        course_factory("D", "13:30", "15:00", "Thursday"),
        course_factory("E", "16:00", "17:00", "Friday"),
    ]
    expected = compute_conflicts(courses)
    assert expected == {"A", "B", "C", "D"}
    for perm in itertools.permutations(courses):
        assert compute_conflicts(list(perm)) == expected


def test_each_id_appears_once(course_factory):
    a = course_factory("A", "08:00", "18:00", "Monday", "Tuesday")
    b = course_factory("B", "09:00", "10:00", "Monday")
    c = course_factory("C", "11:00", "12:00", "Tuesday")
    assert compute_conflicts([a, b, c]) == {"A", "B", "C"}


def test_conflicts_with_skips_the_candidate_itself(course_factory):
    existing = [
        course_factory("A", "09:00", "10:00", "Monday"),
        course_factory("B", "09:30", "10:30", "Monday"),
        course_factory("C", "09:00", "10:00", "Tuesday"),
    ]
    edited_a = course_factory("A", "09:15", "09:45", "Monday")
    assert [c.id for c in conflicts_with(edited_a, existing)] == ["B"]
