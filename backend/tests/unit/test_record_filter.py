"""Unit tests for in-memory search and facet filtering."""

from classroom_admin.application.services import RecordFilter, parse_tags
from classroom_admin.domain.resources import ACTIVITY, TEACHER

TEACHERS = [
    {"Id": 1, "name_c": "Ada Lovelace", "email_c": "ada@school.edu", "department_c": "Mathematics"},
    {"Id": 2, "name_c": "Grace Hopper", "email_c": "grace@school.edu", "department_c": "Computing"},
    {"Id": 3, "name_c": "Mary Shelley", "email_c": None, "department_c": "English"},
    {"Id": 4, "name_c": "Alan Turing", "email_c": "alan@school.edu", "department_c": None},
]


def test_search_is_case_insensitive_across_fields():
    teacher_filter = RecordFilter(TEACHER)

    by_name = teacher_filter.apply(TEACHERS, search="LOVELACE")
    by_email = teacher_filter.apply(TEACHERS, search="grace@")
    by_department = teacher_filter.apply(TEACHERS, search="engl")

    assert [t["Id"] for t in by_name] == [1]
    assert [t["Id"] for t in by_email] == [2]
    assert [t["Id"] for t in by_department] == [3]


def test_blank_search_matches_everything():
    assert RecordFilter(TEACHER).apply(TEACHERS, search="   ") == TEACHERS


def test_missing_values_never_match():
    assert RecordFilter(TEACHER).apply(TEACHERS, search="none") == []


def test_facet_filter_is_exact_and_all_disables_it():
    teacher_filter = RecordFilter(TEACHER)

    computing = teacher_filter.apply(TEACHERS, facets={"department_c": "Computing"})
    everyone = teacher_filter.apply(TEACHERS, facets={"department_c": "all"})
    partial = teacher_filter.apply(TEACHERS, facets={"department_c": "Comp"})

    assert [t["Id"] for t in computing] == [2]
    assert everyone == TEACHERS
    assert partial == []


def test_search_and_facets_combine():
    activities = [
        {"Name": "Essay", "subject_c": "English", "status_c": "Completed", "priority_c": "High"},
        {"Name": "Essay draft", "subject_c": "English", "status_c": "In Progress", "priority_c": "High"},
        {"Name": "Lab report", "subject_c": "Chemistry", "status_c": "Completed", "priority_c": "Low"},
    ]

    matched = RecordFilter(ACTIVITY).apply(
        activities,
        search="essay",
        facets={"status_c": "Completed", "priority_c": None},
    )

    assert [a["Name"] for a in matched] == ["Essay"]


def test_facet_values_are_distinct_sorted_and_non_empty():
    assert RecordFilter.facet_values(TEACHERS, "department_c") == [
        "Computing",
        "English",
        "Mathematics",
    ]


def test_parse_tags():
    assert parse_tags("homework, research,,  project ") == ["homework", "research", "project"]
    assert parse_tags(["a", " b ", ""]) == ["a", "b"]
    assert parse_tags("") == []
    assert parse_tags(None) == []
