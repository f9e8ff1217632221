# tests/test_student.py

import pytest

from core.errors import MalformedRowError, MissingFieldError
from models.student import Student


def make_row(**overrides):
    row = {
        "name": "  Paul Atreides ",
        "email": " patreides@mmm.edu ",
        "participation_score": "3",
        "deferrals": "1",
        "absent": "2",
    }
    row.update(overrides)
    return row


def test_student_from_row_trims_fields():
    student = Student.from_row(make_row(), 1)

    assert student.key == "patreides@mmm.edu"
    assert student.name == "Paul Atreides"
    assert student.participation_score == 3
    assert student.deferrals == 1
    assert student.absences == 2
    assert student.answered_today == 0
    assert student.tier == 0


def test_student_from_row_ignores_extra_columns():
    student = Student.from_row(make_row(section="B"), 1)
    assert student.key == "patreides@mmm.edu"


def test_student_from_row_rejects_bad_number():
    with pytest.raises(MalformedRowError) as excinfo:
        Student.from_row(make_row(participation_score="lots"), 4)

    assert excinfo.value.position == 4
    assert excinfo.value.field == "participation_score"
    assert "Record 4" in str(excinfo.value)


def test_student_from_row_rejects_negative_number():
    with pytest.raises(MalformedRowError):
        Student.from_row(make_row(deferrals="-1"), 1)


def test_student_from_row_rejects_missing_column():
    row = make_row()
    del row["absent"]

    with pytest.raises(MissingFieldError) as excinfo:
        Student.from_row(row, 2)

    assert excinfo.value.field == "absent"


def test_student_from_row_rejects_blank_key():
    with pytest.raises(MalformedRowError):
        Student.from_row(make_row(email="   "), 1)


def test_record_answer(sample_student):
    sample_student.record_answer()

    assert sample_student.participation_score == 4
    assert sample_student.answered_today == 1
    assert sample_student.deferrals == 1
    assert sample_student.absences == 2


def test_snapshot_is_independent(sample_student):
    snapshot = sample_student.snapshot()
    sample_student.record_answer()

    assert snapshot.participation_score == 3
    assert snapshot.answered_today == 0
    assert snapshot.key == sample_student.key


def test_student_to_dict_skips_session_fields(sample_student):
    sample_student.record_answer()
    data = sample_student.to_dict()

    assert data == {
        "name": "Paul Atreides",
        "email": "patreides@mmm.edu",
        "participation_score": 4,
        "deferrals": 1,
        "absent": 2,
    }


def test_student_to_str(sample_student):
    sample_student.record_answer()
    sample_student.tier = 4

    assert sample_student.__str__() == "🔵  4 🔥 Paul Atreides"
