# tests/conftest.py

import random

import pytest

from core.roster_session import RosterSession
from models.roster import Roster
from models.student import Student

SEED_TEXT = (
    "# roster for THTR 274A\n"
    "name\temail\tparticipation_score\tdeferrals\tabsent\n"
    "Paul Atreides\tpatreides@mmm.edu\t2\t0\t1\n"
    "# a comment between records\n"
    "Chani Kynes\tckynes@mmm.edu\t5\t1\t0\n"
    "Duncan Idaho\tdidaho@mmm.edu\t5\t0\t0\n"
)


def build_roster(*students: Student) -> Roster:
    return Roster({student.key: student for student in students})


@pytest.fixture
def make_roster():
    return build_roster


@pytest.fixture
def seed_text():
    return SEED_TEXT


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "roster.tsv"
    path.write_text(SEED_TEXT, encoding="utf-8")
    return str(path)


@pytest.fixture
def sample_student():
    return Student("patreides@mmm.edu", "Paul Atreides", 3, 1, 2)


@pytest.fixture
def sample_roster():
    return build_roster(
        Student("a@mmm.edu", "Alia Atreides", 2),
        Student("b@mmm.edu", "Bene Gesserit", 5),
        Student("c@mmm.edu", "Chani Kynes", 5),
    )


@pytest.fixture
def rng():
    return random.Random(1987)


@pytest.fixture
def sample_session(sample_roster, rng):
    return RosterSession(sample_roster, rng=rng)
