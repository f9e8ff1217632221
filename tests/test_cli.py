# tests/test_cli.py

import cli.main as main
from cli.key_parser import parse_line
from cli.roster_view import render
from core.interaction import Action, InputEvent, Mode


def actions(events):
    return [event.action for event in events]


# --- key parsing ---


def test_parse_command_tokens():
    assert actions(parse_line("q", Mode.COMMAND)) == [Action.QUIT]
    assert actions(parse_line(" R ", Mode.COMMAND)) == [Action.RESHUFFLE]
    assert actions(parse_line("/", Mode.COMMAND)) == [Action.BEGIN_SEARCH]
    assert actions(parse_line("j", Mode.COMMAND)) == [Action.NAVIGATE_DOWN]
    assert actions(parse_line("^p", Mode.COMMAND)) == [Action.NAVIGATE_UP]
    assert actions(parse_line("", Mode.COMMAND)) == [Action.CONFIRM_SELECTION]
    assert parse_line("xyzzy", Mode.COMMAND) == []


def test_parse_slash_search_types_text():
    events = parse_line("/pa", Mode.COMMAND)

    assert events == [
        InputEvent(Action.BEGIN_SEARCH),
        InputEvent(Action.INSERT_CHAR, "p"),
        InputEvent(Action.INSERT_CHAR, "a"),
    ]


def test_parse_search_tokens_and_text():
    assert actions(parse_line(":esc", Mode.SEARCHING)) == [Action.ESCAPE]
    assert actions(parse_line(":bs", Mode.SEARCHING)) == [Action.BACKSPACE]
    assert actions(parse_line("", Mode.SEARCHING)) == [Action.CONFIRM_SELECTION]
    assert [e.char for e in parse_line("q r", Mode.SEARCHING)] == ["q", " ", "r"]


def test_parse_student_tokens():
    assert actions(parse_line("a", Mode.STUDENT)) == [Action.ANSWER]
    assert actions(parse_line("n", Mode.STUDENT)) == [Action.ABSENT]
    assert actions(parse_line("d", Mode.STUDENT)) == [Action.DEFER]
    assert actions(parse_line("esc", Mode.STUDENT)) == [Action.ESCAPE]
    assert parse_line("", Mode.STUDENT) == []
    assert parse_line("q", Mode.STUDENT) == []


# --- rendering ---


def test_render_command_mode(sample_session):
    screen = render(sample_session)

    assert "q = quit" in screen
    assert ">>" in screen
    for student in sample_session.visible_students():
        assert student.name in screen


def test_render_search_and_card(sample_session):
    sample_session.dispatch(InputEvent(Action.BEGIN_SEARCH))
    for char in "zz":
        sample_session.dispatch(InputEvent(Action.INSERT_CHAR, char))

    screen = render(sample_session)
    assert "zz▏" in screen
    assert "(no matching students)" in screen

    sample_session.dispatch(InputEvent(Action.ESCAPE))
    sample_session.dispatch(InputEvent(Action.CONFIRM_SELECTION))

    screen = render(sample_session)
    assert "a = answer" in screen
    assert f"Key: {sample_session.snapshot.key}" in screen


# --- main ---


def test_main_runs_until_quit(seed_file, monkeypatch, capsys):
    lines = iter(["/chani", "", "a", ":esc", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    assert main.main([seed_file, "--seed", "7", "--no-clear"]) == 0

    output = capsys.readouterr().out
    assert "Chani Kynes" in output
    assert "Exiting Roster" in output


def test_main_stops_on_eof(seed_file, monkeypatch):
    def closed_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_input)

    assert main.main([seed_file, "--no-clear"]) == 0


def test_main_reports_malformed_file(tmp_path, capsys):
    path = tmp_path / "roster.tsv"
    path.write_text(
        "name\temail\tparticipation_score\tdeferrals\tabsent\n"
        "Paul\tp@mmm.edu\tlots\t0\t0\n",
        encoding="utf-8",
    )

    assert main.main([str(path)]) == 1
    assert "[ERROR: MALFORMED_ROW]" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.tsv")]) == 1
    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out
