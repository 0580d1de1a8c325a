import pytest

from chopro.exceptions import ValidationError
from chopro.models import ParseStatus
from chopro.parser import parse
from chopro.validator import validate


def test_well_formed_document_is_valid():
    result = validate(parse("{title: X}\n[C]la\n"))
    assert result.valid
    assert result.issues == []
    assert result.metrics == {
        "lines": 2,
        "directives": 1,
        "incomplete_directives": 0,
        "incomplete_chords": 0,
    }


def test_issues_carry_line_numbers():
    result = validate(parse("{title: X}\n[C\n\n{titl\n"))
    assert not result.valid
    assert [(i.line_number, i.status) for i in result.issues] == [
        (2, ParseStatus.INCOMPLETE_CHORD),
        (4, ParseStatus.INCOMPLETE_DIRECTIVE),
    ]
    assert result.metrics["incomplete_chords"] == 1
    assert result.metrics["incomplete_directives"] == 1


def test_unterminated_chord_message():
    (issue,) = validate(parse("la [Am")).issues
    assert issue.text == "Am"
    assert str(issue) == "line 1: unterminated chord [Am"


def test_unterminated_directive_message():
    (issue,) = validate(parse("{titl")).issues
    assert issue.message == "unterminated directive {titl"


def test_unknown_directive_message():
    (issue,) = validate(parse("{tuning: DADGAD}")).issues
    assert issue.message == "unknown directive {tuning: DADGAD}"


def test_bad_argument_message_names_canonical_kind():
    (issue,) = validate(parse("{capo: two}")).issues
    assert issue.message == "invalid number argument for {capo}: {capo: two}"


def test_unexpected_argument_message():
    (issue,) = validate(parse("{eoc: now}")).issues
    assert issue.message == "{end_of_chorus} takes no argument: {eoc: now}"


def test_strict_raises_with_issues():
    with pytest.raises(ValidationError) as excinfo:
        validate(parse("[C\n[G\n"), strict=True)
    assert len(excinfo.value.issues) == 2
    assert str(excinfo.value) == "2 validation issues found"


def test_strict_passes_well_formed_document():
    assert validate(parse("{soc}\nla\n{eoc}\n"), strict=True).valid
