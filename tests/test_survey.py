import io
import struct

import pytest

from opinionated.console import Console
from opinionated.question import Answer, Question
from opinionated.survey import Survey, SurveyIndex, new_survey, prompt_question


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def sample_survey():
    q1 = Question("Favourite colour?", [Answer("Red", 2, False), Answer("", 0, True)], 2, False)
    q2 = Question("Pets?", [Answer("Cat", 1, False)], 1, True)
    return Survey(7, "Likes", "About likes", [q1, q2])


def test_empty_survey_bytes():
    buf = io.BytesIO()
    Survey(1, "A", "").write(buf)
    assert buf.getvalue() == struct.pack("<ii", 1, 1) + b"A" + struct.pack("<ii", 0, 0)


def test_round_trip():
    survey = sample_survey()
    buf = io.BytesIO()
    survey.write(buf)
    buf.seek(0)
    assert Survey.read(buf) == survey
    assert buf.read() == b""


def test_read_truncated_raises():
    buf = io.BytesIO()
    sample_survey().write(buf)
    with pytest.raises(EOFError):
        Survey.read(io.BytesIO(buf.getvalue()[:-3]))


def test_add_and_remove_question():
    survey = sample_survey()
    extra = Question("Extra?")
    survey.add_question(extra)
    assert survey.questions[-1] is extra
    removed = survey.remove_question(0)
    assert removed.text == "Favourite colour?"
    assert [q.text for q in survey.questions] == ["Pets?", "Extra?"]


def test_remove_question_out_of_range():
    with pytest.raises(IndexError):
        sample_survey().remove_question(5)


def test_index_allocates_sequentially(tmp_path):
    index = SurveyIndex(tmp_path / "SurveyIDs.bin")
    assert index.ids() == []
    assert [index.allocate() for _ in range(3)] == [1, 2, 3]
    assert index.ids() == [1, 2, 3]


def test_index_first_file_bytes(tmp_path):
    path = tmp_path / "SurveyIDs.bin"
    SurveyIndex(path).allocate()
    assert path.read_bytes() == struct.pack("<ii", 1, 1)


def test_index_reuses_gap(tmp_path):
    index = SurveyIndex(tmp_path / "SurveyIDs.bin")
    for _ in range(3):
        index.allocate()
    assert index.remove_at(1) == 2
    assert index.ids() == [1, 3]
    assert not index.contains(2)
    assert index.allocate() == 2
    assert index.ids() == [1, 2, 3]
    assert index.contains(2)


def test_index_remove_out_of_range(tmp_path):
    index = SurveyIndex(tmp_path / "SurveyIDs.bin")
    index.allocate()
    with pytest.raises(IndexError):
        index.remove_at(1)


def test_new_survey_uses_index(tmp_path):
    index = SurveyIndex(tmp_path / "SurveyIDs.bin")
    first = new_survey(index)
    second = new_survey(index)
    assert (first.id, second.id) == (1, 2)
    assert second.questions == []


def test_response_report_format():
    survey = Survey(1, "S", "", [
        Question("Q?", [Answer("Yes", 0, False), Answer("No", 2, False)]),
        Question("R?"),
    ])
    assert survey.response_report(0) == "Q?\n1) Yes\t\t0.00\n2) No\t\t100.00\n\n"


def test_response_report_bad_index():
    with pytest.raises(IndexError):
        sample_survey().response_report(2)


def test_prompt_question():
    console, _ = make_console("Best fruit?\n2\ny\nApple\nn\ny\n")
    question = prompt_question(console)
    assert question.text == "Best fruit?"
    assert question.answers == [Answer("Apple", 0, False), Answer("", 0, True)]
    assert question.multiple_choice is False


def test_prompt_question_multiple_choice():
    console, out = make_console("Colours?\n0\nq\nN\n")
    question = prompt_question(console)
    assert question.answers == []
    assert question.multiple_choice is True
    assert "Invalid choice. Please re-enter.\n" in out.getvalue()


def test_modify_question_adds_answer():
    survey = sample_survey()
    console, _ = make_console("1\ny\nBlue\n3\n")
    survey.modify_question(0, console)
    assert survey.questions[0].answers[-1] == Answer("Blue", 0, False)
    assert len(survey.questions[0].answers) == 3


def test_modify_question_deletes_answer():
    survey = sample_survey()
    console, out = make_console("2\n9\n1\n3\n")
    survey.modify_question(0, console)
    assert survey.questions[0].answers == [Answer("", 0, True)]
    assert "Invalid choice.\n" in out.getvalue()


def test_modify_question_invalid_choice():
    survey = sample_survey()
    console, out = make_console("x\n3\n")
    survey.modify_question(1, console)
    assert out.getvalue().count("Invalid choice.\n") == 1
    assert survey.questions[1].answers == [Answer("Cat", 1, False)]