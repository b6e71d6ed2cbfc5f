import json

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.config import settings
from registration import options
from registration.form import (
    NumberQuestion,
    Question,
    RadioQuestion,
    SelectQuestion,
    TextAreaQuestion,
    TextQuestion,
    build_registration_form,
    get_registration_form,
)
from registration.shape import dump_registration
from registration.validation import validate_submission


class TestFormLayout:
    def test_group_order(self):
        form = get_registration_form()
        assert [g.name for g in form.groups] == [
            "general",
            "schooling",
            "experience",
            "eventQuestions",
            "sponsorship",
        ]
        assert form.group("eventQuestions").title == "Event-Specific Questions"

    def test_question_kinds(self):
        form = get_registration_form()
        age = form.group("general").question("age")
        assert isinstance(age, NumberQuestion)
        assert (age.min, age.max, age.pattern) == (14, 100, "[0-9]+")

        hackathons = form.group("experience").question("numPrevHackathons")
        assert (hackathons.min, hackathons.max) == (0, 255)

        assert isinstance(form.group("eventQuestions").question("dietaryRestrictions"), RadioQuestion)
        allergies = form.group("eventQuestions").question("allergies")
        assert isinstance(allergies, TextAreaQuestion)
        assert allergies.rows == 4
        assert not allergies.required

    def test_form_is_cached(self):
        assert get_registration_form() is get_registration_form()

    def test_shape_keys_mirror_the_form(self, valid_answers):
        stored = dump_registration(validate_submission(valid_answers))
        form = get_registration_form()
        assert list(stored) == [g.name for g in form.groups]
        for group in form.groups:
            assert set(stored[group.name]) == {q.name for q in group.questions}

    def test_serialises_with_camel_case_keys(self):
        dumped = get_registration_form().model_dump(by_alias=True)
        first = dumped["groups"][0]["questions"][0]
        assert first["type"] == "text"
        assert "initialValue" in first
        json.dumps(dumped)


class TestClosedQuestionKinds:
    def test_text_question_cannot_carry_options(self):
        with pytest.raises(PydanticValidationError):
            TextQuestion(name="x", label="X", required=True, options=[{"name": "a", "value": "a"}])

    def test_number_question_cannot_carry_rows(self):
        with pytest.raises(PydanticValidationError):
            NumberQuestion(name="x", label="X", required=True, rows=3)

    def test_select_requires_options(self):
        with pytest.raises(PydanticValidationError):
            SelectQuestion(name="x", label="X", required=True)

    def test_discriminator_picks_the_kind(self):
        adapter = TypeAdapter(Question)
        q = adapter.validate_python(
            {"type": "radio", "name": "x", "label": "X", "required": False, "options": [{"name": "a", "value": "A"}]}
        )
        assert isinstance(q, RadioQuestion)
        assert q.options[0].value == "A"

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            TypeAdapter(Question).validate_python({"type": "checkbox", "name": "x", "label": "X", "required": False})

    def test_questions_are_immutable(self):
        q = TextQuestion(name="x", label="X", required=True)
        with pytest.raises(PydanticValidationError):
            q.required = False


class TestReferenceData:
    def test_option_lists_come_from_data_files(self):
        form = get_registration_form()
        university = form.group("schooling").question("university")
        assert [o.value for o in university.options] == list(options.schools())
        assert all(o.name == o.value for o in university.options)
        gender = form.group("general").question("gender")
        assert [o.value for o in gender.options] == [g["value"] for g in options.general_options()["genders"]]

    def test_data_dir_can_be_overridden(self, tmp_path, monkeypatch):
        (tmp_path / "schools.json").write_text(json.dumps(["Test University", "Other"]))
        (tmp_path / "majors.json").write_text(json.dumps(["Testing"]))
        (tmp_path / "general_options.json").write_text(json.dumps({
            "genders": [{"name": "x", "value": "X"}],
            "races": [{"name": "y", "value": "Y"}],
            "ethnicities": [{"name": "z", "value": "Z"}],
        }))
        monkeypatch.setattr(settings, "REGISTRATION_DATA_DIR", str(tmp_path))
        options.clear_cache()
        try:
            form = build_registration_form()
            assert [o.value for o in form.group("schooling").question("university").options] == [
                "Test University",
                "Other",
            ]
            assert [o.value for o in form.group("schooling").question("major").options] == ["Testing"]
        finally:
            monkeypatch.undo()
            options.clear_cache()
