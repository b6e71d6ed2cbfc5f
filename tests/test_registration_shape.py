import copy
import logging

import pytest

from core.errors import ShapeMismatch
from registration.shape import StatefulRegistration, dump_registration, load_registration


def test_round_trip_is_identity(valid_answers):
    loaded = load_registration(valid_answers)
    assert dump_registration(loaded) == valid_answers
    assert load_registration(dump_registration(loaded)) == loaded


def test_value_types_are_preserved(valid_answers):
    valid_answers["general"]["age"] = 20.5
    loaded = load_registration(valid_answers)
    assert loaded.general.age == 20.5
    assert isinstance(loaded.general.age, float)
    assert loaded.event_questions.dietary_restrictions == ["Vegan", "Nuts"]


def test_missing_value_is_none():
    assert load_registration(None) is None


def test_legacy_value_is_treated_as_missing_and_logged(valid_answers, caplog):
    legacy = copy.deepcopy(valid_answers)
    del legacy["experience"]
    with caplog.at_level(logging.WARNING, logger="registration.shape"):
        assert load_registration(legacy, user_id="u1") is None
    record = caplog.records[-1]
    assert record.user_id == "u1"
    assert any(e.startswith("experience") for e in record.errors)


def test_strict_load_raises(valid_answers):
    valid_answers["general"]["age"] = True
    with pytest.raises(ShapeMismatch) as excinfo:
        load_registration(valid_answers, strict=True)
    assert any("general.age" in e for e in excinfo.value.errors)


def test_values_are_not_coerced(valid_answers):
    valid_answers["eventQuestions"]["dietaryRestrictions"] = ("Vegan",)
    assert load_registration(valid_answers) is None


def test_unknown_keys_are_a_mismatch(valid_answers):
    valid_answers["general"]["nickname"] = "Ada"
    with pytest.raises(ShapeMismatch):
        load_registration(valid_answers, strict=True)


def test_model_instance_is_accepted(valid_answers):
    shape = StatefulRegistration.model_validate(valid_answers)
    assert load_registration(shape) == shape
