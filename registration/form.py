"""
Declarative registration questionnaire.

The form is an ordered tuple of question groups. A group's ``name`` is the
key its answers are stored under in ``User.registration``; its ``title`` is
only for display. Each question is one of five kinds, discriminated on
``type``; a kind only accepts the fields that make sense for it, so e.g. a
text question carrying ``options`` fails to construct.
"""
from functools import lru_cache
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from registration import options as reference_data


class _FormModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Option(_FormModel):
    name: str
    value: str


class _QuestionBase(_FormModel):
    name: str
    label: str
    required: bool
    placeholder: str | None = None


class TextQuestion(_QuestionBase):
    type: Literal["text"] = "text"
    initial_value: str = ""
    pattern: str | None = None


class NumberQuestion(_QuestionBase):
    type: Literal["number"] = "number"
    min: int | None = None
    max: int | None = None
    pattern: str | None = None


class TextAreaQuestion(_QuestionBase):
    type: Literal["textarea"] = "textarea"
    rows: int | None = None


class SelectQuestion(_QuestionBase):
    type: Literal["select"] = "select"
    options: tuple[Option, ...]


class RadioQuestion(_QuestionBase):
    type: Literal["radio"] = "radio"
    options: tuple[Option, ...]


Question = Annotated[
    Union[TextQuestion, NumberQuestion, TextAreaQuestion, SelectQuestion, RadioQuestion],
    Field(discriminator="type"),
]


class QuestionGroup(_FormModel):
    name: str
    title: str
    questions: tuple[Question, ...]

    def question(self, name: str) -> Question | None:
        for q in self.questions:
            if q.name == name:
                return q
        return None


class RegistrationForm(_FormModel):
    groups: tuple[QuestionGroup, ...]

    def group(self, name: str) -> QuestionGroup | None:
        for g in self.groups:
            if g.name == name:
                return g
        return None


def _choices(*pairs: tuple[str, str]) -> tuple[Option, ...]:
    return tuple(Option(name=name, value=value) for name, value in pairs)


def _same_name_and_value(values) -> tuple[Option, ...]:
    return tuple(Option(name=v, value=v) for v in values)


def build_registration_form() -> RegistrationForm:
    general = reference_data.general_options()
    return RegistrationForm(groups=(
        QuestionGroup(
            name="general",
            title="General",
            questions=(
                TextQuestion(name="firstName", label="First Name", required=True),
                TextQuestion(name="lastName", label="Last Name", required=True),
                NumberQuestion(name="age", label="Age", required=True, min=14, max=100, pattern="[0-9]+"),
                SelectQuestion(name="gender", label="Gender", required=True, options=general["genders"]),
                SelectQuestion(name="race", label="Race", required=True, options=general["races"]),
                SelectQuestion(name="ethnicity", label="Ethnicity", required=True, options=general["ethnicities"]),
            ),
        ),
        QuestionGroup(
            name="schooling",
            title="School",
            questions=(
                SelectQuestion(
                    name="university",
                    label="This event is open to all schools. Which do you attend?",
                    required=True,
                    options=_same_name_and_value(reference_data.schools()),
                ),
                TextQuestion(
                    name="universityOther",
                    label='If you selected "Other" in the list above, what institution do you attend?',
                    required=False,
                    placeholder="Enter an institution name (optional).",
                ),
                SelectQuestion(
                    name="major",
                    label="All majors are welcome! What is your major?",
                    required=True,
                    options=_same_name_and_value(reference_data.majors()),
                ),
                SelectQuestion(
                    name="levelOfStudy",
                    label="Current level of study",
                    required=True,
                    options=_choices(
                        ("freshman", "Freshman"),
                        ("sophomore", "Sophomore"),
                        ("junior", "Junior"),
                        ("senior", "Senior"),
                        ("graduate", "Graduate Student"),
                    ),
                ),
            ),
        ),
        QuestionGroup(
            name="experience",
            title="Experience",
            questions=(
                NumberQuestion(
                    name="numPrevHackathons",
                    label="How many hackathons have you attended before?",
                    required=True,
                    min=0,
                    max=255,
                ),
                SelectQuestion(
                    name="softwareExperience",
                    label="Relative software-building experience",
                    required=True,
                    options=_choices(
                        ("beginner", "Beginner"),
                        ("intermediate", "Intermediate"),
                        ("advanced", "Advanced"),
                        ("expert", "Expert"),
                    ),
                ),
            ),
        ),
        QuestionGroup(
            name="eventQuestions",
            title="Event-Specific Questions",
            questions=(
                SelectQuestion(
                    name="heardFrom",
                    label="Where did you hear about us?",
                    required=True,
                    options=_choices(
                        ("instagram", "Instagram"),
                        ("x", "X (Twitter)"),
                        ("eventSite", "Event Site"),
                        ("friend", "Friend"),
                        ("other", "Other"),
                    ),
                ),
                SelectQuestion(
                    name="shirtSize",
                    label="Shirt Size",
                    required=True,
                    options=_choices(
                        ("s", "Small"),
                        ("m", "Medium"),
                        ("l", "Large"),
                        ("xl", "Extra Large"),
                    ),
                ),
                RadioQuestion(
                    name="dietaryRestrictions",
                    label="Allergies / Dietary Restrictions:",
                    required=True,
                    options=_choices(
                        ("vegan", "Vegan"),
                        ("vegetarian", "Vegetarian"),
                        ("nuts", "Nuts"),
                        ("fish", "Fish"),
                        ("wheat", "Wheat"),
                        ("dairy", "Dairy"),
                        ("eggs", "Eggs"),
                        ("other", "Other"),
                    ),
                ),
                TextAreaQuestion(
                    name="allergies",
                    label="Other Allergies or Dietary Restrictions",
                    required=False,
                    rows=4,
                    placeholder="Please list any specific allergies or dietary restrictions here",
                ),
                TextAreaQuestion(
                    name="accomodations",
                    label="Is there anything else we can do to better accomodate you at our hackathon?",
                    required=False,
                    rows=4,
                    placeholder="List any accessibility concerns here",
                ),
            ),
        ),
        QuestionGroup(
            name="sponsorship",
            title="Questions from our Sponsors",
            questions=(
                TextQuestion(name="github", label="GitHub", required=False),
                TextQuestion(name="linkedin", label="LinkedIn", required=False),
                TextQuestion(name="personalSite", label="Personal Website", required=False),
                # Filled in per event once sponsors opt in to resume sharing
                RadioQuestion(
                    name="companies",
                    label="Companies you may send my resume to",
                    required=False,
                    options=(),
                ),
            ),
        ),
    ))


@lru_cache(maxsize=1)
def get_registration_form() -> RegistrationForm:
    return build_registration_form()
