from feasibility.models.record import AssessmentRecord
from feasibility.models.types import SizeClass
from feasibility.workflow.planner import plan
from feasibility.workflow.validator import validate

BASIC, REQUIREMENTS = plan(None)


def filled(**overrides):
    fields = dict(
        initiative_name="Client Portal",
        initiative_owner="Jordan",
        region="emea",
        description="Single client portal",
        size=SizeClass.SMALL,
    )
    fields.update(overrides)
    return AssessmentRecord(**fields)


def test_blank_basic_step_reports_every_field():
    errors = validate(BASIC, AssessmentRecord())
    assert set(errors) == {"initiative_name", "initiative_owner", "region", "description", "size"}
    assert errors["size"] == "Project size must be selected"


def test_whitespace_only_is_blank():
    errors = validate(BASIC, filled(initiative_name="   ", region="\t"))
    assert set(errors) == {"initiative_name", "region"}


def test_filled_basic_step_passes():
    assert validate(BASIC, filled()) == {}


def test_missing_size_alone_blocks():
    assert set(validate(BASIC, filled(size=None))) == {"size"}


def test_requirements_step_needs_one_requirement():
    record = filled()
    assert validate(REQUIREMENTS, record) == {"requirements": "Please add at least one requirement"}
    record.add_requirement("SSO")
    assert validate(REQUIREMENTS, record) == {}


def test_later_steps_always_pass():
    record = AssessmentRecord()
    for step in plan(SizeClass.LARGE)[2:]:
        assert validate(step, record) == {}
