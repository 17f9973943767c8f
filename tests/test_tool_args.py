import pytest

from core.errors import ToolArgsError
from core.tool_args import (
    CreateStudyArgs,
    ListSubmissionsArgs,
    PageArgs,
    TransitionStudyArgs,
    WorkspaceListArgs,
)


def test_page_defaults():
    page = PageArgs.from_args({})
    assert (page.limit, page.offset) == (200, 0)


def test_integral_float_is_accepted():
    assert PageArgs.from_args({"limit": 5.0}).limit == 5


@pytest.mark.parametrize("bad", [-1, 2.5, "10", True])
def test_bad_limit_rejected(bad):
    with pytest.raises(ToolArgsError, match="limit"):
        PageArgs.from_args({"limit": bad})


def test_submissions_require_study_id():
    with pytest.raises(ToolArgsError, match="study_id must be a non-empty string"):
        ListSubmissionsArgs.from_args({"limit": 5})


def test_submissions_optional_fields():
    parsed = ListSubmissionsArgs.from_args({"study_id": "s1", "csv": True, "fields": "id,status"})
    assert parsed.csv is True
    assert parsed.fields == "id,status"
    assert parsed.limit == 200


def test_transition_action_is_normalized():
    parsed = TransitionStudyArgs.from_args({"study_id": "s1", "action": "pause"})
    assert parsed.action == "PAUSE"


def test_transition_rejects_unknown_action():
    with pytest.raises(ToolArgsError, match="PUBLISH, PAUSE, START, STOP"):
        TransitionStudyArgs.from_args({"study_id": "s1", "action": "DELETE"})


def test_create_needs_a_source():
    with pytest.raises(ToolArgsError, match="Either study_body or template_path"):
        CreateStudyArgs.from_args({"publish": True})


def test_create_body_must_be_object():
    with pytest.raises(ToolArgsError, match="study_body"):
        CreateStudyArgs.from_args({"study_body": "not an object"})


def test_workspace_list_requires_workspace():
    with pytest.raises(ToolArgsError, match="workspace_id"):
        WorkspaceListArgs.from_args({"workspace_id": ""})
