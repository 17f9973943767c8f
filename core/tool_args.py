# core/tool_args.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.errors import ToolArgsError

DEFAULT_LIMIT = 200
DEFAULT_OFFSET = 0
STUDY_ACTIONS = ("PUBLISH", "PAUSE", "START", "STOP")


def _assert(cond: bool, msg: str) -> None:
    if not cond:
        raise ToolArgsError(msg)


def _req_str(raw: Dict[str, Any], key: str) -> str:
    v = raw.get(key)
    _assert(isinstance(v, str) and v.strip() != "", f"{key} must be a non-empty string")
    return v.strip()


def _opt_str(raw: Dict[str, Any], key: str) -> Optional[str]:
    v = raw.get(key)
    if v is None:
        return None
    _assert(isinstance(v, str), f"{key} must be a string if present")
    return v.strip() or None


def _opt_bool(raw: Dict[str, Any], key: str, default: bool = False) -> bool:
    v = raw.get(key)
    if v is None:
        return default
    _assert(isinstance(v, bool), f"{key} must be a boolean if present")
    return v


def _opt_int(raw: Dict[str, Any], key: str, default: int) -> int:
    v = raw.get(key)
    if v is None:
        return default
    # JSON has one number type; accept 5.0 but not 5.5 or True
    ok = not isinstance(v, bool) and (
        isinstance(v, int) or (isinstance(v, float) and v.is_integer())
    )
    _assert(ok and v >= 0, f"{key} must be a non-negative integer if present")
    return int(v)


@dataclass
class PageArgs:
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "PageArgs":
        return PageArgs(
            limit=_opt_int(raw, "limit", DEFAULT_LIMIT),
            offset=_opt_int(raw, "offset", DEFAULT_OFFSET),
        )


@dataclass
class ListStudiesArgs:
    status: Optional[str] = None  # active / unpublished / completed / all
    project_id: Optional[str] = None

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "ListStudiesArgs":
        return ListStudiesArgs(
            status=_opt_str(raw, "status"),
            project_id=_opt_str(raw, "project_id"),
        )


@dataclass
class CreateStudyArgs:
    study_body: Optional[Dict[str, Any]] = None
    template_path: Optional[str] = None
    publish: bool = False
    silent: bool = False

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "CreateStudyArgs":
        body = raw.get("study_body")
        if body is not None:
            _assert(isinstance(body, dict), "study_body must be an object if present")
        template_path = _opt_str(raw, "template_path")
        _assert(
            body is not None or template_path is not None,
            "Either study_body or template_path must be provided.",
        )
        return CreateStudyArgs(
            study_body=body,
            template_path=template_path,
            publish=_opt_bool(raw, "publish"),
            silent=_opt_bool(raw, "silent"),
        )


@dataclass
class ListSubmissionsArgs:
    study_id: str
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET
    csv: bool = False
    fields: Optional[str] = None

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "ListSubmissionsArgs":
        return ListSubmissionsArgs(
            study_id=_req_str(raw, "study_id"),
            limit=_opt_int(raw, "limit", DEFAULT_LIMIT),
            offset=_opt_int(raw, "offset", DEFAULT_OFFSET),
            csv=_opt_bool(raw, "csv"),
            fields=_opt_str(raw, "fields"),
        )


@dataclass
class ViewStudyArgs:
    study_id: str
    web: bool = False

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "ViewStudyArgs":
        return ViewStudyArgs(study_id=_req_str(raw, "study_id"), web=_opt_bool(raw, "web"))


@dataclass
class DuplicateStudyArgs:
    study_id: str

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "DuplicateStudyArgs":
        return DuplicateStudyArgs(study_id=_req_str(raw, "study_id"))


@dataclass
class TransitionStudyArgs:
    study_id: str
    action: str
    silent: bool = False

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "TransitionStudyArgs":
        action = _req_str(raw, "action").upper()
        _assert(action in STUDY_ACTIONS, f"action must be one of {', '.join(STUDY_ACTIONS)}")
        return TransitionStudyArgs(
            study_id=_req_str(raw, "study_id"),
            action=action,
            silent=_opt_bool(raw, "silent"),
        )


@dataclass
class ListParticipantGroupsArgs:
    project_id: str
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "ListParticipantGroupsArgs":
        page = PageArgs.from_args(raw)
        return ListParticipantGroupsArgs(
            project_id=_req_str(raw, "project_id"), limit=page.limit, offset=page.offset
        )


@dataclass
class WorkspaceListArgs:
    """Campaigns and filter sets are both listed per workspace."""

    workspace_id: str
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @staticmethod
    def from_args(raw: Dict[str, Any]) -> "WorkspaceListArgs":
        page = PageArgs.from_args(raw)
        return WorkspaceListArgs(
            workspace_id=_req_str(raw, "workspace_id"), limit=page.limit, offset=page.offset
        )
