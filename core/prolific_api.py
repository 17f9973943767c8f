from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from core.config import Settings, load_settings
from core.errors import ConfigError, ProlificAPIError, StudyPublishError, TemplateError
from core.io_utils import load_template
from core.tool_args import (
    CreateStudyArgs,
    DuplicateStudyArgs,
    ListParticipantGroupsArgs,
    ListStudiesArgs,
    ListSubmissionsArgs,
    PageArgs,
    TransitionStudyArgs,
    ViewStudyArgs,
    WorkspaceListArgs,
)

logger = logging.getLogger("prolific_api")

API_PREFIX = "/api/v1"


def _seg(value: str) -> str:
    return quote(str(value), safe="")


class ProlificAPI:
    """Thin client for the Prolific REST API. One method = one HTTP call."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        settings = settings or load_settings()
        if not settings.token or settings.token.strip() == "":
            logger.error("PROLIFIC_TOKEN environment variable is not set.")
            raise ConfigError("PROLIFIC_TOKEN environment variable is required")
        self.token = settings.token.strip()
        self.base = settings.base_url.rstrip("/")
        self.timeout = settings.timeout
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Token {self.token}",
            "User-Agent": settings.user_agent,
        }

    def _url(self, path: str) -> str:
        return f"{self.base}{API_PREFIX}/{path}"

    def _req(
        self,
        operation: str,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        kwargs: Dict[str, Any] = {"headers": self.headers, "timeout": self.timeout}
        if params:
            kwargs["params"] = params
        if body is not None:
            kwargs["json"] = body

        r = requests.request(method, self._url(path), **kwargs)
        if not r.ok:
            logger.error(f"Failed to {operation}: {r.status_code} {r.text}")
            raise ProlificAPIError(operation, r.status_code, r.text)
        return r.json()

    # --- Studies ---

    def list_studies(self, args: ListStudiesArgs) -> Any:
        logger.info(f"Listing studies with args: {args}")
        path = "studies/"
        if args.project_id:
            path = f"projects/{_seg(args.project_id)}/studies/"
        params = {args.status: 1} if args.status else None
        return self._req("list studies", "GET", path, params=params)

    def create_study(self, args: CreateStudyArgs) -> Any:
        logger.info(f"Creating study with args: {args}")
        if args.study_body is not None:
            logger.info("Using provided study_body JSON object")
            study_data = args.study_body
        else:
            try:
                study_data = load_template(args.template_path)
            except Exception as e:
                logger.error(f"Failed to read or parse template: {e}")
                raise TemplateError(f"Failed to read or parse template: {e}") from e

        created = self._req("create study", "POST", "studies/", body=study_data)

        if args.publish:
            study_id = created.get("id") if isinstance(created, dict) else None
            if not study_id:
                logger.error("Failed to publish study: created study has no id")
                raise StudyPublishError(created, ValueError("created study has no id"))
            try:
                self.transition_study(TransitionStudyArgs(study_id=study_id, action="PUBLISH"))
            except Exception as e:
                logger.error(f"Failed to publish study: {e}")
                raise StudyPublishError(created, e) from e
        return created

    def list_submissions(self, args: ListSubmissionsArgs) -> Any:
        logger.info(f"Listing submissions with args: {args}")
        return self._req(
            "list submissions",
            "GET",
            f"studies/{_seg(args.study_id)}/submissions/",
            params={"limit": args.limit, "offset": args.offset},
        )

    def view_study(self, args: ViewStudyArgs) -> Any:
        logger.info(f"Viewing study with args: {args}")
        return self._req("view study", "GET", f"studies/{_seg(args.study_id)}")

    def duplicate_study(self, args: DuplicateStudyArgs) -> Any:
        logger.info(f"Duplicating study with args: {args}")
        return self._req("duplicate study", "POST", f"studies/{_seg(args.study_id)}/clone/")

    def transition_study(self, args: TransitionStudyArgs) -> Any:
        logger.info(f"Transitioning study with args: {args}")
        return self._req(
            "transition study",
            "POST",
            f"studies/{_seg(args.study_id)}/transition/",
            body={"action": args.action},
        )

    # --- Workspaces / projects ---

    def list_workspaces(self, args: PageArgs) -> Any:
        logger.info(f"Listing workspaces with args: {args}")
        return self._req(
            "list workspaces",
            "GET",
            "workspaces/",
            params={"limit": args.limit, "offset": args.offset},
        )

    def list_participant_groups(self, args: ListParticipantGroupsArgs) -> Any:
        logger.info(f"Listing participant groups with args: {args}")
        return self._req(
            "list participant groups",
            "GET",
            "participant-groups/",
            params={"project_id": args.project_id, "limit": args.limit, "offset": args.offset},
        )

    def list_campaigns(self, args: WorkspaceListArgs) -> Any:
        logger.info(f"Listing campaigns with args: {args}")
        return self._req(
            "list campaigns",
            "GET",
            "campaigns/",
            params={"workspace_id": args.workspace_id, "limit": args.limit, "offset": args.offset},
        )

    # --- Filters / requirements ---

    def list_filters(self) -> Any:
        logger.info("Listing filters")
        return self._req("list filters", "GET", "filters/")

    def list_filter_sets(self, args: WorkspaceListArgs) -> Any:
        logger.info(f"Listing filter sets with args: {args}")
        return self._req(
            "list filter sets",
            "GET",
            "filter-sets/",
            params={"workspace_id": args.workspace_id, "limit": args.limit, "offset": args.offset},
        )

    def list_requirements(self) -> Any:
        logger.info("Listing requirements")
        return self._req("list requirements", "GET", "eligibility-requirements/")

    # --- Account ---

    def who_am_i(self) -> Any:
        logger.info("Fetching current user")
        return self._req("get current user", "GET", "users/me/")
