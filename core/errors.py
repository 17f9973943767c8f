from __future__ import annotations
from typing import Any, Dict, Optional


class ConfigError(RuntimeError):
    """Missing or invalid configuration. Fatal at start-up."""


class ToolArgsError(ValueError):
    pass


class TemplateError(RuntimeError):
    pass


class ProlificAPIError(RuntimeError):
    def __init__(self, operation: str, status: int, body: str) -> None:
        self.operation = operation
        self.status = status
        self.body = body
        super().__init__(f"Failed to {operation}: {status} {body}")


class StudyPublishError(RuntimeError):
    """The study exists remotely but the PUBLISH transition failed."""

    def __init__(self, study: Dict[str, Any], cause: Exception) -> None:
        self.study = study
        self.cause = cause
        super().__init__(f"Study created but failed to publish: {cause}")

    @property
    def study_id(self) -> Optional[str]:
        return self.study.get("id") if isinstance(self.study, dict) else None
