"""Teams models.

`LanguagePermission.workflow_step_ids` is either a list of step ids or the
literal `"all"`; the latter decodes to `WorkflowSteps.ALL`, never to a list.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from l10n_client.core.domain.common import ApiModel, PatchEntry


class WorkflowSteps(str, Enum):
    """Sentinel for "every workflow step"."""

    ALL = "all"


class LanguagePermission(ApiModel):
    workflow_step_ids: list[int] | WorkflowSteps

    @property
    def all_steps(self) -> bool:
        return self.workflow_step_ids is WorkflowSteps.ALL


class AddTeamToProjectRequest(ApiModel):
    team_id: int
    access_to_all_workflow_steps: bool | None = None
    manager_access: bool | None = None
    # Language id -> permission.
    permissions: dict[str, LanguagePermission] | None = None
    roles: list[str] | None = None


class TeamProjectAccess(ApiModel):
    id: int
    has_manager_access: bool | None = None
    has_access_to_all_workflow_steps: bool | None = None
    permissions: dict[str, LanguagePermission] = Field(default_factory=dict)
    roles: list[str] = Field(default_factory=list)


class ProjectTeamResources(ApiModel):
    skipped: TeamProjectAccess | None = None
    added: TeamProjectAccess | None = None


class Team(ApiModel):
    id: int
    name: str
    total_members: int | None = None
    web_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AddTeamRequest(ApiModel):
    name: str = Field(..., min_length=1)


class TeamPatchPath(str, Enum):
    NAME = "/name"


class TeamPatch(PatchEntry):
    path: TeamPatchPath
