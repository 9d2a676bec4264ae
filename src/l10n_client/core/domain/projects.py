"""Projects & Groups models.

A project payload comes in three shapes:
- `Project`: crowdin.com project as seen by a regular member.
- `ProjectSettings`: crowdin.com project as seen by a manager (settings included).
- `EnterpriseProject`: Crowdin Enterprise project (belongs to a group).

`ProjectResource` resolves the shape from the payload itself, so one executor
method can return any of them.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Union

from pydantic import Discriminator, Field, Tag

from l10n_client.core.domain.common import ApiModel, PatchEntry, wire_keys


class Group(ApiModel):
    id: int
    name: str
    description: str | None = None
    parent_id: int | None = None
    organization_id: int | None = None
    user_id: int | None = None
    subgroups_count: int | None = None
    projects_count: int | None = None
    web_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AddGroupRequest(ApiModel):
    name: str = Field(..., min_length=1)
    parent_id: int | None = None
    description: str | None = None


class GroupPatchPath(str, Enum):
    NAME = "/name"
    DESCRIPTION = "/description"
    PARENT_ID = "/parentId"


class GroupPatch(PatchEntry):
    path: GroupPatchPath


class ProjectVisibility(str, Enum):
    OPEN = "open"
    PRIVATE = "private"


class ProjectBase(ApiModel):
    kind: ClassVar[str] = "project"

    id: int
    name: str
    identifier: str | None = None
    description: str | None = None
    source_language_id: str | None = None
    target_language_ids: list[str] = Field(default_factory=list)
    web_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_activity: datetime | None = None


class Project(ProjectBase):
    kind: ClassVar[str] = "project"

    user_id: int | None = None
    type: int | None = Field(default=None, description="0 = files based, 1 = strings based.")
    logo: str | None = None
    is_external: bool | None = None
    external_type: str | None = None
    has_crowdsourcing: bool | None = None
    public_downloads: bool | None = None


class ProjectSettings(Project):
    kind: ClassVar[str] = "settings"

    translate_duplicates: int | None = None
    tags_detection: int | None = None
    glossary_access: bool | None = None
    is_mt_allowed: bool | None = None
    hidden_strings_proofreaders_access: bool | None = None
    auto_substitution: bool | None = None
    export_translated_only: bool | None = None
    skip_untranslated_strings: bool | None = None
    skip_untranslated_files: bool | None = None
    export_approved_only: bool | None = None
    auto_translate_dialects: bool | None = None
    use_global_tm: bool | None = None
    normalize_placeholder: bool | None = None
    save_meta_info_in_source: bool | None = None
    in_context: bool | None = None
    qa_check_is_active: bool | None = None
    language_mapping: dict[str, dict[str, str]] | None = None


class EnterpriseProject(ProjectBase):
    kind: ClassVar[str] = "enterprise"

    group_id: int | None = None
    user_id: int | None = None
    workflow_id: int | None = None
    language_access_policy: str | None = None
    is_mt_allowed: bool | None = None
    qa_check_is_active: bool | None = None


# Keys only a manager view of a crowdin.com project carries.
_PROJECT_SETTINGS_MARKERS = frozenset(
    {
        "translateDuplicates",
        "tagsDetection",
        "autoSubstitution",
        "exportApprovedOnly",
        "useGlobalTm",
        "qaCheckIsActive",
    }
)


def project_kind(value: Any) -> str:
    """Discriminator for `ProjectResource` (raw payload or model instance)."""

    if isinstance(value, ProjectBase):
        return value.kind
    if isinstance(value, dict):
        keys = wire_keys(value)
        if "groupId" in keys:
            return EnterpriseProject.kind
        if keys & _PROJECT_SETTINGS_MARKERS:
            return ProjectSettings.kind
    return Project.kind


ProjectResource = Annotated[
    Union[
        Annotated[Project, Tag(Project.kind)],
        Annotated[ProjectSettings, Tag(ProjectSettings.kind)],
        Annotated[EnterpriseProject, Tag(EnterpriseProject.kind)],
    ],
    Discriminator(project_kind),
]


class AddProjectRequest(ApiModel):
    name: str = Field(..., min_length=1)
    source_language_id: str = Field(..., min_length=1)
    identifier: str | None = None
    type: int | None = None
    target_language_ids: list[str] | None = None
    visibility: ProjectVisibility | None = None
    description: str | None = None
    # Enterprise only.
    group_id: int | None = None
    template_id: int | None = None
    workflow_template_id: int | None = None


class ProjectPatchPath(str, Enum):
    NAME = "/name"
    IDENTIFIER = "/identifier"
    DESCRIPTION = "/description"
    VISIBILITY = "/visibility"
    TARGET_LANGUAGE_IDS = "/targetLanguageIds"
    LANGUAGE_MAPPING = "/languageMapping"
    QA_CHECK_IS_ACTIVE = "/qaCheckIsActive"


class ProjectPatch(PatchEntry):
    path: ProjectPatchPath
