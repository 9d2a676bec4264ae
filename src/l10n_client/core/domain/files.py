"""Source files & storage models.

Import options vary with the file type. The variant is picked in two steps:
1) if the enclosing payload carries a file `type`, `FILE_TYPE_IMPORT_OPTIONS`
   decides;
2) otherwise `import_options_kind` inspects the option keys themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Union

from pydantic import Discriminator, Field, Tag, model_validator

from l10n_client.core.domain.common import ApiModel, PatchEntry, wire_keys
from l10n_client.core.utils import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    add_param_if_present,
    create_query_params_from_paging,
)


class FileImportOptionsBase(ApiModel):
    kind: ClassVar[str] = "other"

    content_segmentation: bool | None = None
    srx_storage_id: int | None = None


class OtherFileImportOptions(FileImportOptionsBase):
    kind: ClassVar[str] = "other"

    custom_segmentation: bool | None = None


class SpreadsheetFileImportOptions(FileImportOptionsBase):
    kind: ClassVar[str] = "spreadsheet"

    first_line_contains_header: bool | None = None
    import_translations: bool | None = None
    import_hidden_sheets: bool | None = None
    # Column name -> column index.
    scheme: dict[str, int] | None = None


class XmlFileImportOptions(FileImportOptionsBase):
    kind: ClassVar[str] = "xml"

    translate_content: bool | None = None
    translate_attributes: bool | None = None
    translatable_elements: list[str] | None = None


class DocxFileImportOptions(FileImportOptionsBase):
    kind: ClassVar[str] = "docx"

    clean_tags_aggressively: bool | None = None
    translate_hidden_text: bool | None = None
    translate_hyperlink_urls: bool | None = None
    translate_hidden_rows_and_columns: bool | None = None
    import_notes: bool | None = None
    import_hidden_slides: bool | None = None


# File type -> options variant. Types not listed fall back to key inspection.
FILE_TYPE_IMPORT_OPTIONS: dict[str, type[FileImportOptionsBase]] = {
    "csv": SpreadsheetFileImportOptions,
    "xlsx": SpreadsheetFileImportOptions,
    "xml": XmlFileImportOptions,
    "docx": DocxFileImportOptions,
}

# Option key -> variant kind.
_IMPORT_OPTIONS_MARKERS: dict[str, str] = {
    "scheme": SpreadsheetFileImportOptions.kind,
    "firstLineContainsHeader": SpreadsheetFileImportOptions.kind,
    "importTranslations": SpreadsheetFileImportOptions.kind,
    "importHiddenSheets": SpreadsheetFileImportOptions.kind,
    "translateContent": XmlFileImportOptions.kind,
    "translateAttributes": XmlFileImportOptions.kind,
    "translatableElements": XmlFileImportOptions.kind,
    "cleanTagsAggressively": DocxFileImportOptions.kind,
    "translateHiddenText": DocxFileImportOptions.kind,
    "translateHyperlinkUrls": DocxFileImportOptions.kind,
    "translateHiddenRowsAndColumns": DocxFileImportOptions.kind,
    "importNotes": DocxFileImportOptions.kind,
    "importHiddenSlides": DocxFileImportOptions.kind,
}


def import_options_kind(value: Any) -> str:
    """Discriminator for `FileImportOptions` (raw payload or model instance)."""

    if isinstance(value, FileImportOptionsBase):
        return value.kind
    if isinstance(value, dict):
        keys = wire_keys(value)
        for marker, kind in _IMPORT_OPTIONS_MARKERS.items():
            if marker in keys:
                return kind
    return OtherFileImportOptions.kind


FileImportOptions = Annotated[
    Union[
        Annotated[SpreadsheetFileImportOptions, Tag(SpreadsheetFileImportOptions.kind)],
        Annotated[XmlFileImportOptions, Tag(XmlFileImportOptions.kind)],
        Annotated[DocxFileImportOptions, Tag(DocxFileImportOptions.kind)],
        Annotated[OtherFileImportOptions, Tag(OtherFileImportOptions.kind)],
    ],
    Discriminator(import_options_kind),
]


def resolve_import_options_by_type(data: Any) -> Any:
    """Turn raw `importOptions` into the variant the file `type` dictates."""

    if not isinstance(data, dict):
        return data
    key = "importOptions" if "importOptions" in data else "import_options"
    raw = data.get(key)
    file_type = data.get("type")
    if not isinstance(raw, dict) or not isinstance(file_type, str):
        return data
    options_model = FILE_TYPE_IMPORT_OPTIONS.get(file_type)
    if options_model is None:
        return data
    return {**data, key: options_model.model_validate(raw)}


class File(ApiModel):
    id: int
    project_id: int
    branch_id: int | None = None
    directory_id: int | None = None
    name: str
    title: str | None = None
    type: str | None = None
    path: str | None = None
    status: str | None = None
    revision_id: int | None = None
    priority: str | None = None
    import_options: FileImportOptions | None = None
    excluded_target_languages: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def resolve_import_options(cls, data: Any) -> Any:
        return resolve_import_options_by_type(data)


class AddFileRequest(ApiModel):
    storage_id: int
    name: str = Field(..., min_length=1)
    branch_id: int | None = None
    directory_id: int | None = None
    title: str | None = None
    type: str | None = None
    import_options: FileImportOptions | None = None
    attach_label_ids: list[int] | None = None
    excluded_target_languages: list[str] | None = None

    @model_validator(mode="before")
    @classmethod
    def resolve_import_options(cls, data: Any) -> Any:
        return resolve_import_options_by_type(data)


class FileUpdateOption(str, Enum):
    CLEAR_TRANSLATIONS_AND_APPROVALS = "clear_translations_and_approvals"
    KEEP_TRANSLATIONS = "keep_translations"
    KEEP_TRANSLATIONS_AND_APPROVALS = "keep_translations_and_approvals"


class ReplaceFileRequest(ApiModel):
    """`PUT` body that uploads a new revision from storage."""

    storage_id: int
    name: str | None = None
    update_option: FileUpdateOption | None = None
    import_options: FileImportOptions | None = None
    attach_label_ids: list[int] | None = None


class RestoreFileRequest(ApiModel):
    """`PUT` body that restores an earlier revision."""

    revision_id: int


class FilePatchPath(str, Enum):
    NAME = "/name"
    TITLE = "/title"
    BRANCH_ID = "/branchId"
    DIRECTORY_ID = "/directoryId"
    PRIORITY = "/priority"
    EXCLUDED_TARGET_LANGUAGES = "/excludedTargetLanguages"
    IMPORT_OPTIONS = "/importOptions"


class FilePatch(PatchEntry):
    path: FilePatchPath


class DownloadLink(ApiModel):
    url: str
    expire_in: datetime | None = None


class Storage(ApiModel):
    id: int
    file_name: str | None = None


@dataclass(frozen=True)
class FilesListParams:
    """Filters for `GET /projects/{projectId}/files`."""

    branch_id: int | None = None
    directory_id: int | None = None
    filter: str | None = None
    recursion: bool | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def to_query_params(self) -> dict[str, str]:
        params = create_query_params_from_paging(self.limit, self.offset)
        add_param_if_present(params, "branchId", self.branch_id)
        add_param_if_present(params, "directoryId", self.directory_id)
        add_param_if_present(params, "filter", self.filter)
        add_param_if_present(params, "recursion", self.recursion)
        return params
