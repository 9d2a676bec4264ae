"""Unit tests for wire models: camelCase output, import-option variants, permissions."""

import pytest
from pydantic import ValidationError

from l10n_client.adapters.http_client import serialize_body
from l10n_client.core.domain.common import PatchOperation
from l10n_client.core.domain.files import (
    AddFileRequest,
    DocxFileImportOptions,
    File,
    OtherFileImportOptions,
    ReplaceFileRequest,
    SpreadsheetFileImportOptions,
    XmlFileImportOptions,
)
from l10n_client.core.domain.projects import AddGroupRequest, GroupPatch, GroupPatchPath
from l10n_client.core.domain.strings import SourceString
from l10n_client.core.domain.teams import (
    AddTeamToProjectRequest,
    LanguagePermission,
    WorkflowSteps,
)


class TestAddFileRequest:
    def test_spreadsheet_options_serialize_in_camel_case(self) -> None:
        request = AddFileRequest(
            storage_id=1,
            name="Test name",
            import_options=SpreadsheetFileImportOptions(
                scheme={"context": 123, "ua": 1, "ru": 2, "en": 3},
            ),
        )

        assert request.to_wire() == {
            "storageId": 1,
            "name": "Test name",
            "importOptions": {"scheme": {"context": 123, "ua": 1, "ru": 2, "en": 3}},
        }

    def test_round_trip_is_equal(self) -> None:
        request = AddFileRequest(
            storage_id=1,
            name="Test name",
            import_options=SpreadsheetFileImportOptions(scheme={"context": 123, "en": 3}),
        )

        assert AddFileRequest.model_validate(request.to_wire()) == request

    def test_wire_payload_decodes_to_same_variant(self) -> None:
        """Options without a file type are recognised by their keys."""
        request = AddFileRequest.model_validate(
            {
                "storageId": 1,
                "name": "Test name",
                "importOptions": {"scheme": {"context": 123}, "firstLineContainsHeader": True},
            }
        )

        assert isinstance(request.import_options, SpreadsheetFileImportOptions)
        assert request.import_options.first_line_contains_header is True

    def test_excluded_target_languages_use_api_key(self) -> None:
        request = AddFileRequest(storage_id=1, name="a", excluded_target_languages=["de"])

        assert request.to_wire() == {"storageId": 1, "name": "a", "excludedTargetLanguages": ["de"]}

    def test_empty_name_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AddFileRequest(storage_id=1, name="")


class TestFileImportOptionsDispatch:
    def test_file_type_decides_variant(self) -> None:
        """An xml file gets xml options even when only shared keys are present."""
        file = File.model_validate(
            {
                "id": 44,
                "projectId": 2,
                "name": "strings.xml",
                "type": "xml",
                "importOptions": {"contentSegmentation": True},
            }
        )

        assert isinstance(file.import_options, XmlFileImportOptions)
        assert file.import_options.content_segmentation is True

    def test_csv_type_is_spreadsheet(self) -> None:
        file = File.model_validate(
            {"id": 1, "projectId": 2, "name": "a.csv", "type": "csv", "importOptions": {}}
        )

        assert isinstance(file.import_options, SpreadsheetFileImportOptions)

    def test_unknown_type_falls_back_to_keys(self) -> None:
        file = File.model_validate(
            {
                "id": 1,
                "projectId": 2,
                "name": "a.pptx",
                "type": "pptx",
                "importOptions": {"importHiddenSlides": True},
            }
        )

        assert isinstance(file.import_options, DocxFileImportOptions)
        assert file.import_options.import_hidden_slides is True

    def test_no_markers_is_other(self) -> None:
        file = File.model_validate(
            {"id": 1, "projectId": 2, "name": "a.txt", "importOptions": {"customSegmentation": False}}
        )

        assert isinstance(file.import_options, OtherFileImportOptions)
        assert file.import_options.custom_segmentation is False

    def test_excluded_target_languages_are_decoded(self) -> None:
        file = File.model_validate(
            {"id": 1, "projectId": 2, "name": "a.xml", "excludedTargetLanguages": ["de", "fr"]}
        )

        assert file.excluded_target_languages == ["de", "fr"]

    def test_missing_options_stay_none(self) -> None:
        file = File.model_validate({"id": 1, "projectId": 2, "name": "a.txt", "type": "xml"})

        assert file.import_options is None

    def test_replace_request_keeps_variant(self) -> None:
        request = ReplaceFileRequest(
            storage_id=9,
            import_options=XmlFileImportOptions(translatable_elements=["/content/text"]),
        )

        assert request.to_wire() == {
            "storageId": 9,
            "importOptions": {"translatableElements": ["/content/text"]},
        }


class TestLanguagePermission:
    def test_all_literal_becomes_sentinel(self) -> None:
        permission = LanguagePermission.model_validate({"workflowStepIds": "all"})

        assert permission.workflow_step_ids is WorkflowSteps.ALL
        assert permission.all_steps is True

    def test_list_of_ids(self) -> None:
        permission = LanguagePermission.model_validate({"workflowStepIds": [313]})

        assert permission.workflow_step_ids == [313]
        assert permission.all_steps is False

    def test_sentinel_serializes_as_literal(self) -> None:
        request = AddTeamToProjectRequest(
            team_id=1,
            access_to_all_workflow_steps=False,
            manager_access=False,
            permissions={
                "it": LanguagePermission(workflow_step_ids=[313]),
                "de": LanguagePermission(workflow_step_ids=WorkflowSteps.ALL),
            },
            roles=[],
        )

        assert request.to_wire() == {
            "teamId": 1,
            "accessToAllWorkflowSteps": False,
            "managerAccess": False,
            "permissions": {
                "it": {"workflowStepIds": [313]},
                "de": {"workflowStepIds": "all"},
            },
            "roles": [],
        }

    def test_team_request_round_trip_is_equal(self) -> None:
        request = AddTeamToProjectRequest(
            team_id=1,
            permissions={
                "it": LanguagePermission(workflow_step_ids=[313]),
                "de": LanguagePermission(workflow_step_ids=WorkflowSteps.ALL),
            },
        )

        decoded = AddTeamToProjectRequest.model_validate(request.to_wire())

        assert decoded == request
        assert decoded.permissions["de"].all_steps is True


class TestPatches:
    def test_replace_is_default(self) -> None:
        patch = GroupPatch(path=GroupPatchPath.NAME, value="Renamed")

        assert patch.to_wire() == {"op": "replace", "path": "/name", "value": "Renamed"}

    def test_remove_omits_value(self) -> None:
        patch = GroupPatch(op=PatchOperation.REMOVE, path=GroupPatchPath.DESCRIPTION)

        assert patch.to_wire() == {"op": "remove", "path": "/description"}

    @pytest.mark.parametrize("op", [PatchOperation.REPLACE, PatchOperation.ADD, PatchOperation.TEST])
    def test_null_value_is_kept(self, op) -> None:
        """Clearing a field sends an explicit null rather than dropping the key."""
        patch = GroupPatch(op=op, path=GroupPatchPath.DESCRIPTION, value=None)

        assert patch.to_wire() == {"op": op.value, "path": "/description", "value": None}

    def test_null_value_survives_list_body(self) -> None:
        patches = [
            GroupPatch(path=GroupPatchPath.DESCRIPTION, value=None),
            GroupPatch(op=PatchOperation.REMOVE, path=GroupPatchPath.PARENT_ID),
        ]

        assert serialize_body(patches) == [
            {"op": "replace", "path": "/description", "value": None},
            {"op": "remove", "path": "/parentId"},
        ]

    def test_unknown_path_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GroupPatch(path="/nope", value="x")


class TestRequests:
    def test_absent_fields_are_omitted(self) -> None:
        assert AddGroupRequest(name="Mobile").to_wire() == {"name": "Mobile"}

    def test_group_name_required(self) -> None:
        with pytest.raises(ValidationError):
            AddGroupRequest(name="")


class TestSourceString:
    def test_plural_text_is_a_mapping(self) -> None:
        string = SourceString.model_validate(
            {"id": 1, "projectId": 2, "text": {"one": "file", "other": "files"}, "hasPlurals": True}
        )

        assert string.text == {"one": "file", "other": "files"}
        assert string.has_plurals is True
        assert string.label_ids == []
