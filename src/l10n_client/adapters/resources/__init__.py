"""Resource executors (one class per REST resource).

Why a package:
- Groups modules by resource (projects/groups, strings, files, ...).
- Every executor composes `ApiTransport` + `JsonParser` the same way.
"""

from l10n_client.adapters.resources.projects_groups import ProjectsGroupsApiExecutor
from l10n_client.adapters.resources.source_files import SourceFilesApiExecutor
from l10n_client.adapters.resources.source_strings import SourceStringsApiExecutor
from l10n_client.adapters.resources.storage import StorageApiExecutor
from l10n_client.adapters.resources.string_translations import StringTranslationsApiExecutor
from l10n_client.adapters.resources.teams import TeamsApiExecutor

__all__ = [
	"ProjectsGroupsApiExecutor",
	"SourceFilesApiExecutor",
	"SourceStringsApiExecutor",
	"StorageApiExecutor",
	"StringTranslationsApiExecutor",
	"TeamsApiExecutor",
]
