"""Test the plugin service list/execute mapping."""

import pytest

from gaia_sdk import Job
from gaia_sdk.core.exceptions import JobNotFoundError
from gaia_sdk.domain.identifiers import job_id_from_title
from gaia_sdk.domain.outcomes import FailedExit, NotFound, SoftExit, Success
from gaia_sdk.models.schemas import ArgumentSpec, JobDescriptor
from gaia_sdk.services import JobRegistry, PluginService, outcome_to_result


class TestListJobs:
    """Serializing the catalog"""

    def test_lists_in_registry_order(self):
        service = PluginService(JobRegistry.build([
            Job(title="A", handler=print),
            Job(title="B", handler=print),
            Job(title="C", handler=print),
        ]))

        descriptors = list(service.list_jobs())

        assert [d.title for d in descriptors] == ["A", "B", "C"]
        assert [d.id for d in descriptors] == [job_id_from_title(t) for t in ("A", "B", "C")]
        assert all(d.depends_on_ids == [] for d in descriptors)

    def test_descriptor_shape(self, plugin_service):
        deploy = next(d for d in plugin_service.list_jobs() if d.title == "deploy")

        assert deploy.description == "Deploys the build"
        assert deploy.depends_on_ids == [job_id_from_title("build")]
        assert [(a.key, a.type.value, a.value) for a in deploy.arguments] == [
            ("target", "textfield", "staging"),
            ("token", "vault", ""),
        ]
        assert deploy.interaction.type.value == "boolean"
        assert deploy.interaction.description == "Really deploy?"

    def test_job_without_interaction(self, plugin_service):
        build = next(d for d in plugin_service.list_jobs() if d.title == "build")
        assert build.interaction is None


class TestExecuteJob:
    """Mapping outcomes to job results"""

    def test_success(self, plugin_service):
        job_id = job_id_from_title("build")
        result = plugin_service.execute_job(JobDescriptor(id=job_id))

        assert result.unique_id == job_id
        assert result.failed is False
        assert result.exit_pipeline is False

    def test_soft_exit(self, plugin_service):
        result = plugin_service.execute_job(JobDescriptor(id=job_id_from_title("halt")))

        assert result.failed is False
        assert result.exit_pipeline is True
        assert result.message == "pipeline exit requested by job"

    def test_failed_exit(self, plugin_service):
        job_id = job_id_from_title("broken")
        result = plugin_service.execute_job(JobDescriptor(id=job_id))

        assert result.failed is True
        assert result.exit_pipeline is True
        assert result.message == "disk full"
        assert result.unique_id == job_id

    def test_not_found(self, plugin_service):
        with pytest.raises(JobNotFoundError) as exc_info:
            plugin_service.execute_job(JobDescriptor(id=7))

        assert exc_info.value.message == "job not found in plugin"
        assert exc_info.value.code == "CANCELLED"
        assert exc_info.value.job_id == 7

    def test_bound_arguments_reach_handler(self, plugin_service, handlers):
        plugin_service.execute_job(JobDescriptor(
            id=job_id_from_title("deploy"),
            arguments=[ArgumentSpec(type="textfield", key="target", value="prod")]
        ))

        assert handlers["deploy"].calls == [{"target": "prod", "token": ""}]


class TestOutcomeToResult:
    """Pure outcome mapping"""

    def test_mapping_table(self):
        assert outcome_to_result(5, Success()).model_dump() == {
            "unique_id": 5, "failed": False, "exit_pipeline": False, "message": ""
        }
        assert outcome_to_result(5, SoftExit("stop")).model_dump() == {
            "unique_id": 5, "failed": False, "exit_pipeline": True, "message": "stop"
        }
        assert outcome_to_result(5, FailedExit("bad")).model_dump() == {
            "unique_id": 5, "failed": True, "exit_pipeline": True, "message": "bad"
        }

    def test_not_found_has_no_result(self):
        with pytest.raises(JobNotFoundError):
            outcome_to_result(5, NotFound(5))
