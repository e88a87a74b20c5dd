"""Test job execution and outcome classification."""

from gaia_sdk import ExitPipeline, Job, JobFailed
from gaia_sdk.core.constants import EXIT_PIPELINE_MESSAGE
from gaia_sdk.domain.identifiers import job_id_from_title
from gaia_sdk.domain.outcomes import FailedExit, NotFound, SoftExit, Success
from gaia_sdk.models.enums import OutcomeKind
from gaia_sdk.services import ExecutionDispatcher, JobRegistry


class TestOutcomeClassification:
    """Mapping handler behaviour to outcomes"""

    def test_normal_return_is_success(self, dispatcher, handlers):
        outcome = dispatcher.execute(job_id_from_title("build"), {})

        assert outcome == Success()
        assert outcome.kind is OutcomeKind.SUCCESS
        assert len(handlers["build"].calls) == 1

    def test_exit_pipeline_is_soft_exit(self, dispatcher):
        outcome = dispatcher.execute(job_id_from_title("halt"), {})

        assert outcome == SoftExit(EXIT_PIPELINE_MESSAGE)
        assert outcome.message == "pipeline exit requested by job"

    def test_job_failed_is_failed_exit(self, dispatcher):
        outcome = dispatcher.execute(job_id_from_title("broken"), {})

        assert outcome == FailedExit("disk full")

    def test_unexpected_error_is_failed_exit(self, dispatcher, handlers):
        outcome = dispatcher.execute(job_id_from_title("crash"), {})

        assert outcome == FailedExit("boom")
        assert len(handlers["crash"].calls) == 1

    def test_unknown_id_is_not_found_without_invoking(self, dispatcher, handlers):
        outcome = dispatcher.execute(1, {"target": "prod"})

        assert outcome == NotFound(1)
        assert all(not handler.calls for handler in handlers.values())

    def test_custom_soft_exit_message(self):
        def stop(arguments):
            raise ExitPipeline("nothing to deploy")

        dispatcher = ExecutionDispatcher(JobRegistry.build([Job(title="stop", handler=stop)]))
        assert dispatcher.execute(job_id_from_title("stop")) == SoftExit("nothing to deploy")

    def test_sentinel_text_in_job_failed_is_still_failure(self):
        def fail(arguments):
            raise JobFailed(EXIT_PIPELINE_MESSAGE)

        dispatcher = ExecutionDispatcher(JobRegistry.build([Job(title="fail", handler=fail)]))
        assert dispatcher.execute(job_id_from_title("fail")) == FailedExit(EXIT_PIPELINE_MESSAGE)

    def test_error_without_message_uses_type_name(self):
        def fail(arguments):
            raise KeyError()

        dispatcher = ExecutionDispatcher(JobRegistry.build([Job(title="fail", handler=fail)]))
        assert dispatcher.execute(job_id_from_title("fail")) == FailedExit("KeyError")

    def test_each_call_invokes_handler_once(self, dispatcher, handlers):
        job_id = job_id_from_title("broken")
        dispatcher.execute(job_id, {})
        dispatcher.execute(job_id, {})

        assert len(handlers["broken"].calls) == 2


class TestArgumentBinding:
    """Binding runtime values over declared defaults"""

    def test_defaults_used_when_not_bound(self, dispatcher, handlers):
        dispatcher.execute(job_id_from_title("deploy"), {})

        assert handlers["deploy"].calls == [{"target": "staging", "token": ""}]

    def test_bound_values_override_defaults(self, dispatcher, handlers):
        dispatcher.execute(job_id_from_title("deploy"), {"token": "s3cret", "target": "prod"})

        call = handlers["deploy"].calls[0]
        assert call == {"target": "prod", "token": "s3cret"}
        assert list(call) == ["target", "token"]

    def test_undeclared_keys_pass_through(self, dispatcher, handlers):
        dispatcher.execute(job_id_from_title("deploy"), {"extra": "1"})

        assert list(handlers["deploy"].calls[0]) == ["target", "token", "extra"]
        assert handlers["deploy"].calls[0]["extra"] == "1"

    def test_plain_function_handler_receives_mapping(self):
        received = []
        dispatcher = ExecutionDispatcher(JobRegistry.build([
            Job(title="echo", handler=lambda arguments: received.append(arguments))
        ]))

        dispatcher.execute(job_id_from_title("echo"), {"a": "1"})
        assert received == [{"a": "1"}]
