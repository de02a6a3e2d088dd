"""
Tests for the contact submission workflow.
Covers validation, the request/response state machine and the
single in-flight submission guarantee.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from contact.errors import SubmissionError, ValidationError, FALLBACK_FAILURE_MESSAGE
from contact.form import ContactFormData
from contact.workflow import (
    ContactSubmissionWorkflow,
    Notice,
    SubmissionState,
    SubmissionStatus,
    DEFAULT_CONFIRMATION,
)

TIMEOUT = 5


@pytest.fixture
def workflow(intake_client, notices):
    workflow = ContactSubmissionWorkflow(intake_client, notify=notices.append)
    yield workflow
    workflow.close()


def fill(workflow, payload):
    for field, value in payload.items():
        workflow.update_field(field, value)


class TestFieldUpdates:
    """Tests for update_field."""

    def test_initial_state(self, workflow):
        assert workflow.form == ContactFormData()
        assert workflow.state == SubmissionState(SubmissionStatus.IDLE)
        assert workflow.can_submit

    def test_sets_named_field(self, workflow):
        workflow.update_field("subject", "Project")

        assert workflow.form.subject == "Project"

    def test_does_not_validate(self, workflow, intake_client):
        workflow.update_field("email", "definitely not an email")

        assert workflow.form.email == "definitely not an email"
        assert workflow.state.status == SubmissionStatus.IDLE
        intake_client.create_message.assert_not_called()

    def test_unknown_field_is_ignored(self, workflow):
        workflow.update_field("website", "spam")

        assert workflow.form == ContactFormData()

    def test_none_becomes_empty_string(self, workflow, intake_client, valid_payload):
        fill(workflow, valid_payload)
        workflow.update_field("subject", None)

        assert workflow.form.subject == ""
        with pytest.raises(ValidationError) as exc_info:
            workflow.submit()
        assert exc_info.value.code == "missing_fields"
        intake_client.create_message.assert_not_called()

    def test_non_string_value_is_stored_as_text(self, workflow):
        workflow.update_field("name", 42)

        assert workflow.form.name == "42"


class TestValidation:
    """submit() must reject bad input without touching the network."""

    @pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
    @pytest.mark.parametrize("blank", ["", "   "])
    def test_missing_fields(self, workflow, intake_client, notices, valid_payload, field, blank):
        fill(workflow, valid_payload)
        workflow.update_field(field, blank)

        with pytest.raises(ValidationError) as exc_info:
            workflow.submit()

        assert exc_info.value.code == "missing_fields"
        intake_client.create_message.assert_not_called()
        assert workflow.state.status == SubmissionStatus.IDLE
        assert notices == [Notice("Validation Error", "Please fill in all fields", "destructive")]

    @pytest.mark.parametrize("email", ["jane.example.com", "jane@example", "jane@", "jane@@example.com"])
    def test_invalid_email(self, workflow, intake_client, notices, valid_payload, email):
        fill(workflow, valid_payload)
        workflow.update_field("email", email)

        with pytest.raises(ValidationError) as exc_info:
            workflow.submit()

        assert exc_info.value.code == "invalid_email"
        intake_client.create_message.assert_not_called()
        assert notices == [Notice("Validation Error", "Please enter a valid email address", "destructive")]

    def test_form_kept_after_validation_error(self, workflow, valid_payload):
        fill(workflow, valid_payload)
        workflow.update_field("email", "nope")

        with pytest.raises(ValidationError):
            workflow.submit()

        assert workflow.form.name == "Jane Doe"
        assert workflow.form.email == "nope"


class TestSubmission:
    """Tests for the request and its resolution."""

    def test_issues_exactly_one_request_with_payload(self, workflow, intake_client, valid_payload):
        fill(workflow, valid_payload)

        workflow.submit().result(timeout=TIMEOUT)

        intake_client.create_message.assert_called_once_with({
            "name": "Jane Doe",
            "email": "jane@example.com",
            "subject": "Hi",
            "message": "Hello there",
        })

    def test_success_resets_form_and_shows_confirmation(self, workflow, notices, valid_payload):
        fill(workflow, valid_payload)

        state = workflow.submit().result(timeout=TIMEOUT)

        assert state == SubmissionState(SubmissionStatus.SUCCEEDED, "Thanks!")
        assert workflow.state == state
        assert workflow.form == ContactFormData()
        assert notices == [Notice("Message Sent!", "Thanks!", "default")]
        assert workflow.last_notice == notices[-1]

    def test_success_without_confirmation_text(self, workflow, intake_client, valid_payload):
        intake_client.create_message.return_value = {}
        fill(workflow, valid_payload)

        state = workflow.submit().result(timeout=TIMEOUT)

        assert state.reason == DEFAULT_CONFIRMATION

    def test_failure_without_message_uses_fallback(self, workflow, intake_client, notices, valid_payload):
        intake_client.create_message.side_effect = SubmissionError(status_code=500)
        fill(workflow, valid_payload)

        state = workflow.submit().result(timeout=TIMEOUT)

        assert state == SubmissionState(SubmissionStatus.FAILED, FALLBACK_FAILURE_MESSAGE)
        assert notices == [Notice("Error", "Failed to send message. Please try again.", "destructive")]
        assert workflow.form.to_dict() == valid_payload

    def test_failure_surfaces_server_message(self, workflow, intake_client, notices, valid_payload):
        intake_client.create_message.side_effect = SubmissionError("Too many requests. Please try again later.", 429)
        fill(workflow, valid_payload)

        state = workflow.submit().result(timeout=TIMEOUT)

        assert state.status == SubmissionStatus.FAILED
        assert state.reason == "Too many requests. Please try again later."
        assert notices[-1].description == "Too many requests. Please try again later."

    def test_unexpected_collaborator_error_is_a_failure(self, workflow, intake_client, valid_payload):
        intake_client.create_message.side_effect = RuntimeError("boom")
        fill(workflow, valid_payload)

        state = workflow.submit().result(timeout=TIMEOUT)

        assert state == SubmissionState(SubmissionStatus.FAILED, FALLBACK_FAILURE_MESSAGE)
        assert workflow.can_submit
        assert workflow.form.to_dict() == valid_payload

    def test_retry_is_manual(self, workflow, intake_client, valid_payload):
        intake_client.create_message.side_effect = [SubmissionError(), {"message": "Thanks!"}]
        fill(workflow, valid_payload)

        first = workflow.submit().result(timeout=TIMEOUT)
        assert first.status == SubmissionStatus.FAILED
        assert intake_client.create_message.call_count == 1

        second = workflow.submit().result(timeout=TIMEOUT)
        assert second.status == SubmissionStatus.SUCCEEDED
        assert intake_client.create_message.call_count == 2

    def test_notice_handler_errors_do_not_break_submission(self, intake_client, valid_payload):
        def broken_handler(notice):
            raise RuntimeError("toast failed")

        with ContactSubmissionWorkflow(intake_client, notify=broken_handler) as workflow:
            fill(workflow, valid_payload)
            state = workflow.submit().result(timeout=TIMEOUT)

        assert state.status == SubmissionStatus.SUCCEEDED


class TestSingleInFlight:
    """Only one request may be pending per workflow."""

    @pytest.fixture
    def release(self):
        return threading.Event()

    @pytest.fixture
    def blocking_client(self, intake_client, release):
        started = threading.Event()

        def create_message(payload):
            started.set()
            release.wait(TIMEOUT)
            return {"message": "Thanks!"}

        intake_client.create_message.side_effect = create_message
        intake_client.started = started
        return intake_client

    def test_second_submit_while_pending_sends_nothing(self, blocking_client, release, valid_payload):
        with ContactSubmissionWorkflow(blocking_client) as workflow:
            fill(workflow, valid_payload)

            first = workflow.submit()
            assert blocking_client.started.wait(TIMEOUT)
            assert workflow.state.status == SubmissionStatus.SUBMITTING
            assert workflow.is_submitting
            assert not workflow.can_submit

            second = workflow.submit()
            assert second is first

            release.set()
            state = first.result(timeout=TIMEOUT)

        assert state.status == SubmissionStatus.SUCCEEDED
        assert blocking_client.create_message.call_count == 1

    def test_submit_while_pending_skips_validation(self, blocking_client, release, valid_payload):
        with ContactSubmissionWorkflow(blocking_client) as workflow:
            fill(workflow, valid_payload)
            first = workflow.submit()
            assert blocking_client.started.wait(TIMEOUT)

            workflow.update_field("email", "")
            assert workflow.submit() is first

            release.set()
            first.result(timeout=TIMEOUT)

        assert blocking_client.create_message.call_count == 1

    def test_payload_is_captured_at_submit_time(self, blocking_client, release, valid_payload):
        with ContactSubmissionWorkflow(blocking_client) as workflow:
            fill(workflow, valid_payload)
            future = workflow.submit()
            assert blocking_client.started.wait(TIMEOUT)

            workflow.update_field("subject", "Changed")
            release.set()
            future.result(timeout=TIMEOUT)

        blocking_client.create_message.assert_called_once_with(valid_payload)

    def test_can_submit_again_after_settling(self, workflow, intake_client, valid_payload):
        fill(workflow, valid_payload)
        workflow.submit().result(timeout=TIMEOUT)

        assert workflow.can_submit
        assert not workflow.is_submitting


class TestResolvedStates:
    """succeeded/failed are notification states that fall back to idle."""

    def test_field_edit_returns_to_idle(self, workflow, intake_client, valid_payload):
        intake_client.create_message.side_effect = SubmissionError()
        fill(workflow, valid_payload)
        workflow.submit().result(timeout=TIMEOUT)
        assert workflow.state.status == SubmissionStatus.FAILED

        workflow.update_field("email", "jane@example.org")

        assert workflow.state == SubmissionState(SubmissionStatus.IDLE)
        assert workflow.form.name == "Jane Doe"

    def test_dismiss_returns_to_idle(self, workflow, valid_payload):
        fill(workflow, valid_payload)
        workflow.submit().result(timeout=TIMEOUT)
        assert workflow.state.status == SubmissionStatus.SUCCEEDED

        workflow.dismiss()

        assert workflow.state.status == SubmissionStatus.IDLE
        assert workflow.form == ContactFormData()

    def test_validation_error_after_success_is_idle(self, workflow, valid_payload):
        fill(workflow, valid_payload)
        workflow.submit().result(timeout=TIMEOUT)

        with pytest.raises(ValidationError):
            workflow.submit()

        assert workflow.state.status == SubmissionStatus.IDLE


class TestExecutorOwnership:
    """The workflow only shuts down executors it created."""

    def test_injected_executor_survives_close(self, intake_client, valid_payload):
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            workflow = ContactSubmissionWorkflow(intake_client, executor=executor)
            fill(workflow, valid_payload)
            workflow.submit().result(timeout=TIMEOUT)
            workflow.close()

            assert executor.submit(lambda: 42).result(timeout=TIMEOUT) == 42
        finally:
            executor.shutdown(wait=True)

    def test_submit_after_close_leaves_form_usable(self, intake_client, valid_payload):
        workflow = ContactSubmissionWorkflow(intake_client)
        fill(workflow, valid_payload)
        workflow.close()

        with pytest.raises(RuntimeError):
            workflow.submit()

        assert workflow.state == SubmissionState(SubmissionStatus.IDLE)
        assert workflow.can_submit
        assert not workflow.is_submitting
        assert workflow.form.to_dict() == valid_payload
        intake_client.create_message.assert_not_called()
