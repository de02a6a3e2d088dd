"""
Contact Submission Workflow - Form state, validation and the single
in-flight create-message request

States: idle -> submitting -> succeeded | failed -> idle
The resolved states are notification states; the next user action
(update_field, submit, dismiss) puts the form back to idle.
"""

import enum
import logging
import threading
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

from .errors import SubmissionError, ValidationError, FALLBACK_FAILURE_MESSAGE
from .form import ContactFormData, validate_contact_form

logger = logging.getLogger(__name__)

DEFAULT_CONFIRMATION = 'Your message has been sent.'


class SubmissionStatus(enum.Enum):
    IDLE = 'idle'
    SUBMITTING = 'submitting'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


SubmissionState = namedtuple('SubmissionState', ['status', 'reason'], defaults=(None,))

IDLE = SubmissionState(SubmissionStatus.IDLE)
SUBMITTING = SubmissionState(SubmissionStatus.SUBMITTING)

# A user-facing toast: variant is 'default' or 'destructive'
Notice = namedtuple('Notice', ['title', 'description', 'variant'])


def _log_notice(notice):
    level = logging.WARNING if notice.variant == 'destructive' else logging.INFO
    logger.log(level, f"{notice.title}: {notice.description}")


class ContactSubmissionWorkflow:
    """
    Drives one contact form from input to a settled submission

    Args:
        client: Collaborator exposing create_message(payload) -> dict,
            raising SubmissionError on failure (see MessageIntakeClient)
        notify (callable, optional): Receives a Notice for every outcome
        executor (Executor, optional): Runs the request; defaults to a
            private single-worker pool owned by the workflow
    """

    def __init__(self, client, notify=None, executor=None):
        self.client = client
        self.form = ContactFormData()
        self.last_notice = None
        self._notify = notify or _log_notice
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix='contact-submit')
        self._lock = threading.Lock()
        self._state = IDLE
        self._pending = None

    @property
    def state(self):
        return self._state

    @property
    def is_submitting(self):
        return self._pending is not None

    @property
    def can_submit(self):
        """Whether the submit control should be enabled"""
        return self._pending is None

    def update_field(self, field_name, value):
        """Set one form field. No validation happens here."""
        if field_name not in ContactFormData.field_names():
            logger.debug(f"Ignoring unknown contact field: {field_name}")
            return
        with self._lock:
            setattr(self.form, field_name, '' if value is None else str(value))
            self._return_to_idle()

    def dismiss(self):
        """Acknowledge a success or failure notification"""
        with self._lock:
            self._return_to_idle()

    def submit(self):
        """
        Validate the form and send it

        Returns:
            Future: Resolves to the final SubmissionState. While a request is
            pending, the same future is returned and nothing new is sent.

        Raises:
            ValidationError: When the form is incomplete or the email is malformed
            RuntimeError: When the executor has been shut down; the form stays idle
        """
        with self._lock:
            if self._pending is not None:
                logger.debug("Contact submission already in flight, not resending")
                return self._pending

            self._return_to_idle()
            try:
                validate_contact_form(self.form)
            except ValidationError as e:
                error = e
            else:
                error = None
                payload = self.form.to_dict()
                # The worker needs the lock to settle, so it cannot finish before
                # the state below is recorded
                pending = self._executor.submit(self._send, payload)
                self._state = SUBMITTING
                self._pending = pending

        if error is not None:
            self._emit(Notice('Validation Error', error.message, 'destructive'))
            raise error
        return pending

    def close(self):
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _send(self, payload):
        succeeded = False
        try:
            reply = self.client.create_message(payload)
        except SubmissionError as e:
            state = SubmissionState(SubmissionStatus.FAILED, e.reason)
        except Exception as e:
            logger.error(f"Unexpected contact submission error: {str(e)}")
            state = SubmissionState(SubmissionStatus.FAILED, FALLBACK_FAILURE_MESSAGE)
        else:
            succeeded = True
            confirmation = (reply or {}).get('message') or DEFAULT_CONFIRMATION
            state = SubmissionState(SubmissionStatus.SUCCEEDED, confirmation)

        with self._lock:
            if succeeded:
                self.form.clear()
            self._state = state
            self._pending = None

        if succeeded:
            self._emit(Notice('Message Sent!', state.reason, 'default'))
        else:
            self._emit(Notice('Error', state.reason, 'destructive'))
        return state

    def _emit(self, notice):
        self.last_notice = notice
        try:
            self._notify(notice)
        except Exception as e:
            logger.error(f"Contact notice handler failed: {str(e)}")

    def _return_to_idle(self):
        if self._state.status in (SubmissionStatus.SUCCEEDED, SubmissionStatus.FAILED):
            self._state = IDLE
