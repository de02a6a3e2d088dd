"""
Contact Package - Contact form submission workflow and its collaborator client
"""

from .errors import ContactError, ValidationError, SubmissionError, FALLBACK_FAILURE_MESSAGE
from .form import ContactFormData, is_valid_email, validate_contact_form
from .client import MessageIntakeClient
from .workflow import (
    ContactSubmissionWorkflow,
    SubmissionState,
    SubmissionStatus,
    Notice
)

__all__ = [
    'ContactError',
    'ValidationError',
    'SubmissionError',
    'FALLBACK_FAILURE_MESSAGE',
    'ContactFormData',
    'is_valid_email',
    'validate_contact_form',
    'MessageIntakeClient',
    'ContactSubmissionWorkflow',
    'SubmissionState',
    'SubmissionStatus',
    'Notice'
]
