"""
Contact Errors - Failures raised by the contact submission workflow
"""

FALLBACK_FAILURE_MESSAGE = 'Failed to send message. Please try again.'

VALIDATION_MESSAGES = {
    'missing_fields': 'Please fill in all fields',
    'invalid_email': 'Please enter a valid email address',
}


class ContactError(Exception):
    """Base class for contact workflow errors"""


class ValidationError(ContactError):
    """Raised locally, before any network activity, when the form is not sendable"""

    def __init__(self, code):
        self.code = code
        self.message = VALIDATION_MESSAGES.get(code, code)
        super().__init__(self.message)


class SubmissionError(ContactError):
    """
    Raised when the message-intake endpoint rejects or never receives a message

    Args:
        server_message (str, optional): Error text returned by the endpoint
        status_code (int, optional): HTTP status, None for transport failures
    """

    def __init__(self, server_message=None, status_code=None):
        self.server_message = server_message
        self.status_code = status_code
        super().__init__(self.reason)

    @property
    def reason(self):
        return self.server_message or FALLBACK_FAILURE_MESSAGE


__all__ = [
    'ContactError',
    'ValidationError',
    'SubmissionError',
    'FALLBACK_FAILURE_MESSAGE',
    'VALIDATION_MESSAGES'
]
