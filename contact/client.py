"""
Message Intake Client - HTTP collaborator used by the submission workflow
"""

import os
import logging

import requests

from .errors import SubmissionError

logger = logging.getLogger(__name__)

CONTACT_ENDPOINT = '/api/contact'
DEFAULT_TIMEOUT = 10


def _error_text(response):
    """Pull a human-readable error out of a failed response, if there is one"""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get('message') or body.get('error') or None
    return None


class MessageIntakeClient:
    """
    Sends contact messages to a message-intake endpoint

    Args:
        base_url (str): Site root, e.g. 'https://example.com'
        timeout (float): Request timeout in seconds
        session (requests.Session, optional): Session to reuse
    """

    def __init__(self, base_url, timeout=DEFAULT_TIMEOUT, session=None):
        self.url = base_url.rstrip('/') + CONTACT_ENDPOINT
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_env(cls):
        base_url = os.environ.get('CONTACT_API_URL', 'http://localhost:5000')
        timeout = float(os.environ.get('CONTACT_API_TIMEOUT', DEFAULT_TIMEOUT))
        return cls(base_url, timeout=timeout)

    def create_message(self, payload):
        """
        Create a contact message

        Args:
            payload (dict): name, email, subject and message

        Returns:
            dict: The endpoint's JSON reply, containing a confirmation 'message'

        Raises:
            SubmissionError: On transport failure or a non-2xx status
        """
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Contact request to {self.url} failed: {str(e)}")
            raise SubmissionError() from e

        if not response.ok:
            logger.error(f"Contact endpoint returned {response.status_code}")
            raise SubmissionError(_error_text(response), status_code=response.status_code)

        try:
            body = response.json()
        except ValueError:
            body = {}
        return body if isinstance(body, dict) else {}

    def close(self):
        self.session.close()
