"""
Contact Form Module - Form data and the validation rules shared by
the submission workflow and the message-intake endpoint
"""

import re
from dataclasses import dataclass, asdict, fields as dataclass_fields

from .errors import ValidationError

# Browser whitespace: JS \s and String.prototype.trim() use this set, which
# differs from Python's str.isspace() (U+FEFF in, U+001C-U+001F and U+0085 out)
WHITESPACE = (
    '\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005'
    '\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'
)
_NOT_WS_OR_AT = '[^' + re.escape(WHITESPACE) + '@]+'

# Deliberately permissive: local@domain.tld with no whitespace or extra '@'
EMAIL_PATTERN = re.compile(_NOT_WS_OR_AT + '@' + _NOT_WS_OR_AT + r'\.' + _NOT_WS_OR_AT)


def trim(value):
    """Strip leading and trailing whitespace the way a browser's trim() does"""
    return value.strip(WHITESPACE)


@dataclass
class ContactFormData:
    name: str = ''
    email: str = ''
    subject: str = ''
    message: str = ''

    @classmethod
    def field_names(cls):
        return tuple(f.name for f in dataclass_fields(cls))

    @classmethod
    def from_mapping(cls, data, strip=False):
        """Build form data from a dict-like object, ignoring unknown keys"""
        values = {}
        for name in cls.field_names():
            value = data.get(name) or ''
            values[name] = trim(str(value)) if strip else str(value)
        return cls(**values)

    def to_dict(self):
        return asdict(self)

    def missing_fields(self):
        return [name for name, value in self.to_dict().items() if not trim(value)]

    def clear(self):
        for name in self.field_names():
            setattr(self, name, '')


def is_valid_email(email):
    return EMAIL_PATTERN.fullmatch(email or '') is not None


def validate_contact_form(form):
    """
    Check that a contact form can be sent

    Raises:
        ValidationError: 'missing_fields' if any field is blank after trimming,
            'invalid_email' if the email does not look like local@domain.tld
    """
    if form.missing_fields():
        raise ValidationError('missing_fields')
    if not is_valid_email(form.email):
        raise ValidationError('invalid_email')
    return form


__all__ = ['ContactFormData', 'EMAIL_PATTERN', 'WHITESPACE', 'trim', 'is_valid_email', 'validate_contact_form']
