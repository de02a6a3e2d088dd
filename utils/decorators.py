"""
Decorators Module - Request guards for public endpoints
"""

from functools import wraps
from flask import request, jsonify, flash, redirect, url_for, session
from contact.form import ContactFormData
from .security import check_rate_limit

FORM_INPUT_KEY = 'contact_form'


def wants_json():
    """True unless the request came from a plain HTML form post"""
    if request.is_json:
        return True
    return request.mimetype not in ('application/x-www-form-urlencoded', 'multipart/form-data')


def keep_form_input():
    """Hold a failed form post's values so the page can refill the form"""
    session[FORM_INPUT_KEY] = ContactFormData.from_mapping(request.form, strip=True).to_dict()


def pop_form_input():
    return ContactFormData.from_mapping(session.pop(FORM_INPUT_KEY, None) or {})


def rate_limited(endpoint):
    """Decorator rejecting clients that exceed the per-IP request limit"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not check_rate_limit(endpoint):
                message = 'Too many requests. Please try again later.'
                if wants_json():
                    return jsonify({'success': False, 'message': message}), 429
                keep_form_input()
                flash(message, 'danger')
                return redirect(url_for('portfolio.index', _anchor='contact'))
            return f(*args, **kwargs)
        return decorated_function
    return decorator
