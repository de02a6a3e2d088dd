"""
API Routes - Contact message intake
Accepts JSON from scripted clients and plain form posts from the page
"""

from flask import request, jsonify, flash, redirect, url_for, current_app
from extensions import db
from contact.errors import ValidationError, FALLBACK_FAILURE_MESSAGE
from contact.form import ContactFormData, validate_contact_form
from utils.decorators import rate_limited, wants_json, keep_form_input
from utils.helpers import clip
from utils.notifications import notify_new_message
from utils.security import get_client_ip
from . import api_bp

SUCCESS_MESSAGE = "Thank you for your message! I'll get back to you soon."


def _respond(success, message, status, **extra):
    """JSON for API clients; flash and redirect back to the form for HTML posts"""
    if wants_json():
        return jsonify({'success': success, 'message': message, **extra}), status
    if not success:
        keep_form_input()
    flash(message, 'success' if success else 'danger')
    return redirect(url_for('portfolio.index', _anchor='contact'))


@api_bp.route('/contact', methods=['POST'])
@rate_limited('contact')
def contact():
    """Store a contact message and alert the portfolio owner"""
    from models import Message

    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
    else:
        payload = request.form

    # Honeypot spam protection
    if payload.get('website'):
        current_app.logger.info(f"Honeypot triggered from {get_client_ip()}")
        return _respond(True, SUCCESS_MESSAGE, 201)

    form = ContactFormData.from_mapping(payload, strip=True)
    try:
        validate_contact_form(form)
    except ValidationError as e:
        return _respond(False, e.message, 400, error=e.code)

    try:
        field_limit = current_app.config.get('CONTACT_FIELD_MAX_LENGTH', 255)
        new_message = Message()
        new_message.name = clip(form.name, field_limit)
        new_message.email = clip(form.email, field_limit)
        new_message.subject = clip(form.subject, field_limit)
        new_message.message = clip(form.message, current_app.config.get('CONTACT_MESSAGE_MAX_LENGTH', 5000))
        new_message.is_read = False
        new_message.ip_address = clip(get_client_ip(), 45)

        db.session.add(new_message)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Contact form error: {str(e)}")
        db.session.rollback()
        return _respond(False, FALLBACK_FAILURE_MESSAGE, 500)

    current_app.logger.info(f"Contact message saved, message_id: {new_message.id}")
    notify_new_message(new_message)

    return _respond(True, SUCCESS_MESSAGE, 201, id=new_message.id)
