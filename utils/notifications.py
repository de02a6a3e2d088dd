"""
Notifications Module - Telegram and email alerts to the portfolio owner
"""

import smtplib
import requests
import threading
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app
from markupsafe import escape
from .helpers import truncate_text


def get_owner_notifications_config():
    """Load owner notification settings from the app config"""
    return {
        'telegram': {
            'bot_token': current_app.config.get('OWNER_TELEGRAM_BOT_TOKEN') or '',
            'chat_id': current_app.config.get('OWNER_TELEGRAM_CHAT_ID') or ''
        },
        'smtp': {
            'host': current_app.config.get('OWNER_SMTP_HOST') or '',
            'port': current_app.config.get('OWNER_SMTP_PORT') or '587',
            'email': current_app.config.get('OWNER_SMTP_EMAIL') or '',
            'password': current_app.config.get('OWNER_SMTP_PASSWORD') or '',
            'recipient': current_app.config.get('OWNER_EMAIL') or ''
        }
    }


def send_telegram_notification(message_text, config=None):
    """
    Send Telegram notification to the portfolio owner

    Args:
        message_text (str): HTML-formatted message to send
        config (dict, optional): Telegram settings, read from the app if omitted

    Returns:
        bool: True if sent successfully, False otherwise
    """
    config = config or get_owner_notifications_config()['telegram']
    bot_token = config.get('bot_token')
    chat_id = config.get('chat_id')

    if not (bot_token and chat_id):
        current_app.logger.debug("Owner Telegram credentials not configured")
        return False

    try:
        url = f"https://api.telegram.org/bot{bot_token}/sendMessage"
        payload = {
            'chat_id': chat_id,
            'text': message_text,
            'parse_mode': 'HTML'
        }
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code == 200:
            current_app.logger.info("Telegram notification sent to owner")
            return True
        else:
            current_app.logger.error(f"Telegram API error: {response.status_code}")
            return False
    except Exception as e:
        current_app.logger.error(f"Telegram notification error: {str(e)}")
        return False


def send_email(subject, body, html=False, config=None):
    """
    Send email to the portfolio owner using SMTP

    Args:
        subject (str): Email subject
        body (str): Email body
        html (bool): Whether body is HTML
        config (dict, optional): SMTP settings, read from the app if omitted

    Returns:
        bool: Success status
    """
    smtp_config = config or get_owner_notifications_config()['smtp']
    if not all([
        smtp_config.get('host'),
        smtp_config.get('email'),
        smtp_config.get('password')
    ]):
        current_app.logger.debug("Owner SMTP config incomplete")
        return False

    recipient = smtp_config.get('recipient') or smtp_config.get('email')
    try:
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = smtp_config.get('email')
        msg['To'] = recipient
        msg.attach(MIMEText(body, 'html' if html else 'plain'))

        with smtplib.SMTP(smtp_config.get('host'),
                          int(smtp_config.get('port', 587))) as server:
            server.starttls()
            server.login(smtp_config.get('email'), smtp_config.get('password'))
            server.send_message(msg)

        current_app.logger.info(f"Email sent to {recipient}")
        return True
    except Exception as e:
        current_app.logger.error(f"Error sending email to {recipient}: {str(e)}")
        return False


def format_message_alert(message):
    """Telegram (HTML) text for a new contact message"""
    return (
        f"📧 <b>New Portfolio Message</b>\n\n"
        f"👤 <b>From:</b> {escape(message.name)}\n"
        f"📧 <b>Email:</b> {escape(message.email)}\n"
        f"📌 <b>Subject:</b> {escape(message.subject)}\n"
        f"💬 <b>Message:</b>\n{escape(truncate_text(message.message, 200))}"
    )


def format_message_email(message):
    return (
        f"New message from your portfolio contact form\n\n"
        f"From: {message.name} <{message.email}>\n"
        f"Subject: {message.subject}\n\n"
        f"{message.message}\n"
    )


def notify_new_message(message, background=True):
    """
    Alert the owner about a new contact message on every configured channel

    Channels run on a background thread by default so the request that
    stored the message is not held up; failures are only logged.
    """
    app = current_app._get_current_object()
    config = get_owner_notifications_config()
    alert = format_message_alert(message)
    subject = f"[Portfolio] {message.subject}"
    body = format_message_email(message)

    def _send():
        with app.app_context():
            send_telegram_notification(alert, config=config['telegram'])
            send_email(subject, body, config=config['smtp'])

    if background:
        thread = threading.Thread(target=_send)
        thread.daemon = True
        thread.start()
    else:
        _send()


__all__ = [
    'get_owner_notifications_config',
    'send_telegram_notification',
    'send_email',
    'format_message_alert',
    'notify_new_message'
]
