"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import rate_limited, wants_json, keep_form_input, pop_form_input
from .data import load_data, get_default_portfolio_data
from .notifications import (
    send_email,
    send_telegram_notification,
    notify_new_message,
    get_owner_notifications_config
)
from .security import (
    get_client_ip,
    check_rate_limit,
    reset_rate_limits
)
from .helpers import (
    tag_class,
    truncate_text,
    clip
)
from .ui_helpers import (
    get_nav_sections,
    get_page_meta
)

__all__ = [
    # Decorators
    'rate_limited',
    'wants_json',
    'keep_form_input',
    'pop_form_input',

    # Data
    'load_data',
    'get_default_portfolio_data',

    # Notifications
    'send_email',
    'send_telegram_notification',
    'notify_new_message',
    'get_owner_notifications_config',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits',

    # Helpers
    'tag_class',
    'truncate_text',
    'clip',

    # UI Helpers
    'get_nav_sections',
    'get_page_meta'
]
