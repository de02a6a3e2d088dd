"""
Security Module - Client IP lookup and per-IP rate limiting
"""

import time
from flask import request, current_app


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}
RATE_LIMIT_MAX_REQUESTS = 10  # Max 10 requests
RATE_LIMIT_WINDOW = 60  # Per 60 seconds


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR', 'unknown')


def check_rate_limit(endpoint='contact'):
    """Check if IP is within rate limit, recording this request if it is"""
    max_requests = current_app.config.get('CONTACT_RATE_LIMIT_MAX_REQUESTS', RATE_LIMIT_MAX_REQUESTS)
    window = current_app.config.get('CONTACT_RATE_LIMIT_WINDOW', RATE_LIMIT_WINDOW)
    client_ip = get_client_ip()
    current_time = time.time()

    if client_ip not in RATE_LIMIT_REQUESTS:
        RATE_LIMIT_REQUESTS[client_ip] = []

    # Clean old requests outside the window
    RATE_LIMIT_REQUESTS[client_ip] = [
        (ts, ep) for ts, ep in RATE_LIMIT_REQUESTS[client_ip]
        if current_time - ts < window
    ]

    # Check if limit exceeded
    endpoint_requests = [
        ep for ts, ep in RATE_LIMIT_REQUESTS[client_ip] if ep == endpoint
    ]
    if len(endpoint_requests) >= max_requests:
        current_app.logger.warning(f"Rate limit exceeded for {client_ip} on {endpoint}")
        return False

    # Add current request
    RATE_LIMIT_REQUESTS[client_ip].append((current_time, endpoint))
    return True


def reset_rate_limits():
    RATE_LIMIT_REQUESTS.clear()


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits'
]
