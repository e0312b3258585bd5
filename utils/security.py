"""
Security Module - Client IP, rate limiting, password hashing and secrets
"""

import hmac
import secrets
import time
from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR', 'unknown')


def check_rate_limit(endpoint='sign_in'):
    """Check if IP is within rate limit for the endpoint"""
    max_requests = current_app.config.get('LOGIN_RATE_LIMIT', 10)
    window = current_app.config.get('LOGIN_RATE_WINDOW', 60)
    client_ip = get_client_ip()
    current_time = time.time()

    prune_rate_limits(current_time, window)

    recent = RATE_LIMIT_REQUESTS.setdefault(client_ip, [])
    endpoint_requests = [ep for ts, ep in recent if ep == endpoint]
    if len(endpoint_requests) >= max_requests:
        current_app.logger.warning(f"Rate limit exceeded for {client_ip} on {endpoint}")
        return False

    recent.append((current_time, endpoint))
    return True


def prune_rate_limits(current_time, window):
    """Drop requests outside the window, and clients left with none"""
    for ip in list(RATE_LIMIT_REQUESTS):
        recent = [(ts, ep) for ts, ep in RATE_LIMIT_REQUESTS[ip] if current_time - ts < window]
        if recent:
            RATE_LIMIT_REQUESTS[ip] = recent
        else:
            del RATE_LIMIT_REQUESTS[ip]


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)


def generate_session_token():
    return secrets.token_urlsafe(32)


def secrets_match(provided, expected):
    """Constant-time comparison; an unset expected secret never matches"""
    if not provided or not expected:
        return False
    return hmac.compare_digest(str(provided), str(expected))


def get_admin_credentials():
    """Load admin bootstrap credentials from configuration"""
    return {
        'email': current_app.config.get('ADMIN_EMAIL'),
        'password': current_app.config.get('ADMIN_PASSWORD'),
        'name': current_app.config.get('ADMIN_NAME') or 'Admin',
    }


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'prune_rate_limits',
    'hash_password',
    'verify_password',
    'generate_session_token',
    'secrets_match',
    'get_admin_credentials',
]
