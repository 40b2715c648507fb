"""
Security Module - Session gate for the single admin account
"""

import hmac
from flask import session, request, current_app


SESSION_FLAG = 'logged_in'


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                              request.environ.get('REMOTE_ADDR', 'unknown'))


def is_authenticated():
    """True when the current session belongs to the admin"""
    return session.get(SESSION_FLAG) is True


def verify_password(password):
    """Compare a submitted password with the configured admin secret"""
    secret = current_app.config.get('ADMIN_PASSWORD') or ''
    if not secret or password is None:
        return False
    return hmac.compare_digest(password.encode('utf-8'), secret.encode('utf-8'))


def attempt_login(password):
    """
    Log the admin in when the password matches

    Args:
        password (str): Submitted password

    Returns:
        bool: True on success; the session is left untouched otherwise
    """
    if not verify_password(password):
        current_app.logger.warning(f"Failed admin login from {get_client_ip()}")
        return False

    session[SESSION_FLAG] = True
    session.permanent = True
    current_app.logger.info(f"Admin logged in from {get_client_ip()}")
    return True


def logout():
    """Destroy the current session"""
    session.clear()
    current_app.logger.info(f"Admin logged out from {get_client_ip()}")
