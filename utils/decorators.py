"""
Decorators Module - Authentication decorators
"""

from functools import wraps
from flask import redirect, url_for, flash
from .messages import get_message
from .security import is_authenticated


def login_required(f):
    """Decorator to require admin login"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_authenticated():
            flash(get_message('login_required'), 'error')
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return decorated_function
