"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import login_required
from .data import (
    StorageError,
    fetch_or_seed_profile,
    save_profile,
    normalize_profile,
    get_default_profile_data,
    load_bootstrap_data
)
from .forms import ProfileUpdate, parse_nested_form
from .messages import get_message
from .security import (
    attempt_login,
    get_client_ip,
    is_authenticated,
    logout,
    verify_password
)
from .uploads import save_upload

__all__ = [
    # Decorators
    'login_required',

    # Data
    'StorageError',
    'fetch_or_seed_profile',
    'save_profile',
    'normalize_profile',
    'get_default_profile_data',
    'load_bootstrap_data',

    # Forms
    'ProfileUpdate',
    'parse_nested_form',

    # Messages
    'get_message',

    # Security
    'attempt_login',
    'get_client_ip',
    'is_authenticated',
    'logout',
    'verify_password',

    # Uploads
    'save_upload'
]
