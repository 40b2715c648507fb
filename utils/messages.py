"""
Messages Module - Localized user-facing strings
"""

from flask import current_app


DEFAULT_LOCALE = 'ar'

MESSAGES = {
    'ar': {
        'invalid_password': 'كلمة المرور غير صحيحة',
        'profile_updated': 'تم تحديث البيانات بنجاح!',
        'login_required': 'يرجى تسجيل الدخول للوصول إلى هذه الصفحة.',
        'logged_out': 'تم تسجيل الخروج بنجاح.',
        'server_error': 'حدث خطأ في الخادم، يرجى المحاولة لاحقاً.',
        'not_found': 'الصفحة غير موجودة.',
    },
    'en': {
        'invalid_password': 'Incorrect password.',
        'profile_updated': 'Profile updated successfully!',
        'login_required': 'Please log in to access this page.',
        'logged_out': 'Logged out successfully.',
        'server_error': 'Something went wrong on our side. Please try again later.',
        'not_found': 'Page not found.',
    },
}


def get_locale():
    locale = current_app.config.get('LOCALE', DEFAULT_LOCALE)
    return locale if locale in MESSAGES else DEFAULT_LOCALE


def get_message(key, locale=None):
    """Look up a message, falling back to the default locale and then the key"""
    catalog = MESSAGES.get(locale or get_locale(), MESSAGES[DEFAULT_LOCALE])
    return catalog.get(key) or MESSAGES[DEFAULT_LOCALE].get(key, key)
