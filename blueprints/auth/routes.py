"""
Auth Routes - Admin login and logout
"""

from flask import render_template, redirect, url_for, request, flash
from utils.messages import get_message
from utils.security import attempt_login, is_authenticated, logout as end_session
from . import auth_bp


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login"""
    if request.method == 'POST':
        if attempt_login(request.form.get('password')):
            return redirect(url_for('dashboard.index'))
        return render_template('login.html', error=get_message('invalid_password'))

    if is_authenticated():
        return redirect(url_for('dashboard.index'))
    return render_template('login.html', error=None)


@auth_bp.route('/logout')
def logout():
    """Logout current admin"""
    end_session()
    flash(get_message('logged_out'), 'success')
    return redirect(url_for('pages.index'))
