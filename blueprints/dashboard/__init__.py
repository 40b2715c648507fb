"""
Dashboard Blueprint - Profile editing for the admin
Handles: Dashboard form and profile updates
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/dashboard')

from . import routes
