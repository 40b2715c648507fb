"""
Pages Routes - Public portfolio page
"""

from flask import render_template
from utils.data import fetch_or_seed_profile
from . import pages_bp


@pages_bp.route('/')
def index():
    """Public portfolio built from the stored profile"""
    data = fetch_or_seed_profile()
    return render_template('index.html', **data)
