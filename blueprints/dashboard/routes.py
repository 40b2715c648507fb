"""
Dashboard Routes - Admin dashboard for editing the portfolio profile
"""

from flask import render_template, request, current_app
from utils.data import fetch_or_seed_profile, save_profile
from utils.decorators import login_required
from utils.forms import ProfileUpdate
from utils.messages import get_message
from utils.uploads import save_upload
from . import dashboard_bp


@dashboard_bp.route('', strict_slashes=False)
@login_required
def index():
    """Dashboard form populated from the profile"""
    data = fetch_or_seed_profile()
    return render_template('dashboard/index.html', data=data, message=None)


@dashboard_bp.route('/update', methods=['POST'])
@login_required
def update():
    """Apply the submitted dashboard form to the profile"""
    data = fetch_or_seed_profile()

    image = save_upload(request.files.get('profileImage'))
    changes = ProfileUpdate.from_form(request.form, image=image)
    data = changes.apply(data)
    save_profile(data)

    current_app.logger.info(f"Profile updated from dashboard (new image: {'yes' if image else 'no'})")
    return render_template('dashboard/index.html', data=data, message=get_message('profile_updated'))
