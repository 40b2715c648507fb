"""
Data Management Module - Handles loading, seeding and saving the portfolio profile
The profile is a single document stored in one database row.
"""

import json
import os
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from extensions import db
from models import Profile, PROFILE_ID


HERO_FIELDS = ('title', 'name', 'description', 'image')
EXPERIENCE_FIELDS = ('title', 'date', 'location')
SERVICE_FIELDS = ('title', 'icon', 'description')
CONTACT_FIELDS = ('phone', 'email', 'location', 'whatsapp_link', 'instagram_link')


class StorageError(Exception):
    """Raised when the profile store cannot be read or written"""


def get_default_profile_data():
    """Return an empty profile document"""
    return {
        'hero': {field: '' for field in HERO_FIELDS},
        'experience': [],
        'services': [],
        'skills': [],
        'contact': {field: '' for field in CONTACT_FIELDS}
    }


def _text(value):
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def as_list(value):
    if value is None or value == '':
        return []
    if isinstance(value, dict):
        return list(value.values())
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def normalize_experience(entry):
    """Coerce one experience entry, description becomes a list of strings"""
    entry = entry if isinstance(entry, dict) else {}
    result = {field: _text(entry.get(field)) for field in EXPERIENCE_FIELDS}
    result['description'] = [_text(line) for line in as_list(entry.get('description'))]
    return result


def normalize_service(entry):
    entry = entry if isinstance(entry, dict) else {}
    return {field: _text(entry.get(field)) for field in SERVICE_FIELDS}


def normalize_profile(data):
    """
    Fill in every missing field of a profile document

    Args:
        data (dict): Raw profile data, possibly partial

    Returns:
        dict: Profile with all sections present and typed
    """
    data = data if isinstance(data, dict) else {}
    hero = data.get('hero') if isinstance(data.get('hero'), dict) else {}
    contact = data.get('contact') if isinstance(data.get('contact'), dict) else {}

    return {
        'hero': {field: _text(hero.get(field)) for field in HERO_FIELDS},
        'experience': [normalize_experience(e) for e in as_list(data.get('experience'))],
        'services': [normalize_service(s) for s in as_list(data.get('services'))],
        'skills': [_text(skill) for skill in as_list(data.get('skills'))],
        'contact': {field: _text(contact.get(field)) for field in CONTACT_FIELDS}
    }


def profile_to_dict(profile):
    """Convert profile model to dictionary"""
    if not profile:
        return get_default_profile_data()

    return normalize_profile({
        'hero': profile.hero,
        'experience': profile.experience,
        'services': profile.services,
        'skills': profile.skills,
        'contact': profile.contact
    })


def load_bootstrap_data(path):
    """
    Load the seed document used when the store is empty

    A missing or malformed file is not an error: it is logged and
    None is returned so the caller can seed an empty profile.
    """
    if not path:
        return None

    if not os.path.isabs(path):
        path = os.path.join(current_app.root_path, path)

    if not os.path.exists(path):
        current_app.logger.info(f"No bootstrap file at {path}, seeding empty profile")
        return None

    try:
        with open(path, 'r', encoding='utf-8') as file:
            data = json.load(file)
    except (OSError, ValueError) as e:
        current_app.logger.warning(f"Could not read bootstrap file {path}: {str(e)}")
        return None

    if not isinstance(data, dict):
        current_app.logger.warning(f"Bootstrap file {path} does not hold a JSON object, ignoring it")
        return None

    return data


def _apply_to_model(profile, data):
    # Assign fresh objects so SQLAlchemy sees the JSON columns as changed
    profile.hero = dict(data['hero'])
    profile.experience = list(data['experience'])
    profile.services = list(data['services'])
    profile.skills = list(data['skills'])
    profile.contact = dict(data['contact'])


def fetch_or_seed_profile():
    """
    Return the portfolio profile, seeding it on first access

    Returns:
        dict: The normalized profile document

    Raises:
        StorageError: If the database cannot be read or the seed written
    """
    try:
        profile = db.session.get(Profile, PROFILE_ID)
        if profile is not None:
            return profile_to_dict(profile)

        seed = load_bootstrap_data(current_app.config.get('BOOTSTRAP_FILE'))
        data = normalize_profile(seed or {})
        profile = Profile(id=PROFILE_ID)
        _apply_to_model(profile, data)
        db.session.add(profile)
        try:
            db.session.commit()
            current_app.logger.info(f"Seeded profile from {'bootstrap file' if seed else 'empty defaults'}")
        except IntegrityError:
            # Another request seeded first
            db.session.rollback()
            profile = db.session.get(Profile, PROFILE_ID)
        return profile_to_dict(profile)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error loading profile: {str(e)}")
        raise StorageError('Profile store is unavailable') from e


def save_profile(data):
    """
    Persist the full profile document

    Args:
        data (dict): Profile document, normalized before writing

    Raises:
        StorageError: If the write fails
    """
    data = normalize_profile(data)
    try:
        profile = db.session.get(Profile, PROFILE_ID)
        if profile is None:
            profile = Profile(id=PROFILE_ID)
            db.session.add(profile)
        _apply_to_model(profile, data)
        db.session.commit()
        current_app.logger.info(
            f"Saved profile: {len(data['experience'])} experience, "
            f"{len(data['services'])} services, {len(data['skills'])} skills")
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving profile: {str(e)}")
        raise StorageError('Profile could not be saved') from e
