"""
Uploads Module - Stores the hero image sent with a dashboard update
"""

import os
import re
import time
import uuid
from flask import current_app
from werkzeug.utils import secure_filename
from .data import StorageError


_EXTENSION = re.compile(r'\.[A-Za-z0-9]{1,10}')


def get_upload_folder():
    """Absolute path of the public upload directory"""
    folder = current_app.config.get('UPLOAD_FOLDER', 'static/uploads')
    if not os.path.isabs(folder):
        folder = os.path.join(current_app.root_path, folder)
    return folder


def build_upload_filename(original_name):
    """Timestamp plus a random suffix, keeping the original extension"""
    extension = os.path.splitext(secure_filename(original_name or ''))[1].lower()
    if not _EXTENSION.fullmatch(extension):
        extension = ''
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{extension}"


def save_upload(file):
    """
    Save an uploaded file into the upload folder

    Args:
        file (FileStorage): The uploaded file, or None

    Returns:
        str: Public path of the stored file, or None when nothing was uploaded

    Raises:
        StorageError: If the file cannot be written
    """
    if file is None or not file.filename:
        return None

    filename = build_upload_filename(file.filename)
    folder = get_upload_folder()
    try:
        os.makedirs(folder, exist_ok=True)
        file.save(os.path.join(folder, filename))
    except OSError as e:
        current_app.logger.error(f"Error saving upload {file.filename}: {str(e)}")
        raise StorageError('Upload could not be saved') from e

    current_app.logger.info(f"Stored upload {file.filename} as {filename}")
    return f"{current_app.config.get('UPLOAD_URL_PATH', '/static/uploads').rstrip('/')}/{filename}"
