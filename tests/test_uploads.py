"""Test cases for hero image uploads."""
import io
import re

from werkzeug.datastructures import FileStorage

from utils.uploads import build_upload_filename, save_upload


def test_save_upload_without_file_returns_none(app):
    with app.test_request_context():
        assert save_upload(None) is None
        assert save_upload(FileStorage(stream=io.BytesIO(b''), filename='')) is None


def test_save_upload_writes_file_and_returns_public_path(app, upload_dir):
    upload = FileStorage(stream=io.BytesIO(b'image-bytes'), filename='Avatar.PNG')

    with app.test_request_context():
        path = save_upload(upload)

    assert re.fullmatch(r'/static/uploads/\d+-[0-9a-f]{8}\.png', path)
    stored = upload_dir / path.rsplit('/', 1)[1]
    assert stored.read_bytes() == b'image-bytes'


def test_upload_filenames_do_not_collide():
    names = {build_upload_filename('photo.jpg') for _ in range(50)}

    assert len(names) == 50


def test_upload_filename_drops_unusable_extension():
    assert re.fullmatch(r'\d+-[0-9a-f]{8}', build_upload_filename('noextension'))
    assert re.fullmatch(r'\d+-[0-9a-f]{8}', build_upload_filename('photo.p_g'))


def test_upload_filename_uses_cleaned_client_name():
    assert build_upload_filename('../../etc/avatar.JPEG').endswith('.jpeg')
    assert build_upload_filename('weird.p?g').endswith('.pg')
    assert re.fullmatch(r'\d+-[0-9a-f]{8}', build_upload_filename('صورة'))


def test_save_upload_uses_configured_url_path(app, upload_dir):
    app.config['UPLOAD_URL_PATH'] = '/media/avatars/'
    upload = FileStorage(stream=io.BytesIO(b'image-bytes'), filename='me.webp')

    with app.test_request_context():
        path = save_upload(upload)

    assert re.fullmatch(r'/media/avatars/\d+-[0-9a-f]{8}\.webp', path)
    assert (upload_dir / path.rsplit('/', 1)[1]).exists()
