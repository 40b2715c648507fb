import pytest

from app import create_app
from extensions import db


ADMIN_PASSWORD = 'test-password'


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / 'uploads'


@pytest.fixture
def app(tmp_path, upload_dir):
    app = create_app('testing', overrides={
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'test.db'}",
        'UPLOAD_FOLDER': str(upload_dir),
        'ADMIN_PASSWORD': ADMIN_PASSWORD,
        'BOOTSTRAP_FILE': None,
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(client):
    response = client.post('/login', data={'password': ADMIN_PASSWORD})
    assert response.status_code == 302
    return client
