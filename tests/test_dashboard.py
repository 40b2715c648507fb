"""Test cases for the public page and the dashboard routes."""
import io

from blueprints.dashboard import routes as dashboard_routes
from utils.data import StorageError, fetch_or_seed_profile, save_profile


def _stored_profile(app):
    with app.app_context():
        return fetch_or_seed_profile()


def test_public_page_renders_profile(app, client):
    with app.app_context():
        save_profile({
            'hero': {'name': 'Layla Haddad', 'title': 'Backend Engineer'},
            'skills': ['Python', 'PostgreSQL'],
            'contact': {'email': 'layla@example.com'}
        })

    response = client.get('/')

    assert response.status_code == 200
    assert 'Layla Haddad'.encode() in response.data
    assert b'PostgreSQL' in response.data
    assert b'mailto:layla@example.com' in response.data


def test_public_page_seeds_empty_store(app, client):
    response = client.get('/')

    assert response.status_code == 200
    assert _stored_profile(app)['experience'] == []


def test_update_flow_from_empty_store(app, logged_in_client):
    response = logged_in_client.get('/dashboard')
    assert response.status_code == 200

    response = logged_in_client.post('/dashboard/update', data={
        'heroTitle': 'Jane',
        'contactEmail': 'a@b.com',
    })
    assert response.status_code == 200
    assert b'Profile updated successfully!' in response.data

    response = logged_in_client.get('/dashboard')
    assert response.status_code == 200
    assert b'value="Jane"' in response.data
    assert b'value="a@b.com"' in response.data

    profile = _stored_profile(app)
    assert profile['hero']['title'] == 'Jane'
    assert profile['contact']['email'] == 'a@b.com'
    assert profile['experience'] == []


def test_omitted_experience_is_left_unchanged(app, logged_in_client):
    experience = [{'title': 'CTO', 'date': '2021', 'location': 'Amman', 'description': ['Hired the team']}]
    with app.app_context():
        save_profile({'experience': experience, 'skills': ['Go']})

    logged_in_client.post('/dashboard/update', data={'heroTitle': 'Updated'})

    profile = _stored_profile(app)
    assert profile['experience'] == experience
    assert profile['skills'] == ['Go']
    assert profile['hero']['title'] == 'Updated'


def test_submitted_experience_replaces_stored_list(app, logged_in_client):
    with app.app_context():
        save_profile({'experience': [{'title': 'Old job'}]})

    logged_in_client.post('/dashboard/update', data={
        'experience[0][title]': 'New job',
        'experience[0][location]': 'Remote',
        'experience[0][description][]': ['Wrote code', 'Reviewed code'],
        'services[0][title]': 'Audits',
        'services[0][icon]': 'fa-shield',
        'skills[]': ['Python', 'Docker'],
    })

    profile = _stored_profile(app)
    assert profile['experience'] == [{
        'title': 'New job', 'date': '', 'location': 'Remote',
        'description': ['Wrote code', 'Reviewed code']
    }]
    assert profile['services'] == [{'title': 'Audits', 'icon': 'fa-shield', 'description': ''}]
    assert profile['skills'] == ['Python', 'Docker']


def test_update_without_upload_keeps_image(app, logged_in_client):
    with app.app_context():
        save_profile({'hero': {'image': '/static/uploads/existing.png'}})

    logged_in_client.post('/dashboard/update', data={'heroName': 'Sam'})

    hero = _stored_profile(app)['hero']
    assert hero['image'] == '/static/uploads/existing.png'
    assert hero['name'] == 'Sam'


def test_update_with_upload_replaces_image(app, logged_in_client, upload_dir):
    with app.app_context():
        save_profile({'hero': {'image': '/static/uploads/existing.png'}})

    response = logged_in_client.post('/dashboard/update', data={
        'heroName': 'Sam',
        'profileImage': (io.BytesIO(b'new-image'), 'portrait.jpg'),
    }, content_type='multipart/form-data')

    assert response.status_code == 200
    image = _stored_profile(app)['hero']['image']
    assert image.startswith('/static/uploads/')
    assert image.endswith('.jpg')
    assert (upload_dir / image.rsplit('/', 1)[1]).read_bytes() == b'new-image'


def test_storage_failure_returns_server_error(app, logged_in_client, monkeypatch):
    def unavailable(data):
        raise StorageError('Profile could not be saved')

    monkeypatch.setattr(dashboard_routes, 'save_profile', unavailable)

    response = logged_in_client.post('/dashboard/update', data={'heroTitle': 'Jane'})

    assert response.status_code == 500
    assert b'Something went wrong' in response.data


def test_unknown_page_returns_404(client):
    response = client.get('/missing-page')

    assert response.status_code == 404


def test_health_check(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_json_responses_keep_non_ascii_text(app):
    with app.test_request_context():
        response = app.json.response({'message': 'تم تحديث البيانات'})

    assert 'تم تحديث البيانات'.encode('utf-8') in response.data
