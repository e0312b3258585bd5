"""
Tests for sign-in, sign-out and the session gate.
"""
from datetime import datetime, timedelta

from extensions import db
from models import Session as AuthSession, User
from utils.auth import load_user
from utils.security import RATE_LIMIT_REQUESTS, check_rate_limit, prune_rate_limits


def test_login_page_renders(client):
    response = client.get('/login')
    assert response.status_code == 200
    assert b'name="password"' in response.data


def test_admin_pages_redirect_to_login(client):
    response = client.get('/admin/')
    assert response.status_code == 302
    assert '/login' in response.headers['Location']
    assert 'next=' in response.headers['Location']


def test_form_login_with_bad_password(client, admin_user):
    response = client.post('/login', data={'email': admin_user['email'], 'password': 'wrong'})
    assert response.status_code == 401
    assert b'Invalid email or password' in response.data


def test_form_login_with_invalid_email(client, admin_user):
    response = client.post('/login', data={'email': 'not-an-email', 'password': 'x'})
    assert response.status_code == 400


def test_form_login_redirects_to_next(client, admin_user):
    response = client.post('/login', data={**admin_user, 'next': '/admin/skills'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/admin/skills')

    assert client.get('/admin/skills').status_code == 200


def test_form_login_ignores_external_next(client, admin_user):
    response = client.post('/login', data={**admin_user, 'next': '//evil.example.com/'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/admin/')


def test_api_sign_in_returns_session(client, admin_user):
    response = client.post('/api/auth/sign-in/email', json=admin_user)
    assert response.status_code == 200
    data = response.get_json()
    assert data['user']['email'] == admin_user['email']
    assert data['session']['userId'] == data['user']['id']
    assert 'expiresAt' in data['session']


def test_api_sign_in_rejects_bad_credentials(client, admin_user):
    response = client.post('/api/auth/sign-in/email', json={'email': 'nobody@example.com', 'password': 'x'})
    assert response.status_code == 401
    assert response.get_json() == {'error': 'Invalid email or password'}


def test_api_sign_in_validation(client):
    response = client.post('/api/auth/sign-in/email', json={'email': 'admin@example.com'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Validation failed'


def test_get_session(client, admin_user):
    assert client.get('/api/auth/get-session').get_json() is None

    client.post('/api/auth/sign-in/email', json=admin_user)
    data = client.get('/api/auth/get-session').get_json()
    assert data['user']['name'] == 'Site Admin'


def test_sign_out_deletes_session_row(app, auth_client):
    with app.app_context():
        token = db.session.query(AuthSession).one().token

    response = auth_client.post('/api/auth/sign-out')
    assert response.status_code == 200
    assert response.get_json() == {'success': True}

    with app.app_context():
        assert db.session.query(AuthSession).count() == 0
        assert load_user(token) is None

    assert auth_client.get('/api/admin/skills').status_code == 401


def test_logout_requires_post(app, auth_client):
    assert auth_client.get('/logout').status_code == 405
    with app.app_context():
        assert db.session.query(AuthSession).count() == 1

    response = auth_client.post('/logout')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')
    with app.app_context():
        assert db.session.query(AuthSession).count() == 0


def test_expired_session_is_rejected_and_removed(app, auth_client):
    with app.app_context():
        auth_session = db.session.query(AuthSession).one()
        auth_session.expires_at = datetime.utcnow() - timedelta(minutes=1)
        db.session.commit()
        token = auth_session.token

        assert load_user(token) is None
        assert db.session.query(AuthSession).count() == 0

    assert auth_client.get('/api/admin/skills').status_code == 401
    assert auth_client.get('/api/auth/get-session').get_json() is None


def test_sign_in_prunes_expired_sessions(app, client, admin_user):
    with app.app_context():
        user = db.session.query(User).filter_by(email=admin_user['email']).one()
        db.session.add(AuthSession(
            token='stale-token',
            expires_at=datetime.utcnow() - timedelta(days=1),
            user_id=user.id,
        ))
        db.session.commit()

    assert client.post('/api/auth/sign-in/email', json=admin_user).status_code == 200

    with app.app_context():
        tokens = [s.token for s in db.session.query(AuthSession)]
        assert len(tokens) == 1
        assert 'stale-token' not in tokens


def test_sign_in_is_rate_limited(app, client, admin_user):
    app.config['LOGIN_RATE_LIMIT'] = 2
    bad = {'email': admin_user['email'], 'password': 'wrong'}
    assert client.post('/api/auth/sign-in/email', json=bad).status_code == 401
    assert client.post('/api/auth/sign-in/email', json=bad).status_code == 401

    response = client.post('/api/auth/sign-in/email', json=admin_user)
    assert response.status_code == 429


def test_sign_up_is_disabled(client):
    response = client.post('/api/auth/sign-up/email', json={'email': 'new@example.com', 'password': 'secret'})
    assert response.status_code == 403


def test_rate_limit_forgets_idle_clients(app):
    RATE_LIMIT_REQUESTS['10.0.0.9'] = [(0, 'sign_in')]

    with app.test_request_context(environ_base={'REMOTE_ADDR': '10.0.0.1'}):
        assert check_rate_limit('sign_in') is True

    assert '10.0.0.9' not in RATE_LIMIT_REQUESTS
    assert len(RATE_LIMIT_REQUESTS['10.0.0.1']) == 1


def test_prune_rate_limits():
    RATE_LIMIT_REQUESTS['10.0.0.2'] = [(100, 'sign_in'), (170, 'sign_in')]
    RATE_LIMIT_REQUESTS['10.0.0.3'] = [(100, 'sign_in')]

    prune_rate_limits(current_time=180, window=60)
    assert RATE_LIMIT_REQUESTS == {'10.0.0.2': [(170, 'sign_in')]}
