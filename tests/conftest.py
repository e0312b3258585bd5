"""
Pytest fixtures: an application on a temporary SQLite file, clients, and a signed-in admin.
"""
import pytest

from app import create_app
from extensions import db
from utils.auth import create_credential_user
from utils.data import SectionStore
from utils.seed import seed_portfolio
from utils.security import RATE_LIMIT_REQUESTS


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Rate-limit buckets are process-wide; start each test clean."""
    RATE_LIMIT_REQUESTS.clear()
    yield
    RATE_LIMIT_REQUESTS.clear()


@pytest.fixture
def app(tmp_path):
    """Create an app bound to a fresh database file."""
    db_path = tmp_path / "portfolio-test.db"
    app = create_app('testing', {
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{db_path}",
        'SQLALCHEMY_ENGINE_OPTIONS': {'connect_args': {'check_same_thread': False}},
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
def store(app):
    """Section store inside an application context."""
    with app.app_context():
        yield SectionStore(db.session)


@pytest.fixture
def admin_user(app):
    """Create the admin account and return its credentials."""
    with app.app_context():
        create_credential_user(app.config['ADMIN_EMAIL'], app.config['ADMIN_PASSWORD'], app.config['ADMIN_NAME'])
    return {'email': app.config['ADMIN_EMAIL'], 'password': app.config['ADMIN_PASSWORD']}


@pytest.fixture
def auth_client(client, admin_user):
    """Test client signed in as the admin."""
    response = client.post('/api/auth/sign-in/email', json=admin_user)
    assert response.status_code == 200
    return client


@pytest.fixture
def seeded(app):
    """Database filled with the starter content."""
    with app.app_context():
        return seed_portfolio(SectionStore(db.session))
