"""
Auth Module - Email/password sign-in backed by the user, account and session tables

Flask-Login keeps the session token in the signed cookie; the session row is
the source of truth, so deleting it (sign-out) or letting it expire ends the
signed-in state.
"""

from datetime import datetime
from flask import current_app, jsonify, redirect, request, url_for
from flask_login import UserMixin, login_user, logout_user
from sqlalchemy import delete, select

from extensions import db, login_manager
from models import User, Account, Session as AuthSession
from .security import generate_session_token, get_client_ip, hash_password, verify_password

CREDENTIAL_PROVIDER = 'credential'


class AuthUser(UserMixin):
    """Signed-in user as seen by Flask-Login; the id is the session token"""

    def __init__(self, user, auth_session):
        self.user = user
        self.auth_session = auth_session

    def get_id(self):
        return self.auth_session.token

    @property
    def user_id(self):
        return self.user.id

    @property
    def name(self):
        return self.user.name

    @property
    def email(self):
        return self.user.email

    def to_dict(self):
        return {
            'session': {
                'id': self.auth_session.id,
                'userId': self.user.id,
                'expiresAt': self.auth_session.expires_at.isoformat(),
            },
            'user': {
                'id': self.user.id,
                'name': self.user.name,
                'email': self.user.email,
            },
        }


@login_manager.user_loader
def load_user(token):
    auth_session = db.session.scalars(
        select(AuthSession).where(AuthSession.token == token)
    ).first()
    if auth_session is None:
        return None
    if auth_session.expires_at <= datetime.utcnow():
        current_app.logger.info(f"Session for user {auth_session.user_id} expired")
        db.session.delete(auth_session)
        db.session.commit()
        return None
    return AuthUser(auth_session.user, auth_session)


@login_manager.unauthorized_handler
def unauthorized():
    """JSON 401 for API calls, redirect to the login page for admin pages"""
    if request.path.startswith('/api/'):
        return jsonify({'error': 'Unauthorized'}), 401
    return redirect(url_for('auth.login', next=request.path))


def create_credential_user(email, password, name):
    """Create a user with an email+password credential account"""
    user = User(name=name, email=email, email_verified=False)
    db.session.add(user)
    db.session.flush()
    db.session.add(Account(
        account_id=user.id,
        provider_id=CREDENTIAL_PROVIDER,
        user_id=user.id,
        password=hash_password(password),
    ))
    db.session.commit()
    return user


def ensure_admin_user(email, password, name):
    """
    Create the administrator account once.

    Returns:
        bool: True when a user was created, False when it already existed
    """
    existing = db.session.scalars(select(User).where(User.email == email)).first()
    if existing:
        current_app.logger.info(f"Admin user {email} already exists, skipping")
        return False
    create_credential_user(email, password, name)
    current_app.logger.info(f"Admin user {email} created")
    return True


def authenticate(email, password):
    """Return the user whose credential account matches, else None"""
    user = db.session.scalars(select(User).where(User.email == email)).first()
    if user is None:
        return None
    account = db.session.scalars(
        select(Account).where(
            Account.user_id == user.id,
            Account.provider_id == CREDENTIAL_PROVIDER,
        )
    ).first()
    if account is None or not verify_password(password, account.password):
        return None
    return user


def sign_in(user, remember=False):
    """Open a session row for the user and sign it in with Flask-Login"""
    lifetime = current_app.config['PERMANENT_SESSION_LIFETIME']
    prune_expired_sessions(user.id)
    auth_session = AuthSession(
        token=generate_session_token(),
        expires_at=datetime.utcnow() + lifetime,
        ip_address=get_client_ip(),
        user_agent=request.headers.get('User-Agent', '')[:255],
        user_id=user.id,
    )
    db.session.add(auth_session)
    db.session.commit()
    auth_user = AuthUser(user, auth_session)
    login_user(auth_user, remember=remember)
    current_app.logger.info(f"User {user.email} signed in")
    return auth_user


def prune_expired_sessions(user_id):
    """Delete the user's session rows whose expiry has passed"""
    db.session.execute(
        delete(AuthSession).where(
            AuthSession.user_id == user_id,
            AuthSession.expires_at <= datetime.utcnow(),
        )
    )


def sign_out(auth_user):
    """Delete the session row so the token can no longer sign in, then log out"""
    if auth_user is not None and auth_user.is_authenticated:
        db.session.delete(auth_user.auth_session)
        db.session.commit()
        current_app.logger.info(f"User {auth_user.email} signed out")
    logout_user()
