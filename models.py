from extensions import db
from datetime import datetime
import uuid


def _uuid():
    return str(uuid.uuid4())


# ============================================
# Authentication tables
# ============================================

class User(db.Model):
    __tablename__ = 'user'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    email_verified = db.Column(db.Boolean, nullable=False, default=False)
    image = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    sessions = db.relationship('Session', backref='user', lazy=True, cascade='all, delete-orphan')
    accounts = db.relationship('Account', backref='user', lazy=True, cascade='all, delete-orphan')


class Session(db.Model):
    __tablename__ = 'session'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    expires_at = db.Column(db.DateTime, nullable=False)
    token = db.Column(db.String(255), unique=True, nullable=False)
    ip_address = db.Column(db.String(45))
    user_agent = db.Column(db.Text)
    user_id = db.Column(db.String(36), db.ForeignKey('user.id'), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class Account(db.Model):
    __tablename__ = 'account'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    account_id = db.Column(db.Text, nullable=False)
    provider_id = db.Column(db.String(50), nullable=False)  # 'credential' for email+password
    user_id = db.Column(db.String(36), db.ForeignKey('user.id'), nullable=False)
    access_token = db.Column(db.Text)
    refresh_token = db.Column(db.Text)
    id_token = db.Column(db.Text)
    access_token_expires_at = db.Column(db.DateTime)
    refresh_token_expires_at = db.Column(db.DateTime)
    scope = db.Column(db.Text)
    password = db.Column(db.Text)  # password hash
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class Verification(db.Model):
    __tablename__ = 'verification'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    identifier = db.Column(db.Text, nullable=False)
    value = db.Column(db.Text, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# ============================================
# Portfolio content tables
# ============================================

class Hero(db.Model):
    __tablename__ = 'hero'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.Text, nullable=False)
    subtitle = db.Column(db.Text)
    description = db.Column(db.Text)
    image = db.Column(db.Text)  # profile photo URL
    cta_text = db.Column(db.Text)
    cta_url = db.Column(db.Text)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class About(db.Model):
    __tablename__ = 'about'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.Text, nullable=False, default='')
    description = db.Column(db.Text, nullable=False)
    image = db.Column(db.Text)
    resume_url = db.Column(db.Text)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    image = db.Column(db.Text)
    live_url = db.Column(db.Text)
    github_url = db.Column(db.Text)
    tech_stack = db.Column(db.Text)  # comma separated, split at render time
    featured = db.Column(db.Boolean, default=False)
    order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Skill(db.Model):
    __tablename__ = 'skills'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False)  # free text: Frontend, Backend, Tools...
    proficiency = db.Column(db.Integer, default=80)  # 0-100
    icon = db.Column(db.Text)
    order = db.Column(db.Integer, default=0)


class Experience(db.Model):
    __tablename__ = 'experience'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    company = db.Column(db.Text, nullable=False)
    role = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text)
    start_date = db.Column(db.Text, nullable=False)  # YYYY-MM
    end_date = db.Column(db.Text)  # empty or null = present
    location = db.Column(db.Text)
    order = db.Column(db.Integer, default=0)


class Contact(db.Model):
    __tablename__ = 'contact'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    email = db.Column(db.Text)
    phone = db.Column(db.Text)
    location = db.Column(db.Text)
    github = db.Column(db.Text)
    linkedin = db.Column(db.Text)
    twitter = db.Column(db.Text)
    website = db.Column(db.Text)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
