"""
Data Management Module - Generic section store over the portfolio content tables
Maps a section name to its model and offers select/insert/update/delete,
plus the aggregate read used by the public site.
"""

from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime

from flask import current_app
from pydantic.alias_generators import to_camel
from sqlalchemy import delete, func, select, update

from extensions import db
from models import Hero, About, Project, Skill, Experience, Contact
from schemas import HeroSchema, AboutSchema, ProjectSchema, SkillSchema, ExperienceSchema, ContactSchema


SectionDef = namedtuple('SectionDef', ['model', 'schema', 'singleton', 'deletable'])

SECTIONS = {
    'hero': SectionDef(Hero, HeroSchema, singleton=True, deletable=False),
    'about': SectionDef(About, AboutSchema, singleton=True, deletable=False),
    'projects': SectionDef(Project, ProjectSchema, singleton=False, deletable=True),
    'skills': SectionDef(Skill, SkillSchema, singleton=False, deletable=True),
    'experience': SectionDef(Experience, ExperienceSchema, singleton=False, deletable=True),
    'contact': SectionDef(Contact, ContactSchema, singleton=True, deletable=False),
}

SINGLETON_SECTIONS = tuple(name for name, sec in SECTIONS.items() if sec.singleton)
COLLECTION_SECTIONS = tuple(name for name, sec in SECTIONS.items() if not sec.singleton)
DELETABLE_SECTIONS = tuple(name for name, sec in SECTIONS.items() if sec.deletable)


class UnknownSectionError(LookupError):
    """Raised for a section name outside SECTIONS"""


class SectionNotDeletableError(ValueError):
    """Raised when deleting from hero, about or contact"""


def get_section(section):
    try:
        return SECTIONS[section]
    except KeyError:
        raise UnknownSectionError(section)


def record_to_dict(record):
    """Convert a content row to its JSON form (camelCase keys, ISO timestamps)"""
    result = {}
    for column in record.__table__.columns:
        value = getattr(record, column.key)
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        result[to_camel(column.key)] = value
    return result


class SectionStore:
    """
    Uniform CRUD over the six content tables.

    The store trusts its input: callers validate bodies with the section
    schema first. No transaction spans calls.

    Args:
        session: SQLAlchemy session the store issues statements on
    """

    def __init__(self, session):
        self.session = session

    def _query(self, section):
        sec = get_section(section)
        model = sec.model
        stmt = select(model)
        if sec.singleton:
            return stmt.order_by(model.id).limit(1)
        # Ties on `order` fall back to insertion order
        return stmt.order_by(model.order.asc(), model.id.asc())

    def select(self, section):
        """All rows for a collection section; at most one row for a singleton"""
        return list(self.session.scalars(self._query(section)))

    def first(self, section):
        return self.session.scalars(self._query(section)).first()

    def count(self, section):
        model = get_section(section).model
        return self.session.scalar(select(func.count()).select_from(model))

    def insert(self, section, fields):
        model = get_section(section).model
        record = model(**fields)
        self.session.add(record)
        self.session.commit()
        return [record]

    def update(self, section, record_id, fields):
        """
        Update the row with the given id and return it as a one-element list.
        A missing id affects nothing and returns an empty list.
        """
        model = get_section(section).model
        if not fields:
            return list(self.session.scalars(select(model).where(model.id == record_id)))
        result = self.session.execute(
            update(model).where(model.id == record_id).values(**fields)
        )
        self.session.commit()
        if not result.rowcount:
            return []
        return [self.session.get(model, record_id)]

    def delete(self, section, record_id):
        sec = get_section(section)
        if not sec.deletable:
            raise SectionNotDeletableError(section)
        model = sec.model
        self.session.execute(delete(model).where(model.id == record_id))
        self.session.commit()

    def upsert_singleton(self, section, fields):
        """Update the singleton row in place if one exists, else insert it"""
        existing = self.first(section)
        if existing is None:
            return self.insert(section, fields)
        return self.update(section, existing.id, fields)


def get_store():
    """Section store bound to the current request's database session"""
    return SectionStore(db.session)


def _read_section(app, section):
    # Each worker pushes its own app context so it gets its own session and connection
    with app.app_context():
        return [record_to_dict(r) for r in SectionStore(db.session).select(section)]


def load_portfolio(app=None):
    """
    Read all six sections concurrently and assemble the public snapshot.

    Singleton sections come back as their first row or None, collections as
    ordered lists. Any failing read propagates and fails the whole snapshot.

    Returns:
        dict: {hero, about, projects, skills, experience, contact}
    """
    app = app or current_app._get_current_object()
    workers = app.config.get('PORTFOLIO_READ_WORKERS', len(SECTIONS))

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {name: pool.submit(_read_section, app, name) for name in SECTIONS}
        rows = {name: future.result() for name, future in futures.items()}

    portfolio = {}
    for name, sec in SECTIONS.items():
        if sec.singleton:
            portfolio[name] = rows[name][0] if rows[name] else None
        else:
            portfolio[name] = rows[name]
    return portfolio
