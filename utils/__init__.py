"""
Utils Package - Centralized utility modules initialization
"""

from .data import (
    SECTIONS,
    SINGLETON_SECTIONS,
    COLLECTION_SECTIONS,
    DELETABLE_SECTIONS,
    SectionStore,
    UnknownSectionError,
    SectionNotDeletableError,
    get_store,
    load_portfolio,
    record_to_dict
)
from .decorators import section_required, id_required, init_secret_required
from .security import (
    get_client_ip,
    check_rate_limit,
    hash_password,
    verify_password,
    secrets_match,
    get_admin_credentials
)
from .auth import AuthUser, authenticate, sign_in, sign_out, ensure_admin_user
from .media import UploadError, upload_file
from .seed import DEFAULT_CONTENT, seed_portfolio, seed_admin_user
from .helpers import (
    split_tech_stack,
    format_date_range,
    group_skills_by_category,
    all_technologies,
    filter_projects
)

__all__ = [
    # Data
    'SECTIONS',
    'SINGLETON_SECTIONS',
    'COLLECTION_SECTIONS',
    'DELETABLE_SECTIONS',
    'SectionStore',
    'UnknownSectionError',
    'SectionNotDeletableError',
    'get_store',
    'load_portfolio',
    'record_to_dict',

    # Decorators
    'section_required',
    'id_required',
    'init_secret_required',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'hash_password',
    'verify_password',
    'secrets_match',
    'get_admin_credentials',

    # Auth
    'AuthUser',
    'authenticate',
    'sign_in',
    'sign_out',
    'ensure_admin_user',

    # Media
    'UploadError',
    'upload_file',

    # Seed
    'DEFAULT_CONTENT',
    'seed_portfolio',
    'seed_admin_user',

    # Helpers
    'split_tech_stack',
    'format_date_range',
    'group_skills_by_category',
    'all_technologies',
    'filter_projects'
]
