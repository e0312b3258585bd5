"""
Dashboard Blueprint - Admin content management
Handles: Overview and one form page per portfolio section
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/admin')

from . import routes
