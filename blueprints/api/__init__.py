"""
API Blueprint - JSON endpoints
Handles: Section CRUD, portfolio aggregate, media upload, one-time initialization
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
