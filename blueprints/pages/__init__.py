"""
Pages Blueprint - Public portfolio pages
Handles: Home page and the projects listing
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
