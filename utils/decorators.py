"""
Decorators Module - Request guards for the API blueprints
"""

from functools import wraps
from flask import current_app, jsonify, request
from .data import SECTIONS
from .security import secrets_match


def section_required(f):
    """Reject unknown section names with 400 before the handler runs"""
    @wraps(f)
    def decorated_function(section, *args, **kwargs):
        if section not in SECTIONS:
            return jsonify({'error': 'Invalid section'}), 400
        return f(section, *args, **kwargs)
    return decorated_function


def id_required(f):
    """Require an integer ?id= query parameter and pass it as record_id"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        record_id = request.args.get('id', type=int)
        if record_id is None:
            return jsonify({'error': 'ID required'}), 400
        return f(*args, record_id=record_id, **kwargs)
    return decorated_function


def init_secret_required(f):
    """Require ?secret= to match the configured initialization secret"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not secrets_match(request.args.get('secret'), current_app.config.get('INIT_SECRET')):
            current_app.logger.warning("Rejected initialization request with a bad secret")
            return jsonify({'error': 'Unauthorized'}), 401
        return f(*args, **kwargs)
    return decorated_function
