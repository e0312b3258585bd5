"""
API Routes - Section CRUD, portfolio aggregate, uploads and initialization
"""

from flask import request, jsonify, current_app
from flask_login import login_required
from pydantic import ValidationError

from extensions import db
from schemas import format_errors
from utils.data import SECTIONS, SectionNotDeletableError, get_store, load_portfolio, record_to_dict
from utils.decorators import section_required, id_required, init_secret_required
from utils.media import UploadError, upload_file
from utils.seed import seed_portfolio, seed_admin_user
from . import api_bp


def _validated_fields(section):
    """Parse and validate the JSON body; returns (fields, error_response)"""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return None, (jsonify({'error': 'Invalid JSON body'}), 400)
    try:
        data = SECTIONS[section].schema.model_validate(body)
    except ValidationError as e:
        return None, (jsonify({'error': 'Validation failed', 'details': format_errors(e)}), 400)
    return data.to_fields(), None


def _server_error(message, e):
    current_app.logger.error(f"{message}: {str(e)}")
    db.session.rollback()
    return jsonify({'error': 'Internal server error'}), 500


# ============================================
# Section CRUD
# ============================================

@api_bp.route('/admin/<section>', methods=['GET'])
@login_required
@section_required
def get_section(section):
    """Rows of one section: at most one for hero/about/contact, ordered list otherwise"""
    try:
        records = get_store().select(section)
        return jsonify([record_to_dict(r) for r in records])
    except Exception as e:
        return _server_error(f"Error reading section {section}", e)


@api_bp.route('/admin/<section>', methods=['POST'])
@login_required
@section_required
def create_section_item(section):
    fields, error = _validated_fields(section)
    if error:
        return error
    try:
        records = get_store().insert(section, fields)
        current_app.logger.info(f"Created {section} item {records[0].id}")
        return jsonify([record_to_dict(r) for r in records]), 201
    except Exception as e:
        return _server_error(f"Error creating {section} item", e)


@api_bp.route('/admin/<section>', methods=['PUT'])
@login_required
@section_required
@id_required
def update_section_item(section, record_id):
    fields, error = _validated_fields(section)
    if error:
        return error
    try:
        records = get_store().update(section, record_id, fields)
        if not records:
            current_app.logger.info(f"Update of {section} item {record_id} matched no rows")
        return jsonify([record_to_dict(r) for r in records])
    except Exception as e:
        return _server_error(f"Error updating {section} item {record_id}", e)


@api_bp.route('/admin/<section>', methods=['DELETE'])
@login_required
@section_required
@id_required
def delete_section_item(section, record_id):
    """Only projects, skills and experience can be deleted; a missing id still succeeds"""
    try:
        get_store().delete(section, record_id)
        current_app.logger.info(f"Deleted {section} item {record_id}")
        return jsonify({'success': True})
    except SectionNotDeletableError:
        return jsonify({'error': 'Cannot delete this section'}), 400
    except Exception as e:
        return _server_error(f"Error deleting {section} item {record_id}", e)


# ============================================
# Public aggregate
# ============================================

@api_bp.route('/portfolio')
def portfolio():
    try:
        return jsonify(load_portfolio())
    except Exception as e:
        current_app.logger.error(f"Portfolio API error: {str(e)}")
        return jsonify({'error': 'Internal server error'}), 500


# ============================================
# Media upload
# ============================================

@api_bp.route('/upload', methods=['POST'])
@login_required
def upload():
    file = request.files.get('file')
    if file is None or not file.filename:
        return jsonify({'error': 'No file provided'}), 400
    try:
        return jsonify(upload_file(file))
    except UploadError as e:
        current_app.logger.error(f"Upload error: {str(e)}")
        return jsonify({'error': 'Upload failed', 'details': str(e)}), 500
    except Exception as e:
        current_app.logger.error(f"Upload error: {str(e)}")
        return jsonify({'error': 'Upload failed'}), 500


# ============================================
# One-time initialization
# ============================================

@api_bp.route('/init')
@init_secret_required
def init():
    """Seed every section on an empty database and create the admin user"""
    try:
        admin_created = seed_admin_user()
        inserted = seed_portfolio(get_store())
        if inserted is None:
            return jsonify({
                'message': 'Database already initialized',
                'seeded': True,
                'alreadyInitialized': True,
                'inserted': {},
                'adminCreated': admin_created,
            })

        current_app.logger.info("Database initialized")
        return jsonify({
            'message': 'Database initialized successfully!',
            'seeded': True,
            'alreadyInitialized': False,
            'sections': list(inserted.keys()),
            'inserted': inserted,
            'adminCreated': admin_created,
        })
    except Exception as e:
        current_app.logger.error(f"Init error: {str(e)}")
        db.session.rollback()
        return jsonify({'error': 'Initialization failed', 'details': str(e)}), 500
