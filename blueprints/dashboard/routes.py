"""
Dashboard Routes - Admin forms for the portfolio sections
"""

from flask import render_template, redirect, url_for, request, flash, current_app, abort
from flask_login import login_required, current_user
from pydantic import ValidationError

from extensions import db
from schemas import format_errors
from utils.data import SECTIONS, get_store
from utils.media import UploadError
from .forms import SECTION_FORMS, parse_section_form, record_values
from . import dashboard_bp


def _section_or_404(section):
    if section not in SECTIONS:
        abort(404)
    return SECTIONS[section]


def _render_section(section, values=None, editing_id=None, status=200):
    store = get_store()
    sec = SECTIONS[section]
    records = store.select(section)

    if sec.singleton:
        record = records[0] if records else None
        if values is None:
            values = record_values(section, record)
        editing_id = record.id if record else None
    elif values is None:
        editing = next((r for r in records if r.id == editing_id), None) if editing_id else None
        values = record_values(section, editing)
        if editing is None:
            editing_id = None

    return render_template('admin/section.html',
                           section=section,
                           form=SECTION_FORMS[section],
                           singleton=sec.singleton,
                           deletable=sec.deletable,
                           records=records,
                           values=values,
                           editing_id=editing_id,
                           sections=SECTION_FORMS), status


@dashboard_bp.route('/')
@login_required
def index():
    """Overview with per-section counts"""
    store = get_store()
    counts = {name: store.count(name) for name in SECTIONS}
    current_app.logger.info(f"Dashboard overview for {current_user.email}: {counts}")
    return render_template('admin/index.html', counts=counts, sections=SECTION_FORMS)


@dashboard_bp.route('/<section>', methods=['GET'])
@login_required
def section_page(section):
    _section_or_404(section)
    return _render_section(section, editing_id=request.args.get('edit', type=int))


@dashboard_bp.route('/<section>', methods=['POST'])
@login_required
def save_section(section):
    """Create, or update when an id is posted; singletons update in place if a row exists"""
    sec = _section_or_404(section)
    record_id = request.form.get('id', type=int)

    try:
        data = parse_section_form(section, request.form, request.files)
    except UploadError as e:
        current_app.logger.error(f"Upload error on {section} form: {str(e)}")
        flash('File upload failed. Please try again.', 'error')
        return _render_section(section, values=request.form.to_dict(), editing_id=record_id, status=500)

    try:
        fields = sec.schema.model_validate(data).to_fields()
    except ValidationError as e:
        for err in format_errors(e):
            flash(f"{err['field']}: {err['message']}", 'error')
        return _render_section(section, values=data, editing_id=record_id, status=400)

    store = get_store()
    try:
        if sec.singleton:
            store.upsert_singleton(section, fields)
        elif record_id:
            store.update(section, record_id, fields)
        else:
            store.insert(section, fields)
    except Exception as e:
        current_app.logger.error(f"Error saving {section}: {str(e)}")
        db.session.rollback()
        flash('Failed to save. Please try again.', 'error')
        return _render_section(section, values=data, editing_id=record_id, status=500)

    flash(f"{SECTION_FORMS[section]['title']} saved successfully", 'success')
    return redirect(url_for('dashboard.section_page', section=section))


@dashboard_bp.route('/<section>/delete/<int:record_id>', methods=['POST'])
@login_required
def delete_item(section, record_id):
    sec = _section_or_404(section)
    if not sec.deletable:
        flash('This section cannot be deleted.', 'error')
        return redirect(url_for('dashboard.section_page', section=section))

    try:
        get_store().delete(section, record_id)
        flash('Item deleted', 'success')
    except Exception as e:
        current_app.logger.error(f"Error deleting {section} item {record_id}: {str(e)}")
        db.session.rollback()
        flash('Failed to delete. Please try again.', 'error')
    return redirect(url_for('dashboard.section_page', section=section))
