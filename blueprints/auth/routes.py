"""
Auth Routes - Login pages and the JSON session endpoints
"""

from flask import render_template, redirect, url_for, request, flash, jsonify, current_app
from flask_login import current_user
from pydantic import ValidationError

from schemas import LoginSchema, format_errors
from utils.auth import authenticate, sign_in, sign_out
from utils.security import check_rate_limit
from . import auth_bp


def _safe_next(target):
    """Only follow local redirect targets"""
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return url_for('dashboard.index')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login page"""
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.index'))

    next_url = request.values.get('next')
    if request.method == 'POST':
        if not check_rate_limit('sign_in'):
            flash('Too many sign-in attempts. Please wait a minute and try again.', 'error')
            return render_template('login.html', next=next_url), 429

        try:
            form = LoginSchema.model_validate({
                'email': request.form.get('email', '').strip(),
                'password': request.form.get('password', ''),
            })
        except ValidationError as e:
            for err in format_errors(e):
                flash(f"{err['field']}: {err['message']}", 'error')
            return render_template('login.html', next=next_url), 400

        user = authenticate(form.email, form.password)
        if user is None:
            current_app.logger.warning(f"Failed sign-in for {form.email}")
            flash('Invalid email or password', 'error')
            return render_template('login.html', next=next_url), 401

        sign_in(user)
        flash(f'Welcome back, {user.name}!', 'success')
        return redirect(_safe_next(next_url))

    return render_template('login.html', next=next_url)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout current user"""
    sign_out(current_user._get_current_object())
    flash('Logged out successfully', 'success')
    return redirect(url_for('auth.login'))


# ============================================
# JSON session API
# ============================================

@auth_bp.route('/api/auth/sign-in/email', methods=['POST'])
def api_sign_in():
    if not check_rate_limit('sign_in'):
        return jsonify({'error': 'Too many requests'}), 429
    try:
        form = LoginSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify({'error': 'Validation failed', 'details': format_errors(e)}), 400

    user = authenticate(form.email, form.password)
    if user is None:
        current_app.logger.warning(f"Failed sign-in for {form.email}")
        return jsonify({'error': 'Invalid email or password'}), 401
    return jsonify(sign_in(user).to_dict())


@auth_bp.route('/api/auth/sign-out', methods=['POST'])
def api_sign_out():
    sign_out(current_user._get_current_object())
    return jsonify({'success': True})


@auth_bp.route('/api/auth/get-session')
def api_get_session():
    if not current_user.is_authenticated:
        return jsonify(None)
    return jsonify(current_user.to_dict())


@auth_bp.route('/api/auth/sign-up/email', methods=['POST'])
def api_sign_up():
    """Registration is disabled; the admin account is created by seeding"""
    return jsonify({'error': 'Registration is disabled'}), 403
