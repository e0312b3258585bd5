"""
Pages Routes - Public portfolio pages
"""

from flask import render_template, request, current_app
from utils.data import load_portfolio
from utils.helpers import group_skills_by_category, all_technologies, filter_projects
from . import pages_bp


def _load_or_error():
    try:
        return load_portfolio(), None
    except Exception as e:
        current_app.logger.error(f"Error loading portfolio: {str(e)}")
        return None, (render_template('error.html', code=500,
                                      message='Failed to load portfolio data.'), 500)


@pages_bp.route('/')
def index():
    """Home page - hero, about, projects, skills, experience, contact"""
    data, error = _load_or_error()
    if error:
        return error

    has_content = bool(data['hero'] or data['about'] or data['projects'])
    return render_template('index.html',
                           data=data,
                           has_content=has_content,
                           skill_groups=group_skills_by_category(data['skills']))


@pages_bp.route('/projects')
def projects():
    """All projects with text search and technology filter"""
    data, error = _load_or_error()
    if error:
        return error

    query = request.args.get('q', '')
    tech = request.args.get('tech', '')
    all_projects = data['projects']
    technologies = all_technologies(all_projects)

    return render_template('projects.html',
                           data=data,
                           projects=filter_projects(all_projects, query, tech),
                           query=query,
                           selected_tech=tech,
                           technologies=technologies,
                           stats={
                               'total': len(all_projects),
                               'featured': sum(1 for p in all_projects if p.get('featured')),
                               'technologies': len(technologies),
                           })
