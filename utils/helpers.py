"""
Helpers Module - Presentation helpers shared by the public pages and templates
"""

from collections import OrderedDict


def split_tech_stack(tech_stack):
    """'Flask, React,  ' -> ['Flask', 'React']"""
    if not tech_stack:
        return []
    return [tech.strip() for tech in tech_stack.split(',') if tech.strip()]


def format_date_range(start_date, end_date):
    """Experience period; an empty end date means the role is ongoing"""
    return f"{start_date} - {end_date or 'Present'}"


def group_skills_by_category(skills):
    """Group serialized skills by category, keeping their incoming order"""
    groups = OrderedDict()
    for skill in skills:
        groups.setdefault(skill.get('category') or 'Other', []).append(skill)
    return groups


def all_technologies(projects):
    """Distinct technologies across projects, sorted case-insensitively"""
    seen = {}
    for project in projects:
        for tech in split_tech_stack(project.get('techStack')):
            seen.setdefault(tech.lower(), tech)
    return sorted(seen.values(), key=str.lower)


def filter_projects(projects, query='', tech=''):
    """Filter by free-text search over title/description and by technology"""
    query = (query or '').strip().lower()
    tech = (tech or '').strip().lower()
    results = []
    for project in projects:
        if query:
            haystack = f"{project.get('title') or ''} {project.get('description') or ''}".lower()
            if query not in haystack:
                continue
        if tech and tech not in (project.get('techStack') or '').lower():
            continue
        results.append(project)
    return results
