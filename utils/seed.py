"""
Seed Module - Starter content for a fresh database
"""

from flask import current_app

from .auth import ensure_admin_user
from .security import get_admin_credentials

DEFAULT_CONTENT = {
    'hero': [{
        'title': "Hi, I'm Alex Morgan",
        'subtitle': 'Full Stack Developer',
        'description': 'Building fast, accessible web applications with Python, React and PostgreSQL.',
        'cta_text': 'View Projects',
        'cta_url': '#projects',
    }],
    'about': [{
        'title': 'About Me',
        'description': (
            "I'm a full-stack developer who enjoys turning rough ideas into polished products. "
            "I work across the stack, from database schemas to responsive interfaces.\n\n"
            "What I Do:\n"
            "• Building responsive and performant web applications\n"
            "• Designing clean REST APIs\n"
            "• Optimizing applications for better performance"
        ),
        'image': '',
        'resume_url': '',
    }],
    'projects': [
        {
            'title': 'Issue Tracker',
            'description': 'A lightweight issue tracker with boards, labels and keyboard-driven triage.',
            'live_url': 'https://tracker.example.com/',
            'github_url': 'https://github.com/example/issue-tracker',
            'tech_stack': 'Flask, React, PostgreSQL',
            'featured': True,
            'order': 1,
        },
        {
            'title': 'Restaurant Menu',
            'description': 'QR-code menus for restaurants with live availability and staff management.',
            'live_url': 'https://menu.example.com/',
            'github_url': 'https://github.com/example/menu',
            'tech_stack': 'Next.js, React, MongoDB',
            'featured': True,
            'order': 2,
        },
        {
            'title': 'Interview Room',
            'description': 'Remote interviews with video calls, a shared editor and coding challenges.',
            'live_url': 'https://interview.example.com/',
            'github_url': 'https://github.com/example/interview-room',
            'tech_stack': 'WebRTC, React, Node.js',
            'featured': False,
            'order': 3,
        },
    ],
    'skills': [
        {'name': 'Python', 'category': 'Backend', 'proficiency': 90, 'order': 1},
        {'name': 'Flask', 'category': 'Backend', 'proficiency': 85, 'order': 2},
        {'name': 'React', 'category': 'Frontend', 'proficiency': 85, 'order': 3},
        {'name': 'TypeScript', 'category': 'Frontend', 'proficiency': 80, 'order': 4},
        {'name': 'Tailwind CSS', 'category': 'Frontend', 'proficiency': 80, 'order': 5},
        {'name': 'PostgreSQL', 'category': 'Database', 'proficiency': 80, 'order': 6},
        {'name': 'Docker', 'category': 'Tools', 'proficiency': 75, 'order': 7},
        {'name': 'Git', 'category': 'Tools', 'proficiency': 85, 'order': 8},
    ],
    'experience': [
        {
            'company': 'Freelance',
            'role': 'Web Developer',
            'description': 'Building web applications for small businesses and startups.',
            'start_date': '2024-01',
            'end_date': '',
            'location': 'Remote',
            'order': 1,
        },
        {
            'company': 'State University',
            'role': 'Computer Science Student',
            'description': 'Studied algorithms, databases and software engineering.',
            'start_date': '2020-09',
            'end_date': '2024-06',
            'location': 'On site',
            'order': 2,
        },
    ],
    'contact': [{
        'email': 'hello@example.com',
        'phone': '',
        'location': 'Remote',
        'github': 'https://github.com/example',
        'linkedin': 'https://www.linkedin.com/in/example/',
        'twitter': 'https://x.com/example',
        'website': 'https://www.example.com/',
    }],
}


def is_initialized(store):
    return store.first('hero') is not None


def seed_portfolio(store, content=None):
    """
    Insert the starter content when the hero table is empty.

    Returns:
        dict | None: rows inserted per section, or None if already initialized
    """
    if is_initialized(store):
        current_app.logger.info("Database already initialized, skipping content seed")
        return None

    content = content or DEFAULT_CONTENT
    inserted = {}
    for section, rows in content.items():
        for fields in rows:
            store.insert(section, dict(fields))
        inserted[section] = len(rows)
        current_app.logger.info(f"Seeded {section}: {len(rows)} row(s)")
    return inserted


def seed_admin_user():
    """
    Create the admin from configured credentials, if any are configured.

    Returns:
        bool: True when a new admin user was created
    """
    creds = get_admin_credentials()
    if not creds['email'] or not creds['password']:
        current_app.logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD not set, skipping admin user")
        return False
    return ensure_admin_user(creds['email'], creds['password'], creds['name'])
