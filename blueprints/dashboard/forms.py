"""
Dashboard Forms - Field layout of each section form and form parsing
"""

from collections import namedtuple

from utils.media import upload_file

FormField = namedtuple('FormField', ['name', 'label', 'kind', 'required', 'upload'])


def field(name, label, kind='text', required=False, upload=False):
    return FormField(name, label, kind, required, upload)


SECTION_FORMS = {
    'hero': {
        'title': 'Hero Section',
        'fields': [
            field('title', 'Title', required=True),
            field('subtitle', 'Subtitle'),
            field('description', 'Description', 'textarea'),
            field('image', 'Profile photo URL', 'url', upload=True),
            field('cta_text', 'Button text'),
            field('cta_url', 'Button link'),
        ],
    },
    'about': {
        'title': 'About',
        'fields': [
            field('title', 'Title'),
            field('description', 'Description', 'textarea', required=True),
            field('image', 'Image URL', 'url', upload=True),
            field('resume_url', 'Resume URL', 'url', upload=True),
        ],
    },
    'projects': {
        'title': 'Projects',
        'fields': [
            field('title', 'Title', required=True),
            field('description', 'Description', 'textarea'),
            field('image', 'Image URL', 'url', upload=True),
            field('live_url', 'Live URL', 'url'),
            field('github_url', 'Repository URL', 'url'),
            field('tech_stack', 'Tech stack (comma separated)'),
            field('featured', 'Featured', 'checkbox'),
            field('order', 'Order', 'number'),
        ],
    },
    'skills': {
        'title': 'Skills',
        'fields': [
            field('name', 'Name', required=True),
            field('category', 'Category', required=True),
            field('proficiency', 'Proficiency (0-100)', 'number', required=True),
            field('icon', 'Icon'),
            field('order', 'Order', 'number'),
        ],
    },
    'experience': {
        'title': 'Experience',
        'fields': [
            field('company', 'Company', required=True),
            field('role', 'Role', required=True),
            field('description', 'Description', 'textarea'),
            field('start_date', 'Start date', 'month', required=True),
            field('end_date', 'End date (empty for present)', 'month'),
            field('location', 'Location'),
            field('order', 'Order', 'number'),
        ],
    },
    'contact': {
        'title': 'Contact',
        'fields': [
            field('email', 'Email', 'email'),
            field('phone', 'Phone'),
            field('location', 'Location'),
            field('github', 'GitHub', 'url'),
            field('linkedin', 'LinkedIn', 'url'),
            field('twitter', 'Twitter / X', 'url'),
            field('website', 'Website', 'url'),
        ],
    },
}


def parse_section_form(section, form, files):
    """
    Turn a submitted section form into a dict for the section schema.

    Empty number inputs are left out so column defaults apply. A file posted
    as <field>_file is uploaded to the media host and its URL stored in <field>.
    """
    data = {}
    for f in SECTION_FORMS[section]['fields']:
        if f.kind == 'checkbox':
            data[f.name] = form.get(f.name) in ('on', 'true', '1')
            continue

        value = form.get(f.name, '').strip()
        if f.upload:
            upload = files.get(f"{f.name}_file")
            if upload is not None and upload.filename:
                value = upload_file(upload)['url']

        if f.kind == 'number' and value == '':
            continue
        data[f.name] = value
    return data


def record_values(section, record):
    """Current column values for pre-filling a form"""
    if record is None:
        return {}
    return {f.name: getattr(record, f.name) for f in SECTION_FORMS[section]['fields']}
