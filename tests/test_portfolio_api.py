"""
Tests for the public aggregate read.
"""
from utils.data import SectionStore, load_portfolio
from utils.seed import DEFAULT_CONTENT


def test_empty_database(client):
    """An empty database yields null singletons and empty collections."""
    response = client.get('/api/portfolio')
    assert response.status_code == 200
    assert response.get_json() == {
        'hero': None,
        'about': None,
        'projects': [],
        'skills': [],
        'experience': [],
        'contact': None,
    }


def test_no_authentication_needed(client, seeded):
    response = client.get('/api/portfolio')
    assert response.status_code == 200


def test_seeded_snapshot(client, seeded):
    data = client.get('/api/portfolio').get_json()
    assert data['hero']['title'] == DEFAULT_CONTENT['hero'][0]['title']
    assert data['hero']['ctaText'] == 'View Projects'
    assert data['about']['resumeUrl'] == ''
    assert data['contact']['github'] == DEFAULT_CONTENT['contact'][0]['github']
    assert len(data['projects']) == len(DEFAULT_CONTENT['projects'])
    assert len(data['skills']) == len(DEFAULT_CONTENT['skills'])

    for key in ('projects', 'skills', 'experience'):
        orders = [row['order'] for row in data[key]]
        assert orders == sorted(orders)


def test_singletons_use_first_row(client, store):
    store.insert('about', {'title': 'One', 'description': 'first'})
    store.insert('about', {'title': 'Two', 'description': 'second'})

    data = client.get('/api/portfolio').get_json()
    assert data['about']['title'] == 'One'


def test_one_failing_read_fails_the_request(client, store, monkeypatch):
    store.insert('hero', {'title': 'Hi'})
    original_select = SectionStore.select

    def flaky_select(self, section):
        if section == 'skills':
            raise RuntimeError('skills table unavailable')
        return original_select(self, section)

    monkeypatch.setattr(SectionStore, 'select', flaky_select)
    response = client.get('/api/portfolio')
    assert response.status_code == 500
    assert response.get_json() == {'error': 'Internal server error'}


def test_load_portfolio_outside_request(app, store):
    store.insert('skills', {'name': 'Go', 'category': 'Backend', 'proficiency': 70, 'order': 2})
    store.insert('skills', {'name': 'Python', 'category': 'Backend', 'proficiency': 90, 'order': 1})

    data = load_portfolio(app)
    assert [s['name'] for s in data['skills']] == ['Python', 'Go']
    assert data['hero'] is None
