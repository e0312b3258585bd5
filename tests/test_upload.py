"""
Tests for media uploads: endpoint behavior and the media host client helpers.
"""
import io
import re

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
import pytest

from utils import media


@pytest.fixture
def fake_host(monkeypatch):
    """Capture calls to the media host and answer like Cloudinary does."""
    calls = []

    def fake_upload(file, **options):
        calls.append({'file': file, 'options': options})
        resource_type = 'raw' if options.get('resource_type') == 'raw' else 'image'
        public_id = options.get('public_id') or 'portfolio/abc123'
        return {
            'secure_url': f'https://res.cloudinary.com/demo-cloud/{resource_type}/upload/{public_id}',
            'public_id': public_id,
            'format': None if resource_type == 'raw' else 'png',
            'resource_type': resource_type,
            'bytes': 11,
        }

    monkeypatch.setattr(cloudinary.uploader, 'upload', fake_upload)
    return calls


def _raise(error):
    def failing_upload(file, **options):
        raise error
    return failing_upload


def test_requires_authentication(client):
    response = client.post('/api/upload', data={'file': (io.BytesIO(b'x'), 'a.png')})
    assert response.status_code == 401


def test_missing_file(auth_client):
    response = auth_client.post('/api/upload', data={'note': 'no file here'}, content_type='multipart/form-data')
    assert response.status_code == 400
    assert response.get_json() == {'error': 'No file provided'}


def test_image_upload_uses_auto_resource_type(auth_client, fake_host):
    response = auth_client.post('/api/upload', data={'file': (io.BytesIO(b'hello image'), 'photo.png', 'image/png')},
                                content_type='multipart/form-data')
    assert response.status_code == 200
    data = response.get_json()
    assert data['url'].startswith('https://res.cloudinary.com/')
    assert data['publicId'] == 'portfolio/abc123'
    assert data['format'] == 'png'
    assert data['resourceType'] == 'image'
    assert data['fileName'] == 'photo.png'
    assert data['fileType'] == 'image/png'
    assert data['bytes'] == 11

    call = fake_host[0]
    assert call['file'].startswith('data:image/png;base64,')
    assert call['options']['resource_type'] == 'auto'
    assert call['options']['folder'] == 'portfolio'
    assert 'public_id' not in call['options']
    assert cloudinary.config().cloud_name == 'demo-cloud'
    assert cloudinary.config().api_key == 'test-key'


def test_document_upload_is_raw_with_extension(auth_client, fake_host):
    response = auth_client.post('/api/upload',
                                data={'file': (io.BytesIO(b'%PDF-1.4'), 'My Resume (1).pdf', 'application/pdf')},
                                content_type='multipart/form-data')
    assert response.status_code == 200
    data = response.get_json()
    assert data['resourceType'] == 'raw'
    assert data['format'] == 'pdf'
    assert re.fullmatch(r'My_Resume_1_\d+\.pdf', data['publicId'])
    assert fake_host[0]['options']['resource_type'] == 'raw'
    assert fake_host[0]['options']['public_id'] == data['publicId']


def test_host_rejection_returns_500(auth_client, monkeypatch):
    monkeypatch.setattr(cloudinary.uploader, 'upload', _raise(cloudinary.exceptions.BadRequest('Invalid image file')))
    response = auth_client.post('/api/upload', data={'file': (io.BytesIO(b'x'), 'a.png')},
                                content_type='multipart/form-data')
    assert response.status_code == 500
    assert response.get_json() == {'error': 'Upload failed', 'details': 'Invalid image file'}


def test_network_error_returns_500(auth_client, monkeypatch):
    monkeypatch.setattr(cloudinary.uploader, 'upload', _raise(cloudinary.exceptions.GeneralError('no route to host')))
    response = auth_client.post('/api/upload', data={'file': (io.BytesIO(b'x'), 'a.png')},
                                content_type='multipart/form-data')
    assert response.status_code == 500
    assert response.get_json()['details'] == 'no route to host'


def test_missing_credentials_returns_500(app, auth_client, fake_host):
    app.config['CLOUDINARY_API_SECRET'] = None
    response = auth_client.post('/api/upload', data={'file': (io.BytesIO(b'x'), 'a.png')},
                                content_type='multipart/form-data')
    assert response.status_code == 500
    assert fake_host == []


@pytest.mark.parametrize('filename,mimetype,expected', [
    ('cv.pdf', 'application/pdf', True),
    ('CV.DOCX', None, True),
    ('letter.doc', None, True),
    ('blob', 'application/pdf', True),
    ('photo.png', 'image/png', False),
    ('archive.zip', 'application/zip', False),
])
def test_is_document(filename, mimetype, expected):
    assert media.is_document(filename, mimetype) is expected


def test_build_public_id():
    assert media.build_public_id('My Resume (1).pdf', now=1700000000) == 'My_Resume_1_1700000000000.pdf'
    assert media.build_public_id('../../etc/passwd', now=1) == 'etc_passwd_1000'
    assert media.build_public_id('', now=2).startswith('document_2000')
