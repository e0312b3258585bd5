"""
Media Module - Uploads to the external media host (Cloudinary)
Files are sent base64-encoded as a data URI; nothing is stored locally.
"""

import base64
import re
import time
import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from flask import current_app
from werkzeug.utils import secure_filename

DOCUMENT_EXTENSIONS = {'pdf', 'doc', 'docx'}
DOCUMENT_MIMETYPES = {
    'application/pdf',
    'application/msword',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
}


class UploadError(Exception):
    """Raised when the media host is not configured or rejects an upload"""


def file_extension(filename):
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[1].lower()


def is_document(filename, mimetype=None):
    """PDF/DOC/DOCX files are stored as raw resources"""
    return file_extension(filename) in DOCUMENT_EXTENSIONS or mimetype in DOCUMENT_MIMETYPES


def build_public_id(filename, now=None):
    """Sanitized, timestamped public id that keeps the extension in the served URL"""
    safe_name = secure_filename(filename or '') or 'document'
    ext = file_extension(safe_name)
    stem = safe_name[:-(len(ext) + 1)] if ext else safe_name
    stem = re.sub(r'[^A-Za-z0-9_-]+', '_', stem).strip('_') or 'document'
    millis = int((now if now is not None else time.time()) * 1000)
    return f"{stem}_{millis}.{ext}" if ext else f"{stem}_{millis}"


def get_media_credentials():
    return {
        'cloud_name': current_app.config.get('CLOUDINARY_CLOUD_NAME'),
        'api_key': current_app.config.get('CLOUDINARY_API_KEY'),
        'api_secret': current_app.config.get('CLOUDINARY_API_SECRET'),
    }


def configure_media_host():
    """Point the Cloudinary SDK at the configured account; raises UploadError if unset"""
    creds = get_media_credentials()
    if not all(creds.values()):
        raise UploadError('Media host credentials are not configured')
    cloudinary.config(secure=True, **creds)


def upload_file(file_storage):
    """
    Forward an uploaded file to the media host.

    Args:
        file_storage (werkzeug.datastructures.FileStorage): the posted file

    Returns:
        dict: {url, publicId, format, resourceType, fileName, fileType, bytes}

    Raises:
        UploadError: when credentials are missing or the host rejects the file
    """
    configure_media_host()

    filename = file_storage.filename or ''
    mimetype = file_storage.mimetype or 'application/octet-stream'
    content = file_storage.read()
    data_uri = f"data:{mimetype};base64,{base64.b64encode(content).decode('ascii')}"

    options = {
        'folder': current_app.config.get('CLOUDINARY_FOLDER', 'portfolio'),
        'timeout': current_app.config.get('CLOUDINARY_TIMEOUT', 60),
    }
    if is_document(filename, mimetype):
        options['resource_type'] = 'raw'
        options['public_id'] = build_public_id(filename)
    else:
        options['resource_type'] = 'auto'

    try:
        result = cloudinary.uploader.upload(data_uri, **options)
    except cloudinary.exceptions.Error as e:
        raise UploadError(str(e) or e.__class__.__name__)

    current_app.logger.info(f"Uploaded {filename} to media host as {result.get('public_id')}")
    return {
        'url': result.get('secure_url'),
        'publicId': result.get('public_id'),
        'format': result.get('format') or file_extension(filename),
        'resourceType': result.get('resource_type', options['resource_type']),
        'fileName': filename,
        'fileType': mimetype,
        'bytes': result.get('bytes', len(content)),
    }
