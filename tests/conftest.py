"""Pytest fixtures for cloudinarypy tests."""
import pytest
from unittest.mock import Mock

from cloudinarypy import CloudinaryClient, ServiceConfig

API_KEY = '1234567890'
API_SECRET = 'abcd'
CLOUD_NAME = 'demo'
CLOUDINARY_URL = f'cloudinary://{API_KEY}:{API_SECRET}@{CLOUD_NAME}'
TIMESTAMP = '1369431906'


def make_response(status_code=200, body=None, reason='OK'):
    """Builds a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body if body is not None else {}
    return response


@pytest.fixture
def config():
    """Configuration of the demo cloud."""
    return ServiceConfig.from_url(CLOUDINARY_URL)


@pytest.fixture
def session():
    """Mocked requests session answering 200 with an empty object."""
    session = Mock()
    session.request.return_value = make_response()
    return session


@pytest.fixture
def client(config, session):
    """Client wired to the mocked session."""
    return CloudinaryClient(config, session=session)


@pytest.fixture
def fixed_timestamp(monkeypatch):
    """Freezes the timestamp of signed requests."""
    monkeypatch.setattr(
        'cloudinarypy.core.api.request.request_builder.timestamp_now',
        lambda: TIMESTAMP
    )
    return TIMESTAMP


@pytest.fixture
def asset_tree(tmp_path):
    """
    Creates:
        site/images/logo.png
        site/images/icons/a.png
        site/css/default.css
    """
    root = tmp_path / 'site'
    (root / 'images' / 'icons').mkdir(parents=True)
    (root / 'css').mkdir()
    (root / 'images' / 'logo.png').write_bytes(b'\x89PNG logo')
    (root / 'images' / 'icons' / 'a.png').write_bytes(b'\x89PNG a')
    (root / 'css' / 'default.css').write_text('body { color: red; }')
    return root


@pytest.fixture(name='make_response')
def make_response_fixture():
    """Factory for stand-in responses."""
    return make_response
