"""Tests for the request handler."""
from unittest.mock import Mock

import pytest
import requests

from cloudinarypy.core.api import ApiRequest, RequestHandler
from cloudinarypy.core.api.errors import CloudinaryAPIError
from cloudinarypy.core.exceptions import CloudinaryNetworkError


@pytest.fixture
def request_():
    return ApiRequest('POST', 'http://api.example.test/demo/image/destroy/', data={'a': '1'})


class TestRequestHandler:
    """Test suite for RequestHandler."""
    
    def test_sends_request(self, session, request_, make_response):
        """Test session receives method, url and body."""
        session.request.return_value = make_response(200, {'result': 'ok'})
        handler = RequestHandler(session, timeout=10)
        
        data = handler.execute(request_)
        
        assert data == {'result': 'ok'}
        session.request.assert_called_once_with(
            'POST',
            'http://api.example.test/demo/image/destroy/',
            timeout=10,
            data={'a': '1'}
        )
    
    def test_network_error_wrapped(self, request_):
        """Test transport failures become CloudinaryNetworkError."""
        session = Mock()
        session.request.side_effect = requests.ConnectionError('refused')
        handler = RequestHandler(session)
        
        with pytest.raises(CloudinaryNetworkError) as exc_info:
            handler.execute(request_)
        
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
    
    def test_api_error_propagates(self, session, request_, make_response):
        """Test non-2xx responses raise once, no retry."""
        session.request.return_value = make_response(
            401, {'error': {'message': 'Invalid Signature'}}, reason='Unauthorized'
        )
        handler = RequestHandler(session)
        
        with pytest.raises(CloudinaryAPIError, match="Invalid Signature"):
            handler.execute(request_)
        
        assert session.request.call_count == 1
