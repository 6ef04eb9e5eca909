"""
Unit tests for request building.
"""

from urllib.parse import parse_qs

import pytest

from flickr_api import Credentials, Request, build_request, sign_args
from flickr_api.constants import DEFAULT_REST_URI, FORM_CONTENT_TYPE


class TestBuildRequest:
    """Test request assembly and signing."""

    @pytest.fixture
    def signed_credentials(self):
        return Credentials("made_up_key", "my_secret")

    @pytest.fixture
    def unsigned_credentials(self):
        return Credentials("made_up_key")

    def test_injects_method_and_key(self, unsigned_credentials):
        """Test that method and api_key are added to the arguments."""
        request = build_request('flickr.test.echo', {'foo': 'bar'}, unsigned_credentials)

        assert request.method == 'flickr.test.echo'
        assert request.args['method'] == 'flickr.test.echo'
        assert request.args['api_key'] == 'made_up_key'
        assert request.args['foo'] == 'bar'
        assert request.endpoint == DEFAULT_REST_URI

    def test_unsigned_without_secret(self, unsigned_credentials):
        """Test that no api_sig is added without a secret."""
        request = build_request('flickr.test.echo', {}, unsigned_credentials)

        assert 'api_sig' not in request.args
        assert request.signed is False

    def test_signed_with_secret(self, signed_credentials):
        """Test that api_sig covers method, api_key and the arguments."""
        request = build_request('flickr.test.echo', {'foo': 'bar'}, signed_credentials)

        expected = sign_args('my_secret', {
            'foo': 'bar',
            'method': 'flickr.test.echo',
            'api_key': 'made_up_key'
        })
        assert request.signed is True
        assert request.args['api_sig'] == expected

    def test_caller_signature_replaced(self, signed_credentials):
        """Test that a stale api_sig is not signed over or kept."""
        request = build_request('flickr.test.echo', {'api_sig': 'stale'}, signed_credentials)
        fresh = build_request('flickr.test.echo', {}, signed_credentials)

        assert request.args['api_sig'] == fresh.args['api_sig']

    def test_caller_args_not_mutated(self, signed_credentials):
        """Test that the caller's mapping is left untouched."""
        args = {'foo': 'bar'}
        build_request('flickr.test.echo', args, signed_credentials)

        assert args == {'foo': 'bar'}

    def test_none_args(self, unsigned_credentials):
        """Test building a request without arguments."""
        request = build_request('flickr.test.null', None, unsigned_credentials)

        assert dict(request.args) == {'method': 'flickr.test.null', 'api_key': 'made_up_key'}

    def test_custom_endpoint(self, unsigned_credentials):
        """Test building against an overridden endpoint."""
        request = build_request('m', {}, unsigned_credentials, 'https://example.com/rest/')

        assert request.endpoint == 'https://example.com/rest/'

    def test_empty_method(self, unsigned_credentials):
        """Test that a method name is required."""
        with pytest.raises(ValueError):
            build_request('', {}, unsigned_credentials)


class TestRequest:
    """Test the request value object."""

    def test_args_read_only(self):
        """Test that arguments cannot be modified after construction."""
        request = Request('flickr.test.echo', {'foo': 'bar'})

        with pytest.raises(TypeError):
            request.args['foo'] = 'baz'

    def test_args_copied(self):
        """Test that later changes to the source mapping do not leak in."""
        source = {'foo': 'bar'}
        request = Request('flickr.test.echo', source)
        source['foo'] = 'baz'

        assert request.args['foo'] == 'bar'

    def test_body_form_encoded(self):
        """Test the form-encoded body."""
        request = Request('flickr.test.echo', {'foo': 'bar baz', 'empty': None, 'text': '匕'})

        parsed = parse_qs(request.body.decode('ascii'), keep_blank_values=True)
        assert parsed == {'foo': ['bar baz'], 'empty': [''], 'text': ['匕']}
        assert request.content_type == FORM_CONTENT_TYPE

    def test_body_bytes_values(self):
        """Test that byte values are encoded like their text form."""
        text = Request('m', {'foo': '匕七'})
        raw = Request('m', {'foo': b"\xe5\x8c\x95\xe4\xb8\x83"})

        assert text.body == raw.body

    def test_not_hashable(self):
        """Test that requests are compared by value but cannot be hashed."""
        first = Request('m', {'foo': 'bar'})

        assert first == Request('m', {'foo': 'bar'})
        assert Request.__hash__ is None
        with pytest.raises(TypeError):
            hash(first)
