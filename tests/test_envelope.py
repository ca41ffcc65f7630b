"""Tests for callback envelope decoding."""
import pytest

from qq_connect.envelope import extract_callback_json, raise_for_error_envelope
from qq_connect.errors import DecodeError, ProviderError


class TestExtractCallbackJson:
    """Tests for extract_callback_json."""

    def test_fixed_width_wrapper(self):
        """9-byte prefix and 3-byte suffix are stripped."""
        body = b'callback({"error":100016,"error_description":"invalid code"});\n'

        assert extract_callback_json(body) == {"error": 100016, "error_description": "invalid code"}

    def test_wrapper_with_spaces(self):
        """Wrapper length does not matter."""
        body = 'callback( {"client_id":"X","openid":"O1"} );\n'

        assert extract_callback_json(body) == {"client_id": "X", "openid": "O1"}

    def test_bare_json(self):
        """Unwrapped JSON is accepted too."""
        assert extract_callback_json(b'{"openid":"O1"}') == {"openid": "O1"}

    def test_nested_object(self):
        """Payload runs to the last closing brace."""
        body = 'callback( {"a":{"b":1}} );'

        assert extract_callback_json(body) == {"a": {"b": 1}}

    def test_no_braces(self):
        """Body without a JSON object is a decode error."""
        with pytest.raises(DecodeError):
            extract_callback_json(b"<html>Bad Gateway</html>")

    def test_invalid_json(self):
        """Broken JSON inside the wrapper is a decode error."""
        with pytest.raises(DecodeError):
            extract_callback_json(b"callback( {openid: O1} );\n")

    def test_empty_body(self):
        """Empty body is a decode error."""
        with pytest.raises(DecodeError):
            extract_callback_json(b"")


class TestRaiseForErrorEnvelope:
    """Tests for raise_for_error_envelope."""

    def test_error_envelope(self):
        """error / error_description become a ProviderError."""
        with pytest.raises(ProviderError) as exc_info:
            raise_for_error_envelope({"error": 100016, "error_description": "invalid code"})

        assert exc_info.value.code == 100016
        assert exc_info.value.message == "invalid code"
        assert str(exc_info.value) == "Error code 100016: invalid code"

    def test_string_error_code(self):
        """Numeric strings are accepted as error codes."""
        with pytest.raises(ProviderError) as exc_info:
            raise_for_error_envelope({"error": "100013", "error_description": "access token is illegal"})

        assert exc_info.value.code == 100013

    def test_missing_description(self):
        """Missing description yields an empty message."""
        with pytest.raises(ProviderError) as exc_info:
            raise_for_error_envelope({"error": 100007})

        assert exc_info.value.message == ""

    def test_no_error_field(self):
        """Payload without an error field is not an error envelope."""
        with pytest.raises(DecodeError):
            raise_for_error_envelope({"client_id": "X", "openid": ""})

    def test_non_numeric_error_code(self):
        """Non-numeric error code is a decode error."""
        with pytest.raises(DecodeError):
            raise_for_error_envelope({"error": "bad", "error_description": "?"})
