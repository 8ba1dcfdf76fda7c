import pytest

from prefs_lib.storage.errors import DecodeFailure, EncodeFailure
from prefs_lib.storage.serializer import JSONCodec


def test_encode_decode_nested_value():
    c = JSONCodec()
    value = {'id': 1, 'tags': ['a', 'b'], 'meta': {'ok': True, 'ratio': 0.5, 'none': None}}
    text = c.encode(value)
    assert isinstance(text, str)
    assert c.decode(text) == value


@pytest.mark.parametrize('value', [object(), {1, 2}, b'bytes', float('inf'), {'x': float('nan')}])
def test_encode_rejects_unrepresentable_values(value):
    with pytest.raises(EncodeFailure):
        JSONCodec().encode(value)


def test_encode_rejects_circular_reference():
    d = {}
    d['self'] = d
    with pytest.raises(EncodeFailure):
        JSONCodec().encode(d)


@pytest.mark.parametrize('text', ['{invalid_json', '', 'NaN-ish', '[1, 2'])
def test_decode_rejects_malformed_text(text):
    with pytest.raises(DecodeFailure):
        JSONCodec().decode(text)


def test_decode_rejects_non_text():
    with pytest.raises(DecodeFailure):
        JSONCodec().decode(b'{}')


def test_decode_rejects_integer_beyond_conversion_limit():
    with pytest.raises(DecodeFailure):
        JSONCodec().decode('1' * 5000)
