import random

import pytest

from uricodec import percent


@pytest.fixture(params=['bytearray', 'join_list'])
def decode_approach(request, monkeypatch):
    method = percent._join_tokens_list
    if request.param == 'bytearray':
        method = percent._join_tokens_bytearray
    monkeypatch.setattr(percent, '_join_tokens', method)
    return method


def _arbitrary_bytes(count, length, seed=1337):
    rng = random.Random(seed)
    return [bytes(rng.randrange(256) for _ in range(length)) for __ in range(count)]


@pytest.fixture
def arbitrary_bytes():
    return _arbitrary_bytes(count=100, length=32)
