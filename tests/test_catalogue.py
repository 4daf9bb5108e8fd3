import random

import pytest

from rooivalk.catalogue import (
    DEFAULT_ERROR_MESSAGES,
    ResponseCatalogue,
    ResponseType,
    get_response,
    pick,
)


def test_pick_is_deterministic_with_seeded_rng():
    options = ("a", "b", "c", "d")
    first = [pick(options, random.Random(3)) for _ in range(5)]
    second = [pick(options, random.Random(3)) for _ in range(5)]
    assert first == second
    assert all(item in options for item in first)


def test_pick_empty_list_raises():
    with pytest.raises(ValueError):
        pick(())


def test_get_response_uses_requested_list():
    catalogue = ResponseCatalogue(errors=("boom",), greetings=("hi",), discord_limit=("long",))
    assert get_response(ResponseType.ERROR, catalogue) == "boom"
    assert get_response(ResponseType.GREETING, catalogue) == "hi"
    assert get_response(ResponseType.DISCORD_LIMIT, catalogue) == "long"


def test_default_catalogue_has_builtin_errors():
    catalogue = ResponseCatalogue()
    assert get_response(ResponseType.ERROR, catalogue, random.Random(0)) in DEFAULT_ERROR_MESSAGES


def test_catalogue_is_immutable():
    catalogue = ResponseCatalogue()
    with pytest.raises(AttributeError):
        catalogue.errors = ("x",)
