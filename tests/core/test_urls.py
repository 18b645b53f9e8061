"""URL composer tests — pure tests for query appending, encoding and path scoping.

Tests cover:
    - append_query: '?' vs '&' selection, empty fragments
    - parameterize: encoding, deterministic ordering, None values, round trip
    - insert_path_segment: position after the version segment, idempotency
"""

from urllib.parse import parse_qsl, urlsplit

from outside_in.core.urls import append_query, encode_params, insert_path_segment, parameterize


# -- append_query -------------------------------------------------------------

def test_append_query_starts_query_string():
    assert append_query("http://h/v1.1/x", "a=1") == "http://h/v1.1/x?a=1"


def test_append_query_joins_existing_query_string():
    assert append_query("http://h/v1.1/x?a=1", "b=2") == "http://h/v1.1/x?a=1&b=2"


def test_append_query_empty_fragment_is_noop():
    assert append_query("http://h/v1.1/x", "") == "http://h/v1.1/x"


# -- parameterize -------------------------------------------------------------

def test_parameterize_encodes_keys_and_values():
    url = parameterize("http://h/x", {"q": "coffee & tea", "near me": "a/b"})
    assert url == "http://h/x?near%20me=a%2Fb&q=coffee%20%26%20tea"


def test_parameterize_is_deterministic_regardless_of_insertion_order():
    a = parameterize("http://h/x", {"limit": 5, "b": "2", "a": "1"})
    b = parameterize("http://h/x", {"a": "1", "limit": 5, "b": "2"})
    assert a == b == "http://h/x?a=1&b=2&limit=5"


def test_parameterize_appends_to_existing_query():
    assert parameterize("http://h/x?keep=1", {"limit": 5}) == "http://h/x?keep=1&limit=5"


def test_parameterize_empty_inputs_leaves_url_unchanged():
    assert parameterize("http://h/x", {}) == "http://h/x"


def test_parameterize_drops_none_values():
    assert parameterize("http://h/x", {"a": None, "b": 1}) == "http://h/x?b=1"


def test_parameterize_round_trips_through_query_decoding():
    inputs = {"publication-id": 42, "limit": 10, "q": "ümlaut & friends", "flag": "yes"}
    query = urlsplit(parameterize("http://h/v1.1/stories", inputs)).query
    assert dict(parse_qsl(query)) == {k: str(v) for k, v in inputs.items()}


def test_encode_params_stringifies_scalars():
    assert encode_params({"n": 1.5, "b": True}) == "b=true&n=1.5"


# -- insert_path_segment ------------------------------------------------------

def test_insert_path_segment_goes_after_version():
    url = insert_path_segment("http://h/v1.1/locations/named/Brooklyn", "/pub/42")
    assert url == "http://h/v1.1/pub/42/locations/named/Brooklyn"


def test_insert_path_segment_is_idempotent():
    once = insert_path_segment("http://h/v1.1/locations", "/pub/42")
    twice = insert_path_segment(once, "/pub/42")
    assert once == twice
    assert twice.count("/pub/42") == 1


def test_insert_path_segment_keeps_query_string():
    url = insert_path_segment("http://h/v1.1/stories?limit=5", "/publications/7")
    assert url == "http://h/v1.1/publications/7/stories?limit=5"


def test_insert_path_segment_quotes_values():
    url = insert_path_segment("http://h/v1.1/stories", "/publications/a b")
    assert url == "http://h/v1.1/publications/a%20b/stories"
    assert insert_path_segment(url, "/publications/a b") == url


def test_insert_path_segment_different_value_is_inserted():
    url = insert_path_segment("http://h/v1.1/pub/1/stories", "/pub/2")
    assert url == "http://h/v1.1/pub/2/pub/1/stories"


def test_encode_params_lowercases_booleans():
    assert encode_params({"open": False, "verified": True}) == "open=false&verified=true"


def test_insert_path_segment_keeps_empty_components():
    url = insert_path_segment("http://h/v1.1/a//b", "/pub/1")
    assert url == "http://h/v1.1/pub/1/a//b"


def test_insert_path_segment_keeps_trailing_slash():
    url = insert_path_segment("http://h/v1.1/stories/", "/pub/1")
    assert url == "http://h/v1.1/pub/1/stories/"


def test_insert_path_segment_on_bare_host():
    assert insert_path_segment("http://h", "/pub/1") == "http://h/pub/1"
    assert insert_path_segment("http://h/", "/pub/1") == "http://h/pub/1"
