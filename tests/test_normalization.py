import pytest

from urlboard.normalization import canonical_url, is_valid_url, url_fingerprint


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/a/b",
        "http://example.com",
        "https://example.com:8443/path?q=1",
        "https://пример.рф/страница",
    ],
)
def test_valid_urls(url):
    assert is_valid_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "",
        "   ",
        None,
        "not a url",
        "ftp://example.com/file",
        "https://exa mple.com",
        "example.com",
    ],
)
def test_invalid_urls(url):
    assert is_valid_url(url) is False


def test_canonical_url_drops_default_port_and_sorts_query():
    assert canonical_url("HTTPS://Example.COM:443/p?b=2&a=1#frag") == "https://example.com/p?a=1&b=2"


def test_canonical_url_adds_scheme():
    assert canonical_url("  example.com  ") == "http://example.com"


def test_fingerprint_is_stable_for_equivalent_urls():
    a = url_fingerprint("https://Example.com/p?b=2&a=1")
    b = url_fingerprint("https://example.com:443/p?a=1&b=2#x")
    assert a == b
    assert len(a) == 12


def test_fingerprint_never_leaks_url():
    fp = url_fingerprint("https://example.com/secret-token")
    assert "secret" not in fp


@pytest.mark.parametrize("empty", ["", "  ", None])
def test_fingerprint_of_empty(empty):
    assert url_fingerprint(empty) == "<empty>"


def test_fingerprint_survives_garbage():
    assert url_fingerprint("http://host:notaport/") != "<empty>"
