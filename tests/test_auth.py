from hiertree.core.auth import api_key_matches


def test_no_configured_key_allows_everything():
    assert api_key_matches(None, "")
    assert api_key_matches("anything", "")


def test_configured_key_must_match():
    assert api_key_matches("secret", "secret")
    assert not api_key_matches("secrets", "secret")
    assert not api_key_matches(None, "secret")
