"""Tests for the parameter store."""

import pytest

from amocrm_toolkit.core.models import Credentials
from amocrm_toolkit.core.params import ParamsBag


@pytest.fixture
def bag():
    """Create a bag with credentials set."""
    return ParamsBag.from_credentials(
        Credentials(domain="example", login="login@domain", apikey="hash")
    )


def test_from_credentials(bag):
    """Test that credentials fill the auth group."""
    assert bag.get_auth("domain") == "example"
    assert bag.get_auth("login") == "login@domain"
    assert bag.get_auth("apikey") == "hash"


def test_get_auth_unset_key_returns_default():
    """Test that reading an unset auth key never fails."""
    bag = ParamsBag()
    assert bag.get_auth("domain") == ""
    assert bag.get_auth("login", None) is None


def test_set_auth_never_fails():
    """Test that storing any auth key is plain state mutation."""
    bag = ParamsBag()
    bag.set_auth("password", "secret")

    assert bag.get_auth("password") == "secret"
    assert bag.get_auth("domain") == ""


def test_add_auth_alias():
    """Test add_auth behaves like set_auth."""
    bag = ParamsBag()
    bag.add_auth("domain", "example")
    assert bag.get_auth("domain") == "example"


def test_add_get_single_and_mapping(bag):
    """Test merging query parameters one by one and as a mapping."""
    bag.add_get("limit_rows", 10)
    bag.add_get({"limit_offset": 20, "query": "John"})

    assert bag.get_get() == {"limit_rows": 10, "limit_offset": 20, "query": "John"}


def test_add_get_last_write_wins(bag):
    """Test that the same key written twice keeps the last value."""
    bag.add_get("query", "first")
    bag.add_get({"query": "second"})

    assert bag.get_get() == {"query": "second"}


def test_add_post_and_has_post(bag):
    """Test body fields accumulate and has_post reports them."""
    assert bag.has_post() is False

    bag.add_post("leads", {"add": []})
    bag.add_post({"other": 1})

    assert bag.has_post() is True
    assert bag.get_post() == {"leads": {"add": []}, "other": 1}


def test_get_get_returns_copy(bag):
    """Test that callers cannot mutate the stored mapping through get_get."""
    bag.add_get("a", "1")
    snapshot = bag.get_get()
    snapshot["b"] = "2"

    assert bag.get_get() == {"a": "1"}


def test_values_persist_until_cleared(bag):
    """Test that GET/POST values survive until explicitly cleared."""
    bag.add_get("a", "1")
    bag.add_post("b", "2")

    assert bag.has_get() and bag.has_post()

    bag.clear()

    assert bag.get_get() == {}
    assert bag.get_post() == {}
    assert bag.get_auth("apikey") == "hash"


def test_clear_get_and_clear_post_are_independent(bag):
    """Test clearing one group keeps the other."""
    bag.add_get("a", "1")
    bag.add_post("b", "2")

    bag.clear_get()
    assert bag.get_get() == {}
    assert bag.get_post() == {"b": "2"}

    bag.clear_post()
    assert bag.has_post() is False


def test_copy_is_independent(bag):
    """Test that a copied bag does not share state with the original."""
    bag.add_get("a", "1")
    clone = bag.copy()

    clone.add_get("b", "2")
    clone.add_post("c", "3")
    clone.set_auth("domain", "other")

    assert bag.get_get() == {"a": "1"}
    assert bag.has_post() is False
    assert bag.get_auth("domain") == "example"
    assert clone.get_get() == {"a": "1", "b": "2"}


def test_repr_hides_apikey(bag):
    """Test that the API key never appears in the repr."""
    assert "hash" not in repr(bag)
    assert "example" in repr(bag)


def test_copy_does_not_share_nested_values(bag):
    """Test that nested POST and GET values are copied, not shared."""
    bag.add_post("leads", {"add": [{"name": "Deal"}]})
    bag.add_get("filter", {"id": [1, 2]})
    clone = bag.copy()

    clone.get_post()["leads"]["add"].append({"name": "Other"})
    clone.get_get()["filter"]["id"].append(3)

    assert bag.get_post() == {"leads": {"add": [{"name": "Deal"}]}}
    assert bag.get_get() == {"filter": {"id": [1, 2]}}
