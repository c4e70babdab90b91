"""Tests for the Okta entry point and resource wiring."""
import dataclasses

import pytest
import requests

from oktaclient import Okta
from oktaclient.config.settings import ClientConfig, Settings
from oktaclient.core.exceptions import OktaAPIError, OktaConfigError
from oktaclient.core.resources import ResourceSet
from oktaclient.core.users import UserService
from oktaclient.models import User


def test_bootstrap_builds_resources_eagerly():
    okta = Okta("acme", "K")
    assert okta._resources is not None
    assert isinstance(okta.resources, ResourceSet)


def test_lazy_resources_without_bootstrap():
    okta = Okta("acme", "K", {"bootstrap": False})
    assert okta._resources is None
    resources = okta.resources
    assert resources is okta.resources


def test_all_services_share_one_client():
    okta = Okta("acme", "K")
    services = [getattr(okta.resources, f.name) for f in dataclasses.fields(ResourceSet)]
    assert len(services) == 7
    assert all(service.client is okta.client for service in services)


def test_resource_set_is_immutable():
    okta = Okta("acme", "K")
    with pytest.raises(dataclasses.FrozenInstanceError):
        okta.resources.users = UserService(okta.client)


def test_base_url_from_options():
    assert Okta("acme", "K").base_url == "https://acme.okta.com/api/v1/"
    assert Okta("acme", "K", {"preview": True}).base_url == "https://acme.oktapreview.com/api/v1/"
    assert Okta("acme", "K", ClientConfig(api_version="v2")).base_url == "https://acme.okta.com/api/v2/"


def test_invalid_config_fails_before_any_request(http):
    with pytest.raises(OktaConfigError):
        Okta("acme", "K", {"apiVersion": ""})
    with pytest.raises(OktaConfigError):
        Okta("acme", "K", ["preview"])
    assert http.requests == []


def test_from_settings():
    okta = Okta.from_settings(Settings(org="acme", api_key="K", preview=True, timeout=3.0))
    assert okta.base_url == "https://acme.oktapreview.com/api/v1/"
    assert okta.client.timeout == 3.0


def test_end_to_end_call(http):
    http.queue(404, {"errorCode": "E0000007", "errorSummary": "Not found: Resource not found: 00u404 (User)"})
    with Okta("acme", "K") as okta:
        with pytest.raises(OktaAPIError) as excinfo:
            okta.resources.users.get("00u404")
    assert excinfo.value.body == {
        "errorCode": "E0000007",
        "errorSummary": "Not found: Resource not found: 00u404 (User)",
    }
    assert http.last.url == "https://acme.okta.com/api/v1/users/00u404"
    assert http.last.headers["Authorization"] == "SSWS K"


def test_clients_sharing_a_session_use_their_own_key(http):
    session = requests.Session()
    alpha = Okta("alpha", "KEY_A", session=session)
    Okta("beta", "KEY_B", session=session)

    alpha.resources.users.get("me")
    assert http.last.url == "https://alpha.okta.com/api/v1/users/me"
    assert http.last.headers["Authorization"] == "SSWS KEY_A"


def test_results_load_into_models(http):
    http.queue(200, {"id": "00u1", "status": "ACTIVE", "profile": {"login": "a@example.org"}})
    okta = Okta("acme", "K")
    user = User.from_dict(okta.resources.users.get("00u1"))
    assert user.profile.login == "a@example.org"


def test_repr_hides_api_key():
    assert "super-secret" not in repr(Okta("acme", "super-secret"))
