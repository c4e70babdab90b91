import pytest

from oktaclient.core.exceptions import OktaConfigError
from oktaclient.models import (
    PROVIDER_TYPES,
    Application,
    Credentials,
    Event,
    Group,
    Profile,
    Provider,
    Role,
    Schema,
    Session,
    User,
)


USER_JSON = {
    "id": "00ub0oNGTSWTBKOLGLNR",
    "status": "ACTIVE",
    "created": "2013-06-24T16:39:18.000Z",
    "activated": "2013-06-24T16:39:19.000Z",
    "statusChanged": "2013-06-24T16:39:19.000Z",
    "lastLogin": "2013-06-24T17:39:19.000Z",
    "lastUpdated": "2013-07-02T21:36:25.344Z",
    "passwordChanged": "2013-07-02T21:36:25.344Z",
    "profile": {
        "firstName": "Isaac",
        "lastName": "Brock",
        "email": "isaac.brock@example.com",
        "login": "isaac.brock@example.com",
        "mobilePhone": "555-415-1337",
        "twitterUserName": "ibrock",
    },
    "credentials": {
        "password": {},
        "recovery_question": {"question": "Who's a major player in the cowboy scene?"},
        "provider": {"type": "OKTA", "name": "OKTA"},
    },
    "_links": {"self": {"href": "https://acme.okta.com/api/v1/users/00ub0oNGTSWTBKOLGLNR"}},
}


@pytest.mark.parametrize("provider_type", PROVIDER_TYPES)
def test_provider_accepts_known_types(provider_type):
    assert Provider(type=provider_type).type == provider_type


def test_provider_rejects_unknown_type_at_construction():
    with pytest.raises(OktaConfigError, match="Invalid provider type"):
        Provider(type="GOOGLE")


def test_provider_rejects_unknown_type_on_assignment():
    provider = Provider(type="OKTA", name="OKTA")
    with pytest.raises(OktaConfigError):
        provider.type = "okta"
    assert provider.type == "OKTA"


def test_user_from_dict():
    user = User.from_dict(USER_JSON)
    assert user.id == "00ub0oNGTSWTBKOLGLNR"
    assert user.status == "ACTIVE"
    assert user.profile.login == "isaac.brock@example.com"
    assert user.profile.extra == {"twitterUserName": "ibrock"}
    assert user.credentials.provider.type == "OKTA"
    assert user.credentials.recovery_question.answer is None
    assert user.links["self"]["href"].endswith("/users/00ub0oNGTSWTBKOLGLNR")


def test_user_round_trips_through_dict():
    assert User.from_dict(USER_JSON).to_dict() == USER_JSON


def test_profile_to_dict_skips_unset_and_keeps_custom():
    profile = Profile(login="a@example.org", firstName="A", extra={"costCode": "X1"})
    assert profile.to_dict() == {"login": "a@example.org", "firstName": "A", "costCode": "X1"}


def test_empty_credentials_to_dict():
    assert Credentials().to_dict() == {}


def test_invalid_provider_in_payload_is_rejected():
    with pytest.raises(OktaConfigError):
        Credentials.from_dict({"provider": {"type": "UNKNOWN"}})


def test_group_from_dict():
    group = Group.from_dict({
        "id": "00g1emaKYZTWRYYRRTSK",
        "type": "OKTA_GROUP",
        "objectClass": ["okta:user_group"],
        "profile": {"name": "West Coast Users", "description": "All Users West of The Rockies"},
    })
    assert group.profile.name == "West Coast Users"
    assert group.to_dict()["objectClass"] == ["okta:user_group"]


def test_application_from_dict():
    app = Application.from_dict({
        "id": "0oa1gjh63g214q0Hq0g4",
        "name": "bookmark",
        "label": "Sample Bookmark App",
        "status": "ACTIVE",
        "signOnMode": "BOOKMARK",
        "settings": {"app": {"url": "https://example.com/bookmark.htm"}},
    })
    assert app.signOnMode == "BOOKMARK"
    assert app.to_dict()["settings"]["app"]["url"] == "https://example.com/bookmark.htm"
    assert "features" not in app.to_dict()


def test_role_session_schema_event():
    role = Role.from_dict({"id": "ra1", "type": "SUPER_ADMIN", "status": "ACTIVE"})
    assert role.type == "SUPER_ADMIN"

    session = Session.from_dict({"id": "101W_juydrDRByB7fUdRyE2JQ", "userId": "00u1", "amr": ["pwd"]})
    assert session.amr == ["pwd"]

    schema = Schema.from_dict({
        "id": "https://acme.okta.com/meta/schemas/user/default",
        "definitions": {"custom": {"properties": {"twitterUserName": {"type": "string"}}}},
    })
    assert "twitterUserName" in schema.custom_properties
    assert Schema().custom_properties == {}

    event = Event.from_dict({"eventId": "tevZxTAFy", "action": {"objectType": "core.user_auth.login_success"}})
    assert event.object_type == "core.user_auth.login_success"
