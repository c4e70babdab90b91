"""Tests for status-code based response normalization."""
from types import SimpleNamespace

import pytest

from oktaclient.core.exceptions import OktaAPIError, OktaDecodeError
from oktaclient.core.response import SUCCESS_STATUS_CODES, NormalizedResult, classify, is_success, normalize

SUCCESS = [200, 201, 202, 203, 204, 205, 206]
FAILURE = [100, 207, 301, 304, 400, 401, 403, 404, 409, 429, 500, 502, 503]


def test_success_set_is_exactly_2xx_subset():
    assert SUCCESS_STATUS_CODES == frozenset(SUCCESS)


@pytest.mark.parametrize("status", SUCCESS)
def test_success_codes_decode_body(response_factory, status):
    resp = response_factory(status, {"id": "00u1", "status": "ACTIVE"})
    assert is_success(status)
    assert normalize(resp) == {"id": "00u1", "status": "ACTIVE"}


@pytest.mark.parametrize("status", SUCCESS)
def test_empty_success_body_is_empty_object(response_factory, status):
    assert normalize(response_factory(status)) == {}


def test_204_scenario(response_factory):
    result = classify(response_factory(204))
    assert result.ok
    assert result.value == {}
    assert result.error is None


@pytest.mark.parametrize("status", FAILURE)
def test_failure_codes_carry_decoded_body(response_factory, status):
    resp = response_factory(status, {"errorCode": "E0000001", "errorSummary": "Api validation failed"})
    assert not is_success(status)
    with pytest.raises(OktaAPIError) as excinfo:
        normalize(resp)
    assert excinfo.value.status_code == status
    assert excinfo.value.body == {"errorCode": "E0000001", "errorSummary": "Api validation failed"}


def test_404_scenario(response_factory):
    resp = response_factory(404, {"errorCode": "E0000007"}, url="https://acme.okta.com/api/v1/users/nope")
    result = classify(resp)
    assert not result.ok
    assert result.value is None
    assert result.error.status_code == 404
    assert result.error.body == {"errorCode": "E0000007"}
    assert result.error.error_code == "E0000007"
    assert result.error.endpoint == "https://acme.okta.com/api/v1/users/nope"


def test_error_exposes_okta_error_fields(response_factory):
    body = {
        "errorCode": "E0000001",
        "errorSummary": "Api validation failed: login",
        "errorId": "oaeHfmOAx1iRLa0H10DeMz5fQ",
        "errorCauses": [{"errorSummary": "login: An object with this field already exists"}],
    }
    error = classify(response_factory(400, body)).error
    assert error.error_summary == "Api validation failed: login"
    assert error.error_id == "oaeHfmOAx1iRLa0H10DeMz5fQ"
    assert len(error.error_causes) == 1
    assert "E0000001" in str(error)
    assert "[400]" in str(error)


@pytest.mark.parametrize("raw", [None, b"<html>Bad Gateway</html>", b"{not json"])
def test_unparseable_error_body_still_fails(response_factory, raw):
    result = classify(response_factory(502, raw))
    assert not result.ok
    assert result.error.body is None
    assert result.error.error_code is None
    assert result.error.error_causes == []


def test_error_body_is_always_a_mapping(response_factory):
    error = classify(response_factory(403, {"errorCode": "E0000006"}), as_object=True).error
    assert isinstance(error.body, dict)


def test_classification_ignores_body_content(response_factory):
    # An error-looking body on 200 is still a success
    assert normalize(response_factory(200, {"errorCode": "E0000007"})) == {"errorCode": "E0000007"}
    # A normal payload on 400 is still a failure
    with pytest.raises(OktaAPIError):
        normalize(response_factory(400, {"id": "00u1"}))


def test_as_object_returns_namespaces(response_factory):
    value = normalize(response_factory(200, {"id": "00u1", "profile": {"login": "a@b.c"}}), as_object=True)
    assert isinstance(value, SimpleNamespace)
    assert value.id == "00u1"
    assert value.profile.login == "a@b.c"


def test_as_object_empty_body(response_factory):
    assert normalize(response_factory(204), as_object=True) == SimpleNamespace()


def test_list_bodies_decode(response_factory):
    assert normalize(response_factory(200, [{"id": "a"}, {"id": "b"}])) == [{"id": "a"}, {"id": "b"}]


def test_invalid_success_body_raises_decode_error(response_factory):
    with pytest.raises(OktaDecodeError) as excinfo:
        normalize(response_factory(200, b"<xml/>"))
    assert excinfo.value.status_code == 200
    assert excinfo.value.text == "<xml/>"


def test_normalized_result_unwrap():
    assert NormalizedResult(status_code=200, value={"a": 1}).unwrap() == {"a": 1}
    error = OktaAPIError(500, None, "https://acme.okta.com/api/v1/users")
    with pytest.raises(OktaAPIError):
        NormalizedResult(status_code=500, error=error).unwrap()
