"""Error Hierarchy — PeopleApiError attributes and envelope conversion."""

from people_api.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    PeopleApiError,
    PersonNotFoundError,
)


def test_person_not_found_is_404_domain_error():
    err = PersonNotFoundError("Barney")
    assert isinstance(err, PeopleApiError)
    assert err.http_status == 404
    assert err.code == "PERSON_NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.key == "Barney"
    assert "Barney" in str(err)


def test_to_envelope_links_request_uri():
    err = PeopleApiError(
        "nope", "NOPE", ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 410,
    )
    assert err.to_envelope("/people?x=1").to_response() == {
        "message": "nope",
        "logref": "NOPE",
        "links": {"self": "/people?x=1"},
    }


def test_severity_and_category_serialize_as_strings():
    assert ErrorSeverity.WARNING.value == "warning"
    assert ErrorCategory.RESOURCE_NOT_FOUND == "resource_not_found"
