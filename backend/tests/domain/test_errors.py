"""Unit tests for the domain error catalog."""

import pytest
from domain.errors import DomainError, ErrorKind, ManagementError


class TestErrorKind:
    """Test the status and code carried by each kind."""

    @pytest.mark.parametrize("kind", [
        ErrorKind.ROLE_ALREADY_EXISTS,
        ErrorKind.USER_ALREADY_EXISTS,
        ErrorKind.VIEW_ALREADY_EXISTS,
        ErrorKind.SUBSCRIPTION_NOT_CLOSABLE,
        ErrorKind.PAGINATION_INVALID,
    ])
    def test_conflicts_and_invalid_requests_are_bad_requests(self, kind):
        """Test that conflicts are reported as 400."""
        assert kind.http_status == 400

    def test_forbidden_access_is_403(self):
        assert ErrorKind.FORBIDDEN_ACCESS.http_status == 403

    @pytest.mark.parametrize("kind", [
        ErrorKind.APPLICATION_NOT_FOUND,
        ErrorKind.SUBSCRIPTION_NOT_FOUND,
        ErrorKind.API_NOT_FOUND,
        ErrorKind.PLAN_NOT_FOUND,
        ErrorKind.USER_NOT_FOUND,
        ErrorKind.ROLE_NOT_FOUND,
        ErrorKind.VIEW_NOT_FOUND,
        ErrorKind.API_HEADER_NOT_FOUND,
    ])
    def test_missing_resources_are_404(self, kind):
        assert kind.http_status == 404

    def test_technical_codes_are_unique(self):
        """Test that no two kinds share a technical code."""
        codes = [kind.technical_code for kind in ErrorKind]
        assert len(codes) == len(set(codes))


class TestDomainError:
    """Test message rendering and wire representation."""

    def test_role_already_exists_message(self):
        error = DomainError(ErrorKind.ROLE_ALREADY_EXISTS, {"scope": "API", "name": "OWNER"})
        assert error.message == "Role [API,OWNER] already exists."
        assert error.technical_code == "role.exists"

    def test_user_already_exists_message(self):
        error = DomainError(
            ErrorKind.USER_ALREADY_EXISTS,
            {"user": "jdoe", "environment": "DEFAULT", "source": "ldap"},
        )
        assert error.message == "A user [jdoe] already exists for environment DEFAULT."

    def test_to_dict(self):
        """Test the error envelope keys."""
        error = DomainError(ErrorKind.FORBIDDEN_ACCESS)
        assert error.to_dict() == {
            "message": "You do not have sufficient rights to access this resource",
            "http_status": 403,
            "technicalCode": "forbidden",
            "parameters": {},
        }


class TestManagementError:
    """Test the exception wrapping a domain error."""

    def test_of_stringifies_parameters(self):
        exc = ManagementError.of(ErrorKind.VIEW_ALREADY_EXISTS, view=42)
        assert exc.kind is ErrorKind.VIEW_ALREADY_EXISTS
        assert exc.error.parameters == {"view": "42"}

    def test_str_is_the_message(self):
        exc = ManagementError.of(ErrorKind.API_NOT_FOUND, api="api-1")
        assert str(exc) == "Api [api-1] can not be found."

    def test_can_be_raised_and_caught(self):
        with pytest.raises(ManagementError) as exc_info:
            raise ManagementError.of(ErrorKind.PAGINATION_INVALID)
        assert exc_info.value.error.http_status == 400
