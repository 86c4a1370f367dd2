"""Tests for the error taxonomy."""

import pytest

from live_scribe.l1_entities.errors import AppError, NotFoundError, UnauthorizedError, ValidationError


class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        ('cls', 'status', 'message'),
        [
            (ValidationError, 400, 'Validation error'),
            (UnauthorizedError, 401, 'Unauthorized'),
            (NotFoundError, 404, 'Not found'),
        ],
    )
    def test_defaults(self, cls, status, message):
        err = cls()
        assert isinstance(err, AppError)
        assert err.status_code == status
        assert err.message == message
        assert str(err) == message

    def test_custom_message(self):
        err = ValidationError('Missing text')
        assert err.message == 'Missing text'
        assert err.status_code == 400

    def test_base_defaults_to_500(self):
        assert AppError().status_code == 500

    def test_base_status_override(self):
        assert AppError('teapot', status_code=418).status_code == 418
