"""Shared fixtures: one Flask app and test client per site variant."""

import pytest

from counseling_site.app_factory import create_app


@pytest.fixture
def counseling_app():
    return create_app('counseling', {'TESTING': True})


@pytest.fixture
def counseling_client(counseling_app):
    return counseling_app.test_client()


@pytest.fixture
def basic_app():
    return create_app('basic', {'TESTING': True})


@pytest.fixture
def basic_client(basic_app):
    return basic_app.test_client()
