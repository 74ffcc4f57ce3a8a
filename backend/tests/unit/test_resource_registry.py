"""Tests for the resource registry and the name-based client provider."""

import pytest

from classroom_admin.application.services import RemoteResourceClient
from classroom_admin.domain.exceptions import UnknownResourceError
from classroom_admin.domain.resources import ACTIVITY, TEACHER, all_resources, get_resource
from classroom_admin.infrastructure.dependencies import resource_client_provider


def test_get_resource_by_name():
    assert get_resource("activity") is ACTIVITY
    assert get_resource("teacher") is TEACHER


def test_get_unknown_resource_raises():
    with pytest.raises(UnknownResourceError) as exc_info:
        get_resource("student")

    assert exc_info.value.name == "student"
    assert str(exc_info.value) == "Unknown resource 'student'"


def test_all_resources_lists_every_descriptor():
    assert all_resources() == [ACTIVITY, TEACHER]


def test_provider_for_unknown_resource_fails_when_built():
    with pytest.raises(UnknownResourceError):
        resource_client_provider("student")


@pytest.mark.asyncio
async def test_provider_yields_client_bound_to_named_resource(transport, notifier):
    provide = resource_client_provider("teacher")

    generator = provide(transport=transport, notifier=notifier)
    client = await generator.__anext__()
    await generator.aclose()

    assert isinstance(client, RemoteResourceClient)
    assert client.descriptor is TEACHER
    assert provide.__name__ == "get_teacher_client"
