"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from global_credentials.domain.entities import GlobalCredential

from .fakes import FakeDiscoveryClient


@pytest.fixture
def fake_client() -> FakeDiscoveryClient:
    """Discovery client returning an empty credential list."""
    return FakeDiscoveryClient()


@pytest.fixture
def common_api_fields() -> dict[str, Any]:
    """Common fields of a backend credential payload entry."""
    return {
        "comments": "lab",
        "description": "lab credential",
        "id": "0a1b2c3d",
        "instanceTenantId": "tenant-1",
        "instanceUuid": "0a1b2c3d",
    }


@pytest.fixture
def cli_payload(common_api_fields: dict[str, Any]) -> dict[str, Any]:
    """CLI credential payload entry with an empty enable password and a stray auth type."""
    return {
        **common_api_fields,
        "credentialType": "CLI",
        "username": "u",
        "password": "p",
        "enablePassword": "",
        "authType": "X",
    }


@pytest.fixture
def full_payload(common_api_fields: dict[str, Any]) -> dict[str, Any]:
    """Payload entry with every type-specific field populated; set credentialType per test."""
    return {
        **common_api_fields,
        "credentialType": "",
        "username": "admin",
        "password": "secret",
        "enablePassword": "enable",
        "authPassword": "authpass",
        "authType": "SHA",
        "privacyPassword": "privpass",
        "privacyType": "AES128",
        "snmpMode": "AUTHPRIV",
        "readCommunity": "public",
        "writeCommunity": "private",
        "port": 443,
        "secure": "true",
        "netconfPort": "830",
    }


@pytest.fixture
def cli_credential(cli_payload: dict[str, Any]) -> GlobalCredential:
    """CLI credential entity."""
    return GlobalCredential.from_api(cli_payload)
