from typing import Any

import pytest
from pytest_cases import parametrize

from azure_netspec.exceptions import (
    InvalidNetworkSpecError,
    MissingCloudPropertiesError,
    MissingSubnetNameError,
    MissingVirtualNetworkNameError,
)
from azure_netspec.models.network import ManualNetwork, VipNetwork
from azure_netspec.validator import build_manual_network, build_vip_network
from tests.models.utils import full_network_spec_dict, network_spec_dict
from tests.utils import random_ip, random_lower_string


def test_manual_network(global_defaults: dict[str, Any]) -> None:
    d = full_network_spec_dict()
    d["ip"] = str(random_ip())
    network = build_manual_network(global_defaults, "private", d)
    assert isinstance(network, ManualNetwork)
    assert network.type == "manual"
    assert network.name == "private"
    assert str(network.ip) == d["ip"]
    assert network.subnet_name == d["cloud_properties"]["subnet_name"]
    assert network.has_default_dns is True
    assert network.has_default_gateway is True


def test_manual_network_without_ip(global_defaults: dict[str, Any]) -> None:
    network = build_manual_network(global_defaults, "private", network_spec_dict())
    assert network.ip is None
    assert network.resource_group_name == global_defaults["resource_group_name"]


def test_manual_network_missing_cloud_properties(
    global_defaults: dict[str, Any],
) -> None:
    with pytest.raises(MissingCloudPropertiesError) as exc_info:
        build_manual_network(global_defaults, "private", {"ip": "10.0.0.4"})
    assert exc_info.value.message == "cloud_properties required for manual network"


@parametrize(
    "key, error, message",
    [
        (
            "virtual_network_name",
            MissingVirtualNetworkNameError,
            "virtual_network_name required for manual network",
        ),
        (
            "subnet_name",
            MissingSubnetNameError,
            "subnet_name required for manual network",
        ),
    ],
)
def test_manual_network_missing_names(
    global_defaults: dict[str, Any], key: str, error: type[Exception], message: str
) -> None:
    d = network_spec_dict()
    d["cloud_properties"][key] = None
    with pytest.raises(error) as exc_info:
        build_manual_network(global_defaults, "private", d)
    assert exc_info.value.message == message


def test_manual_network_invalid_ip(global_defaults: dict[str, Any]) -> None:
    d = network_spec_dict()
    d["ip"] = random_lower_string()
    with pytest.raises(InvalidNetworkSpecError):
        build_manual_network(global_defaults, "private", d)


def test_vip_network(global_defaults: dict[str, Any]) -> None:
    d = {"ip": str(random_ip()), "type": "vip"}
    network = build_vip_network(global_defaults, "public", d)
    assert isinstance(network, VipNetwork)
    assert network.type == "vip"
    assert str(network.ip) == d["ip"]
    assert network.resource_group_name == global_defaults["resource_group_name"]
    assert network.has_default_dns is False
    assert network.has_default_gateway is False


def test_vip_network_own_resource_group(global_defaults: dict[str, Any]) -> None:
    d = {"cloud_properties": {"resource_group_name": random_lower_string()}}
    network = build_vip_network(global_defaults, "public", d)
    assert network.resource_group_name == d["cloud_properties"]["resource_group_name"]


@parametrize(spec=[None, [random_lower_string()]])
def test_vip_network_not_a_mapping(global_defaults: dict[str, Any], spec: Any) -> None:
    with pytest.raises(InvalidNetworkSpecError):
        build_vip_network(global_defaults, "public", spec)


def test_vip_network_invalid_ip(global_defaults: dict[str, Any]) -> None:
    with pytest.raises(InvalidNetworkSpecError):
        build_vip_network(global_defaults, "public", {"ip": random_lower_string()})


def test_vip_network_unknown_cloud_properties_keys(
    global_defaults: dict[str, Any],
) -> None:
    d = {"cloud_properties": {1: random_lower_string()}}
    network = build_vip_network(global_defaults, "public", d)
    assert network.resource_group_name == global_defaults["resource_group_name"]
