"""Validate network specifications and build immutable network descriptors.

Each builder is a pure function of its inputs: it never logs, never mutates the
given mappings and raises exactly one NetworkSpecError subclass on invalid input.
Checks are performed in a fixed order and the first failing one wins:

1. the specification must be a mapping;
2. it must have a cloud_properties mapping (not required for vip networks);
3. cloud_properties must define virtual_network_name;
4. cloud_properties must define subnet_name;
5. every other value must have the expected type.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from azure_netspec.exceptions import (
    InvalidNetworkSpecError,
    MissingCloudPropertiesError,
    MissingSubnetNameError,
    MissingVirtualNetworkNameError,
)
from azure_netspec.models.network import (
    DynamicNetwork,
    ManualNetwork,
    NetworkSpec,
    SubnetCloudProperties,
    SubnetNetwork,
    VipNetwork,
)


def is_unset(value: Any) -> bool:
    """Return True when a required string is null or empty."""
    return value is None or value == ""


def resolve_resource_group_name(
    own_value: str | None, global_defaults: Mapping[str, Any]
) -> str | None:
    """Resolve the resource group of a network.

    Args:
        own_value (str | None): value set in the network cloud_properties.
        global_defaults (Mapping): process wide defaults. Its resource_group_name
            is used when the network does not define its own.

    Returns:
        str | None: the resolved resource group name.

    """
    if own_value is not None:
        return own_value
    return global_defaults.get("resource_group_name")


def ensure_mapping(raw_spec: Any) -> Mapping[Any, Any]:
    """Return the input when it is a mapping.

    Raises:
        InvalidNetworkSpecError when the input is not a mapping.

    """
    if not isinstance(raw_spec, Mapping):
        raise InvalidNetworkSpecError(
            f"Invalid spec, dict expected, '{type(raw_spec).__name__}' provided"
        )
    return raw_spec


def parse_network_spec(raw_spec: Any, *, with_ip: bool = True) -> NetworkSpec:
    """Convert an untyped network specification into a NetworkSpec.

    Args:
        raw_spec (Any): user supplied specification.
        with_ip (bool): validate the top level ip. When False the ip is ignored.

    Returns:
        NetworkSpec: typed specification.

    Raises:
        InvalidNetworkSpecError when the input is not a mapping or a value has the
        wrong type.

    """
    data = dict(ensure_mapping(raw_spec))
    if not with_ip:
        data.pop("ip", None)
    if isinstance(data.get("cloud_properties"), Mapping):
        data["cloud_properties"] = dict(data["cloud_properties"])
    try:
        return NetworkSpec.model_validate(data)
    except ValidationError as e:
        raise InvalidNetworkSpecError(f"Invalid network spec: {e!r}") from e


def check_subnet_spec(raw_spec: Any, network_type: str) -> Mapping[str, Any]:
    """Verify the required keys of a dynamic or manual network specification.

    Returns:
        Mapping: the cloud_properties of the specification.

    """
    cloud_properties = ensure_mapping(raw_spec).get("cloud_properties")
    if not isinstance(cloud_properties, Mapping):
        raise MissingCloudPropertiesError(network_type)
    if is_unset(cloud_properties.get("virtual_network_name")):
        raise MissingVirtualNetworkNameError(network_type)
    if is_unset(cloud_properties.get("subnet_name")):
        raise MissingSubnetNameError(network_type)
    return cloud_properties


def _build_subnet_network(
    model: type[SubnetNetwork],
    global_defaults: Mapping[str, Any],
    network_name: str,
    raw_spec: Any,
    **kwargs,
) -> SubnetNetwork:
    network_type = model.model_fields["type"].default
    cloud_properties = check_subnet_spec(raw_spec, network_type)
    spec = parse_network_spec(raw_spec, with_ip=model is ManualNetwork)
    try:
        props = SubnetCloudProperties.model_validate(dict(cloud_properties))
        if model is ManualNetwork:
            kwargs["ip"] = spec.ip
        return model(
            name=network_name,
            resource_group_name=resolve_resource_group_name(
                props.resource_group_name, global_defaults
            ),
            virtual_network_name=props.virtual_network_name,
            subnet_name=props.subnet_name,
            security_group=props.security_group,
            application_security_groups=props.application_security_groups,
            ip_forwarding=props.ip_forwarding,
            accelerated_networking=props.accelerated_networking,
            dns=spec.dns,
            has_default_dns=spec.has_default_dns,
            has_default_gateway=spec.has_default_gateway,
            **kwargs,
        )
    except ValidationError as e:
        raise InvalidNetworkSpecError(
            f"Invalid {network_type} network '{network_name}': {e!r}"
        ) from e


def build_dynamic_network(
    global_defaults: Mapping[str, Any], network_name: str, raw_spec: Any
) -> DynamicNetwork:
    """Validate a dynamic network specification and build its descriptor.

    Args:
        global_defaults (Mapping): process wide defaults, with at least the fallback
            resource_group_name.
        network_name (str): network name, used only as descriptor identity.
        raw_spec (Any): user supplied specification.

    Returns:
        DynamicNetwork: immutable descriptor.

    Raises:
        InvalidNetworkSpecError when the specification is not a mapping or has
        values of the wrong type.
        MissingCloudPropertiesError when cloud_properties is missing.
        MissingVirtualNetworkNameError when virtual_network_name is missing or null.
        MissingSubnetNameError when subnet_name is missing or null.

    """
    return _build_subnet_network(
        DynamicNetwork, global_defaults, network_name, raw_spec
    )


def build_manual_network(
    global_defaults: Mapping[str, Any], network_name: str, raw_spec: Any
) -> ManualNetwork:
    """Validate a manual network specification and build its descriptor.

    Same rules of a dynamic network. The private IP, if any, is kept as it is.
    """
    return _build_subnet_network(
        ManualNetwork, global_defaults, network_name, raw_spec
    )


def build_vip_network(
    global_defaults: Mapping[str, Any], network_name: str, raw_spec: Any
) -> VipNetwork:
    """Validate a vip network specification and build its descriptor.

    cloud_properties is optional and only resource_group_name is read from it.
    """
    spec = parse_network_spec(raw_spec)
    own_value = (spec.cloud_properties or {}).get("resource_group_name")
    try:
        return VipNetwork(
            name=network_name,
            resource_group_name=resolve_resource_group_name(own_value, global_defaults),
            ip=spec.ip,
            dns=spec.dns,
            has_default_dns=spec.has_default_dns,
            has_default_gateway=spec.has_default_gateway,
        )
    except ValidationError as e:
        raise InvalidNetworkSpecError(
            f"Invalid vip network '{network_name}': {e!r}"
        ) from e
