"""Build the whole network configuration of an instance."""

from collections.abc import Mapping
from logging import Logger
from typing import Any

from azure_netspec.exceptions import (
    InvalidNetworkTypeError,
    MissingNetworkError,
    MultipleVipNetworksError,
)
from azure_netspec.models.network import (
    DynamicNetwork,
    ManualNetwork,
    NetworkConfiguration,
    VipNetwork,
)
from azure_netspec.validator import (
    build_dynamic_network,
    build_manual_network,
    build_vip_network,
    ensure_mapping,
)

DEFAULT_NETWORK_TYPE = "manual"


def configure_networks(
    global_defaults: Mapping[str, Any], networks: Any, *, logger: Logger
) -> NetworkConfiguration:
    """Validate all the networks of an instance.

    Networks without a type are manual networks. At most one vip network is
    accepted and at least one dynamic or manual network is required.

    Args:
        global_defaults (Mapping): process wide defaults.
        networks (Any): mapping with network names as keys and the untyped
            network specifications as values.
        logger (Logger): Logger instance.

    Returns:
        NetworkConfiguration: the validated networks, in the given order.

    Raises:
        InvalidNetworkSpecError when networks is not a mapping.
        InvalidNetworkTypeError when a network type is not supported.
        MultipleVipNetworksError when there is more than one vip network.
        MissingNetworkError when there are no dynamic or manual networks.
        Any error raised while validating a single network.

    """
    ensure_mapping(networks)

    built: list[DynamicNetwork | ManualNetwork] = []
    vip_network: VipNetwork | None = None
    for name, spec in networks.items():
        network_type = DEFAULT_NETWORK_TYPE
        if isinstance(spec, Mapping) and spec.get("type") is not None:
            network_type = spec["type"]

        if network_type == "dynamic":
            built.append(build_dynamic_network(global_defaults, name, spec))
        elif network_type == "manual":
            built.append(build_manual_network(global_defaults, name, spec))
        elif network_type == "vip":
            if vip_network is not None:
                raise MultipleVipNetworksError(name)
            vip_network = build_vip_network(global_defaults, name, spec)
        else:
            raise InvalidNetworkTypeError(network_type)
        logger.debug("Network '%s' of type '%s' is valid", name, network_type)

    if len(built) == 0:
        raise MissingNetworkError()

    return NetworkConfiguration(networks=built, vip_network=vip_network)
