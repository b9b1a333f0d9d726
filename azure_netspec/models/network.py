"""Pydantic models of the networks a Virtual Machine is attached to."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, field_validator


def none_to_empty(v: Any) -> Any:
    """A null sequence is an empty sequence.

    Args:
        v (Any): input value.

    Returns:
        Any: an empty tuple when the input is None, otherwise the input.

    """
    return () if v is None else v


class NetworkSpec(BaseModel):
    """Typed view of the user supplied specification of a network attachment.

    Unknown keys are ignored.

    Attributes:
    ----------
        type (str): Network type. Absent means manual network.
        ip (IPvAnyAddress | None): Private IP (manual) or public IP (vip).
        dns (str | tuple of str | None): DNS servers override.
        default (tuple of Any): Defaults this network provides ("dns", "gateway").
        cloud_properties (dict | None): Provider specific properties.
    """

    model_config = ConfigDict(extra="ignore")

    type: Annotated[str, Field(default="manual", description="Network type.")]
    ip: Annotated[
        IPvAnyAddress | None,
        Field(default=None, description="IP address assigned to the instance."),
    ]
    dns: Annotated[
        str | tuple[str, ...] | None,
        Field(default=None, description="DNS servers override."),
    ]
    default: Annotated[
        tuple[Any, ...],
        Field(
            default=(),
            description="Defaults provided by this network. Known values are 'dns' "
            "and 'gateway'.",
        ),
    ]
    cloud_properties: Annotated[
        dict[Any, Any] | None,
        Field(default=None, description="Provider specific properties."),
    ]

    @field_validator("default", mode="before")
    @classmethod
    def null_default(cls, v: Any) -> Any:
        """A null list of defaults is an empty list."""
        return none_to_empty(v)

    @property
    def has_default_dns(self) -> bool:
        return "dns" in self.default

    @property
    def has_default_gateway(self) -> bool:
        return "gateway" in self.default


class SubnetCloudProperties(BaseModel):
    """Cloud properties identifying the subnet a network interface is placed in."""

    model_config = ConfigDict(extra="ignore")

    virtual_network_name: Annotated[
        str, Field(min_length=1, description="Virtual network name.")
    ]
    subnet_name: Annotated[str, Field(min_length=1, description="Subnet name.")]
    resource_group_name: Annotated[
        str | None,
        Field(default=None, description="Resource group of the virtual network."),
    ]
    security_group: Annotated[
        str | None,
        Field(default=None, description="Network security group name."),
    ]
    application_security_groups: Annotated[
        tuple[str, ...],
        Field(default=(), description="Application security group names."),
    ]
    ip_forwarding: Annotated[
        bool, Field(default=False, description="Enable IP forwarding on the NIC.")
    ]
    accelerated_networking: Annotated[
        bool,
        Field(default=False, description="Enable accelerated networking on the NIC."),
    ]

    @field_validator("application_security_groups", mode="before")
    @classmethod
    def null_asgs(cls, v: Any) -> Any:
        """A null list of application security groups is an empty list."""
        return none_to_empty(v)


class Network(BaseModel):
    """Common attributes of a validated network. Instances are read-only.

    Attributes:
    ----------
        name (str): Network name, as supplied by the caller.
        resource_group_name (str | None): Resolved resource group.
        dns (str | tuple of str | None): DNS servers override.
        has_default_dns (bool): This network provides the default DNS.
        has_default_gateway (bool): This network provides the default gateway.
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(description="Network name.")]
    resource_group_name: Annotated[
        str | None, Field(description="Resolved resource group name.")
    ]
    dns: Annotated[
        str | tuple[str, ...] | None,
        Field(default=None, description="DNS servers override."),
    ]
    has_default_dns: Annotated[
        bool, Field(default=False, description="Network providing the default DNS.")
    ]
    has_default_gateway: Annotated[
        bool,
        Field(default=False, description="Network providing the default gateway."),
    ]


class SubnetNetwork(Network):
    """Network whose interface is placed in a subnet of a virtual network."""

    virtual_network_name: Annotated[
        str, Field(min_length=1, description="Virtual network name.")
    ]
    subnet_name: Annotated[str, Field(min_length=1, description="Subnet name.")]
    security_group: Annotated[
        str | None,
        Field(default=None, description="Network security group override."),
    ]
    application_security_groups: Annotated[
        tuple[str, ...],
        Field(default=(), description="Application security group names."),
    ]
    ip_forwarding: Annotated[
        bool, Field(default=False, description="IP forwarding enabled.")
    ]
    accelerated_networking: Annotated[
        bool, Field(default=False, description="Accelerated networking enabled.")
    ]


class DynamicNetwork(SubnetNetwork):
    """Network whose addresses are assigned by the provider (DHCP)."""

    type: Annotated[Literal["dynamic"], Field(default="dynamic")]


class ManualNetwork(SubnetNetwork):
    """Network with a statically assigned private IP."""

    type: Annotated[Literal["manual"], Field(default="manual")]
    ip: Annotated[
        IPvAnyAddress | None, Field(default=None, description="Private IP address.")
    ]


class VipNetwork(Network):
    """Network exposing a public IP."""

    type: Annotated[Literal["vip"], Field(default="vip")]
    ip: Annotated[
        IPvAnyAddress | None, Field(default=None, description="Public IP address.")
    ]


class NetworkConfiguration(BaseModel):
    """All the networks of an instance."""

    model_config = ConfigDict(frozen=True)

    networks: Annotated[
        tuple[DynamicNetwork | ManualNetwork, ...],
        Field(min_length=1, description="Dynamic and manual networks, in order."),
    ]
    vip_network: Annotated[
        VipNetwork | None, Field(default=None, description="Optional VIP network.")
    ]

    def default_dns(self) -> str | tuple[str, ...] | None:
        """Return the DNS of the first network flagged as default DNS provider."""
        for network in self.networks:
            if network.has_default_dns:
                return network.dns
        return None

    def default_gateway_network(self) -> DynamicNetwork | ManualNetwork:
        """Return the network providing the default gateway.

        When no network is flagged, the first one is used.
        """
        return next(
            (n for n in self.networks if n.has_default_gateway), self.networks[0]
        )
