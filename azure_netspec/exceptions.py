"""Network specification errors.

All of them are input validation failures: they are never transient and must reach
the caller unchanged.
"""


class NetworkSpecError(Exception):
    """Base class for the errors raised while validating network specifications."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class InvalidNetworkSpecError(NetworkSpecError):
    """The network specification is not a mapping or has values of the wrong type."""


class MissingCloudPropertiesError(NetworkSpecError):
    """The network specification has no cloud_properties mapping."""

    def __init__(self, network_type: str = "dynamic", *args):
        self.network_type = network_type
        super().__init__(f"cloud_properties required for {network_type} network", *args)


class MissingVirtualNetworkNameError(NetworkSpecError):
    """cloud_properties has no virtual_network_name or it is null."""

    def __init__(self, network_type: str = "dynamic", *args):
        self.network_type = network_type
        super().__init__(
            f"virtual_network_name required for {network_type} network", *args
        )


class MissingSubnetNameError(NetworkSpecError):
    """cloud_properties has no subnet_name or it is null."""

    def __init__(self, network_type: str = "dynamic", *args):
        self.network_type = network_type
        super().__init__(f"subnet_name required for {network_type} network", *args)


class InvalidNetworkTypeError(NetworkSpecError):
    def __init__(self, network_type: str, *args):
        self.network_type = network_type
        super().__init__(
            f"Invalid network type '{network_type}' for Azure, can only handle "
            "'dynamic', 'vip', or 'manual' network types",
            *args,
        )


class MultipleVipNetworksError(NetworkSpecError):
    def __init__(self, network_name: str, *args):
        self.network_name = network_name
        super().__init__(f"More than one vip network for '{network_name}'", *args)


class MissingNetworkError(NetworkSpecError):
    def __init__(self, *args):
        super().__init__(
            "At least one dynamic or manual network should be defined", *args
        )


class InvalidYamlError(Exception):
    """The networks manifest can't be read or parsed."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args)
