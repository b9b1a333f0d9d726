from typing import Any

from tests.utils import random_lower_string


def global_defaults_dict() -> dict[str, Any]:
    """Dict with the global defaults minimal attributes."""
    return {"resource_group_name": random_lower_string()}


def cloud_properties_dict() -> dict[str, Any]:
    """Dict with subnet cloud properties minimal attributes."""
    return {
        "virtual_network_name": random_lower_string(),
        "subnet_name": random_lower_string(),
    }


def network_spec_dict(network_type: str | None = None) -> dict[str, Any]:
    """Dict with dynamic or manual network spec minimal attributes."""
    d = {"cloud_properties": cloud_properties_dict()}
    if network_type is not None:
        d["type"] = network_type
    return d


def full_network_spec_dict() -> dict[str, Any]:
    """Dict with all the attributes of a dynamic network spec."""
    return {
        "default": ["dns", "gateway"],
        "dns": random_lower_string(),
        "cloud_properties": {
            **cloud_properties_dict(),
            "resource_group_name": random_lower_string(),
            "security_group": random_lower_string(),
            "application_security_groups": [
                random_lower_string(),
                random_lower_string(),
            ],
        },
    }
