import string
from ipaddress import IPv4Address, IPv6Address
from random import choices, randint


def random_ip(version: str = "v4") -> IPv4Address | IPv6Address:
    """Return a random IP address of the given version."""
    if version == "v4":
        return IPv4Address(randint(0, 2**32 - 1))
    elif version == "v6":
        return IPv6Address(randint(0, 2**128 - 1))


def random_lower_string() -> str:
    """Return a generic random string."""
    return "".join(choices(string.ascii_lowercase, k=32))
