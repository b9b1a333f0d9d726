"""Read the networks of an instance from a YAML file."""

from logging import Logger
from pathlib import Path
from typing import Any

import yaml

from azure_netspec.exceptions import InvalidYamlError


def read_networks(fname: str | Path, *, logger: Logger) -> dict[str, Any]:
    """Load the network specifications from a YAML file.

    The file content is a mapping with the network names as keys and the network
    specifications as values. An optional top level 'networks' key is accepted.

    Args:
        fname (str | Path): path to the YAML file.
        logger (Logger): Logger instance.

    Returns:
        dict of {str: Any}: untyped network specifications.

    Raises:
        InvalidYamlError when the file does not exist, is not parsable, is empty or
        does not contain a mapping.

    """
    msg = f"Loading network specifications from file: {fname}"
    logger.info(msg)

    try:
        with open(fname) as f:
            config = yaml.safe_load(f)
    except FileNotFoundError as e:
        msg = f"Error reading file {fname}"
        logger.error(msg)
        raise InvalidYamlError(msg) from e
    except yaml.YAMLError as e:
        msg = f"Error parsing file {fname}"
        logger.error(msg)
        raise InvalidYamlError(msg) from e

    if not config:  # empty string/file
        msg = f"Empty configuration in file {fname}"
        logger.error(msg)
        raise InvalidYamlError(msg)

    if isinstance(config, dict) and isinstance(config.get("networks"), dict):
        config = config["networks"]
    if not isinstance(config, dict):
        msg = f"Invalid YAML file {fname}: a mapping of networks is expected"
        logger.error(msg)
        raise InvalidYamlError(msg)

    logger.debug(config)
    return config
