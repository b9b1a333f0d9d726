"""Validation script."""

import sys

from azure_netspec.config import get_settings
from azure_netspec.configurator import configure_networks
from azure_netspec.exceptions import InvalidYamlError, NetworkSpecError
from azure_netspec.loaders import read_networks
from azure_netspec.logger import create_logger
from azure_netspec.parser import parser


def main(log_level: str, networks_file: str | None = None) -> None:
    """Main function.

    Read the networks of an instance from a YAML file, validate them using the
    application settings as global defaults and print the resulting descriptors as
    JSON on stdout.

    Exit with status 1 when the file can't be read or a network is not valid. The
    error message, which names the missing field, is logged as it is.
    """
    settings = get_settings()
    logger = create_logger(settings.APP_NAME, level=log_level)

    fname = networks_file or settings.NETWORKS_FILE
    if fname is None:
        logger.error("No networks file given.")
        sys.exit(1)

    try:
        networks = read_networks(fname, logger=logger)
    except InvalidYamlError:
        sys.exit(1)

    try:
        configuration = configure_networks(
            settings.global_defaults(), networks, logger=logger
        )
    except NetworkSpecError as e:
        logger.error(e.message)
        sys.exit(1)

    logger.info("Validated %d network(s)", len(configuration.networks))
    print(configuration.model_dump_json(indent=2))


def cli() -> None:
    """Console script entry point."""
    args = parser.parse_args()
    main(args.loglevel.upper(), args.networks_file)


if __name__ == "__main__":
    cli()
