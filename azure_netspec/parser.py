"""Command line arguments parser."""

import argparse
import logging

log_values = [i.lower() for i in logging.getLevelNamesMapping().keys()]

parser = argparse.ArgumentParser(
    description="Validate the networks of an instance and print their descriptors."
)
parser.add_argument(
    "-l",
    "--loglevel",
    default="warning",
    choices=log_values,
    help=f"Provide logging level. Valid values: {log_values}. \
        Example --loglevel debug, default=warning",
)
parser.add_argument(
    "networks_file",
    nargs="?",
    default=None,
    help="YAML file with the networks to validate. Defaults to the NETWORKS_FILE \
        setting",
)
