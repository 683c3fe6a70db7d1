import argparse
import logging
from pathlib import Path
import sys
import yaml


def load_config(config_file=Path(__file__).parent.parent / "config.yaml"):
    """
    Load configuration options from a YAML file.
    Returns an empty dict when the file is missing or empty.
    """
    config_file = Path(config_file)
    if not config_file.is_file():
        logging.debug(f"No config file at {config_file}")
        return {}
    with config_file.open("r") as file:
        return yaml.safe_load(file) or {}


def config_to_args(config):
    """Turn config keys into the command-line arguments they stand for."""
    simulated_args = []
    for key, value in config.items():
        if key == "config" or value is None or value is False:
            continue
        if value is True:
            simulated_args.append(f"--{key}")
        else:
            # One token, so values starting with "-" stay values
            simulated_args.append(f"--{key}={value}")
    return simulated_args


def build_parser():
    parser = argparse.ArgumentParser(
        prog="wlinflate",
        description="Expand a wordlist with prepends, appends, extensions, and substitutions.",
    )
    parser.add_argument(
        "-w", "--wordlist",
        type=Path,
        required=True,
        help="Path to the wordlist."
    )
    parser.add_argument(
        "-p", "--prepend",
        type=str,
        help="Prepend wordlist words (csv)."
    )
    parser.add_argument(
        "-a", "--append",
        type=str,
        help="Append wordlist words (csv)."
    )
    parser.add_argument(
        "-x", "--extensions",
        type=str,
        help="Extensions to add to each word (csv, e.g. '.txt,.bak')."
    )
    parser.add_argument(
        "-s", "--swap",
        type=str,
        help="Swap in for entries that contain {SWAP} (csv)."
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: stdout)."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show configuration, progress, and line counts on stderr."
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML config to read options from. Command-line arguments take precedence."
    )
    return parser


def load_args(config=None, argv=None):
    """
    Parse command-line arguments, falling back to config when none are given.
    """
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    # An explicit --config replaces the default config, CLI arguments override it
    config_parser = argparse.ArgumentParser(prog="wlinflate", add_help=False)
    config_parser.add_argument("-c", "--config", type=Path)
    known, argv = config_parser.parse_known_args(argv)
    if known.config:
        simulated_args = config_to_args(load_config(known.config))
        logging.debug(f"Simulated arguments: {simulated_args}")
        argv = simulated_args + argv

    # Otherwise handle simulated arguments only when there are no CLI arguments
    elif config and not argv:
        simulated_args = config_to_args(config)
        logging.debug(f"Simulated arguments: {simulated_args}")
        argv = simulated_args

    args = parser.parse_args(argv)
    args.config = known.config
    return args
