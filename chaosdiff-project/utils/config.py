# What it does: Builds the immutable run configuration from command-line arguments and an optional INI config file
# What data structure it uses: Named tuple (the frozen run configuration), Map / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
from typing import NamedTuple

CONFIG_SECTION = 'compare'
DEFAULT_OUTPUT_DIR = 'results'
DEFAULT_SUFFIX = '.txt'


class RunConfig(NamedTuple):
    new_dir: str
    old_dir: str
    output_dir: str = DEFAULT_OUTPUT_DIR
    verbose: bool = False
    no_unchanged: bool = False
    suffix: str = DEFAULT_SUFFIX


def read_config_file(config_path): # Reads the [compare] section of a config file into a dict of typed values
    if not os.path.isfile(config_path):
        raise FileNotFoundError(f"config file '{config_path}' does not exist")

    config = configparser.ConfigParser()
    with open(config_path, 'r', encoding='utf-8') as f:
        config.read_file(f)

    if not config.has_section(CONFIG_SECTION):
        return {}

    values = {}
    for option, key in (('new', 'new_dir'), ('old', 'old_dir'), ('output', 'output_dir'), ('suffix', 'suffix')):
        value = config.get(CONFIG_SECTION, option, fallback=None)
        if value:
            values[key] = value
    for option in ('verbose', 'no_unchanged'):
        if config.has_option(CONFIG_SECTION, option):
            # getboolean raises ValueError on anything but yes/no/true/false/on/off/1/0
            values[option] = config.getboolean(CONFIG_SECTION, option)
    return values


def build_run_config(args, file_values=None): # Merges flags over config file values over defaults. Raises ValueError if a directory is missing
    file_values = file_values or {}

    def pick(name, default=None):
        value = getattr(args, name, None)
        if value is not None:
            return value
        return file_values.get(name, default)

    new_dir = pick('new_dir')
    old_dir = pick('old_dir')
    if not new_dir or not old_dir:
        raise ValueError("Both --new (today) and --old (yesterday) directories must be provided.")

    return RunConfig(
        new_dir=new_dir,
        old_dir=old_dir,
        output_dir=pick('output_dir', DEFAULT_OUTPUT_DIR),
        verbose=bool(pick('verbose', False)),
        no_unchanged=bool(pick('no_unchanged', False)),
        suffix=pick('suffix', DEFAULT_SUFFIX),
    )
