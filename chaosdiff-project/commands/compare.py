# The command: chaosdiff -n <new-dir> -p <old-dir> [-o <output>] [-v] [--nu]
# What it does: Compares every program URL list in the new directory with the same-named list in the old directory and writes added, removed and unchanged lines per program
# How it does: It lists the *.txt files of the new directory in sorted order. For each one it loads both versions into sets (a missing or unreadable file becomes an empty set), computes set differences and the intersection, and writes the sorted results to <output>/<program>/. Write failures are recorded per program and the batch carries on
# What data structure it uses: Sets (for O(1) average membership tests while diffing), List (sorted directory listing and output lines), Named tuple (the immutable run configuration)

import configparser
import logging
import os
import sys
from utils import config as config_utils, diff as diff_utils, lines as lines_utils
from utils.summary import ProgramResult, RunSummary

logger = logging.getLogger(__name__)

OUTPUT_FILES = ('added', 'removed', 'unchanged')

def run(args): # Entry point for the CLI: builds the config, runs the comparison and reports the summary
    file_values = {}
    if getattr(args, 'config', None):
        try:
            file_values = config_utils.read_config_file(args.config)
        except (OSError, ValueError, configparser.Error) as e:
            print(f"fatal: could not read config file: {e}", file=sys.stderr)
            sys.exit(1)

    try:
        run_config = config_utils.build_run_config(args, file_values)
    except ValueError as e:
        print(f"fatal: {e}", file=sys.stderr)
        print_usage = getattr(args, 'print_usage', None)
        if print_usage:
            print_usage(sys.stderr)
        sys.exit(1)

    try:
        filenames = list_program_files(run_config.new_dir, run_config.suffix)
    except (OSError, ValueError) as e:  # ValueError: embedded NUL in path
        print(f"fatal: failed to read new directory '{run_config.new_dir}': {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Starting comparison:\n  OLD: %s\n  NEW: %s", run_config.old_dir, run_config.new_dir)

    summary = compare_directories(run_config, filenames)

    print(summary.format())
    print(f"Comparison completed. Results stored in: {run_config.output_dir}")
    return summary

def list_program_files(new_dir, suffix=config_utils.DEFAULT_SUFFIX): # Returns the sorted names of regular files in new_dir ending in suffix. Raises OSError (or ValueError for a NUL in the path) if new_dir cannot be listed
    with os.scandir(new_dir) as entries:
        names = [entry.name for entry in entries
                 if entry.is_file() and entry.name.endswith(suffix)]
    return sorted(names)

def program_name(filename, suffix=config_utils.DEFAULT_SUFFIX):
    if suffix and filename.endswith(suffix):
        return filename[:-len(suffix)]
    return filename

def compare_directories(run_config, filenames=None): # Runs compare_program for every program file in the new directory (listed here unless given)
    summary = RunSummary()
    if filenames is None:
        filenames = list_program_files(run_config.new_dir, run_config.suffix)
    for filename in filenames:
        summary.add(compare_program(run_config, filename))
    return summary

def compare_program(run_config, filename): # Loads, compares and writes the results for a single program
    program = program_name(filename, run_config.suffix)
    result = ProgramResult(program)

    new_path = os.path.join(run_config.new_dir, filename)
    old_path = os.path.join(run_config.old_dir, filename)

    sides = {}
    for side, path in (('old', old_path), ('new', new_path)):
        lines, error = lines_utils.read_lines(path)
        if error:
            result.read_errors.append((side, path, error))
            # A missing old file is the normal case for a newly scanned program
            level = logging.WARNING if run_config.verbose else logging.DEBUG
            logger.log(level, "%s: treating unreadable %s file as empty: %s", program, side, error)
        sides[side] = lines

    changes = diff_utils.compare_sets(sides['old'], sides['new'])
    result.added = len(changes['added'])
    result.removed = len(changes['removed'])
    result.unchanged = len(changes['unchanged'])

    result_dir = os.path.join(run_config.output_dir, program)
    for name in OUTPUT_FILES:
        if name == 'unchanged' and run_config.no_unchanged:
            continue
        out_path = os.path.join(result_dir, f"{name}.txt")
        try:
            lines_utils.write_lines(changes[name], out_path)
        except (OSError, ValueError) as e:
            result.write_errors.append((out_path, str(e)))
            logger.error("%s: could not write %s: %s", program, out_path, e)

    if run_config.verbose:
        logger.info("%-25s → Added: %3d | Removed: %3d | Unchanged: %3d",
                    program, result.added, result.removed, result.unchanged)
    return result
