# Shared pytest fixtures for chaosdiff tests

import pytest
import os
import sys
import shutil
import tempfile

# Add chaosdiff-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'chaosdiff-project'))

from utils.config import RunConfig


def write_file(path, content):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def read_file(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def scan_dirs(temp_dir):
    # Creates empty old/new scan directories and returns (new_dir, old_dir, output_dir)
    new_dir = os.path.join(temp_dir, 'chaos-output-2025-06-08')
    old_dir = os.path.join(temp_dir, 'chaos-output-2025-06-07')
    output_dir = os.path.join(temp_dir, 'results')
    os.makedirs(new_dir)
    os.makedirs(old_dir)
    return new_dir, old_dir, output_dir


@pytest.fixture
def populated_scans(scan_dirs):
    # Two programs present in both snapshots, one new program and one program that vanished
    new_dir, old_dir, output_dir = scan_dirs

    write_file(os.path.join(old_dir, 'acme.txt'), 'https://a.acme.com\nhttps://b.acme.com\nhttps://c.acme.com\n')
    write_file(os.path.join(new_dir, 'acme.txt'), 'https://b.acme.com\nhttps://c.acme.com\nhttps://d.acme.com\n')

    write_file(os.path.join(old_dir, 'globex.txt'), '  https://x.globex.com  \n\n')
    write_file(os.path.join(new_dir, 'globex.txt'), 'https://x.globex.com\n')

    write_file(os.path.join(new_dir, 'initech.txt'), 'https://initech.com\nhttps://api.initech.com\n')

    write_file(os.path.join(old_dir, 'umbrella.txt'), 'https://umbrella.com\n')

    return new_dir, old_dir, output_dir


@pytest.fixture
def run_config(scan_dirs):
    new_dir, old_dir, output_dir = scan_dirs
    return RunConfig(new_dir=new_dir, old_dir=old_dir, output_dir=output_dir)


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
