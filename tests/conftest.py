"""
Pytest configuration and shared fixtures for swacli tests.
"""

import pytest
import argparse
from unittest.mock import Mock
from rich.console import Console
import tempfile
import json

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from swacli.command_handler import CommandHandler
from swacli.configuration_manager import ConfigurationManager, SWACLIConfig


@pytest.fixture
def mock_logger():
    """Mock logger collaborator with a non-terminating error method."""
    return Mock()


@pytest.fixture
def mock_console():
    """Mock Rich console."""
    return Mock(spec=Console)


@pytest.fixture
def app_dir():
    """Temporary app folder containing dist/server.js."""
    with tempfile.TemporaryDirectory() as directory:
        os.makedirs(os.path.join(directory, 'dist'))
        with open(os.path.join(directory, 'dist', 'server.js'), 'w') as f:
            f.write("console.log('ok');\n")
        yield directory


@pytest.fixture
def swa_config(app_dir):
    """Effective configuration rooted at the temporary app folder."""
    return SWACLIConfig(app_location=app_dir)


@pytest.fixture
def temp_config_file(app_dir):
    """Create a temporary swa-cli.config.json with two configurations."""
    config_data = {
        '$schema': 'https://aka.ms/azure/static-web-apps-cli/schema',
        'configurations': {
            'app': {
                'appLocation': app_dir,
                'outputLocation': 'dist',
                'run': 'npm:dev',
                'port': 4242
            },
            'docs': {
                'appLocation': 'docs',
                'run': 'npx:vitepress',
                'host': '0.0.0.0'
            }
        }
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        json.dump(config_data, f)
        config_file = f.name

    yield config_file

    os.unlink(config_file)


@pytest.fixture
def sample_args():
    """Create sample arguments for testing."""
    args = argparse.Namespace()
    args.command = 'resolve'
    args.startup_script = 'npm:build'
    args.format = 'text'
    args.config_name = None
    args.dry_run = False
    return args


@pytest.fixture
def command_handler(sample_args, mock_console, temp_config_file):
    """Create a CommandHandler instance for the 'app' configuration."""
    configuration_manager = ConfigurationManager(temp_config_file)
    config = configuration_manager.build_config('app')
    return CommandHandler(
        args=sample_args,
        console=mock_console,
        configuration_manager=configuration_manager,
        config=config
    )
