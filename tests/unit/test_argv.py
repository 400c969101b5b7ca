"""
Unit tests for argv flag lookup.
"""

import pytest
from unittest.mock import patch

from swacli.utils import argv


class TestArgv:
    """Test cases for the argv helper."""

    def test_key_equals_value(self):
        assert argv('--port', ['swacli', '--port=4242']) == '4242'

    def test_key_space_value(self):
        assert argv('--port', ['swacli', '--port', '4242']) == '4242'

    def test_value_is_trimmed(self):
        assert argv('--host', ['swacli', '--host=  0.0.0.0 ']) == '0.0.0.0'
        assert argv('--host', ['swacli', '--host', ' 127.0.0.1 ']) == '127.0.0.1'

    def test_empty_value_after_equals_is_absent(self):
        assert argv('--key', ['swacli', '--key=']) is None
        assert argv('--key', ['swacli', '--key=   ']) is None

    def test_switch_at_end_of_list(self):
        assert argv('--verbose', ['swacli', 'start', '--verbose']) is True

    def test_switch_followed_by_another_flag(self):
        assert argv('--verbose', ['swacli', '--verbose', '--port', '4242']) is True

    def test_flag_not_present(self):
        assert argv('--port', ['swacli', 'start', '--host', 'localhost']) is None

    def test_empty_token_list(self):
        assert argv('--port', []) is None

    def test_later_flag_found_after_unrelated_flag(self):
        tokens = ['swacli', '--host', 'localhost', '--open', '--port', '4242']
        assert argv('--port', tokens) == '4242'

    def test_unrelated_key_value_does_not_stop_scan(self):
        assert argv('--port', ['swacli', '--host=localhost', '--port=8080']) == '8080'

    def test_first_occurrence_wins(self):
        assert argv('--port', ['swacli', '--port=1111', '--port', '2222']) == '1111'

    def test_no_prefix_matching(self):
        assert argv('--port', ['swacli', '--ports=4242', '--po', '4242']) is None

    def test_plain_tokens_are_not_flags(self):
        assert argv('--port', ['swacli', 'port', '4242']) is None

    def test_flag_with_surrounding_whitespace_matches(self):
        assert argv('--port', ['swacli', '--port ', '4242']) == '4242'

    def test_value_stops_at_second_equals(self):
        assert argv('--define', ['swacli', '--define=A=1']) == 'A'
        assert argv('--define', ['swacli', '--define==1']) is None

    def test_empty_next_token_keeps_scanning(self):
        assert argv('--name', ['swacli', '--name', '   ']) is None
        assert argv('--name', ['swacli', '--name', '', '--name=app']) == 'app'

    def test_defaults_to_sys_argv(self):
        with patch('sys.argv', ['swacli', '--config-name', 'app']):
            assert argv('--config-name') == 'app'

    @pytest.mark.parametrize('tokens', [
        ['swacli'],
        ['swacli', 'start', './app'],
        ['swacli', '--run', 'npm:dev', '--verbose'],
    ])
    def test_absent_flag_is_none(self, tokens):
        assert argv('--port', tokens) is None
