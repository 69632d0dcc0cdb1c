"""Unit tests for the console front-end in cli.py

Test coverage includes:

1. One-shot subcommands
   - shorten prints the full short URL and persists it.
   - retrieve accepts full short URLs and bare shortcodes.
   - stats prints both counters.
   - Failures return exit code 1.

2. Configuration overrides
   - --data-file and --domain override the resolved configuration.

3. Interactive menu
   - Shorten/retrieve/statistics flows, invalid choices, exit and end of input.
   - The store is saved when the menu ends.

4. Configuration errors
   - A malformed configuration exits with code 2 and prints the error code.
"""

import json
from unittest.mock import MagicMock

import pytest

from localshortener import cli
from localshortener.constants import ENV


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch, tmp_path):
    for name in (*ENV.App, *ENV.Store):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(ENV.App.PROJECT_ROOT, str(tmp_path))
    monkeypatch.setattr(cli, 'initialize_logging', MagicMock())


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / 'url_data.json'


@pytest.fixture
def run(data_file):
    def _run(*args: str) -> int:
        return cli.main(['--data-file', str(data_file), *args])

    return _run


@pytest.fixture
def feed_input(monkeypatch):
    """Answer input() prompts from a list; raise EOFError once exhausted."""

    def _feed(*answers: str) -> None:
        remaining = list(answers)

        def fake_input(prompt=''):
            print(prompt, end='')
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr('builtins.input', fake_input)

    return _feed


def shortcode_from(output: str) -> str:
    line = next(line for line in output.splitlines() if 'Short URL: ' in line)
    return line.rsplit('/', 1)[-1]


# -------------------------------
# 1. One-shot subcommands
# -------------------------------


def test_shorten_command(run, data_file, capsys):
    assert run('shorten', 'https://www.example.com') == 0

    out = capsys.readouterr().out
    assert out.startswith('Short URL: http://short.rl/')
    shortcode = shortcode_from(out)
    assert json.loads(data_file.read_text(encoding='utf-8'))['ShortToUrl'] == {shortcode: 'https://www.example.com'}


def test_shorten_command_is_idempotent_across_runs(run, capsys):
    run('shorten', 'https://www.example.com')
    first = capsys.readouterr().out
    run('shorten', 'https://www.example.com')
    second = capsys.readouterr().out

    assert first == second


def test_shorten_command_blank_url(run, capsys):
    assert run('shorten', '   ') == 1
    assert 'URL cannot be empty.' in capsys.readouterr().out


@pytest.mark.parametrize('as_full_url', [True, False])
def test_retrieve_command(run, capsys, as_full_url):
    run('shorten', 'https://www.example.com')
    full_url = capsys.readouterr().out.strip().removeprefix('Short URL: ')
    argument = full_url if as_full_url else full_url.rsplit('/', 1)[-1]

    assert run('retrieve', argument) == 0
    assert capsys.readouterr().out.strip() == 'Original URL: https://www.example.com'


def test_retrieve_command_not_found(run, capsys):
    assert run('retrieve', 'http://short.rl/nope00') == 1
    assert 'Short URL not found.' in capsys.readouterr().out


def test_retrieve_command_blank(run, capsys):
    assert run('retrieve', ' ') == 1
    assert 'Short URL cannot be empty.' in capsys.readouterr().out


def test_stats_command(run, capsys):
    run('shorten', 'https://a.example.com')
    run('shorten', 'https://b.example.com')
    capsys.readouterr()

    assert run('stats') == 0
    out = capsys.readouterr().out
    assert 'Total URLs: 2' in out
    assert 'Unique short keys: 2' in out


def test_generation_failure(run, capsys, monkeypatch):
    monkeypatch.setattr('localshortener.dao.file.ShortURLFileDAO.exists', lambda self, shortcode, **kwargs: True)

    assert run('shorten', 'https://www.example.com') == 1
    assert 'Failed to generate a unique short URL' in capsys.readouterr().out


# -------------------------------
# 2. Configuration overrides
# -------------------------------


def test_domain_override(run, capsys):
    run('--domain', 'https://sho.rt/', 'shorten', 'https://www.example.com')
    assert capsys.readouterr().out.startswith('Short URL: https://sho.rt/')


def test_config_file(tmp_path, data_file, capsys):
    config_file = tmp_path / 'settings.yml'
    config_file.write_text(f'store:\n  domain: https://yaml.rt/\n  data_file: {data_file}\n', encoding='utf-8')

    assert cli.main(['--config', str(config_file), 'shorten', 'https://www.example.com']) == 0

    assert capsys.readouterr().out.startswith('Short URL: https://yaml.rt/')
    assert data_file.exists()


def test_log_level_is_forwarded(run):
    run('--log-level', 'DEBUG', 'stats')
    cli.initialize_logging.assert_called_once_with('DEBUG')


# -------------------------------
# 3. Interactive menu
# -------------------------------


def test_menu_shorten_retrieve_and_exit(run, feed_input, capsys, data_file):
    feed_input('1', 'https://www.example.com', '4')
    assert run() == 0
    shortcode = shortcode_from(capsys.readouterr().out)

    feed_input('2', f'http://short.rl/{shortcode}', '3', '4')
    assert run() == 0

    out = capsys.readouterr().out
    assert 'Original URL: https://www.example.com' in out
    assert 'Total URLs: 1' in out


def test_menu_invalid_choice(run, feed_input, capsys):
    feed_input('9', '4')
    run()
    assert 'Invalid choice. Try again.' in capsys.readouterr().out


def test_menu_empty_inputs(run, feed_input, capsys):
    feed_input('1', '', '2', '  ', '4')
    run()

    out = capsys.readouterr().out
    assert 'URL cannot be empty.' in out
    assert 'Short URL cannot be empty.' in out


@pytest.mark.parametrize('answers', [('4',), ()])
def test_menu_saves_on_exit(run, feed_input, data_file, answers):
    """Choosing exit or closing stdin both save the store."""
    feed_input(*answers)
    run()

    assert json.loads(data_file.read_text(encoding='utf-8')) == {'UrlToShort': {}, 'ShortToUrl': {}}


# -------------------------------
# 4. Configuration errors
# -------------------------------


def test_malformed_config_reports_error_code(tmp_path, capsys):
    config_file = tmp_path / 'settings.yml'
    config_file.write_text('store:\n  - https://yaml.rt/\n', encoding='utf-8')

    assert cli.main(['--config', str(config_file), 'stats']) == 2

    err = capsys.readouterr().err
    assert 'config:bad_configuration_error' in err
    assert "'store' section" in err
