import json
from pathlib import Path

import pytest

from localshortener.dao.file import ShortURLFileDAO


@pytest.fixture
def data_file(tmp_path) -> Path:
    return tmp_path / 'url_data.json'


@pytest.fixture
def dao(data_file) -> ShortURLFileDAO:
    return ShortURLFileDAO(data_file=data_file)


@pytest.fixture
def write_snapshot(data_file):
    """Write a raw snapshot document (or raw text) to the data file."""

    def _write(document) -> Path:
        text = document if isinstance(document, str) else json.dumps(document)
        data_file.write_text(text, encoding='utf-8')
        return data_file

    return _write
