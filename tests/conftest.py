from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / 'fixtures'


@pytest.fixture
def fixture_path():
    def path(name):
        return FIXTURES / name
    return path


@pytest.fixture
def fixture_text(fixture_path):
    def read(name):
        return fixture_path(name).read_text(encoding='utf-8')
    return read
