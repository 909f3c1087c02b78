import pytest
from fastapi.testclient import TestClient

from services.config_manager import CONFIG_DIR_ENV, ConfigManager
from services.line_tokenizer import split_lines


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config manager at an empty temporary directory."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()


@pytest.fixture
def client(config_dir):
    """Test client with lifespan events and isolated configuration."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


def _check_well_formed(result, old_text, new_text):
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)

    old_numbers = [r.old_line_number for r in result.rows if r.old_line_number is not None]
    new_numbers = [r.new_line_number for r in result.rows if r.new_line_number is not None]
    assert old_numbers == list(range(1, len(old_lines) + 1))
    assert new_numbers == list(range(1, len(new_lines) + 1))

    for row in result.rows:
        assert row.old_line_number is not None or row.new_line_number is not None
        if row.kind == "deleted":
            assert row.new_line_number is None
            assert row.text == old_lines[row.old_line_number - 1].text
        elif row.kind == "inserted":
            assert row.old_line_number is None
            assert row.text == new_lines[row.new_line_number - 1].text
        else:
            assert row.old_line_number is not None and row.new_line_number is not None
            assert row.text == old_lines[row.old_line_number - 1].text
        if row.kind == "modified":
            assert row.new_text == new_lines[row.new_line_number - 1].text


@pytest.fixture
def assert_well_formed():
    """Checker for the numbering and coverage invariants of a DiffResult."""
    return _check_well_formed
