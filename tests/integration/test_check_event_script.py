"""Tests for the check_event operator script."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "check_event.py"


@pytest.fixture
def check_event():
    """Load scripts/check_event.py as a module."""
    spec = importlib.util.spec_from_file_location("check_event", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestLoadEvent:
    """Test load_event."""

    def test_loads_object(self, check_event, tmp_path, sample_event_data):
        """A JSON object is parsed into a ConversionEvent."""
        path = tmp_path / "event.json"
        path.write_text(json.dumps(sample_event_data))

        event = check_event.load_event(path)

        assert event.event_name == "Lead"
        assert event.event_id == "Lead-1736937000-k3j9x8a2b"

    @pytest.mark.parametrize("document", [[{"eventName": "Lead"}], "Lead", 42])
    def test_rejects_non_object(self, check_event, tmp_path, document):
        """A top-level list or scalar raises ValueError."""
        path = tmp_path / "event.json"
        path.write_text(json.dumps(document))

        with pytest.raises(ValueError, match="Expected a JSON object"):
            check_event.load_event(path)

    def test_main_exits_on_non_object(self, check_event, tmp_path, monkeypatch, capsys):
        """main reports a non-object file and exits with status 1."""
        path = tmp_path / "event.json"
        path.write_text("[]")
        monkeypatch.setattr("sys.argv", ["check_event.py", str(path)])

        with pytest.raises(SystemExit) as exc_info:
            check_event.main()

        assert exc_info.value.code == 1
        assert "Could not read event" in capsys.readouterr().out
