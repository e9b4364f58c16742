"""Tests for configuration and models."""

from itombs.config import CanvasSettings, DatabaseSettings, ServerSettings, settings
from itombs.models import RELATIONSHIP_CHOICES, NewRelative, RelativeRecord


class TestConfiguration:
    """Test configuration loading."""

    def test_settings_import(self):
        assert settings is not None
        assert settings.root_placeholder_name == "You"

    def test_canvas_defaults(self):
        canvas = CanvasSettings()
        assert canvas.mobile_breakpoint == 768
        assert canvas.desktop_max_width == 1000
        assert canvas.drag_threshold == 5.0

    def test_canvas_env_override(self, monkeypatch):
        monkeypatch.setenv("CANVAS_DRAG_THRESHOLD", "8")
        assert CanvasSettings().drag_threshold == 8.0

    def test_database_path(self):
        assert DatabaseSettings().tree_db_path.endswith("tree.db")

    def test_server_defaults(self):
        server = ServerSettings()
        assert server.ui_port == 8080
        assert server.api_base_url.startswith("http")


class TestModels:
    """Test data models."""

    def test_vocabulary(self):
        assert RELATIONSHIP_CHOICES[0] == "self"
        assert "niece" in RELATIONSHIP_CHOICES
        assert len(RELATIONSHIP_CHOICES) == 12

    def test_record_from_api_row(self):
        record = RelativeRecord.model_validate({
            "tree_id": 1, "user_id": 2, "relative_name": "Me",
            "relationship": "Self", "profile_url": None,
        })
        assert record.is_self
        assert record.name == "Me"

    def test_new_relative_aliases(self):
        body = NewRelative.model_validate({"userId": "4", "relativeName": "Bob"})
        assert body.owner_id == 4
        assert body.name == "Bob"
        assert body.relationship is None
