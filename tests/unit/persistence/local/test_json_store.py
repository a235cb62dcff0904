"""Unit tests for the JSON file local share store."""

import json

from collab.domain.model.local_share import LocalShareData
from collab.persistence.local.json_store import JsonFileLocalShareStore


class TestJsonFileLocalShareStore:
    """Tests for JsonFileLocalShareStore."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFileLocalShareStore(tmp_path / "shares.json")

        assert store.load() == {}

    def test_save_then_load(self, tmp_path):
        """Saved data is readable by a fresh store on the same path."""
        path = tmp_path / "nested" / "shares.json"
        shares = {"obj-1": LocalShareData(viewer="v" * 40, accepted=["v" * 40])}

        JsonFileLocalShareStore(path).save(shares)

        assert JsonFileLocalShareStore(path).load() == shares
        assert json.loads(path.read_text())["obj-1"]["editor"] is None

    def test_corrupt_file_reads_empty(self, tmp_path):
        """Unparseable content is treated as an empty store."""
        path = tmp_path / "shares.json"
        path.write_text("{not json")

        assert JsonFileLocalShareStore(path).load() == {}

    def test_non_object_reads_empty(self, tmp_path):
        path = tmp_path / "shares.json"
        path.write_text("[1, 2, 3]")

        assert JsonFileLocalShareStore(path).load() == {}

    def test_malformed_entry_skipped(self, tmp_path):
        """One bad entry does not hide the good ones."""
        path = tmp_path / "shares.json"
        path.write_text(
            json.dumps(
                {
                    "obj-1": {"viewer": "abc", "editor": None, "accepted": []},
                    "obj-2": {"accepted": "not-a-list"},
                }
            )
        )

        shares = JsonFileLocalShareStore(path).load()

        assert list(shares) == ["obj-1"]
        assert shares["obj-1"].viewer == "abc"

    def test_save_overwrites_corrupt_file(self, tmp_path):
        path = tmp_path / "shares.json"
        path.write_text("garbage")
        store = JsonFileLocalShareStore(path)

        store.save({"obj-1": LocalShareData(editor="e")})

        assert store.load()["obj-1"].editor == "e"
