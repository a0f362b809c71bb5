"""
Command-line interface tests
"""
import json

import pytest

from main import main


class TestCommands:
    def test_soundex(self, capsys):
        main(["soundex", "Washington", "Ashcraft"])
        out = capsys.readouterr().out
        assert "Washington\tW-252" in out
        assert "Ashcraft\tA-261" in out

    def test_distance(self, capsys):
        main(["distance", "kitten", "sitting"])
        assert capsys.readouterr().out.strip() == "3"

    def test_count_with_precision(self, capsys):
        main(["count", "average_chars_per_token", "--text", "Eye of The Prophet", "--precision", "1"])
        assert capsys.readouterr().out.strip() == "3.8"

    def test_count_with_exclude(self, capsys):
        main(["count", "token_count", "--text", "The Prophet", "--exclude", "the"])
        assert capsys.readouterr().out.strip() == "1"

    def test_stats_json(self, capsys):
        main(["stats", "--text", "the prophet the madman", "--format", "json", "--top-k", "1"])
        data = json.loads(capsys.readouterr().out)
        assert data["token_count"] == 4
        assert data["top_tokens"] == [["the", 2, 0.5]]

    def test_stats_from_file(self, capsys, tmp_path):
        path = tmp_path / "book.txt"
        path.write_text("Sand and Foam", encoding="utf-8")
        main(["stats", "--file", str(path), "--format", "list"])
        assert "token_count: 3" in capsys.readouterr().out


class TestErrors:
    def test_invalid_name_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["soundex", "1abc"])
        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["stats", "--file", str(tmp_path / "missing.txt")])
        assert excinfo.value.code == 1

    def test_unknown_operation_rejected_by_parser(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["count", "nope", "--text", "x"])
        assert excinfo.value.code == 2
