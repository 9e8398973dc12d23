"""
Tests for the HTTP surface - routers wired into the FastAPI app
"""

from __future__ import annotations


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "siftview-backend"}


class TestContentEndpoints:
    """Detection and formatting endpoints"""

    def test_detect_by_extension(self, client):
        response = client.post("/api/content/detect", json={"content": "anything", "extension": "json"})
        assert response.status_code == 200
        assert response.json() == {"kind": "json", "confidence": 0.95}

    def test_detect_heuristic(self, client):
        response = client.post("/api/content/detect", json={"content": '{"a":1}'})
        assert response.json() == {"kind": "json", "confidence": 0.85}

    def test_segments(self, client):
        content = '123\n123\n{"a": 1}\n\nselect * from t'
        response = client.post("/api/content/segments", json={"content": content})
        assert response.status_code == 200
        assert response.json() == [
            {"start_line": 1, "end_line": 2, "kind": "text"},
            {"start_line": 3, "end_line": 3, "kind": "json"},
            {"start_line": 5, "end_line": 5, "kind": "text"},
        ]

    def test_format_json(self, client):
        response = client.post("/api/content/format/json", json={"content": '{"a":1}'})
        assert response.status_code == 200
        assert response.json() == {"content": '{\n  "a": 1\n}'}

    def test_format_json_parse_error(self, client):
        response = client.post("/api/content/format/json", json={"content": "{ invalid }"})
        assert response.status_code == 400
        assert "line 1" in response.json()["detail"]

    def test_format_json_rejects_nan(self, client):
        response = client.post("/api/content/format/json", json={"content": "[NaN, Infinity]"})
        assert response.status_code == 400
        assert "NaN" in response.json()["detail"]

    def test_format_segmented(self, client):
        payload = {
            "content": 'note\n{"a":1}\nb=2\na=1',
            "segments": [
                {"start_line": 1, "end_line": 1, "kind": "text"},
                {"start_line": 2, "end_line": 2, "kind": "json"},
                {"start_line": 3, "end_line": 4, "kind": "properties"},
            ],
        }
        response = client.post("/api/content/format/segmented", json=payload)
        assert response.status_code == 200
        assert response.json() == {"content": 'note\n{\n  "a": 1\n}\na=1\nb=2'}

    def test_format_segmented_never_fails(self, client):
        payload = {
            "content": "{ broken",
            "segments": [
                {"start_line": 1, "end_line": 1, "kind": "json"},
                {"start_line": 7, "end_line": 3, "kind": "mystery"},
            ],
        }
        response = client.post("/api/content/format/segmented", json=payload)
        assert response.status_code == 200
        assert response.json() == {"content": "{ broken"}

    def test_format_segmented_without_segments(self, client):
        response = client.post("/api/content/format/segmented", json={"content": "[1]"})
        assert response.json() == {"content": "[\n  1\n]"}


class TestDiffEndpoints:
    """Unified and structured diff endpoints"""

    def test_unified(self, client):
        response = client.post("/api/diff/unified", json={"left": "a\nb\n", "right": "a\nc\n"})
        assert response.status_code == 200
        diff = response.json()["diff"]
        assert diff.startswith("--- current\n+++ clipboard\n")
        assert "-b\n+c\n" in diff

    def test_structured(self, client):
        response = client.post("/api/diff/structured", json={"left": "1\n2\n3\n", "right": "1\n2\n"})
        assert response.status_code == 200
        assert response.json() == {
            "left_label": "current",
            "right_label": "clipboard",
            "blocks": [
                {"type": "unchanged", "count": 2, "lines": ["1", "2"]},
                {"type": "changed", "old_lines": ["3"], "new_lines": []},
            ],
        }


class TestFileEndpoints:
    """Read/write endpoints and their error mapping"""

    def test_read(self, client, tmp_path):
        path = tmp_path / "data.JSON"
        path.write_text('{"a": 1}', encoding="utf-8")
        response = client.post("/api/files/read", json={"path": str(path)})
        assert response.status_code == 200
        assert response.json() == {"path": str(path), "content": '{"a": 1}', "extension": "json"}

    def test_read_missing(self, client, tmp_path):
        response = client.post("/api/files/read", json={"path": str(tmp_path / "nope.txt")})
        assert response.status_code == 404

    def test_read_too_large(self, client, tmp_path):
        path = tmp_path / "big.log"
        with open(path, "wb") as f:
            f.truncate(6 * 1024 * 1024)
        response = client.post("/api/files/read", json={"path": str(path)})
        assert response.status_code == 413
        assert response.json()["detail"].startswith("File too large (6.0 MB). Maximum size is 5 MB.")

    def test_read_directory_is_an_error(self, client, tmp_path):
        response = client.post("/api/files/read", json={"path": str(tmp_path)})
        assert response.status_code == 400

    def test_write(self, client, tmp_path):
        path = tmp_path / "out.env"
        response = client.post("/api/files/write", json={"path": str(path), "content": "A=1\n"})
        assert response.status_code == 200
        assert response.json()["status"] == "success"
        assert path.read_text(encoding="utf-8") == "A=1\n"

    def test_write_error(self, client, tmp_path):
        path = tmp_path / "missing" / "out.txt"
        response = client.post("/api/files/write", json={"path": str(path), "content": "x"})
        assert response.status_code == 400


class TestConfigEndpoints:
    """Server settings endpoints"""

    def test_get_and_update(self, client, config_dir):
        response = client.get("/api/config")
        assert response.status_code == 200
        assert response.json()["server"] == {"host": "127.0.0.1", "port": 8000}

        response = client.put("/api/config", json={"server": {"port": 9001}})
        assert response.status_code == 200
        assert response.json()["status"] == "success"

        response = client.get("/api/config")
        assert response.json()["server"] == {"host": "127.0.0.1", "port": 9001}
