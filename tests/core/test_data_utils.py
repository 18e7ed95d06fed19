import io
import json

import pytest

from complexity_cli.core.data_utils import read_source, save_json
from complexity_cli.core.exceptions import InputError


def test_save_json_creates_parents(tmp_path):
    path = tmp_path / "out" / "result.json"
    save_json(str(path), {"overallComplexity": "O(n²)"})
    assert json.loads(path.read_text(encoding="utf-8")) == {"overallComplexity": "O(n²)"}


def test_read_source_from_file(tmp_path):
    path = tmp_path / "f.js"
    path.write_text("function f() {}", encoding="utf-8")
    assert read_source(str(path)) == "function f() {}"


def test_read_source_from_stdin():
    assert read_source("-", stdin=io.StringIO("const x = 1;")) == "const x = 1;"


def test_read_source_missing_file(tmp_path):
    with pytest.raises(InputError):
        read_source(str(tmp_path / "nope.js"))


def test_read_source_undecodable(tmp_path):
    path = tmp_path / "latin.js"
    path.write_bytes(b"const s = '\xff\xfe';")
    with pytest.raises(InputError):
        read_source(str(path))
