from __future__ import annotations

import base64
import os

from frontend.exporters import save_outputs
from frontend.uploads import file_to_data_uri


def test_save_outputs_writes_files() -> None:
    paths = save_outputs({"svg": b"<svg/>", "tex": b"\\draw;"})
    assert paths["svg"].endswith("diagram.svg")
    assert paths["tex"].endswith("diagram.tikz")
    with open(paths["svg"], "rb") as f:
        assert f.read() == b"<svg/>"
    assert os.path.dirname(paths["svg"]) == os.path.dirname(paths["tex"])


def test_save_outputs_empty() -> None:
    assert save_outputs({}) == {}


def test_file_to_data_uri(tmp_path) -> None:  # noqa: ANN001
    img = tmp_path / "figure.jpg"
    img.write_bytes(b"\xff\xd8\xff")
    uri = file_to_data_uri(str(img))
    assert uri == "data:image/jpeg;base64," + base64.b64encode(b"\xff\xd8\xff").decode("ascii")


def test_file_to_data_uri_defaults_mime(tmp_path) -> None:  # noqa: ANN001
    blob = tmp_path / "upload"
    blob.write_bytes(b"abc")
    assert file_to_data_uri(str(blob)).startswith("data:image/png;base64,")
    assert file_to_data_uri(None) is None
