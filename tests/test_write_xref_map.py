"""Tests for writing XRefMap files."""

from pathlib import Path

import yaml

from xrefmap.reference_record import ReferenceRecord
from xrefmap.write_xref_map import render_xref_map, write_xref_map

RECORDS = [
    ReferenceRecord(
        uid="UnityEngine.Object.Destroy(UnityEngine.Object)",
        name="Destroy",
        href="https://docs.unity3d.com/2022.3/Documentation/ScriptReference/Object.Destroy.html",
        comment_id="M:UnityEngine.Object.Destroy(UnityEngine.Object)",
        full_name="UnityEngine.Object.Destroy",
        name_with_type="Object.Destroy(Object)",
    ),
    ReferenceRecord(
        uid="UnityEngine.Vector3",
        name="Vector3",
        href="https://docs.unity3d.com/2022.3/Documentation/ScriptReference/Vector3.html",
        comment_id="T:UnityEngine.Vector3",
        full_name="UnityEngine.Vector3",
        name_with_type="Vector3",
    ),
]


def test_render_header_and_fields() -> None:
    """Verify the MIME header, sorted flag and DocFX field names."""
    text = render_xref_map(RECORDS)
    assert text.splitlines()[0] == "### YamlMime:XRefMap"

    doc = yaml.safe_load(text)
    assert doc["sorted"] is True
    first = doc["references"][0]
    assert list(first) == ["uid", "name", "href", "commentId", "fullName", "nameWithType"]
    assert first["commentId"] == "M:UnityEngine.Object.Destroy(UnityEngine.Object)"
    assert [r["uid"] for r in doc["references"]] == [r.uid for r in RECORDS]


def test_render_empty() -> None:
    """Verify that an empty map is still a valid document."""
    doc = yaml.safe_load(render_xref_map([]))
    assert doc == {"sorted": True, "references": []}


def test_write_xref_map(tmp_path: Path) -> None:
    """Verify the output path layout."""
    out = write_xref_map(RECORDS, tmp_path, "2022.3")
    assert out == tmp_path / "2022.3" / "xrefmap.yml"
    assert out.read_text(encoding="utf-8").startswith("### YamlMime:XRefMap\n")
