"""Tests for the href resolution ladder."""

from urllib.parse import urlparse

import pytest

from xrefmap.href_resolver import HrefResolver

BASE = "https://docs.unity3d.com/2022.3/Documentation/ScriptReference"
INDEX = f"{BASE}/index.html"


class FakePageExists:
    """Page-exists capability answering from a fixed set of URLs."""

    def __init__(self, existing: set[str] | None = None) -> None:
        """Initialize with the URLs that should exist."""
        self.existing = existing or set()
        self.calls: list[str] = []

    def exists(self, url: str) -> bool:
        """Record the probe and answer from the fixed set."""
        self.calls.append(url)
        return url in self.existing


def test_namespace_resolves_to_index_without_probing() -> None:
    """Verify that namespaces never hit the network."""
    probe = FakePageExists()
    resolver = HrefResolver(probe)
    res = resolver.resolve_detailed(
        "UnityEngine.Rendering", "N:UnityEngine.Rendering", "2022.3"
    )
    assert res.url == INDEX
    assert res.rung == "namespace"
    assert probe.calls == []


def test_primary_accepted() -> None:
    """Verify that an existing primary page wins on the first probe."""
    probe = FakePageExists({f"{BASE}/Object.Destroy.html"})
    resolver = HrefResolver(probe)
    res = resolver.resolve_detailed(
        "UnityEngine.Object.Destroy(UnityEngine.Object)",
        "M:UnityEngine.Object.Destroy(UnityEngine.Object)",
        "2022.3",
    )
    assert res.url == f"{BASE}/Object.Destroy.html"
    assert res.rung == "primary"
    assert res.probes == 1


def test_alternate_accepted() -> None:
    """Verify that the flipped separator is tried second."""
    probe = FakePageExists({f"{BASE}/Transform-localScale.html"})
    resolver = HrefResolver(probe)
    url = resolver.resolve(
        "UnityEngine.Transform.localScale", "P:UnityEngine.Transform.localScale", "2022.3"
    )
    assert url == f"{BASE}/Transform-localScale.html"
    assert probe.calls == [
        f"{BASE}/Transform.localScale.html",
        f"{BASE}/Transform-localScale.html",
    ]


def test_constructor_alternate_is_type_page() -> None:
    """Verify that a missing -ctor page falls back to the type page."""
    probe = FakePageExists({f"{BASE}/Vector3.html"})
    resolver = HrefResolver(probe)
    res = resolver.resolve_detailed(
        "UnityEngine.Vector3.#ctor(System.Single,System.Single)",
        "M:UnityEngine.Vector3.#ctor(System.Single,System.Single)",
        "2022.3",
    )
    assert res.url == f"{BASE}/Vector3.html"
    assert res.rung == "alternate"
    assert probe.calls[0] == f"{BASE}/Vector3-ctor.html"


def test_constructor_href_never_contains_hash_ctor() -> None:
    """Verify the constructor URL uses -ctor."""
    probe = FakePageExists({f"{BASE}/Vector3-ctor.html"})
    resolver = HrefResolver(probe)
    url = resolver.resolve(
        "UnityEngine.Vector3.#ctor", "M:UnityEngine.Vector3.#ctor", "2022.3"
    )
    assert "-ctor" in url
    assert ".#ctor" not in url


def test_parent_accepted() -> None:
    """Verify that the enclosing type's page is the third rung."""
    probe = FakePageExists({f"{BASE}/Rendering.CommandBuffer.html"})
    resolver = HrefResolver(probe)
    res = resolver.resolve_detailed(
        "UnityEngine.Rendering.CommandBuffer.Blit(System.Int32)",
        "M:UnityEngine.Rendering.CommandBuffer.Blit(System.Int32)",
        "2022.3",
    )
    assert res.url == f"{BASE}/Rendering.CommandBuffer.html"
    assert res.rung == "parent"
    assert res.probes == 3


@pytest.mark.parametrize(
    ("uid", "comment_id"),
    [
        ("UnityEngine.Vector3", "T:UnityEngine.Vector3"),
        ("UnityEngine.LogType.Error", "F:UnityEngine.LogType.Error"),
        ("UnityEngine.Vector3.op_Addition(A,B)", "M:UnityEngine.Vector3.op_Addition(A,B)"),
        ("UnityEngine.Foo.Bar", "Q:UnityEngine.Foo.Bar"),
        ("", "M:"),
    ],
)
def test_exhausted_ladder_falls_back_to_index(uid: str, comment_id: str) -> None:
    """Verify that rejected probes always end at the version index."""
    resolver = HrefResolver(FakePageExists())
    res = resolver.resolve_detailed(uid, comment_id, "2022.3")
    assert res.url == INDEX
    assert res.rung == "index"


def test_urls_are_absolute() -> None:
    """Verify that every resolved URL is an absolute http(s) URL."""
    resolver = HrefResolver(FakePageExists(), site_root="https://docs.example.com/")
    for uid, cid in [
        ("UnityEngine", "N:UnityEngine"),
        ("UnityEngine.Object.name", "P:UnityEngine.Object.name"),
    ]:
        parsed = urlparse(resolver.resolve(uid, cid, "6000.0"))
        assert parsed.scheme in {"http", "https"}
        assert parsed.netloc == "docs.example.com"
        assert parsed.path.startswith("/6000.0/Documentation/ScriptReference/")
        assert parsed.path.endswith(".html")


def test_from_config() -> None:
    """Verify that site layout and prefixes come from configuration."""
    config = {
        "site": {"root": "http://localhost:8000", "reference_path": "/Ref/"},
        "namespaces": {"strip_prefixes": ["MyGame"]},
    }
    probe = FakePageExists({"http://localhost:8000/1.0/Ref/Player.Jump.html"})
    resolver = HrefResolver.from_config(probe, config)
    assert resolver.resolve("MyGame.Player.Jump", "M:MyGame.Player.Jump", "1.0") == (
        "http://localhost:8000/1.0/Ref/Player.Jump.html"
    )
