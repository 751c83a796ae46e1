"""Resolution of DocFX UIDs to verified Unity Scripting Reference URLs."""

import logging
from typing import Any

from xrefmap.href_candidates import (
    DEFAULT_STRIP_PREFIXES,
    NAMESPACE_HREF,
    build_href_candidates,
    is_namespace_comment_id,
)
from xrefmap.page_exists import PageExists
from xrefmap.resolution_result import RUNG_INDEX, RUNG_NAMESPACE, HrefResolution

logger = logging.getLogger(__name__)

DEFAULT_SITE_ROOT = "https://docs.unity3d.com"
DEFAULT_REFERENCE_PATH = "Documentation/ScriptReference"


class HrefResolver:
    """Turns ``(uid, commentId, version)`` into the best existing page URL.

    Candidates are probed in order: the primary guess, its alternate spelling,
    the enclosing type's page. When none exists the version's ``index.html``
    is returned, so resolution never fails.
    """

    def __init__(
        self,
        page_exists: PageExists,
        site_root: str = DEFAULT_SITE_ROOT,
        reference_path: str = DEFAULT_REFERENCE_PATH,
        strip_prefixes: tuple[str, ...] = DEFAULT_STRIP_PREFIXES,
    ) -> None:
        """Initialize the resolver with an existence check and the site layout."""
        self.page_exists = page_exists
        self.site_root = site_root.rstrip("/")
        self.reference_path = reference_path.strip("/")
        self.strip_prefixes = strip_prefixes

    @classmethod
    def from_config(
        cls, page_exists: PageExists, config: dict[str, Any]
    ) -> "HrefResolver":
        """Build a resolver from the ``site`` and ``namespaces`` config sections."""
        site = config.get("site", {})
        namespaces = config.get("namespaces", {})
        return cls(
            page_exists,
            site_root=site.get("root", DEFAULT_SITE_ROOT),
            reference_path=site.get("reference_path", DEFAULT_REFERENCE_PATH),
            strip_prefixes=tuple(
                namespaces.get("strip_prefixes", DEFAULT_STRIP_PREFIXES)
            ),
        )

    def page_url(self, version: str, href: str) -> str:
        """Return the absolute URL of page ``href`` for ``version``."""
        return f"{self.site_root}/{version}/{self.reference_path}/{href}.html"

    def index_url(self, version: str) -> str:
        """Return the version's Scripting Reference landing page."""
        return self.page_url(version, NAMESPACE_HREF)

    def resolve(self, uid: str, comment_id: str, version: str) -> str:
        """Return the URL to link ``uid`` to."""
        return self.resolve_detailed(uid, comment_id, version).url

    def resolve_detailed(
        self, uid: str, comment_id: str, version: str
    ) -> HrefResolution:
        """Resolve ``uid`` and report which candidate was accepted."""
        if is_namespace_comment_id(comment_id):
            return HrefResolution(uid, self.index_url(version), RUNG_NAMESPACE)

        candidates = build_href_candidates(uid, comment_id, self.strip_prefixes)
        probes = 0
        for rung, href in candidates.ordered():
            url = self.page_url(version, href)
            probes += 1
            if self.page_exists.exists(url):
                logger.debug("%s -> %s (%s)", uid, url, rung)
                return HrefResolution(uid, url, rung, probes)

        logger.info("No page found for %s; linking to the index", uid)
        return HrefResolution(uid, self.index_url(version), RUNG_INDEX, probes)
