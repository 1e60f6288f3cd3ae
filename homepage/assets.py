"""In-memory asset store populated from the bundled content directory."""

import logging
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

STATIC_PREFIX = "static/"
TEMPLATES_PREFIX = "templates/"

MIME_TYPES: Mapping[str, str] = MappingProxyType({
    ".css": "text/css",
    ".ico": "image/x-icon",
    ".js": "text/javascript",
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".txt": "text/plain",
    ".wasm": "application/wasm",
    ".woff2": "font/woff2",
})
DEFAULT_MIME_TYPE = "application/octet-stream"


class BundleError(RuntimeError):
    """The content bundle is missing or malformed; the site cannot start."""


def guess_content_type(path: str) -> str:
    """Return the content type for ``path`` by extension, or the binary fallback."""
    return MIME_TYPES.get(PurePosixPath(path).suffix.lower(), DEFAULT_MIME_TYPE)


class AssetStore:
    """Read-only mapping from logical (posix, content-relative) path to bytes.

    Everything is read at construction time; lookups never touch the
    filesystem, so request paths such as ``../secret`` simply miss.
    """

    def __init__(self, files: Mapping[str, bytes]):
        self._files = MappingProxyType(dict(files))

    @classmethod
    def from_directory(cls, root: Path) -> "AssetStore":
        if not root.is_dir():
            raise BundleError(f"Content directory not found: {root}")
        files: Dict[str, bytes] = {}
        try:
            for path in sorted(root.rglob("*")):
                if path.is_file():
                    files[path.relative_to(root).as_posix()] = path.read_bytes()
        except OSError as e:
            raise BundleError(f"Failed to read content bundle {root}: {e}") from e
        logger.info(f"Loaded {len(files)} bundled files from {root}")
        return cls(files)

    def get(self, name: str) -> Optional[bytes]:
        return self._files.get(name)

    def require(self, name: str) -> bytes:
        data = self.get(name)
        if data is None:
            raise BundleError(f"Required bundled file missing: {name}")
        return data

    def static(self, name: str) -> Optional[bytes]:
        """Look up a file under ``static/``; empty names always miss."""
        if not name:
            return None
        return self.get(STATIC_PREFIX + name)

    def templates(self) -> Dict[str, str]:
        """All bundled templates keyed by their name below ``templates/``."""
        out = {}
        for name, data in self._files.items():
            if name.startswith(TEMPLATES_PREFIX):
                try:
                    out[name[len(TEMPLATES_PREFIX):]] = data.decode("utf-8")
                except UnicodeDecodeError as e:
                    raise BundleError(f"Template {name} is not valid UTF-8") from e
        return out

    def __len__(self) -> int:
        return len(self._files)
