from __future__ import annotations

from .culler import ManifestError, cull_fields, cull_manifest, find_manifest
from .fields import DEFAULT_ALLOWED_FIELDS, LIFECYCLE_SCRIPTS
from .types import CullResult

__version__ = "0.1.0"

__all__ = [
    "CullResult",
    "DEFAULT_ALLOWED_FIELDS",
    "LIFECYCLE_SCRIPTS",
    "ManifestError",
    "cull_fields",
    "cull_manifest",
    "find_manifest",
    "__version__",
]
