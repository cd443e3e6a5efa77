from __future__ import annotations
from typing import FrozenSet, Iterable

# https://docs.npmjs.com/cli/v9/configuring-npm/package-json
DEFAULT_ALLOWED_FIELDS: FrozenSet[str] = frozenset({
    "author",
    "bin",
    "browser",
    "bugs",
    "contributors",
    "dependencies",
    "description",
    "engines",
    "exports",
    "files",
    "funding",
    "homepage",
    "keywords",
    "license",
    "main",
    "maintainers",
    "module",
    "name",
    "optionalDependencies",
    "peerDependencies",
    "private",
    "publishConfig",
    "repository",
    "scripts",
    "sideEffects",
    "type",
    "types",
    "typesVersions",
    "version",
    "workspaces",
})

# https://docs.npmjs.com/cli/v9/using-npm/scripts#life-cycle-scripts
LIFECYCLE_SCRIPTS: FrozenSet[str] = frozenset({
    "postinstall",
    "postuninstall",
    "preinstall",
    "prepare",
    "preuninstall",
})


def allowed_fields(preserve: Iterable[str] | None = None) -> FrozenSet[str]:
    """Return the default allowed fields extended with ``preserve``.

    No validation is done on the extra names; duplicates collapse.

    :param preserve: Extra top-level field names to keep.
    :return: Effective allow-list for one run.
    """
    extra = frozenset(preserve or ())
    if not extra:
        return DEFAULT_ALLOWED_FIELDS
    return DEFAULT_ALLOWED_FIELDS | extra
