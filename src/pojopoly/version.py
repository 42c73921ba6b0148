"""Basic pojopoly version information.

These values can be used programmatically by applications which want to gate on the library version.
"""

from __future__ import annotations

import re

# may include build metadata
__version__ = '0.1.0'


def _semver(version: str) -> str:
    sem_ver = re.search(r'\d+\.\d+\.\d+', version)
    if sem_ver is None:
        msg = 'Package version does not contain a semantic version "<MAJOR>.<MINOR>.<DEBUG>", please fix this'
        raise RuntimeError(msg)
    return sem_ver.group()


version_string = _semver(__version__)
"""
Version string in the format <MAJOR>.<MINOR>.<DEBUG> . Strips out pre-release and build metadata.
"""

version_info: tuple[int, int, int] = tuple([int(x) for x in version_string.split('.')])  # type: ignore[assignment]
"""
Integer tuple in the format <MAJOR>,<MINOR>,<DEBUG> .
"""
