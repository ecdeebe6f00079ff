"""Bridge from Python package versions (PEP 440) to semantic versions."""

from __future__ import annotations

from packaging.version import InvalidVersion, Version

from .version import SemanticVersion

_PRE_RELEASE_NAMES = {"a": "alpha", "b": "beta", "rc": "rc"}


def from_pep440(value: Version | str) -> SemanticVersion:
    """Convert a PEP 440 version into the closest semantic version.

    ``1.2rc1`` becomes ``1.2.0-rc.1`` and ``1.0.dev3`` becomes
    ``1.0.0-0.dev.3``, whose leading ``0`` sorts it before any alpha, beta
    or rc release of the same version. A dev release of a pre-release is
    lossy: ``2.0b1.dev2`` becomes ``2.0.0-beta.1.dev.2``, which sorts after
    ``2.0.0-beta.1`` rather than before it. Post-release and local segments
    have no SemVer precedence, so they are kept as build metadata.

    Raises:
        ValueError: If the version is invalid, has a non-zero epoch, or has
            more than three release components.
    """
    if not isinstance(value, Version):
        try:
            value = Version(value)
        except InvalidVersion as exc:
            raise ValueError(f"Invalid PEP 440 version: {value!r}") from exc

    if value.epoch:
        raise ValueError(f"Cannot represent version epoch in {value}")
    if len(value.release) > 3:
        raise ValueError(f"Cannot represent more than three release components in {value}")
    major, minor, patch = (value.release + (0, 0))[:3]

    pre_releases: list[str | int] = []
    if value.pre is not None:
        letter, number = value.pre
        pre_releases += [_PRE_RELEASE_NAMES[letter], number]
    if value.dev is not None:
        if not pre_releases:
            pre_releases.append(0)
        pre_releases += ["dev", value.dev]

    build_metadata: list[str] = []
    if value.post is not None:
        build_metadata += ["post", str(value.post)]
    if value.local is not None:
        build_metadata += value.local.replace("_", ".").replace("-", ".").split(".")

    return SemanticVersion(major, minor, patch, tuple(pre_releases), tuple(build_metadata))
