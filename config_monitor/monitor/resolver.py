"""Map changed configuration file paths to the service identifiers that must refresh.

Two filename conventions are recognised:

* ``<name>-<profile>.<ext>`` (and ``application-<profile>.<ext>`` for every
  service). Every hyphen is tried as the name/profile boundary, so
  ``foo-bar-dev.yml`` yields ``foo:bar-dev``, ``foo-bar:dev`` and ``foo-bar-dev``.
* ``<dir>/<service>-prod.<ext>``, where the whole text before ``-prod`` is the
  service name (see ``parse_application_name``).

Both over-generate on purpose; extra refresh signals are harmless.
"""

import posixpath

APPLICATION = "application"
WILDCARD = "*"


def _stem(path: str) -> str:
    """Filename without directory and extension; empty for directory-like paths."""
    cleaned = path.replace("\\", "/")
    if not cleaned or cleaned.endswith("/"):
        return ""
    filename = posixpath.normpath(cleaned).rsplit("/", 1)[-1]
    dot = filename.rfind(".")
    stem = filename if dot == -1 else filename[:dot]
    # ".." that climbs past the start of a relative path
    if not stem.strip("."):
        return ""
    return stem


def _identifier(name: str, profile: str | None = None) -> str | None:
    """Identifier for name (and profile), or None for ``application*`` names other than ``application``."""
    if name == APPLICATION:
        target = WILDCARD
    elif name.startswith(APPLICATION):
        return None
    else:
        target = name
    if profile is None:
        return target
    return f"{target}:{profile}"


def resolve_service_names(path: str) -> list[str]:
    """Return identifiers guessed from the filename in path, ordered and duplicate-free.

    Never raises; a path without a usable filename gives an empty list.
    """
    stem = _stem(path or "")
    if not stem:
        return []

    candidates: list[str | None] = []
    index = stem.find("-")
    while index >= 0:
        candidates.append(_identifier(stem[:index], stem[index + 1 :]))
        index = stem.find("-", index + 1)
    candidates.append(_identifier(stem))

    seen: set[str] = set()
    result: list[str] = []
    for service in candidates:
        if service is None or service in seen:
            continue
        seen.add(service)
        result.append(service)
    return result


def parse_application_name(path: str) -> str | None:
    """Service name between the last ``/`` and the last ``-prod`` in path.

    ``/member/nbbang-auth-prod.yml`` -> ``nbbang-auth``. Returns None when either
    anchor is missing or ``-prod`` does not come after the last ``/``.
    """
    if not path:
        return None
    start = path.rfind("/")
    end = path.rfind("-prod")
    if start == -1 or end == -1 or end <= start + 1:
        return None
    return path[start + 1 : end]
