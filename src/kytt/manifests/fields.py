"""
Helpers to navigate into the nested fields of a resource that was already looked up.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from kytt.tools.types import Container, PodSpec

_MISSING = object()


def get_path(obj: Any, path: str | Sequence[str], default: Any = None) -> Any:
    """
    Access a nested value by a dotted *path*. Integer segments index into lists. Returns *default* if any segment
    along the path does not exist.

    Note that keys containing a dot can only be reached by passing the path as a sequence of segments.
    """

    parts = path.split(".") if isinstance(path, str) else list(path)
    value = obj
    for part in parts:
        match value:
            case Mapping():
                value = value.get(part, _MISSING)
            case list():
                try:
                    value = value[int(part)]
                except (ValueError, IndexError):
                    value = _MISSING
            case _:
                value = _MISSING
        if value is _MISSING:
            return default
    return value


def _find_by_name(items: Any, name: str) -> dict[str, Any] | None:
    for item in items or ():
        if isinstance(item, dict) and item.get("name") == name:
            return item
    return None


def pod_spec(resource: Mapping[str, Any] | None) -> PodSpec | None:
    """
    Return the pod template spec (`spec.template.spec`) of a Deployment, StatefulSet or similar resource.
    """

    spec = get_path(resource, "spec.template.spec")
    return spec if isinstance(spec, dict) else None


def find_container(resource: Mapping[str, Any] | None, name: str, init: bool = False) -> Container | None:
    """
    Find a container by name in the pod template of *resource*. If *init* is set, the init containers are searched
    instead.
    """

    return _find_by_name(get_path(pod_spec(resource), "initContainers" if init else "containers"), name)


def find_volume(resource: Mapping[str, Any] | None, name: str) -> dict[str, Any] | None:
    return _find_by_name(get_path(pod_spec(resource), "volumes"), name)


def find_volume_mount(container: Container | None, name: str) -> dict[str, Any] | None:
    return _find_by_name(get_path(container, "volumeMounts"), name)


def container_env_values(container: Container | None) -> list[dict[str, Any]]:
    """
    Return the `env` entries of a container, or an empty list.
    """

    return list(get_path(container, "env") or [])


def find_env(container: Container | None, name: str) -> dict[str, Any] | None:
    return _find_by_name(container_env_values(container), name)


def container_env_value(container: Container | None, name: str) -> str | None:
    """
    Return the literal `value` of the named environment variable. Entries that use `valueFrom` have no literal value
    and yield `None`, same as a missing entry.
    """

    entry = find_env(container, name)
    return entry.get("value") if entry is not None else None


def find_annotation(obj: Mapping[str, Any] | None, key: str) -> str | None:
    """
    Return the value of the annotation with exactly the given *key* from `metadata.annotations`.
    """

    annotations = get_path(obj, "metadata.annotations")
    if not isinstance(annotations, Mapping):
        return None
    return annotations.get(key)


def find_annotations(obj: Mapping[str, Any] | None, substring: str) -> list[str]:
    """
    Return the values of all annotations whose key contains *substring*, in the order they appear in the document.
    """

    annotations = get_path(obj, "metadata.annotations")
    if not isinstance(annotations, Mapping):
        return []
    return [value for key, value in annotations.items() if substring in str(key)]


def parse_env_string(value: str | None) -> dict[str, str]:
    """
    Decode a comma separated list of `KEY=VALUE` assignments, as used for deployer environment variables.

    Each segment is split on its first `=` and both sides are trimmed. Segments without a `=` are dropped silently.

        >>> parse_env_string("A=1, B=2,BAD,C=x=y")
        {'A': '1', 'B': '2', 'C': 'x=y'}
    """

    result: dict[str, str] = {}
    for segment in (value or "").split(","):
        parts = [part.strip() for part in segment.split("=", 1)]
        if len(parts) == 2:
            result[parts[0]] = parts[1]
    return result
