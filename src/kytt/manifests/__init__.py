"""
Lookups over rendered Kubernetes manifest streams.

Every function in this package works on the raw YAML text (or on an object that was already looked up from it)
and re-parses on each call; nothing is cached. A lookup that finds nothing returns `None` rather than raising.
"""

from kytt.manifests.documents import (
    YamlDocument,
    join_yaml_documents,
    parse_manifests,
    parse_yaml_document,
    parse_yaml_documents,
)
from kytt.manifests.fields import (
    container_env_value,
    container_env_values,
    find_annotation,
    find_annotations,
    find_container,
    find_env,
    find_volume,
    find_volume_mount,
    get_path,
    parse_env_string,
    pod_spec,
)
from kytt.manifests.lookup import (
    find_config_map,
    find_deployment,
    find_pod_specs_with_image_pull_secrets,
    find_resource,
    find_resources,
    find_secret,
    find_service,
    find_stateful_set,
)

__all__ = [
    "YamlDocument",
    "container_env_value",
    "container_env_values",
    "find_annotation",
    "find_annotations",
    "find_config_map",
    "find_container",
    "find_deployment",
    "find_env",
    "find_pod_specs_with_image_pull_secrets",
    "find_resource",
    "find_resources",
    "find_secret",
    "find_service",
    "find_stateful_set",
    "find_volume",
    "find_volume_mount",
    "get_path",
    "join_yaml_documents",
    "parse_env_string",
    "parse_manifests",
    "parse_yaml_document",
    "parse_yaml_documents",
    "pod_spec",
]
