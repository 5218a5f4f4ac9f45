from typing import Any, NewType

Manifest = NewType("Manifest", dict[str, Any])
""" One decoded document of a rendered stream, identified by its `kind` and `metadata.name`. """

Manifests = NewType("Manifests", list[Manifest])
""" Decoded documents in the order ytt rendered them. """

PodSpec = dict[str, Any]
""" The `spec.template.spec` of a workload resource (Deployment, StatefulSet). """

Container = dict[str, Any]
""" An entry of a pod spec's `containers` or `initContainers` list. """
