from kytt.manifests.documents import parse_manifests
from kytt.manifests.fields import pod_spec
from kytt.tools.types import Manifest, Manifests, PodSpec


def find_resource(text: str, kind: str, name: str) -> Manifest | None:
    """
    Find the first resource of the given *kind* with the given *name* in a rendered stream.

    Identity is the pair `(kind, name)`. If the stream contains duplicates, only the first one in document order is
    ever returned.
    """

    for manifest in parse_manifests(text):
        metadata = manifest.get("metadata") or {}
        if manifest.get("kind") == kind and metadata.get("name") == name:
            return manifest
    return None


def find_resources(text: str, kind: str) -> Manifests:
    """
    Find all resources of the given *kind*, in document order.
    """

    return Manifests([manifest for manifest in parse_manifests(text) if manifest.get("kind") == kind])


def find_deployment(text: str, name: str) -> Manifest | None:
    return find_resource(text, "Deployment", name)


def find_stateful_set(text: str, name: str) -> Manifest | None:
    return find_resource(text, "StatefulSet", name)


def find_service(text: str, name: str) -> Manifest | None:
    return find_resource(text, "Service", name)


def find_config_map(text: str, name: str) -> Manifest | None:
    return find_resource(text, "ConfigMap", name)


def find_secret(text: str, name: str) -> Manifest | None:
    return find_resource(text, "Secret", name)


def find_pod_specs_with_image_pull_secrets(text: str) -> list[PodSpec]:
    """
    Collect the pod specs of all Deployments and StatefulSets that declare at least one image pull secret.

    Deployments come first, then StatefulSets, each in document order.
    """

    result = []
    for kind in ("Deployment", "StatefulSet"):
        for manifest in find_resources(text, kind):
            spec = pod_spec(manifest)
            if spec is not None and spec.get("imagePullSecrets"):
                result.append(spec)
    return result
