import copy
from dataclasses import dataclass
from typing import Any, Iterable

import yaml

from kytt.tools.types import Manifest, Manifests


@dataclass(frozen=True)
class YamlDocument:
    """
    A single document of a YAML stream.
    """

    data: Any
    """ The decoded document. This is `None` for an empty document. """

    def to_yaml(self) -> str:
        """
        Serialize the document back to YAML text, preserving the key order of the source.
        """

        return yaml.safe_dump(self.data, sort_keys=False)

    def to_json(self) -> Any:
        """
        Return the document as plain Python data. The result is a copy and may be modified freely.
        """

        return copy.deepcopy(self.data)

    def __str__(self) -> str:
        return self.to_yaml()


def parse_yaml_documents(text: str) -> list[YamlDocument]:
    """
    Split a multi-document YAML stream into its documents. Empty documents are skipped.

    Raises:
        yaml.YAMLError: If any document in the stream is malformed.
    """

    # safe_load_all() is lazy; consume it fully so a late syntax error fails the whole parse.
    return [YamlDocument(data) for data in list(yaml.safe_load_all(text)) if data is not None]


def parse_yaml_document(text: str) -> YamlDocument:
    """
    Parse a single YAML document, such as the `application.yaml` embedded in a ConfigMap.
    """

    return YamlDocument(yaml.safe_load(text))


def join_yaml_documents(documents: Iterable[YamlDocument]) -> str:
    return yaml.safe_dump_all([document.data for document in documents], sort_keys=False)


def parse_manifests(text: str) -> Manifests:
    """
    Decode all documents of a rendered stream that are mappings, in document order.
    """

    return Manifests([Manifest(doc.data) for doc in parse_yaml_documents(text) if isinstance(doc.data, dict)])
