from pathlib import Path
import sys
from typing import Optional

from loguru import logger
from typer import Argument, Option
import yaml

from kytt.manifests import find_pod_specs_with_image_pull_secrets, find_resource, parse_env_string

from . import app


def _read_stream(file: Path | None) -> str:
    if file is None:
        logger.trace("Reading manifests from stdin")
        return sys.stdin.read()
    return file.read_text()


@app.command()
def find(
    kind: str = Argument(..., help="The resource kind, e.g. `Deployment`."),
    name: str = Argument(..., help="The resource name."),
    file: Optional[Path] = Option(None, "--file", "-f", help="The rendered stream. Defaults to stdin."),
) -> None:
    """
    Print the first resource with the given kind and name.
    """

    manifest = find_resource(_read_stream(file), kind, name)
    if manifest is None:
        logger.error("No {} named '{}' found.", kind, name)
        sys.exit(1)
    print(yaml.safe_dump(manifest, sort_keys=False), end="")


@app.command("pull-secrets")
def pull_secrets(
    file: Optional[Path] = Option(None, "--file", "-f", help="The rendered stream. Defaults to stdin."),
) -> None:
    """
    Print the image pull secrets referenced by each Deployment and StatefulSet pod spec, one pod spec per line.
    """

    for spec in find_pod_specs_with_image_pull_secrets(_read_stream(file)):
        print(",".join(str(secret.get("name")) for secret in spec["imagePullSecrets"]))


@app.command()
def env(value: str = Argument(..., help="A comma separated list of `KEY=VALUE` assignments.")) -> None:
    """
    Decode an environment-assignment string and print one `KEY=VALUE` per line.
    """

    for key, item in parse_env_string(value).items():
        print(f"{key}={item}")
