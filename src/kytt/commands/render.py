from pathlib import Path
import sys
from typing import Optional

from loguru import logger
from typer import Argument, Option

from kytt.config import HarnessConfig
from kytt.tools.ytt import Ytt, YttError

from . import app


@app.command()
def render(
    files: Optional[list[Path]] = Argument(
        None, help="Template files or directories. Defaults to the `files` in `kytt.yaml`."
    ),
    data_value: list[str] = Option([], "--data-value", "-v", help="A scalar data value as `key=value`."),
    data_value_yaml: list[str] = Option([], "--data-value-yaml", "-y", help="A YAML data value as `key=yaml`."),
    ytt: Optional[str] = Option(None, envvar="KYTT_YTT", help="The ytt binary. Defaults to `ytt` in `kytt.yaml`."),
    config: Optional[Path] = Option(None, help="Path to `kytt.yaml`. If not set, it is searched for."),
) -> None:
    """
    Render the templates with ytt and print the manifest stream.
    """

    harness = HarnessConfig.load(config)
    options = harness.options(list(files or []), data_value, data_value_yaml)
    if not options.files:
        logger.error("No template files given and none configured in '{}'.", HarnessConfig.FILENAME)
        sys.exit(1)

    try:
        result = Ytt(ytt or harness.config.ytt).render(options)
    except YttError as exc:
        logger.error("{}", exc)
        sys.exit(1)

    if not result.success:
        logger.error("Rendering failed:\n{}", result.stderr)
        sys.exit(1)

    logger.info("Rendered {} manifest(s).", len(result.manifests()))
    print(result.stdout)
