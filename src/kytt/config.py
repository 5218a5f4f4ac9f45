from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, overload

from loguru import logger

from kytt.tools.ytt import YttOptions


@dataclass
class Harness:
    """
    Configuration for rendering the package under test that is stored in a `kytt.yaml` file.
    """

    ytt: str = "ytt"
    """ The `ytt` binary to invoke. """

    files: list[Path] = field(default_factory=list)
    """ Template files or directories to render. Relative paths are resolved against the configuration file. """

    data_values: list[str] = field(default_factory=list)
    """ Scalar data values (`key=value`) passed to every render. """

    data_value_yamls: list[str] = field(default_factory=list)
    """ YAML data values (`key=yaml`) passed to every render. """


@overload
def find_config_file(filename: str, cwd: Path | None = None, required: Literal[False] = False) -> Path | None: ...


@overload
def find_config_file(filename: str, cwd: Path | None = None, required: Literal[True] = True) -> Path: ...


def find_config_file(filename: str, cwd: Path | None = None, required: bool = True) -> Path | None:
    """
    Find a file with the given *filename* in the given *cwd* or any of its parent directories.
    """

    cwd = Path.cwd() if cwd is None else cwd.absolute()
    for directory in [cwd, *cwd.parents]:
        if (directory / filename).is_file():
            return directory / filename

    if required:
        raise FileNotFoundError(f"Could not find '{filename}' in '{cwd}' or any of its parent directories.")
    return None


@dataclass
class HarnessConfig:
    """
    Wrapper for the harness configuration file.
    """

    FILENAME = "kytt.yaml"

    file: Path | None
    config: Harness

    @staticmethod
    def load(file: Path | None = None, /, cwd: Path | None = None) -> "HarnessConfig":
        """
        Load the harness configuration from the given file, or from the `kytt.yaml` found in *cwd* or its parents. If
        no configuration file exists, the defaults are returned.
        """

        from databind.json import load as deser
        from yaml import safe_load

        if file is None:
            file = find_config_file(HarnessConfig.FILENAME, cwd, required=False)
        if file is None:
            return HarnessConfig(None, Harness())

        logger.debug("Loading harness configuration from '{}'", file)
        harness = deser(safe_load(file.read_text()) or {}, Harness, filename=str(file))

        for idx, path in enumerate(harness.files):
            if not path.is_absolute():
                path = file.parent / path
                harness.files[idx] = path
            if not path.exists():
                logger.warning("Template path '{}' does not exist", path)

        return HarnessConfig(file, harness)

    def options(
        self,
        files: list[str | Path] | None = None,
        data_values: list[str] | None = None,
        data_value_yamls: list[str] | None = None,
    ) -> YttOptions:
        """
        Build the options for a render. Explicit *files* replace the configured ones, data values are appended to the
        configured defaults.
        """

        return YttOptions(
            files=list(files) if files else list(self.config.files),
            data_values=[*self.config.data_values, *(data_values or [])],
            data_value_yamls=[*self.config.data_value_yamls, *(data_value_yamls or [])],
        )
