from dataclasses import dataclass, field
from pathlib import Path
import shlex
import subprocess

from loguru import logger

from kytt.tools.types import Manifests


@dataclass
class YttError(Exception):
    """
    Raised when the `ytt` process could not be started at all, e.g. because the binary does not exist or is not
    executable. A render that ran and failed is not an error, it is reported via #YttResult.success.
    """

    binary: str
    reason: str

    def __str__(self) -> str:
        return f"Could not run '{self.binary}': {self.reason}"


@dataclass
class YttOptions:
    """
    The inputs of a single `ytt` invocation.
    """

    files: list[str | Path] = field(default_factory=list)
    """ Template files or directories, each passed with `--file`. """

    data_values: list[str] = field(default_factory=list)
    """ Scalar data values in `key=value` form, each passed with `--data-value`. """

    data_value_yamls: list[str] = field(default_factory=list)
    """ YAML-typed data values in `key=yaml` form, each passed with `--data-value-yaml`. """


@dataclass
class YttResult:
    success: bool
    """ Whether `ytt` exited with status code 0. """

    stdout: str
    """ The rendered manifest stream (trimmed). """

    stderr: str
    """ Diagnostics emitted by `ytt`, usually only present if the render failed (trimmed). """

    def manifests(self) -> Manifests:
        """
        Decode the rendered stream into a list of manifests.
        """

        from kytt.manifests import parse_manifests

        return parse_manifests(self.stdout)


class Ytt:
    """
    Wrapper for interfacing with `ytt`.
    """

    def __init__(self, binary: str = "ytt", cwd: Path | None = None) -> None:
        self.binary = binary
        self.cwd = cwd

    def command(self, options: YttOptions) -> list[str]:
        """
        Build the `ytt` command line for the given options.
        """

        command = [self.binary]
        for file in options.files:
            command.extend(["--file", str(file)])
        for value in options.data_values:
            command.extend(["--data-value", value])
        for value in options.data_value_yamls:
            command.extend(["--data-value-yaml", value])
        return command

    def render(self, options: YttOptions) -> YttResult:
        """
        Run `ytt` and capture its output. This never raises on a non-zero exit status; inspect the returned result
        instead.

        Raises:
            YttError: If the process could not be started.
        """

        command = self.command(options)
        logger.debug("Rendering manifests with ytt: $ {}", " ".join(map(shlex.quote, command)))

        try:
            # ytt output is not guaranteed to be valid UTF-8.
            status = subprocess.run(
                command, capture_output=True, encoding="utf-8", errors="replace", cwd=self.cwd
            )
        except OSError as exc:
            raise YttError(self.binary, str(exc)) from exc

        result = YttResult(
            success=status.returncode == 0,
            stdout=status.stdout.strip(),
            stderr=status.stderr.strip(),
        )
        if not result.success:
            logger.warning("ytt exited with status code {}: {}", status.returncode, result.stderr)
        return result


def exec_ytt(options: YttOptions, binary: str = "ytt", cwd: Path | None = None) -> YttResult:
    """
    Shorthand for `Ytt(binary, cwd).render(options)`.
    """

    return Ytt(binary, cwd).render(options)
