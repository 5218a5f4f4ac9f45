from pathlib import Path
import subprocess
import sys
from textwrap import dedent
from unittest.mock import MagicMock, patch

import pytest

from kytt.tools.ytt import Ytt, YttError, YttOptions, exec_ytt


def _fake_ytt(directory: Path, script: str) -> Path:
    path = directory / "ytt"
    path.write_text("#!/bin/sh\n" + dedent(script))
    path.chmod(0o755)
    return path


def test__Ytt__command__one_flag_per_entry_in_category_order() -> None:
    options = YttOptions(
        files=["config", Path("overlays/extra.yml")],
        data_values=["a=1", "b=two"],
        data_value_yamls=["scdf.server.image.tag=2.8.1"],
    )

    assert Ytt().command(options) == [
        "ytt",
        "--file",
        "config",
        "--file",
        "overlays/extra.yml",
        "--data-value",
        "a=1",
        "--data-value",
        "b=two",
        "--data-value-yaml",
        "scdf.server.image.tag=2.8.1",
    ]


def test__Ytt__command__without_options() -> None:
    assert Ytt("/opt/bin/ytt").command(YttOptions()) == ["/opt/bin/ytt"]


def test__Ytt__render__captures_and_trims_output() -> None:
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="\nkind: Service\n\n", stderr="  ")
    with patch("kytt.tools.ytt.subprocess.run", MagicMock(return_value=completed)) as run:
        result = Ytt(cwd=Path("/work")).render(YttOptions(files=["config"]))

    run.assert_called_once_with(
        ["ytt", "--file", "config"], capture_output=True, encoding="utf-8", errors="replace", cwd=Path("/work")
    )
    assert result.success
    assert result.stdout == "kind: Service"
    assert result.stderr == ""


def test__Ytt__render__non_zero_exit_is_not_an_error() -> None:
    completed = subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="ytt: Error: boom\n")
    with patch("kytt.tools.ytt.subprocess.run", MagicMock(return_value=completed)):
        result = exec_ytt(YttOptions())

    assert not result.success
    assert result.stderr == "ytt: Error: boom"


def test__Ytt__render__missing_binary_raises(tmp_path: Path) -> None:
    ytt = Ytt(str(tmp_path / "does-not-exist"))
    with pytest.raises(YttError) as excinfo:
        ytt.render(YttOptions(files=["config"]))

    assert excinfo.value.binary == str(tmp_path / "does-not-exist")
    assert isinstance(excinfo.value.__cause__, OSError)


@pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell")
def test__Ytt__render__runs_process(tmp_path: Path) -> None:
    binary = _fake_ytt(
        tmp_path,
        """
        echo "---"
        echo "args: $*"
        """,
    )

    result = Ytt(str(binary)).render(YttOptions(files=["a.yml"], data_value_yamls=["x=1"]))

    assert result.success
    assert result.stdout == "---\nargs: --file a.yml --data-value-yaml x=1"
    assert result.manifests() == [{"args": "--file a.yml --data-value-yaml x=1"}]


@pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell")
def test__Ytt__render__reports_failure(tmp_path: Path) -> None:
    binary = _fake_ytt(
        tmp_path,
        """
        echo "  partial  "
        echo "  ytt: Error: missing value  " >&2
        exit 3
        """,
    )

    result = Ytt(str(binary)).render(YttOptions())

    assert not result.success
    assert result.stdout == "partial"
    assert result.stderr == "ytt: Error: missing value"


@pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell")
def test__Ytt__render__undecodable_output_is_still_a_result(tmp_path: Path) -> None:
    binary = _fake_ytt(
        tmp_path,
        r"""
        printf 'kind: \377\n'
        printf 'bad \377 byte' >&2
        exit 1
        """,
    )

    result = Ytt(str(binary)).render(YttOptions())

    assert not result.success
    assert result.stdout == "kind: �"
    assert result.stderr == "bad � byte"
