"""End-to-end tests for ``ignition start``."""

import re

from ignition import __version__
from ignition.entrypoints.cli.main import ignition
from tests.e2e.cli.conftest import SAMPLE_SPECS

# pylint: disable=redefined-outer-name

CLEAN_ENV = {"IGNITION_SPECS": None, "IGNITION_DETECT_CYCLES": None}


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def invoke(runner, *args: str, env: dict | None = None):
    """Invoke the CLI with a clean IGNITION environment."""
    return runner.invoke(ignition, list(args), env={**CLEAN_ENV, **(env or {})})


def test_version(runner) -> None:
    """--version prints the package version."""
    result = invoke(runner, "--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_start(runner) -> None:
    """The top-level help mentions the start command."""
    result = invoke(runner, "--help")
    assert result.exit_code == 0
    assert_in_output(r"^\s+start\s", result.output)


def test_start_resolves_dependencies(runner) -> None:
    """Dependencies are started first and listed in start order."""
    result = invoke(runner, "start", "web", "--specs", SAMPLE_SPECS)
    assert result.exit_code == 0, result.output
    assert_in_output(r"web started \(temporary\)", result.output)
    assert_in_output(r"^config\ndb\nweb$", result.output)


def test_start_mode(runner) -> None:
    """--mode is accepted case-insensitively."""
    result = invoke(runner, "start", "web", "--specs", SAMPLE_SPECS, "--mode", "PERMANENT")
    assert result.exit_code == 0, result.output
    assert_in_output(r"web started \(permanent\)", result.output)


def test_specs_from_environment(runner) -> None:
    """IGNITION_SPECS is used when --specs is omitted."""
    result = invoke(runner, "start", "config", env={"IGNITION_SPECS": SAMPLE_SPECS})
    assert result.exit_code == 0, result.output
    assert_in_output(r"^config$", result.output)


def test_missing_specs(runner) -> None:
    """Without specs there is nothing to start."""
    result = invoke(runner, "start", "web")
    assert result.exit_code == 1
    assert "No component specifications given." in result.output


def test_bad_specs_path(runner) -> None:
    """An unresolvable specs path is reported."""
    result = invoke(runner, "start", "web", "--specs", "tests.e2e.cli.sample_specs:NOPE")
    assert result.exit_code == 1
    assert "has no attribute 'NOPE'" in result.output


def test_component_failure(runner) -> None:
    """A failing component exits 1 with its reason and lists nothing."""
    result = invoke(runner, "start", "broken", "--specs", SAMPLE_SPECS)
    assert result.exit_code == 1
    assert "Could not start broken: port already in use" in result.output
    assert_not_in_output(r"^config$", result.output)


def test_unknown_component(runner) -> None:
    """Unknown names fail cleanly."""
    result = invoke(runner, "start", "ghost", "--specs", SAMPLE_SPECS)
    assert result.exit_code == 1
    assert "Could not start ghost: unknown component 'ghost'" in result.output


def test_cycle_with_detection(runner) -> None:
    """--detect-cycles reports the loop."""
    result = invoke(runner, "start", "loop_a", "--specs", SAMPLE_SPECS, "--detect-cycles")
    assert result.exit_code == 1
    assert "dependency cycle: loop_a -> loop_b -> loop_a" in result.output


def test_cycle_detection_from_environment(runner) -> None:
    """IGNITION_DETECT_CYCLES turns detection on when the flag is absent."""
    result = invoke(
        runner,
        "start",
        "loop_a",
        "--specs",
        SAMPLE_SPECS,
        env={"IGNITION_DETECT_CYCLES": "yes"},
    )
    assert result.exit_code == 1
    assert "dependency cycle: loop_a -> loop_b -> loop_a" in result.output


def test_cycle_without_detection(runner) -> None:
    """Without detection the recursion error is turned into a hint."""
    result = invoke(runner, "start", "loop_a", "--specs", SAMPLE_SPECS)
    assert result.exit_code == 1
    assert "Dependency cycle while starting 'loop_a'" in result.output


def test_invalid_detect_cycles_setting(runner) -> None:
    """A garbage IGNITION_DETECT_CYCLES value is a configuration error."""
    result = invoke(
        runner,
        "start",
        "web",
        "--specs",
        SAMPLE_SPECS,
        env={"IGNITION_DETECT_CYCLES": "sometimes"},
    )
    assert result.exit_code == 1
    assert "Invalid value 'sometimes' for IGNITION_DETECT_CYCLES." in result.output


def test_verbose_shows_resolution(runner) -> None:
    """-v shows INFO logs from the coordinator."""
    result = invoke(runner, "-v", "--no-color", "start", "web", "--specs", SAMPLE_SPECS)
    assert result.exit_code == 0, result.output
    assert_in_output(r"Dependency db of web is running", result.output)


def test_default_verbosity_hides_info(runner) -> None:
    """At the default WARNING level INFO logs stay quiet."""
    result = invoke(runner, "--no-color", "start", "web", "--specs", SAMPLE_SPECS)
    assert result.exit_code == 0, result.output
    assert_not_in_output(r"Dependency db of web is running", result.output)


def test_logger_level_override(runner) -> None:
    """-L can silence a project logger even when verbose."""
    result = invoke(
        runner,
        "-vv",
        "--no-color",
        "-L",
        "ignition.service_layer=ERROR",
        "start",
        "web",
        "--specs",
        SAMPLE_SPECS,
    )
    assert result.exit_code == 0, result.output
    assert_not_in_output(r"Dependency db of web is running", result.output)


def test_bad_logger_level(runner) -> None:
    """Malformed -L values are usage errors."""
    result = invoke(runner, "-L", "nonsense", "start", "web", "--specs", SAMPLE_SPECS)
    assert result.exit_code == 2
    assert "Expected NAME=LEVEL" in result.output
