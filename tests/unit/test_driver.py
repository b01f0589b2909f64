"""Tests for the run driver state machine with fake collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import pytest

from sinhf_conformance.core.driver import DriverState, FunctionValidator
from sinhf_conformance.core.errors import FatalSetupError
from sinhf_conformance.core.functions import FunctionUnderTest
from sinhf_conformance.core.reference_table import TestCase
from sinhf_conformance.utils.constants import FAIL_EXIT_CODE, PASS_EXIT_CODE


class ReportedFailure(Exception):
    pass


@dataclass
class FakeOptions:
    function: FunctionUnderTest
    verbose: bool = False


@dataclass
class FakeEnvironment:
    function: FunctionUnderTest
    fail_setup: bool = False
    verbose: bool = False
    events: list = field(default_factory=list)
    options: FakeOptions | None = None

    def initialize(self, args):
        self.events.append(("initialize", args))
        if self.fail_setup:
            raise FatalSetupError("no runtime")
        self.options = FakeOptions(function=self.function, verbose=self.verbose)

    def terminate(self):
        self.events.append(("terminate",))


class RecordingFunction:
    """Odd function y = 2x that records every input and breaks on request."""

    def __init__(self, broken_input=None):
        self.inputs = []
        self.broken_input = broken_input

    def __call__(self, value):
        self.inputs.append(float(value))
        if self.broken_input is not None and value == self.broken_input:
            return np.float32(0.0)
        return np.float32(2.0) * value


def make_table():
    return (
        TestCase(np.float32(0.0), np.float32(0.0), np.float32(1e-6)),
        TestCase(np.float32(1.0), np.float32(2.0), np.float32(1e-6), "one"),
        TestCase(np.float32(2.0), np.float32(4.0), np.float32(1e-6)),
        TestCase(np.float32(np.inf), np.float32(np.inf), np.float32(0.0)),
    )


def make_driver(recorder, **env_kwargs):
    reported = []

    def report_failure(message):
        reported.append(message)
        raise ReportedFailure(message)

    environment = FakeEnvironment(FunctionUnderTest("double", recorder), **env_kwargs)
    driver = FunctionValidator(environment, report_failure=report_failure, table=make_table())
    return driver, environment, reported


def test_successful_run_checks_every_entry_and_its_negation_in_order(capsys):
    recorder = RecordingFunction()
    driver, environment, reported = make_driver(recorder)

    assert driver.state is DriverState.UNINITIALIZED
    assert driver.run(["--flag"]) == PASS_EXIT_CODE

    assert driver.state is DriverState.TERMINATED
    assert reported == []
    assert environment.events == [("initialize", ["--flag"]), ("terminate",)]
    assert recorder.inputs[:8] == [0.0, -0.0, 1.0, -1.0, 2.0, -2.0, np.inf, -np.inf]
    assert np.isnan(recorder.inputs[8])
    assert driver.checks_passed == 9
    assert "[sinhf] PASS: 9 checks against double" in capsys.readouterr().out


def test_first_mismatch_aborts_run_and_terminates_before_reporting():
    recorder = RecordingFunction(broken_input=np.float32(-1.0))
    driver, environment, reported = make_driver(recorder)

    with pytest.raises(ReportedFailure):
        driver.run([])

    # Nothing after the failing negated entry is evaluated.
    assert recorder.inputs == [0.0, -0.0, 1.0, -1.0]
    assert environment.events[-1] == ("terminate",)
    assert driver.state is DriverState.TERMINATED
    assert len(reported) == 1
    assert reported[0].startswith("double(-1) returned")
    assert reported[0].endswith("[value: -(one)]")


def test_nan_propagation_failure_is_reported():
    class NanToZero(RecordingFunction):
        def __call__(self, value):
            result = super().__call__(value)
            return np.float32(0.0) if np.isnan(value) else result

    recorder = NanToZero()
    driver, environment, reported = make_driver(recorder)

    with pytest.raises(ReportedFailure):
        driver.run([])

    assert environment.events.count(("terminate",)) == 1
    assert "should have returned        nan" in reported[0]
    assert driver.checks_passed == 8


def test_setup_failure_returns_fail_without_running_checks(capsys):
    recorder = RecordingFunction()
    driver, environment, reported = make_driver(recorder, fail_setup=True)

    assert driver.run(["--bad"]) == FAIL_EXIT_CODE

    assert recorder.inputs == []
    assert reported == []
    assert environment.events == [("initialize", ["--bad"])]
    assert driver.state is DriverState.UNINITIALIZED
    assert "setup failed: no runtime" in capsys.readouterr().err


def test_reporter_that_returns_still_fails_the_run():
    recorder = RecordingFunction(broken_input=np.float32(2.0))
    environment = FakeEnvironment(FunctionUnderTest("double", recorder))
    messages = []
    driver = FunctionValidator(environment, report_failure=messages.append, table=make_table())

    assert driver.run([]) == FAIL_EXIT_CODE
    assert len(messages) == 1


def test_verbose_prints_one_line_per_passing_check(capsys):
    driver, _, _ = make_driver(RecordingFunction(), verbose=True)

    driver.run([])
    lines = [line for line in capsys.readouterr().out.splitlines() if line.endswith(" ok")]

    assert len(lines) == 8
    assert lines[0] == "[sinhf] double(0) ok"


def test_driver_cannot_be_reused():
    driver, _, _ = make_driver(RecordingFunction())
    driver.run([])

    with pytest.raises(RuntimeError, match="already used"):
        driver.run([])


def test_environment_without_function_option_fails_loudly_after_terminate():
    class NoFunctionEnvironment(FakeEnvironment):
        def initialize(self, args):
            self.events.append(("initialize", args))
            self.options = object()

    environment = NoFunctionEnvironment(FunctionUnderTest("double", RecordingFunction()))
    driver = FunctionValidator(environment, report_failure=lambda message: None, table=make_table())

    with pytest.raises(AttributeError):
        driver.run([])

    assert environment.events[-1] == ("terminate",)
    assert driver.checks_passed == 0
