"""
Tests for waitutil.protocol — PollConfig validation, Outcome and errors.
"""

import math

import pytest

from waitutil.protocol import (
    ConfigError,
    Outcome,
    PollConfig,
    WaitError,
    WaitTimeoutError,
)


class TestPollConfig:
    def test_defaults(self):
        config = PollConfig()
        assert config.delay_sec == 1
        assert config.timeout_sec == 60
        assert config.verbose is False

    def test_from_options_none(self):
        assert PollConfig.from_options(None) == PollConfig()

    def test_from_options_full(self):
        config = PollConfig.from_options({"delay_sec": 0.5, "timeout_sec": 5, "verbose": True})
        assert config == PollConfig(delay_sec=0.5, timeout_sec=5, verbose=True)

    def test_none_values_use_defaults(self):
        config = PollConfig.from_options({"delay_sec": None, "timeout_sec": 3})
        assert config.delay_sec == 1
        assert config.timeout_sec == 3

    def test_zero_is_kept(self):
        config = PollConfig.from_options({"timeout_sec": 0, "delay_sec": 0})
        assert config.timeout_sec == 0
        assert config.delay_sec == 0

    def test_unknown_keys_rejected(self):
        with pytest.raises(ConfigError) as exc:
            PollConfig.from_options({"timeout_sec": 1, "retries": 3, "backoff": 2})
        assert exc.value.invalid_keys == ("backoff", "retries")
        assert "retries" in str(exc.value)
        assert "Invalid options" in str(exc.value)

    def test_options_not_mutated(self):
        options = {"timeout_sec": 1, "verbose": True}
        PollConfig.from_options(options)
        assert options == {"timeout_sec": 1, "verbose": True}

    def test_negative_duration_rejected(self):
        with pytest.raises(ConfigError, match="non-negative"):
            PollConfig(timeout_sec=-1)

    def test_non_numeric_duration_rejected(self):
        with pytest.raises(ConfigError, match="delay_sec"):
            PollConfig.from_options({"delay_sec": "fast"})

    @pytest.mark.parametrize("name", ["delay_sec", "timeout_sec"])
    def test_nan_duration_rejected(self, name):
        with pytest.raises(ConfigError, match=name):
            PollConfig(**{name: math.nan})

    def test_infinite_delay_rejected(self):
        with pytest.raises(ConfigError, match="finite"):
            PollConfig(delay_sec=math.inf)

    def test_infinite_timeout_allowed(self):
        assert PollConfig(timeout_sec=math.inf).timeout_sec == math.inf

    def test_bool_is_not_a_duration(self):
        with pytest.raises(ConfigError):
            PollConfig(delay_sec=True)

    def test_verbose_must_be_bool(self):
        with pytest.raises(ConfigError, match="verbose"):
            PollConfig(verbose="yes")

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="mapping"):
            PollConfig.from_options([("timeout_sec", 1)])

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
        assert issubclass(ConfigError, WaitError)


class TestOutcome:
    def test_bool(self):
        assert Outcome(True)
        assert not Outcome(False, "nope")

    def test_of_bool(self):
        assert Outcome.of(True) == Outcome(True)
        assert Outcome.of(False) == Outcome(False)

    def test_of_pair(self):
        assert Outcome.of((False, "still booting")) == Outcome(False, "still booting")
        assert Outcome.of([True, "ok"]) == Outcome(True, "ok")

    def test_of_sequence_uses_first_element(self):
        assert Outcome.of((False,)) == Outcome(False)
        assert Outcome.of((False, "a", "b")) == Outcome(False, "a")
        assert Outcome.of([True]) == Outcome(True)

    def test_of_empty_sequence_is_failure(self):
        assert Outcome.of(()) == Outcome(False)
        assert Outcome.of([]) == Outcome(False)

    def test_of_outcome_passthrough(self):
        outcome = Outcome(False, "x")
        assert Outcome.of(outcome) is outcome

    def test_of_truthy_values(self):
        assert Outcome.of(None) == Outcome(False)
        assert Outcome.of("ready") == Outcome(True)


class TestWaitTimeoutError:
    def test_message_without_detail(self):
        err = WaitTimeoutError("db", 5, 5.2)
        assert str(err) == "Timed out waiting for db (5 seconds elapsed)"
        assert err.detail is None

    def test_message_with_detail(self):
        err = WaitTimeoutError("db", 5, 5.2, "detail-X")
        assert str(err).endswith(": detail-X")
        assert err.description == "db"
        assert err.timeout_sec == 5
        assert err.elapsed_sec == 5.2

    def test_is_builtin_timeout_error(self):
        with pytest.raises(TimeoutError):
            raise WaitTimeoutError("db", 1, 1.0)
