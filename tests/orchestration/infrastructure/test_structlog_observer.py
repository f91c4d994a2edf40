"""Tests for StructlogAutostakeObserver event names and levels."""

from structlog.testing import capture_logs

from autostake.orchestration.infrastructure.observer import StructlogAutostakeObserver


class TestStructlogAutostakeObserver:
    def test_invalid_network_name_is_an_error(self) -> None:
        observer = StructlogAutostakeObserver()

        with capture_logs() as logs:
            observer.invalid_network_name(name="delta", configured=["alpha"])

        assert logs == [
            {
                "event": "autostake.invalid_network_name",
                "log_level": "error",
                "name": "delta",
                "configured": ["alpha"],
            }
        ]

    def test_retry_reports_restricted_address_count(self) -> None:
        observer = StructlogAutostakeObserver()

        with capture_logs() as logs:
            observer.attempt_retry(
                network="cosmoshub",
                attempt=1,
                delay_seconds=30.0,
                addresses=["cosmos1a", "cosmos1b"],
            )

        assert logs[0]["event"] == "autostake.attempt.retry"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["restricted_addresses"] == 2

    def test_full_target_set_has_no_restricted_count(self) -> None:
        observer = StructlogAutostakeObserver()

        with capture_logs() as logs:
            observer.attempt_started(
                network="cosmoshub", attempt=1, max_attempts=3, addresses=None
            )

        assert logs[0]["restricted_addresses"] is None

    def test_failed_network_completion_is_an_error(self) -> None:
        observer = StructlogAutostakeObserver()

        with capture_logs() as logs:
            observer.network_completed(network="cosmoshub", status="failed", attempts=3)
            observer.network_completed(network="osmosis", status="succeeded", attempts=1)

        assert [log["log_level"] for log in logs] == ["error", "info"]

    def test_unavailable_failed_addresses_is_a_warning(self) -> None:
        observer = StructlogAutostakeObserver()

        with capture_logs() as logs:
            observer.failed_addresses_unavailable(
                network="cosmoshub", attempt=2, reason="delegations not loaded"
            )

        assert logs[0]["event"] == "autostake.attempt.failed_addresses_unavailable"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["reason"] == "delegations not loaded"
