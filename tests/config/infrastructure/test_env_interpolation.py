"""Tests for ${ENV_VAR} resolution inside network records."""

from autostake.config.infrastructure.env_interpolation import (
    find_missing_vars,
    resolve_networks,
)


class TestFindMissingVars:
    def test_maps_each_missing_var_to_referencing_networks(self) -> None:
        networks = [
            {"name": "cosmoshub", "healthCheck": {"uuid": "${HC_A}"}},
            {"name": "osmosis", "healthCheck": {"uuid": "${HC_B}"}, "rpc": ["${HC_A}"]},
        ]

        missing = find_missing_vars(networks=networks, environ={})

        assert missing == {"HC_A": ["cosmoshub", "osmosis"], "HC_B": ["osmosis"]}

    def test_network_is_listed_once_per_var(self) -> None:
        networks = [{"name": "juno", "a": "${HC_A}", "b": "prefix-${HC_A}"}]

        assert find_missing_vars(networks=networks, environ={}) == {"HC_A": ["juno"]}

    def test_set_vars_are_not_reported(self) -> None:
        networks = [{"name": "juno", "healthCheck": {"uuid": "${HC_A}"}}]

        assert find_missing_vars(networks=networks, environ={"HC_A": "x"}) == {}


class TestResolveNetworks:
    def test_substitutes_nested_values(self) -> None:
        networks = [
            {"name": "juno", "healthCheck": {"uuid": "${HC_A}"}, "autostake": {"retries": 2}}
        ]

        resolved = resolve_networks(networks=networks, environ={"HC_A": "uuid-1"})

        assert resolved == [
            {"name": "juno", "healthCheck": {"uuid": "uuid-1"}, "autostake": {"retries": 2}}
        ]

    def test_input_records_are_left_untouched(self) -> None:
        networks = [{"name": "juno", "restUrl": ["https://${HOST}"]}]

        resolve_networks(networks=networks, environ={"HOST": "lcd.juno"})

        assert networks == [{"name": "juno", "restUrl": ["https://${HOST}"]}]

    def test_non_string_scalars_pass_through(self) -> None:
        networks = [{"name": "juno", "values": [1, 2.5, True, None]}]

        assert resolve_networks(networks=networks, environ={}) == networks
