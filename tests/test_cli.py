# /*
# Copyright 2026 The eksdemo Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# */

"""Tests for the eksdemo command line."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import yaml
from typer.testing import CliRunner

from eksdemo import cli
from eksdemo.commands import create_cmd, delete_cmd


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_session(monkeypatch, aws):
    factory = MagicMock(return_value=aws)
    monkeypatch.setattr(create_cmd, "AwsSession", factory)
    monkeypatch.setattr(delete_cmd, "AwsSession", factory)
    return factory


def _yaml_document(output):
    start = output.index("apiVersion:")
    return yaml.safe_load(output[start:])


def test_help_lists_subcommands(runner):
    result = runner.invoke(cli.app, ["--help"])

    assert result.exit_code == 0
    assert "create" in result.output
    assert "delete" in result.output


def test_create_help_lists_flags_in_order(runner):
    result = runner.invoke(cli.app, ["create", "cluster", "--help"])

    assert result.exit_code == 0, result.output
    positions = [result.output.index(f"--{name}") for name in ("instance", "version", "vpc-cidr", "dry-run")]
    assert positions == sorted(positions)


def test_invalid_vpc_cidr_is_usage_error(runner, fake_session):
    result = runner.invoke(cli.app, ["create", "cluster", "blue", "--vpc-cidr", "10.0.0.0"])

    assert result.exit_code == 2
    assert "failed parsing --vpc-cidr" in result.output
    fake_session.assert_not_called()


def test_invalid_version_is_usage_error(runner, fake_session):
    result = runner.invoke(cli.app, ["create", "cluster", "blue", "-v", "1.19"])

    assert result.exit_code == 2
    fake_session.assert_not_called()


def test_negative_node_count_is_usage_error(runner, fake_session):
    result = runner.invoke(cli.app, ["create", "cluster", "blue", "--nodes", "-1"])

    assert result.exit_code == 2


def test_dry_run(runner, fake_session):
    result = runner.invoke(
        cli.app,
        ["--region", "us-west-2", "create", "cluster", "blue", "-v", "1.25", "-N", "3", "--spot",
         "--vpc-cidr", "10.10.0.0/16", "--dry-run"],
    )

    assert result.exit_code == 0, result.output
    config = _yaml_document(result.output)
    assert config["metadata"] == {"name": "blue", "region": "us-west-2", "version": "1.25"}
    assert config["vpc"] == {"cidr": "10.10.0.0/16"}
    assert config["managedNodeGroups"][0]["desiredCapacity"] == 3
    assert config["managedNodeGroups"][0]["spot"] is True
    settings = fake_session.call_args.args[0]
    assert settings.region == "us-west-2"


def test_each_invocation_starts_from_defaults(runner, fake_session):
    runner.invoke(cli.app, ["create", "cluster", "blue", "-N", "3", "--spot", "--dry-run"])

    result = runner.invoke(cli.app, ["create", "cluster", "green", "--dry-run"])

    assert result.exit_code == 0, result.output
    ng = _yaml_document(result.output)["managedNodeGroups"][0]
    assert ng["desiredCapacity"] == 2
    assert "spot" not in ng


def test_node_count_outside_range(runner, fake_session):
    result = runner.invoke(cli.app, ["create", "cluster", "blue", "-N", "12", "--dry-run"])

    assert result.exit_code != 0
    assert isinstance(result.exception, ValueError)


def test_delete_cluster(runner, fake_session, monkeypatch, cfn_client, make_stack):
    cfn_client.get_paginator.return_value.paginate.return_value = [{"Stacks": [make_stack("eksdemo-blue-a")]}]
    manager = MagicMock()
    monkeypatch.setattr("eksdemo.cluster.EksctlManager", MagicMock(return_value=manager))

    result = runner.invoke(cli.app, ["delete", "cluster", "blue"])

    assert result.exit_code == 0, result.output
    cfn_client.delete_stack.assert_called_once_with(StackName="eksdemo-blue-a")
    manager.delete.assert_called_once()
    assert manager.delete.call_args.args[0].common.cluster_name == "blue"


def test_broken_registry_only_affects_create(runner, fake_session, monkeypatch):
    monkeypatch.setattr("eksdemo.cluster.irsa_candidates",
                        MagicMock(side_effect=ValueError("Unknown dependency type 'helm' in application 'x'")))
    monkeypatch.setattr("eksdemo.cluster.EksctlManager", MagicMock())

    deleted = runner.invoke(cli.app, ["delete", "cluster", "blue"])
    created = runner.invoke(cli.app, ["create", "cluster", "blue", "--dry-run"])

    assert deleted.exit_code == 0, deleted.output
    assert isinstance(created.exception, ValueError)
    assert "Unknown dependency type" in str(created.exception)


def test_main_reports_errors(monkeypatch):
    monkeypatch.setattr("sys.argv", ["eksdemo", "delete", "cluster", "blue"])
    monkeypatch.setattr(delete_cmd, "AwsSession", MagicMock(side_effect=RuntimeError("boom")))
    console = MagicMock()
    monkeypatch.setattr(cli, "console", console)

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    assert "boom" in console.print.call_args.args[0]
