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

"""Tests for flag combination checks and config display."""

from __future__ import annotations

import logging

from eksdemo import cluster, config


def test_prefix_assignment_with_ipv6_warns(caplog):
    options = cluster.new_resource().options
    options.ipv6 = True
    options.prefix_assignment = True

    with caplog.at_level(logging.WARNING, logger="eksdemo"):
        config.validate_flags(options)

    assert "--prefix-assignment is implied by --ipv6" in caplog.text


def test_private_fargate_warns(caplog):
    options = cluster.new_resource().options
    options.private = True
    options.fargate = True

    with caplog.at_level(logging.WARNING, logger="eksdemo"):
        config.validate_flags(options)

    assert "--fargate on a --private cluster" in caplog.text


def test_defaults_do_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="eksdemo"):
        config.validate_flags(cluster.new_resource().options)

    assert caplog.records == []


def test_display_config_lists_roles(cluster_resource, monkeypatch):
    printed = []
    monkeypatch.setattr(config.console, "print", lambda *args, **kwargs: printed.append(str(args[0])))
    options = cluster_resource.options
    options.set_name("blue")
    options.pre_create()

    config.display_config(options)

    assert "  name            : blue" in printed
    assert "  kube-system/ebs-csi-controller-sa" in printed
