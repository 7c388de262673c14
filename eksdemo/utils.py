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

"""Utility functions for command checks and address parsing."""

from __future__ import annotations

import ipaddress

import sh


def parse_cidr(value: str) -> ipaddress.IPv4Network | ipaddress.IPv6Network:
    """Parse a CIDR string in ``address/prefix-length`` form.

    Host bits may be set (``10.1.2.3/16`` is accepted). Netmask notation, bare
    addresses and IPv6 zone IDs (``fe80::%eth0/64``) are rejected.

    Args:
        value: CIDR string such as ``192.168.0.0/16`` or ``2001:db8::/32``.

    Returns:
        The network the CIDR describes.

    Raises:
        ValueError: If *value* is not a valid CIDR.
    """
    address, sep, prefix = value.partition("/")
    if not sep or not address or "%" in address or not prefix.isdigit():
        raise ValueError(f"invalid CIDR address: {value}")
    return ipaddress.ip_network(value, strict=False)


def require_command(cmd: str) -> None:
    """Check if a command exists on the system PATH.

    Args:
        cmd: Name of the CLI command to check.

    Raises:
        RuntimeError: If the command is not found.
    """
    try:
        sh.which(cmd)
    except sh.ErrorReturnCode as err:
        raise RuntimeError(f"Required command '{cmd}' not found. Please install it first.") from err
