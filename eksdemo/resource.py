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

"""Resource descriptors and the create/delete lifecycle around them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from eksdemo.flags import Flags
from eksdemo.options import Nameable


class Manager(Protocol):
    def create(self, options: Any, dry_run: bool = False) -> None: ...

    def delete(self, options: Any) -> None: ...


@dataclass
class Resource:
    """A named resource with its options, flags, and manager.

    Attributes:
        name: Resource type identifier (e.g. ``cluster``, ``irsa``).
        description: Human readable description used in help text.
        options: Options object; implements ``set_name`` and, where the
            resource is managed, ``pre_create`` and ``pre_delete``.
        create_flags: Flags registered on the create command, in order.
        manager: Execution engine for create/delete, or None for descriptors
            that are materialized by another resource.
    """

    name: str
    description: str = ""
    options: Nameable | None = None
    create_flags: Flags = field(default_factory=Flags)
    manager: Manager | None = None

    def set_name(self, name: str) -> None:
        self.options.set_name(name)

    def create(self, name: str, dry_run: bool = False) -> None:
        """Name the resource, run its pre-create hook, then hand it to the manager.

        Args:
            name: Name of the resource instance to create.
            dry_run: Render the request without creating anything.

        Raises:
            RuntimeError: If the resource has no manager.
        """
        if self.manager is None:
            raise RuntimeError(f"{self.name} resources cannot be created directly")
        self.set_name(name)
        self.options.pre_create()
        self.manager.create(self.options, dry_run=dry_run)

    def delete(self, name: str) -> None:
        """Name the resource, run its pre-delete hook, then hand it to the manager.

        Args:
            name: Name of the resource instance to delete.

        Raises:
            RuntimeError: If the resource has no manager.
        """
        if self.manager is None:
            raise RuntimeError(f"{self.name} resources cannot be deleted directly")
        self.set_name(name)
        self.options.pre_delete()
        self.manager.delete(self.options)
