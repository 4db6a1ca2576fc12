# Copyright 2025 CrownOps Engineering
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

"""Version-tolerant imports shared across querygen.

querygen supports Python 3.10 and newer. A handful of standard-library names
only appeared in 3.11 or 3.12; this module resolves each of them once so the
rest of the package can import a stable name.

- ``tomllib``: stdlib TOML parser, or the ``tomli`` backport on 3.10.
- ``StrEnum``: stdlib ``enum.StrEnum``, or a ``str``/``Enum`` mixin on 3.10.
- ``override``, ``TypedDict``, ``Unpack``: from ``typing`` when present,
  otherwise from ``typing_extensions``.
"""

from __future__ import annotations

import enum
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import tomli as tomllib
    from typing_extensions import TypedDict, Unpack, override
else:
    if sys.version_info >= (3, 11):
        import tomllib
        from typing import Unpack
    else:
        import tomli as tomllib
        from typing_extensions import Unpack

    if sys.version_info >= (3, 12):
        from typing import TypedDict, override
    else:
        from typing_extensions import TypedDict, override


if sys.version_info >= (3, 11):
    StrEnum = enum.StrEnum
else:

    class StrEnum(str, enum.Enum):
        """String-valued enum whose ``str()`` is the member value."""

        def __str__(self) -> str:
            return str(self.value)


__all__ = ["StrEnum", "TypedDict", "Unpack", "override", "tomllib"]
