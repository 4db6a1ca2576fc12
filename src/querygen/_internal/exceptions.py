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


"""Root of the querygen exception hierarchy.

Every error querygen raises derives from :class:`QuerygenError`, so callers can
catch the whole family at once. Errors may carry a multi-line ``hint`` that the
CLI prints after the message.
"""

from __future__ import annotations

__all__ = ["QuerygenError", "QuerygenValidationError"]


class QuerygenError(Exception):
    """Base error for all querygen exceptions.

    Attributes:
        hint: Optional remediation text shown after the error message.
    """

    hint: str | None = None


class QuerygenValidationError(QuerygenError, ValueError):
    """Raised when a configuration document or one of its values is rejected."""
