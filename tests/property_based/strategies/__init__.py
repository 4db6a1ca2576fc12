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

"""Hypothesis strategies for configuration references."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = ["identifiers", "module_paths"]

_IDENT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"


def identifiers() -> st.SearchStrategy[str]:
    """Non-empty names without separators."""
    return st.text(alphabet=_IDENT_ALPHABET, min_size=1, max_size=12)


def module_paths() -> st.SearchStrategy[str]:
    """Module paths such as ``github.com/org/repo``; always contain a ``/``."""
    host = st.lists(identifiers(), min_size=1, max_size=3).map(".".join)
    segments = st.lists(identifiers(), min_size=1, max_size=3)
    return st.tuples(host, segments).map(lambda parts: "/".join([parts[0], *parts[1]]))
