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

"""querygen - configuration core for a multi-package SQL code generator.

Loads and validates the document that describes each generation package (its
schema, queries, database engine and output flags) and resolves type overrides
into typed references for code generators.
"""

from __future__ import annotations

from querygen.exceptions import (
    QuerygenError,
    QuerygenValidationError,
)

from .config import (
    ConfigValidationError,
    GenerateSettings,
    Override,
    PackageSettings,
    load_config,
    parse_config,
    settings_to_dict,
)
from .core.model_types import Engine

__all__ = [
    "ConfigValidationError",
    "Engine",
    "GenerateSettings",
    "Override",
    "PackageSettings",
    "QuerygenError",
    "QuerygenValidationError",
    "__version__",
    "load_config",
    "parse_config",
    "settings_to_dict",
]

__version__ = "0.1.0"
