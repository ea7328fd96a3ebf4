# Copyright 2024 by the httpcodes authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Private type aliases used internally by httpcodes."""

from __future__ import annotations

import http
from typing import Union

Description = str
"""Human-readable description attached to a status code or method."""

StatusLike = Union[int, http.HTTPStatus, str, bytes]
"""Anything that can be normalized to an integer status code."""

MethodLike = str
"""A method token, either a plain ``str`` or a :class:`~httpcodes.Method`."""
