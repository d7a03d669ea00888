# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ormi test suite.

Unit tests are grouped by package under tests/unit; shared factories and
fixtures live in tests/conftest.py.
"""
