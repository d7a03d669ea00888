# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Ormi components.

Everything here runs in-process against the in-memory repository.
"""
