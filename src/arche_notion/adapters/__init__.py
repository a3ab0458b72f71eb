# Copyright (c)
# SPDX-License-Identifier: MIT
"""Adapters: resource gateways over the Notion transport."""
