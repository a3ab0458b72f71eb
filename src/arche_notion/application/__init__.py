# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application layer: request schemas."""
