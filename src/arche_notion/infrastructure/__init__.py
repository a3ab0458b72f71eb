# Copyright (c)
# SPDX-License-Identifier: MIT
"""Infrastructure: HTTP transport, resilience, logging and observability."""
