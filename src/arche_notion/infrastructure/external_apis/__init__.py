# Copyright (c)
# SPDX-License-Identifier: MIT
