# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resource gateways and the operation table."""

from .base import NotionGateway
from .blocks import BlockChildrenGateway, BlocksGateway
from .comments import CommentsGateway
from .data_sources import DataSourcesGateway
from .databases import DatabasesGateway
from .operations import OPERATIONS, Operation
from .pages import PagesGateway
from .search import SearchGateway
from .users import UsersGateway

__all__ = [
    "OPERATIONS",
    "BlockChildrenGateway",
    "BlocksGateway",
    "CommentsGateway",
    "DataSourcesGateway",
    "DatabasesGateway",
    "NotionGateway",
    "Operation",
    "PagesGateway",
    "SearchGateway",
    "UsersGateway",
]
