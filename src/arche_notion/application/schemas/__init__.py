# Copyright (c)
# SPDX-License-Identifier: MIT
"""Request schemas: parameter objects, query filters and sorts."""

from .blocks import BlocksAppendChildrenRequest, BlocksUpdateRequest
from .comments import CommentCreateRequest
from .data_sources import (
    CreateDataSourceRequest,
    QueryDataSourceRequest,
    RetrieveDataSourceRequest,
    UpdateDataSourceRequest,
    UpdatePropertyConfiguration,
)
from .databases import DatabasesCreateRequest, DatabasesUpdateRequest, InitialDataSourceRequest
from .filters import (
    AndFilter,
    CheckboxFilter,
    CreatedTimeFilter,
    DateFilter,
    EmailFilter,
    FilesFilter,
    Filter,
    LastEditedTimeFilter,
    MultiSelectFilter,
    NumberFilter,
    OrFilter,
    PeopleFilter,
    PhoneNumberFilter,
    PropertyFilter,
    RelationFilter,
    RichTextFilter,
    SelectFilter,
    StatusFilter,
    TimestampFilter,
    TitleFilter,
    UniqueIdFilter,
    UrlFilter,
)
from .pages import PagesCreateParameters, PagesUpdateParameters
from .search import SearchFilter, SearchObjectType, SearchRequest, SearchSort
from .sorts import Direction, PropertySort, Sort, Timestamp, TimestampSort

__all__ = [
    "AndFilter",
    "BlocksAppendChildrenRequest",
    "BlocksUpdateRequest",
    "CheckboxFilter",
    "CommentCreateRequest",
    "CreateDataSourceRequest",
    "CreatedTimeFilter",
    "DatabasesCreateRequest",
    "DatabasesUpdateRequest",
    "DateFilter",
    "Direction",
    "EmailFilter",
    "FilesFilter",
    "Filter",
    "InitialDataSourceRequest",
    "LastEditedTimeFilter",
    "MultiSelectFilter",
    "NumberFilter",
    "OrFilter",
    "PagesCreateParameters",
    "PagesUpdateParameters",
    "PeopleFilter",
    "PhoneNumberFilter",
    "PropertyFilter",
    "PropertySort",
    "QueryDataSourceRequest",
    "RelationFilter",
    "RetrieveDataSourceRequest",
    "RichTextFilter",
    "SearchFilter",
    "SearchObjectType",
    "SearchRequest",
    "SearchSort",
    "SelectFilter",
    "Sort",
    "StatusFilter",
    "Timestamp",
    "TimestampFilter",
    "TimestampSort",
    "TitleFilter",
    "UniqueIdFilter",
    "UpdateDataSourceRequest",
    "UpdatePropertyConfiguration",
    "UrlFilter",
]
