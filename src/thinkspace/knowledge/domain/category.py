"""ParaCategory — the four-way PARA classification of knowledge items."""

from enum import StrEnum


class ParaCategory(StrEnum):
    PROJECT = "project"
    AREA = "area"
    RESOURCE = "resource"
    ARCHIVE = "archive"
