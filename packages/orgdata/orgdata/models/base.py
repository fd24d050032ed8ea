"""
Column factories shared by every table.

The ownership block (owner_id, created_at, updated_at, deleted_at) is always the
trailing four columns of a table, so it is declared per table with these
factories rather than inherited from a mixin, which would put it first.
"""

from typing import Any

import sqlalchemy as sa
from sqlmodel import Field


def owner_id_field() -> Any:
    return Field(foreign_key="users.user_id", nullable=False)


def created_at_field() -> Any:
    return Field(
        default=None,
        nullable=False,
        sa_column_kwargs={"server_default": sa.text("now()")},
        sa_type=sa.DateTime(timezone=True),
    )


def updated_at_field() -> Any:
    return Field(
        default=None,
        nullable=False,
        sa_column_kwargs={"server_default": sa.text("now()")},
        sa_type=sa.DateTime(timezone=True),
    )


def deleted_at_field() -> Any:
    return Field(default=None, nullable=True, sa_type=sa.DateTime(timezone=True))
