# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List, Literal, Set, Tuple
import logging
from sqlalchemy import Connection, Table, UniqueConstraint, inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.schema import CreateColumn
from app.db.base import Base
from app.db import models  # noqa: F401  (registra os modelos no metadata)

"""
Sincronização do schema no startup.


- `create`: cria as tabelas que não existem.
- `force`: derruba e recria as tabelas (dados são perdidos).
- `alter`: cria as ausentes e adiciona colunas novas às existentes, com unicidade e índices (nunca remove/retipa).
"""

log = logging.getLogger("db.sync")

SyncMode = Literal["create", "alter", "force"]


def _create_missing(conn: Connection) -> List[str]:
    inspector = inspect(conn)
    created: List[str] = []
    for table in Base.metadata.sorted_tables:
        if not inspector.has_table(table.name):
            created.extend(f"{table.name}.{c.name}" for c in table.columns)
    Base.metadata.create_all(conn, checkfirst=True)
    return created


def _recreate_all(conn: Connection) -> List[str]:
    Base.metadata.drop_all(conn, checkfirst=True)
    Base.metadata.create_all(conn)
    return [f"{t.name}.{c.name}" for t in Base.metadata.sorted_tables for c in t.columns]


def _unique_groups(table: Table) -> List[Tuple[str, ...]]:
    groups: List[Tuple[str, ...]] = []
    for constraint in table.constraints:
        if isinstance(constraint, UniqueConstraint):
            groups.append(tuple(c.name for c in constraint.columns))
    for column in table.columns:
        if column.unique and (column.name,) not in groups:
            groups.append((column.name,))
    return groups


def _add_unique_rules(conn: Connection, table: Table, added: Set[str]) -> None:
    # ADD COLUMN só carrega a definição da coluna; unicidade e índices vêm à parte
    preparer = conn.dialect.identifier_preparer
    table_name = preparer.format_table(table)
    for names in _unique_groups(table):
        if not added.intersection(names):
            continue
        index_name = preparer.quote(f"uq_{table.name}_{'_'.join(names)}")
        columns = ", ".join(preparer.quote(n) for n in names)
        conn.execute(text(f"CREATE UNIQUE INDEX {index_name} ON {table_name} ({columns})"))
    for index in table.indexes:
        if added.intersection(c.name for c in index.columns):
            index.create(conn)


def _add_missing_columns(conn: Connection, table: Table) -> List[str]:
    existing = {col["name"] for col in inspect(conn).get_columns(table.name)}
    table_name = conn.dialect.identifier_preparer.format_table(table)
    added: List[str] = []
    for column in table.columns:
        if column.name in existing:
            continue
        column_ddl = CreateColumn(column).compile(dialect=conn.dialect)
        conn.execute(text(f"ALTER TABLE {table_name} ADD COLUMN {column_ddl}"))
        added.append(column.name)
    if added:
        _add_unique_rules(conn, table, set(added))
    return [f"{table.name}.{name}" for name in added]


def _alter(conn: Connection) -> List[str]:
    inspector = inspect(conn)
    changed: List[str] = []
    for table in Base.metadata.sorted_tables:
        if inspector.has_table(table.name):
            changed.extend(_add_missing_columns(conn, table))
        else:
            table.create(conn)
            changed.extend(f"{table.name}.{c.name}" for c in table.columns)
    return changed


_STRATEGIES = {
    "create": _create_missing,
    "force": _recreate_all,
    "alter": _alter,
}


async def sync_schema(engine: AsyncEngine, mode: SyncMode = "alter") -> List[str]:
    """
    Aplica o schema dos modelos ao banco conforme `mode`.

    Retorna as colunas criadas/adicionadas no formato `tabela.coluna`
    (lista vazia quando nada mudou).
    """
    try:
        strategy = _STRATEGIES[mode]
    except KeyError:
        raise ValueError(f"Unknown sync mode {mode!r}; expected one of {sorted(_STRATEGIES)}") from None

    async with engine.begin() as conn:
        changed = await conn.run_sync(strategy)

    log.info("Schema sync (%s): %d column(s) created/added", mode, len(changed))
    return changed
