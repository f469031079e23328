"""
任务数据访问层
Tasks 表的插入；绑定顺序与表的列顺序一致（id 之后的 7 列）。
"""
from __future__ import annotations

import datetime as dt
from sqlite3 import Connection
from typing import Optional, Union

from . import generated_key

INSERT_TASK = (
    "INSERT INTO Tasks (title, description, dueDate, isFinished, intAttr1, intAttr2, projectId) "
    "VALUES (?, ?, ?, ?, ?, ?, ?)"
)

DateLike = Union[dt.date, str, None]


def to_db_date(value: DateLike) -> Optional[str]:
    """把领域日期转换为存储格式 YYYY-MM-DD；None 原样写入 NULL。"""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    if isinstance(value, str):
        return dt.date.fromisoformat(value.strip()).isoformat()
    raise TypeError(f"unsupported due date type: {type(value).__name__}")


def insert_task(
    conn: Connection,
    title: str,
    description: str,
    due_date: DateLike,
    is_finished: Union[bool, int, None],
    int_attr1: Optional[int],
    int_attr2: Optional[int],
    project_id: int,
) -> int:
    params = (
        title,
        description,
        to_db_date(due_date),
        1 if is_finished else 0,
        int_attr1,
        int_attr2,
        project_id,
    )
    cur = conn.execute(INSERT_TASK, params)
    return generated_key(cur, "Tasks")
