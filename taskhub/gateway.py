"""
持久化网关
User / Project / Task 的写入入口：每次保存独立获取连接、执行一条插入、
读取数据库生成的主键并返回。连接不缓存，所有退出路径上都会关闭。
"""
from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Union

from . import db
from .errors import DataAccessError
from .repository import project_repo, task_repo, user_repo
from .repository.task_repo import DateLike

logger = logging.getLogger(__name__)

Connector = Callable[[], sqlite3.Connection]


class PersistenceGateway:
    """Create-only access to the Users, Projects and Tasks tables."""

    def __init__(self, db_path: Optional[str] = None, connector: Optional[Connector] = None):
        self.db_path = db_path
        self._connector = connector or (lambda: db.connect(self.db_path))

    def connect(self) -> sqlite3.Connection:
        return self._connector()

    @contextmanager
    def _session(self, table: str) -> Iterator[sqlite3.Connection]:
        try:
            conn = self.connect()
        except (sqlite3.Error, OSError) as exc:
            logger.warning("connect failed (db=%s): %s", self.db_path, exc)
            raise DataAccessError(f"cannot open database: {exc}") from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            logger.warning("insert into %s failed: %s", table, exc)
            raise DataAccessError(f"insert into {table} failed: {exc}") from exc
        except DataAccessError as exc:
            logger.warning("insert into %s failed: %s", table, exc)
            raise
        finally:
            conn.close()

    def save_user(self, name: str) -> int:
        with self._session("Users") as conn:
            user_id = user_repo.insert_user(conn, name)
        logger.debug("saved user id=%s", user_id)
        return user_id

    def save_project(self, title: str, description: str, user_id: int) -> int:
        with self._session("Projects") as conn:
            project_id = project_repo.insert_project(conn, title, description, user_id)
        logger.debug("saved project id=%s user_id=%s", project_id, user_id)
        return project_id

    def save_task(
        self,
        title: str,
        description: str,
        due_date: DateLike,
        is_finished: Union[bool, int, None],
        int_attr1: Optional[int],
        int_attr2: Optional[int],
        project_id: int,
    ) -> int:
        with self._session("Tasks") as conn:
            task_id = task_repo.insert_task(
                conn, title, description, due_date, is_finished, int_attr1, int_attr2, project_id
            )
        logger.debug("saved task id=%s project_id=%s", task_id, project_id)
        return task_id
