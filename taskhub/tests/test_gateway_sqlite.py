"""
网关端到端测试：真实 SQLite 临时库
"""
from __future__ import annotations

import datetime as dt

import pytest

from taskhub import DataAccessError, PersistenceGateway
from taskhub.db import get_conn


def test_user_project_task_chain(tmp_db_path):
    gw = PersistenceGateway(tmp_db_path)

    user_id = gw.save_user("Blazej")
    project_id = gw.save_project("ProjectName", "ProjectDescription", user_id)
    task_id = gw.save_task("Draft", "First draft", dt.date(2024, 3, 1), 0, 2, 5, project_id)

    with get_conn(tmp_db_path) as conn:
        task = conn.execute("SELECT * FROM Tasks WHERE id=?", (task_id,)).fetchone()
        project = conn.execute("SELECT * FROM Projects WHERE id=?", (project_id,)).fetchone()
    assert project["userId"] == user_id
    assert project["title"] == "ProjectName"
    assert task["projectId"] == project_id
    assert task["dueDate"] == "2024-03-01"
    assert task["isFinished"] == 0
    assert (task["intAttr1"], task["intAttr2"]) == (2, 5)


def test_sequential_users_get_distinct_ids(tmp_db_path):
    gw = PersistenceGateway()  # 走 TASKHUB_DB_PATH

    ids = [gw.save_user(n) for n in ("Blazej", "Kamilla", "Ola")]

    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_unknown_parent_rejected(tmp_db_path):
    gw = PersistenceGateway(tmp_db_path)

    with pytest.raises(DataAccessError):
        gw.save_project("Orphan", "no owner", 12345)
    with pytest.raises(DataAccessError):
        gw.save_task("Orphan", "no project", None, 0, None, None, 12345)


def test_name_required(tmp_db_path):
    gw = PersistenceGateway(tmp_db_path)

    with pytest.raises(DataAccessError):
        gw.save_user(None)


def test_missing_schema_is_data_access_error(tmp_path):
    gw = PersistenceGateway(str(tmp_path / "empty.db"))

    with pytest.raises(DataAccessError):
        gw.save_user("Blazej")


def test_bad_due_date_rejected_before_insert(tmp_db_path):
    gw = PersistenceGateway(tmp_db_path)
    project_id = gw.save_project("p", "d", gw.save_user("u"))

    with pytest.raises(ValueError):
        gw.save_task("t", "d", "17/05/2024", 0, None, None, project_id)
    with get_conn(tmp_db_path) as conn:
        assert conn.execute("SELECT COUNT(1) AS c FROM Tasks").fetchone()["c"] == 0


def test_unreachable_location_is_data_access_error(tmp_path):
    # 路径中间是普通文件，目录无法创建
    blocker = tmp_path / "afile"
    blocker.write_text("x", encoding="utf-8")
    gw = PersistenceGateway(str(blocker / "sub" / "t.db"))

    with pytest.raises(DataAccessError) as ei:
        gw.save_user("a")
    assert isinstance(ei.value.__cause__, OSError)


def test_missing_parent_id_rejected_by_store(tmp_db_path):
    gw = PersistenceGateway(tmp_db_path)

    with pytest.raises(DataAccessError):
        gw.save_project("p", "d", None)
    with pytest.raises(DataAccessError):
        gw.save_task("t", "d", None, 0, None, None, None)
