#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task store CLI (SQLite)

Commands:
  init                Create the Users / Projects / Tasks tables if missing
  add-user            Insert a user and print its generated id
  add-project         Insert a project owned by a user and print its id
  add-task            Insert a task under a project and print its id

Notes:
- The database location comes from --db, TASKHUB_DB_PATH or config.yaml (db_path).
- Parent ids are not checked here; the foreign keys in the store reject unknown parents.
"""
from __future__ import annotations

import argparse
import logging
import sqlite3
import sys

from .db import ensure_schema, get_conn
from .errors import DataAccessError
from .gateway import PersistenceGateway


# ---------------- Commands ----------------

def cmd_init(args) -> int:
    try:
        with get_conn(args.db) as conn:
            ensure_schema(conn)
    except (sqlite3.Error, OSError) as exc:
        raise DataAccessError(f"cannot initialize database: {exc}") from exc
    print("DB initialized.")
    return 0


def cmd_add_user(args) -> int:
    print(PersistenceGateway(args.db).save_user(args.name))
    return 0


def cmd_add_project(args) -> int:
    gw = PersistenceGateway(args.db)
    print(gw.save_project(args.title, args.description, args.user_id))
    return 0


def cmd_add_task(args) -> int:
    gw = PersistenceGateway(args.db)
    task_id = gw.save_task(
        args.title,
        args.description,
        args.due_date,
        1 if args.finished else 0,
        args.int_attr1,
        args.int_attr2,
        args.project_id,
    )
    print(task_id)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskhub", description="Task store CLI")
    parser.add_argument("--db", default=None, help="SQLite file (default: config.yaml / TASKHUB_DB_PATH)")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="cmd")

    p_init = sub.add_parser("init", help="create tables")
    p_init.set_defaults(func=cmd_init)

    p_user = sub.add_parser("add-user", help="add a user")
    p_user.add_argument("--name", required=True)
    p_user.set_defaults(func=cmd_add_user)

    p_proj = sub.add_parser("add-project", help="add a project")
    p_proj.add_argument("--title", required=True)
    p_proj.add_argument("--description", default="")
    p_proj.add_argument("--user-id", required=True, type=int)
    p_proj.set_defaults(func=cmd_add_project)

    p_task = sub.add_parser("add-task", help="add a task")
    p_task.add_argument("--title", required=True)
    p_task.add_argument("--description", default="")
    p_task.add_argument("--due-date", required=False, help="YYYY-MM-DD")
    p_task.add_argument("--finished", action="store_true")
    p_task.add_argument("--int-attr1", type=int, required=False)
    p_task.add_argument("--int-attr2", type=int, required=False)
    p_task.add_argument("--project-id", required=True, type=int)
    p_task.set_defaults(func=cmd_add_task)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        return args.func(args)
    except DataAccessError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
