"""JSON file storage for the application snapshot."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from app.domain.entities import Notification, Snapshot, Task, User, parse_user_number
from app.domain.exceptions import PersistenceError
from app.utils import parse_iso_datetime

logger = logging.getLogger(__name__)


class JsonSnapshotStore:
    """Read and write the whole :class:`Snapshot` as one JSON document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Snapshot:
        """Return the persisted snapshot, or an empty one when unavailable.

        Unparseable content is logged and treated as an empty store so that
        startup never aborts on a damaged file.
        """

        if not self.path.exists():
            logger.info("No data file at %s; starting with an empty store", self.path)
            return Snapshot()

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            snapshot = deserialize_snapshot(raw)
        except (OSError, ValueError, TypeError, KeyError) as exc:
            logger.error(
                "Could not parse data file %s, starting with an empty store: %s",
                self.path,
                exc,
            )
            return Snapshot()

        logger.info(
            "Loaded %s users, %s tasks and %s notifications from %s",
            len(snapshot.users),
            len(snapshot.tasks),
            len(snapshot.notifications),
            self.path,
        )
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        """Overwrite the data file with ``snapshot``.

        The document is written to a sibling temporary file first and then
        moved into place.
        """

        document = json.dumps(serialize_snapshot(snapshot), indent=2, ensure_ascii=False)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(document)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error("Failed to write data file %s: %s", self.path, exc)
            raise PersistenceError("Could not save data") from exc


def serialize_snapshot(snapshot: Snapshot) -> dict[str, Any]:
    """Return a JSON-serializable representation of ``snapshot``."""

    payload = asdict(snapshot)
    _normalize_temporal_values(payload)
    return payload


def deserialize_snapshot(data: dict[str, Any]) -> Snapshot:
    """Build a :class:`Snapshot` from the document produced by :func:`serialize_snapshot`."""

    if not isinstance(data, dict):
        raise ValueError("Snapshot document must be a JSON object")

    users = [_user_from_dict(item) for item in data.get("users") or []]
    tasks = [_task_from_dict(item) for item in data.get("tasks") or []]
    notifications = [
        _notification_from_dict(item) for item in data.get("notifications") or []
    ]

    last_user_number = data.get("last_user_number")
    if not isinstance(last_user_number, int):
        last_user_number = 0
    # Older documents carry no counter; never hand out an identifier already in use.
    numbers = [parse_user_number(user.id) or 0 for user in users]
    last_user_number = max([last_user_number, *numbers])

    return Snapshot(
        users=users,
        tasks=tasks,
        notifications=notifications,
        last_user_number=last_user_number,
        last_daily_summary_on=_parse_date(data.get("last_daily_summary_on")),
    )


def _normalize_temporal_values(data: dict[str, Any] | list[Any]) -> None:
    """Convert date and time values nested inside ``data`` into ISO strings."""

    items = data.items() if isinstance(data, dict) else enumerate(data)
    for key, value in list(items):
        if isinstance(value, (datetime, date, time)):
            data[key] = value.isoformat()
        elif isinstance(value, (dict, list)):
            _normalize_temporal_values(value)


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _parse_time(value: str | None) -> time | None:
    return time.fromisoformat(value) if value else None


def _user_from_dict(item: dict[str, Any]) -> User:
    return User(
        id=str(item["id"]),
        full_name=item["full_name"],
        email=item["email"],
        phone_number=item.get("phone_number"),
        password=item["password"],
        profile_image=item.get("profile_image"),
        created_at=parse_iso_datetime(item.get("created_at")),
    )


def _task_from_dict(item: dict[str, Any]) -> Task:
    end_date = _parse_date(item.get("end_date"))
    if end_date is None:
        raise ValueError(f"Task {item.get('id')} has no end date")
    return Task(
        id=int(item["id"]),
        user_id=str(item["user_id"]),
        title=item["title"],
        end_date=end_date,
        status=item.get("status") or "pending",
        description=item.get("description"),
        start_date=_parse_date(item.get("start_date")),
        start_time=_parse_time(item.get("start_time")),
        end_time=_parse_time(item.get("end_time")),
        created_at=parse_iso_datetime(item.get("created_at")),
        updated_at=parse_iso_datetime(item.get("updated_at")),
    )


def _notification_from_dict(item: dict[str, Any]) -> Notification:
    return Notification(
        id=int(item["id"]),
        user_id=str(item["user_id"]),
        type=item["type"],
        title=item["title"],
        message=item["message"],
        is_html=bool(item.get("is_html", False)),
        payload=dict(item.get("payload") or {}),
        read=bool(item.get("read", False)),
        created_at=parse_iso_datetime(item.get("created_at")),
        read_at=parse_iso_datetime(item.get("read_at")),
    )


__all__ = ["JsonSnapshotStore", "serialize_snapshot", "deserialize_snapshot"]
