"""In-memory Judge repository."""

import json
import threading
from pathlib import Path

import structlog

from judgefinder.domain.common.result import Err
from judgefinder.domain.judges.entities.court_position import JudgeId
from judgefinder.domain.judges.entities.judge import JudgeAggregate

logger = structlog.get_logger(__name__)


class InMemoryJudgeRepository:
    """
    Judge repository backed by a dict of serialized records.

    Judges are stored as ``to_dict`` snapshots and rebuilt on every read,
    so callers never share a mutable aggregate between requests.
    """

    def __init__(self) -> None:
        self._records: dict[str, dict[str, object]] = {}
        self._lock = threading.Lock()

    def find_by_id(self, judge_id: JudgeId) -> JudgeAggregate | None:
        with self._lock:
            record = self._records.get(str(judge_id))
        if record is None:
            return None
        return JudgeAggregate.from_dict(record).unwrap()

    def list_all(self) -> list[JudgeAggregate]:
        with self._lock:
            records = list(self._records.values())
        judges = [JudgeAggregate.from_dict(record).unwrap() for record in records]
        return sorted(judges, key=lambda judge: (judge.name, str(judge.id)))

    def save(self, judge: JudgeAggregate) -> JudgeAggregate:
        with self._lock:
            self._records[str(judge.id)] = judge.to_dict()
        return judge

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def load_seed(self, path: Path) -> int:
        """
        Load persisted judge records from a JSON list.

        Returns:
            Number of judges loaded

        Raises:
            ValueError: If the file is not a JSON list or a record is invalid
        """
        payload = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(payload, list):
            msg = f"Judge seed file must contain a JSON list: {path}"
            raise ValueError(msg)

        judges: list[JudgeAggregate] = []
        for record in payload:
            if not isinstance(record, dict):
                msg = f"Judge seed records must be objects: {path}"
                raise ValueError(msg)
            result = JudgeAggregate.from_dict(record)
            if isinstance(result, Err):
                msg = f"Invalid judge record {record.get('id')!r} in {path}: {result.error.message}"
                raise ValueError(msg)
            judges.append(result.value)

        for judge in judges:
            self.save(judge)

        logger.info("judge_seed_loaded", path=str(path), judges=len(judges))
        return len(judges)
