from __future__ import annotations

import json
import logging
from copy import deepcopy
from typing import Dict, Iterable, Optional, Set, Tuple

from sqlalchemy import Column, Enum, String, Text, create_engine, delete
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .codecs import parse_int_token
from .models import ValueKind

logger = logging.getLogger(__name__)

Base = declarative_base()


class PreferenceModel(Base):
    __tablename__ = "preferences"
    key = Column(String, primary_key=True)
    kind = Column(Enum(ValueKind))
    value = Column(Text)


class PreferencesRepository:
    """
    Abstract flat key-value store for personal reading state. Values are
    typed (string, set of strings, int) and each put fully overwrites the
    key. All methods are synchronous and every write is durable on return.

    Reading a key that was stored with a different kind returns the default
    rather than raising.
    """

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        raise NotImplementedError

    def put_string(self, key: str, value: str) -> None:
        raise NotImplementedError

    def get_string_set(self, key: str) -> Optional[Set[str]]:
        raise NotImplementedError

    def put_string_set(self, key: str, values: Iterable[str]) -> None:
        raise NotImplementedError

    def get_int(self, key: str, default: int) -> int:
        raise NotImplementedError

    def put_int(self, key: str, value: int) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemoryPreferencesRepository(PreferencesRepository):
    """
    Simple in-memory store for local runs and tests. Keeps copies of stored
    values to avoid cross-mutation between callers.
    """

    def __init__(self):
        self.values: Dict[str, Tuple[ValueKind, object]] = {}

    def _clone(self, obj):
        return deepcopy(obj)

    def _get(self, key: str, kind: ValueKind):
        entry = self.values.get(key)
        if not entry or entry[0] != kind:
            return None
        return self._clone(entry[1])

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._get(key, ValueKind.STRING)
        return default if value is None else value

    def put_string(self, key: str, value: str) -> None:
        self.values[key] = (ValueKind.STRING, value)

    def get_string_set(self, key: str) -> Optional[Set[str]]:
        return self._get(key, ValueKind.STRING_SET)

    def put_string_set(self, key: str, values: Iterable[str]) -> None:
        self.values[key] = (ValueKind.STRING_SET, set(values))

    def get_int(self, key: str, default: int) -> int:
        value = self._get(key, ValueKind.INT)
        return default if value is None else value

    def put_int(self, key: str, value: int) -> None:
        self.values[key] = (ValueKind.INT, int(value))

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


class SqlAlchemyPreferencesRepository(PreferencesRepository):
    """
    SQL-backed store using SQLAlchemy. Works with SQLite/Postgres URLs.
    Each put runs in its own session and commits before returning.
    """

    def __init__(self, database_url: str):
        self.engine = create_engine(database_url, future=True)
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False, future=True)

    def _session(self) -> Session:
        return self.SessionLocal()

    def _get(self, key: str, kind: ValueKind) -> Optional[str]:
        with self._session() as session:
            model = session.get(PreferenceModel, key)
            if not model:
                return None
            if model.kind != kind:
                logger.warning("Preference %s stored as %s, expected %s", key, model.kind, kind)
                return None
            return model.value

    def _put(self, key: str, kind: ValueKind, value: str) -> None:
        with self._session() as session:
            session.merge(PreferenceModel(key=key, kind=kind, value=value))
            session.commit()

    # region typed accessors
    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._get(key, ValueKind.STRING)
        return default if value is None else value

    def put_string(self, key: str, value: str) -> None:
        self._put(key, ValueKind.STRING, value)

    def get_string_set(self, key: str) -> Optional[Set[str]]:
        raw = self._get(key, ValueKind.STRING_SET)
        if raw is None:
            return None
        try:
            items = json.loads(raw)
        except ValueError:
            logger.warning("Preference %s holds malformed set data", key)
            return None
        if not isinstance(items, list):
            return None
        return {item for item in items if isinstance(item, str)}

    def put_string_set(self, key: str, values: Iterable[str]) -> None:
        self._put(key, ValueKind.STRING_SET, json.dumps(sorted(set(values))))

    def get_int(self, key: str, default: int) -> int:
        value = parse_int_token(self._get(key, ValueKind.INT))
        return default if value is None else value

    def put_int(self, key: str, value: int) -> None:
        self._put(key, ValueKind.INT, str(int(value)))

    # endregion

    def remove(self, key: str) -> None:
        with self._session() as session:
            session.execute(delete(PreferenceModel).where(PreferenceModel.key == key))
            session.commit()
