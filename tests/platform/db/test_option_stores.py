from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from themecheck.features.update_check import OptionStore
from themecheck.platform.db import DatabaseManager, InMemoryOptionStore, OptionsDAO


class TestOptionsDAO:
    """Integration tests for OptionsDAO."""

    def _create_dao(self, tmp_path: Path) -> tuple[DatabaseManager, OptionsDAO]:
        manager = DatabaseManager(tmp_path / "data" / "options.db")
        manager.connect()
        assert manager.conn is not None
        return manager, OptionsDAO(manager.conn)

    def test_missing_option_is_none(self, tmp_path: Path) -> None:
        _, dao = self._create_dao(tmp_path)

        assert dao.get("checks") is None

    def test_set_and_get_round_trip_json(self, tmp_path: Path) -> None:
        _, dao = self._create_dao(tmp_path)
        checks = {"abc": {"status_code": "200", "data": {"global_diff": 5, "gallery": "https://x/y"}}}

        dao.set("checks", checks)

        assert dao.get("checks") == checks

    def test_set_replaces_previous_value(self, tmp_path: Path) -> None:
        _, dao = self._create_dao(tmp_path)

        dao.set("checks", {"a": {"status_code": "200"}})
        dao.set("checks", {"a": {"status_code": "200"}, "b": {"status_code": "200"}})

        assert dao.get("checks") == {"a": {"status_code": "200"}, "b": {"status_code": "200"}}

    def test_values_survive_reconnect(self, tmp_path: Path) -> None:
        manager, dao = self._create_dao(tmp_path)
        dao.set("checks", {"key": {"status_code": "200"}})
        manager.close()

        with DatabaseManager(tmp_path / "data" / "options.db") as reopened:
            assert reopened.conn is not None
            assert OptionsDAO(reopened.conn).get("checks") == {"key": {"status_code": "200"}}

    def test_invalid_json_reads_as_none(self, tmp_path: Path) -> None:
        manager, dao = self._create_dao(tmp_path)
        assert manager.conn is not None
        _ = manager.conn.execute(
            "INSERT INTO options (option_name, option_value) VALUES (?, ?)", ("checks", "{broken")
        )
        manager.conn.commit()

        assert dao.get("checks") is None

    def test_set_rejects_unserializable_values(self, tmp_path: Path) -> None:
        _, dao = self._create_dao(tmp_path)

        with pytest.raises(TypeError):
            dao.set("checks", {"key": object()})

    def test_write_on_closed_connection_raises(self, tmp_path: Path) -> None:
        manager, dao = self._create_dao(tmp_path)
        assert manager.conn is not None
        manager.conn.close()

        with pytest.raises(sqlite3.Error):
            dao.set("checks", {})

    def test_read_on_closed_connection_raises(self, tmp_path: Path) -> None:
        manager, dao = self._create_dao(tmp_path)
        assert manager.conn is not None
        manager.conn.close()

        with pytest.raises(sqlite3.Error):
            _ = dao.get("checks")

    def test_satisfies_option_store_port(self, tmp_path: Path) -> None:
        _, dao = self._create_dao(tmp_path)

        assert isinstance(dao, OptionStore)


def test_memory_database_path() -> None:
    with DatabaseManager(":memory:") as manager:
        assert manager.conn is not None
        dao = OptionsDAO(manager.conn)
        dao.set("checks", {"k": {"status_code": "200"}})
        assert dao.get("checks") == {"k": {"status_code": "200"}}


def test_in_memory_store_isolates_stored_values() -> None:
    store = InMemoryOptionStore({"checks": {"a": {"status_code": "200"}}})

    value = store.get("checks")
    assert value == {"a": {"status_code": "200"}}
    value["b"] = {}

    assert store.get("checks") == {"a": {"status_code": "200"}}
    assert store.get("missing") is None
    assert isinstance(store, OptionStore)


def test_in_memory_store_counts_writes() -> None:
    store = InMemoryOptionStore()

    store.set("checks", {})
    store.set("checks", {"a": {}})

    assert store.writes == 2
    assert store.get("checks") == {"a": {}}


def test_options_dao_module_exports() -> None:
    from themecheck.platform.db import options_dao

    assert options_dao.__all__ == ["OptionsDAO"]
