"""Tests for ServiceRegistry over a mocked psycopg2 connection."""

import psycopg2
import pytest

from service_registry_api.app.schemas.service import ServiceCreate, ServiceRead
from service_registry_api.app.services.registry_service import ServiceRegistry


@pytest.fixture
def service_registry(fake_db):
    return ServiceRegistry(fake_db)


def test_list_services_maps_rows(service_registry, conn, cursor):
    cursor.fetchall.return_value = [
        {"id": 1, "name": "a", "link": "http://a"},
        {"id": 2, "name": "b", "link": "http://b"},
    ]
    services = service_registry.list_services()
    assert services == [
        ServiceRead(id=1, name="a", link="http://a"),
        ServiceRead(id=2, name="b", link="http://b"),
    ]
    cursor.execute.assert_called_once_with("SELECT id, name, link FROM services")
    conn.commit.assert_called_once()


def test_list_services_propagates_errors(service_registry, conn, cursor):
    cursor.execute.side_effect = psycopg2.OperationalError("connection lost")
    with pytest.raises(psycopg2.OperationalError):
        service_registry.list_services()
    conn.rollback.assert_called_once()


def test_create_service_returns_inserted_row(service_registry, fake_db, conn, cursor):
    cursor.fetchone.return_value = {"id": 7, "name": "a", "link": "http://x"}
    created = service_registry.create_service(ServiceCreate(name="a", link="http://x"))
    assert created == ServiceRead(id=7, name="a", link="http://x")
    sql, params = cursor.execute.call_args[0]
    assert sql.startswith("INSERT INTO services (name, link)")
    assert "RETURNING id, name, link" in sql
    assert params == ("a", "http://x")
    conn.commit.assert_called_once()
    assert fake_db.borrowed == 1


def test_create_service_rolls_back_on_conflict(service_registry, conn, cursor):
    cursor.execute.side_effect = psycopg2.IntegrityError("duplicate key value")
    with pytest.raises(psycopg2.IntegrityError):
        service_registry.create_service(ServiceCreate(name="a", link="http://x"))
    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()


def test_rollback_skipped_on_closed_connection(service_registry, conn, cursor):
    conn.closed = 2
    cursor.execute.side_effect = psycopg2.InterfaceError("connection already closed")
    with pytest.raises(psycopg2.InterfaceError):
        service_registry.create_service(ServiceCreate(name="a", link="http://x"))
    conn.rollback.assert_not_called()


@pytest.mark.parametrize("rowcount, expected", [(1, True), (0, False)])
def test_delete_service(service_registry, conn, cursor, rowcount, expected):
    cursor.rowcount = rowcount
    assert service_registry.delete_service("a") is expected
    cursor.execute.assert_called_once_with("DELETE FROM services WHERE name = %s", ("a",))
    conn.commit.assert_called_once()


def test_delete_service_propagates_errors(service_registry, conn, cursor):
    cursor.execute.side_effect = psycopg2.OperationalError("connection lost")
    with pytest.raises(psycopg2.OperationalError):
        service_registry.delete_service("a")
    conn.rollback.assert_called_once()
