"""Tests for order repositories (memory, functional, SQLAlchemy)."""

import asyncio
from collections.abc import AsyncIterator
from datetime import datetime, timezone

import pytest
from kungfu import Ok, Error
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from factories import AMOUNT, CURRENCY, GATEWAY, LOCAL_ID, ORDER_ID, pending_order, unwrap
from reconciler import orders as O
from reconciler.db import OrderTable


NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


# ═══════════════════════════════════════════════════════════════════════════════
# Memory
# ═══════════════════════════════════════════════════════════════════════════════


class TestMemoryOrders:
    async def test_find_scoped_to_gateway(self):
        orders = O.MemoryOrders(pending_order())
        assert unwrap(await orders.find(ORDER_ID, GATEWAY)) == pending_order()
        assert unwrap(await orders.find(ORDER_ID, "stripe")) is None
        assert unwrap(await orders.find("order_other", GATEWAY)) is None

    async def test_paid_transition_sets_payment_and_paid_at(self):
        orders = O.MemoryOrders(pending_order())
        assert unwrap(await orders.transition(LOCAL_ID, O.OrderStatus.PAID, payment_id="pay_9", at=NOW)) is True

        order = orders.get(LOCAL_ID)
        assert order.status is O.OrderStatus.PAID
        assert order.payment_id == "pay_9"
        assert order.paid_at == NOW
        assert order.updated_at == NOW

    async def test_failed_transition_leaves_payment_fields(self):
        orders = O.MemoryOrders(pending_order())
        assert unwrap(await orders.transition(LOCAL_ID, O.OrderStatus.FAILED, payment_id="pay_9", at=NOW)) is True

        order = orders.get(LOCAL_ID)
        assert order.status is O.OrderStatus.FAILED
        assert order.payment_id is None
        assert order.paid_at is None

    async def test_terminal_orders_never_move(self):
        orders = O.MemoryOrders(pending_order())
        await orders.transition(LOCAL_ID, O.OrderStatus.FAILED, payment_id=None, at=NOW)

        assert unwrap(await orders.transition(LOCAL_ID, O.OrderStatus.PAID, payment_id="pay_1", at=NOW)) is False
        assert orders.get(LOCAL_ID).status is O.OrderStatus.FAILED

    async def test_unknown_id_changes_nothing(self):
        orders = O.MemoryOrders()
        assert unwrap(await orders.transition("missing", O.OrderStatus.PAID, payment_id=None, at=NOW)) is False

    async def test_pending_target_is_an_error(self):
        orders = O.MemoryOrders(pending_order())
        result = await orders.transition(LOCAL_ID, O.OrderStatus.PENDING, payment_id=None, at=NOW)
        assert isinstance(result, Error)

    async def test_concurrent_transitions_change_once(self):
        orders = O.MemoryOrders(pending_order())
        results = await asyncio.gather(
            *(
                orders.transition(LOCAL_ID, O.OrderStatus.PAID, payment_id=f"pay_{i}", at=NOW)
                for i in range(10)
            )
        )
        assert [unwrap(r) for r in results].count(True) == 1


class TestFunctionalOrders:
    async def test_delegates(self):
        seen: list[tuple] = []

        async def find(order_id: str, gateway: str):
            seen.append(("find", order_id, gateway))
            return Ok(pending_order())

        async def transition(id: str, target: O.OrderStatus, *, payment_id: str | None, at: datetime):
            seen.append(("transition", id, target, payment_id))
            return Ok(True)

        orders = O.orders_from(find=find, transition=transition)
        assert unwrap(await orders.find(ORDER_ID, GATEWAY)).id == LOCAL_ID
        assert unwrap(await orders.transition(LOCAL_ID, O.OrderStatus.PAID, payment_id="pay_1", at=NOW))
        assert seen == [
            ("find", ORDER_ID, GATEWAY),
            ("transition", LOCAL_ID, O.OrderStatus.PAID, "pay_1"),
        ]


# ═══════════════════════════════════════════════════════════════════════════════
# SQLAlchemy
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture()
async def session_factory(tmp_path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    from reconciler.db import create_database

    factory, engine = await create_database(f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}")
    async with factory() as session:
        session.add_all(
            [
                OrderTable(id=LOCAL_ID, order_id=ORDER_ID, gateway=GATEWAY, amount=AMOUNT, currency=CURRENCY),
                OrderTable(id="enr_stripe", order_id="order_shared", gateway="stripe", amount=500, currency="USD"),
            ]
        )
        await session.commit()
    yield factory
    await engine.dispose()


async def stored(factory: async_sessionmaker[AsyncSession], id: str) -> OrderTable:
    async with factory() as session:
        return (await session.execute(select(OrderTable).where(OrderTable.id == id))).scalar_one()


class TestSQLAlchemyOrders:
    async def test_find(self, session_factory):
        orders = O.SQLAlchemyOrders(session_factory)
        order = unwrap(await orders.find(ORDER_ID, GATEWAY))

        assert order is not None
        assert order.id == LOCAL_ID
        assert order.amount == AMOUNT
        assert order.currency == CURRENCY
        assert order.is_pending

    async def test_find_never_crosses_gateways(self, session_factory):
        orders = O.SQLAlchemyOrders(session_factory)
        assert unwrap(await orders.find("order_shared", GATEWAY)) is None
        assert unwrap(await orders.find(ORDER_ID, "stripe")) is None

    async def test_paid_transition_is_compare_and_set(self, session_factory):
        orders = O.SQLAlchemyOrders(session_factory)

        assert unwrap(await orders.transition(LOCAL_ID, O.OrderStatus.PAID, payment_id="pay_1", at=NOW)) is True
        assert unwrap(await orders.transition(LOCAL_ID, O.OrderStatus.PAID, payment_id="pay_2", at=NOW)) is False
        assert unwrap(await orders.transition(LOCAL_ID, O.OrderStatus.FAILED, payment_id=None, at=NOW)) is False

        row = await stored(session_factory, LOCAL_ID)
        assert row.status == "paid"
        assert row.payment_id == "pay_1"
        assert row.paid_at is not None

    async def test_failed_transition_leaves_payment_fields(self, session_factory):
        orders = O.SQLAlchemyOrders(session_factory)
        assert unwrap(await orders.transition(LOCAL_ID, O.OrderStatus.FAILED, payment_id="pay_1", at=NOW)) is True

        row = await stored(session_factory, LOCAL_ID)
        assert row.status == "failed"
        assert row.payment_id is None
        assert row.paid_at is None

    async def test_pending_target_is_an_error(self, session_factory):
        orders = O.SQLAlchemyOrders(session_factory)
        result = await orders.transition(LOCAL_ID, O.OrderStatus.PENDING, payment_id=None, at=NOW)
        assert isinstance(result, Error)

    async def test_storage_failure_is_an_error(self, tmp_path):
        from reconciler.db import open_database

        factory, engine = open_database(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        try:
            orders = O.SQLAlchemyOrders(factory)
            assert isinstance(await orders.find(ORDER_ID, GATEWAY), Error)
            assert isinstance(
                await orders.transition(LOCAL_ID, O.OrderStatus.PAID, payment_id=None, at=NOW),
                Error,
            )
        finally:
            await engine.dispose()
