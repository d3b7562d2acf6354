"""Tests for per-order mutual exclusion."""

import threading
import time

import pytest
from ordering.order.locking import order_lock, process_exclusively, registered_orders
from ordering.order.removal import RemoveLineItemQuantity
from ordering.order.status import UpdateOrderStatus
from protean.exceptions import ObjectNotFoundError


class TestOrderLock:
    def test_serializes_read_modify_write(self):
        state = {"quantity": 0}

        def bump():
            with order_lock("order-4"):
                current = state["quantity"]
                time.sleep(0.001)
                state["quantity"] = current + 1

        threads = [threading.Thread(target=bump) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert state["quantity"] == 20
        assert registered_orders() == set()

    def test_entry_lives_while_held(self):
        with order_lock("order-5"):
            assert registered_orders() == {"order-5"}
        assert registered_orders() == set()

    def test_different_orders_do_not_block_each_other(self):
        entered = threading.Event()

        def other():
            with order_lock("order-7"):
                entered.set()

        with order_lock("order-6"):
            thread = threading.Thread(target=other)
            thread.start()
            assert entered.wait(timeout=1)
            thread.join()


class TestProcessExclusively:
    def test_runs_command_and_leaves_no_entry(self, place_order, entry):
        order = place_order(entry("P1", 2))

        revision = process_exclusively(UpdateOrderStatus(order_id=str(order.id), is_paid=True))

        assert revision == 1
        assert registered_orders() == set()

    def test_many_orders_leave_registry_empty(self, place_order, entry):
        for _ in range(25):
            order = place_order(entry("P1", 1))
            process_exclusively(UpdateOrderStatus(order_id=str(order.id), is_delivered=True))

        assert registered_orders() == set()

    def test_entry_released_when_command_fails(self, place_order, entry):
        order = place_order(entry("P1", 2))
        command = RemoveLineItemQuantity(order_id=str(order.id), product_key="P1|Green", quantity_to_remove=1)

        with pytest.raises(ObjectNotFoundError):
            process_exclusively(command)

        assert registered_orders() == set()
