"""FastAPI routes for the Ordering domain."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    CreateOrderRequest,
    NotificationResponse,
    OrderIdResponse,
    OrderView,
    ProgressNotificationRequest,
    RemoveItemRequest,
    RemoveItemResponse,
    RevisionResponse,
    StatusResponse,
    UpdateOrderStatusRequest,
)
from ordering.order.creation import CreateOrder
from ordering.order.deletion import DeleteOrder
from ordering.order.locking import process_exclusively
from ordering.order.progress import SendProgressNotification
from ordering.order.queries import all_orders, get_order, orders_for_email
from ordering.order.removal import RemoveLineItemQuantity
from ordering.order.status import UpdateOrderStatus

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: CreateOrderRequest) -> OrderIdResponse:
    command = CreateOrder(
        customer_name=body.customer_name,
        email=body.email,
        phone=body.phone,
        address=json.dumps(body.address, ensure_ascii=False) if body.address else None,
        products=json.dumps([p.model_dump() for p in body.products], ensure_ascii=False),
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("", response_model=list[OrderView])
async def list_orders() -> list[OrderView]:
    return [OrderView(**view) for view in all_orders()]


@order_router.get("/email/{email}", response_model=list[OrderView])
async def list_orders_for_email(email: str) -> list[OrderView]:
    return [OrderView(**view) for view in orders_for_email(email)]


@order_router.get("/{order_id}", response_model=OrderView)
async def get_order_by_id(order_id: str) -> OrderView:
    return OrderView(**get_order(order_id))


@order_router.put("/{order_id}", response_model=RevisionResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> RevisionResponse:
    command = UpdateOrderStatus(
        order_id=order_id,
        is_paid=body.is_paid,
        is_delivered=body.is_delivered,
        product_progress=(
            json.dumps(body.product_progress, ensure_ascii=False) if body.product_progress is not None else None
        ),
        expected_revision=body.expected_revision,
    )
    revision = process_exclusively(command)
    return RevisionResponse(revision=revision)


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    process_exclusively(DeleteOrder(order_id=order_id))
    return StatusResponse()


@order_router.post("/{order_id}/remove-item", response_model=RemoveItemResponse)
async def remove_item(order_id: str, body: RemoveItemRequest) -> RemoveItemResponse:
    command = RemoveLineItemQuantity(
        order_id=order_id,
        product_key=body.product_key,
        quantity_to_remove=body.quantity_to_remove,
        expected_revision=body.expected_revision,
    )
    result = process_exclusively(command)
    return RemoveItemResponse(
        message="Item quantity updated successfully",
        total_price=result["total_price"],
        revision=result["revision"],
    )


@order_router.post("/{order_id}/notify", response_model=NotificationResponse)
async def send_progress_notification(order_id: str, body: ProgressNotificationRequest) -> NotificationResponse:
    command = SendProgressNotification(
        order_id=order_id,
        email=body.email,
        product_key=body.product_key,
        progress=body.progress,
        article_index=body.article_index,
    )
    message_id = current_domain.process(command, asynchronous=False)
    return NotificationResponse(message_id=message_id)
