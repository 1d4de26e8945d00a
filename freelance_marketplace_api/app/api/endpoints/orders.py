"""
Order endpoints.

Orders are listed per client or per freelancer.  Updates are limited
to ``status``, ``escrowStatus`` and ``deliveryDate``; any other field
in the request body is dropped.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from freelance_marketplace_api.app.api.deps import get_order_service
from freelance_marketplace_api.app.schemas.order import Order, OrderCreate, OrderStatusUpdate
from freelance_marketplace_api.app.services import OrderService

router = APIRouter()


@router.get("/client/{client_id}", response_model=List[Order])
async def list_client_orders(client_id: str, orders: OrderService = Depends(get_order_service)) -> List[Order]:
    return await orders.get_orders_by_client(client_id)


@router.get("/freelancer/{freelancer_id}", response_model=List[Order])
async def list_freelancer_orders(
    freelancer_id: str, orders: OrderService = Depends(get_order_service)
) -> List[Order]:
    return await orders.get_orders_by_freelancer(freelancer_id)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: str, orders: OrderService = Depends(get_order_service)) -> Order:
    order = await orders.get_order(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return order


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
async def create_order(order_in: OrderCreate, orders: OrderService = Depends(get_order_service)) -> Order:
    return await orders.create_order(order_in)


@router.patch("/{order_id}", response_model=Order)
async def update_order(
    order_id: str,
    order_in: OrderStatusUpdate,
    orders: OrderService = Depends(get_order_service),
) -> Order:
    order = await orders.update_order(order_id, order_in.to_patch())
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return order
