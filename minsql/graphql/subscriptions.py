"""Delivery of data to active GraphQL subscriptions."""

from __future__ import annotations

import asyncio
import copy
from typing import Any, Dict

_CHANNEL_CAPACITY = 100


class GraphQLSubscriptionManager:
    """Keeps a bounded queue per subscription and pushes data into it."""

    def __init__(self) -> None:
        self._subscriptions: Dict[str, "asyncio.Queue[Any]"] = {}

    async def subscribe(self, subscription_id: str) -> "asyncio.Queue[Any]":
        """Register ``subscription_id`` and return the queue its data arrives on."""
        queue: "asyncio.Queue[Any]" = asyncio.Queue(maxsize=_CHANNEL_CAPACITY)
        self._subscriptions[subscription_id] = queue
        return queue

    async def unsubscribe(self, subscription_id: str) -> None:
        """Stop delivering to ``subscription_id``; unknown ids are ignored."""
        self._subscriptions.pop(subscription_id, None)

    async def notify(self, subscription_id: str, data: Any) -> None:
        """Deliver ``data`` to ``subscription_id``, waiting while its queue is full."""
        queue = self._subscriptions.get(subscription_id)
        if queue is not None:
            await queue.put(data)

    async def broadcast(self, data: Any) -> None:
        """Deliver a copy of ``data`` to every subscription."""
        for queue in list(self._subscriptions.values()):
            await queue.put(copy.deepcopy(data))