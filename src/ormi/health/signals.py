# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
External signal providers for property health.

Collection rate, inspection status and market position are not derived from
the property graph itself. Providers supply them on a 0-100 scale; until a
real source exists for a signal, the configured placeholder is returned.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..core.base.property import PropertyRecord
from ..core.primitives.enums import PaymentStatusEnum
from ..core.primitives.settings import SignalDefaults

# Payments that represent rent actually billed to a tenant
BILLED_PAYMENT_STATUSES = frozenset(
    {PaymentStatusEnum.PAID, PaymentStatusEnum.PENDING, PaymentStatusEnum.FAILED}
)


class SignalProvider(ABC):
    """Source of the externally supplied health signals for a property."""

    @abstractmethod
    def collection_rate(self, record: PropertyRecord) -> float:
        pass

    @abstractmethod
    def inspection_status(self, record: PropertyRecord) -> float:
        pass

    @abstractmethod
    def market_position(self, record: PropertyRecord) -> float:
        pass


class DefaultSignalProvider(SignalProvider):
    """Returns the configured placeholder for every signal."""

    def __init__(self, defaults: Optional[SignalDefaults] = None):
        self.defaults = defaults or SignalDefaults()

    def collection_rate(self, record: PropertyRecord) -> float:
        return self.defaults.collection_rate

    def inspection_status(self, record: PropertyRecord) -> float:
        return self.defaults.inspection_status

    def market_position(self, record: PropertyRecord) -> float:
        return self.defaults.market_position


class PaymentCollectionSignalProvider(DefaultSignalProvider):
    """
    Derives the collection rate from the property's unit payments.

    Collection rate is the paid amount over the billed amount (paid, pending
    and failed payments), in percent. Refunded payments are ignored. With
    nothing billed the placeholder default is used. Inspection status and
    market position still come from the defaults.
    """

    def collection_rate(self, record: PropertyRecord) -> float:
        billed = 0.0
        paid = 0.0
        for payment in record.payments:
            if payment.status not in BILLED_PAYMENT_STATUSES:
                continue
            billed += payment.amount
            if payment.status == PaymentStatusEnum.PAID:
                paid += payment.amount

        if billed <= 0:
            return self.defaults.collection_rate
        return paid / billed * 100
