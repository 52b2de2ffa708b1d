"""Router principal do Asaas; agrega os endpoints por recurso."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.asaas.customer import router as customer_router
from api.routes.asaas.shopper import router as shopper_router
from api.routes.asaas.subaccount import router as subaccount_router
from api.routes.asaas.subscription import router as subscription_router
from api.routes.asaas.webhook import router as webhook_router

router = APIRouter()

router.include_router(customer_router, prefix="/customer", tags=["customer"])
router.include_router(subaccount_router, prefix="/subaccount", tags=["subaccount"])
router.include_router(webhook_router, prefix="/webhook", tags=["webhook"])
router.include_router(subscription_router, prefix="/subscription", tags=["subscription"])
router.include_router(shopper_router, prefix="/shoppers", tags=["shoppers"])
