from fastapi import APIRouter

from fintrack.api.v1 import (
    auth_router,
    bank_account_router,
    budgets_router,
    health_router,
    reports_router,
    savings_wallet_router,
    transactions_router,
    users_router,
)

router_v1 = APIRouter(prefix="/v1")
router_v1.include_router(health_router)
router_v1.include_router(auth_router)
router_v1.include_router(users_router)
router_v1.include_router(transactions_router)
router_v1.include_router(savings_wallet_router)
router_v1.include_router(budgets_router)
router_v1.include_router(reports_router)
router_v1.include_router(bank_account_router)

router = APIRouter(prefix="/api")

router.include_router(router_v1)
