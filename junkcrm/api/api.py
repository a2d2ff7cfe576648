from fastapi import APIRouter
from junkcrm.api.endpoints import (
    auth, health, users, sms,
    customers, jobs, quotes, transactions, leads, invoices, notifications
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])

# Resource endpoints
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
api_router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
api_router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
api_router.include_router(leads.router, prefix="/leads", tags=["leads"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])

# External integrations
api_router.include_router(sms.router, tags=["sms"])
