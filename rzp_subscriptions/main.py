from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rzp_subscriptions.api.routers.subscriptions import router as subscriptions_router


app = FastAPI(title="Razorpay Subscriptions API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(subscriptions_router)
