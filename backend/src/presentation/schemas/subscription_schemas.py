"""Subscription-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from domain.entities import Subscription


class SubscriptionInput(BaseModel):
    """Request schema for subscribing an application to a plan."""
    
    application: str = Field(..., min_length=1, description="Application id")
    plan: str = Field(..., min_length=1, description="Plan id")
    request: Optional[str] = Field(None, max_length=4000, description="Message for the API publisher")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "application": "3f1c0b4e-0f0e-4f55-9a55-2d2d7f9f5b11",
                    "plan": "8d9c1d2e-1a6f-4e0b-8a57-51c6b1b8c2aa",
                    "request": "We need access for the Q3 release"
                }
            ]
        }
    }


class SubscriptionResponse(BaseModel):
    """Response schema for a subscription."""
    
    id: str
    application: str
    plan: str
    api: str
    status: str
    subscribed_by: Optional[str] = None
    request: Optional[str] = None
    created_at: datetime
    processed_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    
    @classmethod
    def from_entity(cls, subscription: Subscription) -> "SubscriptionResponse":
        return cls(
            id=subscription.id,
            application=subscription.application_id,
            plan=subscription.plan_id,
            api=subscription.api_id,
            status=subscription.status.value,
            subscribed_by=subscription.subscribed_by,
            request=subscription.request,
            created_at=subscription.created_at,
            processed_at=subscription.processed_at,
            closed_at=subscription.closed_at,
        )
