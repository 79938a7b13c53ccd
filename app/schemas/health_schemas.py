# app/schemas/health_schemas.py
from typing import Dict, Optional

from pydantic import BaseModel


class ComponentStatus(BaseModel):
    status: str
    detail: Optional[str] = None
    last_update: Optional[str] = None
    fresh: Optional[bool] = None


class ServiceInfo(BaseModel):
    name: str
    version: str
    environment: str
    time: str


class HealthResponse(BaseModel):
    service: ServiceInfo
    indicator: str
    description: str
    components: Dict[str, ComponentStatus]
