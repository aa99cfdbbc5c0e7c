from typing import Dict

from pydantic import BaseModel, ConfigDict


class CategoryMetrics(BaseModel):
    """Weekly sales and stock figures for one product category"""
    model_config = ConfigDict(frozen=True)

    sales_last_week: int
    sales_previous_week: int
    inventory: int


class RetailDataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    categories: Dict[str, CategoryMetrics]


class InsightResponse(BaseModel):
    """Response model for sales insights endpoint"""
    question: str
    insight: str


class HealthResponse(BaseModel):
    message: str
    timestamp: str
    region: str
