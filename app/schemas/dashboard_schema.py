# app/schemas/dashboard_schema.py
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyticsOverview(_CamelModel):
    total_users: int
    admin_count: int
    user_count: int
    new_this_month: int
    new_this_week: int


class MonthlySignup(BaseModel):
    label: str
    count: int


class RoleDistribution(BaseModel):
    admin: int
    user: int


class AnalyticsData(_CamelModel):
    overview: AnalyticsOverview
    monthly_signups: List[MonthlySignup]
    role_distribution: RoleDistribution
