# app/routes/analytics.py
import asyncio
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.middleware.rbac import is_admin
from app.models import user as user_model
from app.schemas.dashboard_schema import AnalyticsData
from app.utils.analytics_utils import (
    build_monthly_signups,
    histogram_window_start,
    seven_days_ago,
    start_of_month,
)

analytics_router = APIRouter(tags=["Analytics"])


@analytics_router.get("", response_model=AnalyticsData)
@analytics_router.get("/", response_model=AnalyticsData, include_in_schema=False)
async def get_analytics(admin=Depends(is_admin)):
    now = datetime.now(timezone.utc)

    total_users, admin_count, new_this_month, new_this_week, rows = await asyncio.gather(
        user_model.count_users(),
        user_model.count_users({"role": user_model.Role.ADMIN.value}),
        user_model.count_users({"created_at": {"$gte": start_of_month(now)}}),
        user_model.count_users({"created_at": {"$gte": seven_days_ago(now)}}),
        user_model.monthly_signup_rows(histogram_window_start(now)),
    )

    user_count = total_users - admin_count
    return {
        "overview": {
            "total_users": total_users,
            "admin_count": admin_count,
            "user_count": user_count,
            "new_this_month": new_this_month,
            "new_this_week": new_this_week,
        },
        "monthly_signups": build_monthly_signups(rows, now),
        "role_distribution": {"admin": admin_count, "user": user_count},
    }
