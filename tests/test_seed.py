"""Tests for the seed script."""

from unittest.mock import AsyncMock, patch

import pytest

from app.scripts import seed as seed_script
from conftest import make_user_doc


@pytest.mark.asyncio
async def test_creates_missing_and_skips_existing():
    existing = make_user_doc(email="admin@smartwinnr.com", role="admin")

    async def lookup(email, include_password=False):
        return existing if email == "admin@smartwinnr.com" else None

    with patch("app.database.client") as client, \
            patch("app.database.ensure_indexes", new=AsyncMock()) as ensure, \
            patch("app.models.user.get_user_by_email", new=AsyncMock(side_effect=lookup)), \
            patch("app.models.user.create_user", new=AsyncMock(return_value=make_user_doc(email="user@smartwinnr.com"))) as create:
        client.admin.command = AsyncMock(return_value={"ok": 1})

        created = await seed_script.seed()

    assert created == 1
    ensure.assert_awaited_once()
    create.assert_awaited_once()
    assert create.await_args.kwargs["email"] == "user@smartwinnr.com"
    assert create.await_args.kwargs["role"] == "user"
