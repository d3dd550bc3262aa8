"""Shared FastAPI dependencies.

Kept out of main.py so routers can import them without a circular import.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.db.session import get_db

DB = Annotated[AsyncSession, Depends(get_db)]
