#!/usr/bin/env python3
"""
Run migrations (same process, same DATABASE_URL), then seed, then uvicorn.
Ensures the kv_entries table exists before seed and app start.
"""
import os
import sys

# 1) Run migrations using the same settings as the app
from hotelquick.core.config import settings
from alembic.config import Config
from alembic import command

alembic_cfg = Config(os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic.ini"))
alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
command.upgrade(alembic_cfg, "head")

# 2) Seed the hotel and booking collections if they are still absent
from hotelquick.seed import run as run_seed
run_seed()

# 3) Start uvicorn (replace current process)
os.execv(
    sys.executable,
    [sys.executable, "-m", "uvicorn", "hotelquick.main:app", "--host", "0.0.0.0", "--port", "8000"],
)
