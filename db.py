# db.py

#============================================================#
#                           DONEO                            #
#============================================================#
# Version     : V1.0.0                                       #
#------------------------------------------------------------#
# Purpose     : Persisted app flags for DONEO (first-launch  #
#               onboarding gate). Projects, tasks and the    #
#               activity feed live in memory, see services/. #
#============================================================#


from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import create_engine, Column, String, Boolean, DateTime
from sqlalchemy.orm import declarative_base, sessionmaker

from config import get_setting
from utils.logging import get_logger

log = get_logger(__name__)

# ---- Engine / Session ----
DATABASE_URL = get_setting("DATABASE_URL")

engine = create_engine(DATABASE_URL, pool_pre_ping=True, future=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
Base = declarative_base()

HAS_LAUNCHED_KEY = "hasLaunchedBefore"

class AppFlag(Base):
    __tablename__ = "app_flags"
    key = Column(String, primary_key=True)
    value = Column(Boolean, default=False, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

def init_db(bind=None):
    Base.metadata.create_all(bind or engine)

# ---- helpers ----
def get_flag(key: str, default: bool = False) -> bool:
    with SessionLocal() as s:
        row = s.get(AppFlag, key)
        return bool(row.value) if row else default

def set_flag(key: str, value: bool = True) -> None:
    with SessionLocal() as s:
        row = s.get(AppFlag, key)
        if not row:
            row = AppFlag(key=key, value=value)
            s.add(row)
        else:
            row.value = value
        s.commit()

def check_first_launch() -> bool:
    """
    Return True if onboarding should be shown. The first call also marks the
    app as launched, so every later call returns False.
    """
    if get_flag(HAS_LAUNCHED_KEY):
        return False
    set_flag(HAS_LAUNCHED_KEY, True)
    log.info("first_launch", key=HAS_LAUNCHED_KEY)
    return True

def reset_first_launch(key: Optional[str] = None) -> None:
    set_flag(key or HAS_LAUNCHED_KEY, False)
