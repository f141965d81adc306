from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from db.session import Base
from config import Config, Network  # api specific config

CFG = Config[Network]

# PROJECTS MODEL

OPEN = "OPEN"
BLOCK = "BLOCK"
CLOSED = "CLOSED"
STATUSES = (OPEN, BLOCK, CLOSED)


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    createdAt = Column(DateTime(timezone=True), server_default=func.now())
    updatedAt = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    name = Column(String, unique=True, nullable=False)
    targetAmount = Column(Float, nullable=False)
    tokenSupply = Column(Float, nullable=False)
    minimumBuy = Column(Float)
    maximumBuy = Column(Float)
    vesting = Column(Float)
    payoutAddress = Column(String(42), unique=True, nullable=False)
    amountRaised = Column(Float, nullable=False, default=0)
    totalRaised = Column(Float, nullable=False, default=0)
    status = Column(String, nullable=False, default=OPEN, index=True)
    tokenAddress = Column(String, nullable=False, default=CFG.unassignedTokenAddress)
    publicKey = Column(String)
    privateKey = Column(String)
