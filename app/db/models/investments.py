from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.sql import func

from db.session import Base

# INVESTMENTS MODEL


class Investment(Base):
    __tablename__ = "investments"

    id = Column(Integer, primary_key=True, index=True)
    createdAt = Column(DateTime(timezone=True), server_default=func.now())
    updatedAt = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    investorAddress = Column(String, nullable=False, index=True)
    givenAmount = Column(Float, nullable=False)
    actualAmount = Column(Float, nullable=False)
    projectId = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    onSale = Column(Boolean, nullable=False, default=False)
