from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from db.session import Base

# TOKENS MODEL


class Token(Base):
    __tablename__ = "tokens"

    id = Column(Integer, primary_key=True, index=True)
    createdAt = Column(DateTime(timezone=True), server_default=func.now())
    tokenAddress = Column(String, nullable=False)
    projectId = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
