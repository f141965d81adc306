from datetime import datetime
from pydantic import BaseModel, Field
import typing as t

### SCHEMAS FOR PROJECTS ###


class CreateProject(BaseModel):
    name: str
    targetAmount: float = Field(..., gt=0)
    tokenSupply: float = Field(..., ge=0)
    minimumBuy: t.Optional[float] = None
    maximumBuy: t.Optional[float] = None
    vesting: t.Optional[float] = None
    # checked by the ledger so a missing address reports InvalidAddress
    payoutAddress: t.Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Sunrise Solar",
                "targetAmount": 1000,
                "tokenSupply": 500,
                "minimumBuy": 10,
                "maximumBuy": 500,
                "vesting": 6,
                "payoutAddress": "0xCD5Fc6F111884617A37997E5c206Ff344ca77275",
            }
        }


class AssignToken(BaseModel):
    projectID: t.Union[int, str]
    tokenAddress: str


class Project(BaseModel):
    id: int
    name: str
    targetAmount: float
    tokenSupply: float
    minimumBuy: t.Optional[float] = None
    maximumBuy: t.Optional[float] = None
    vesting: t.Optional[float] = None
    payoutAddress: str
    amountRaised: float
    totalRaised: float
    status: str
    tokenAddress: str
    publicKey: t.Optional[str] = None
    createdAt: t.Optional[datetime] = None
    updatedAt: t.Optional[datetime] = None

    class Config:
        from_attributes = True


class ProjectResponse(BaseModel):
    statusCode: int
    responseMessage: t.Optional[str] = None
    project: Project


class CreateProjectResponse(ProjectResponse):
    projectID: int


class ProjectListResponse(BaseModel):
    statusCode: int
    projects: t.List[Project]
