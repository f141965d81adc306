from datetime import datetime
from pydantic import BaseModel, Field
import typing as t

### SCHEMAS FOR INVESTMENTS ###


class CreateInvestment(BaseModel):
    investorAddress: str
    givenAmount: float = Field(..., ge=0)
    actualAmount: float = Field(..., ge=0)
    projectID: t.Union[int, str]

    class Config:
        json_schema_extra = {
            "example": {
                "investorAddress": "0xCD5Fc6F111884617A37997E5c206Ff344ca77275",
                "givenAmount": 100,
                "actualAmount": 98,
                "projectID": 1,
            }
        }


class Investment(BaseModel):
    id: int
    investorAddress: str
    givenAmount: float
    actualAmount: float
    projectId: int
    onSale: bool
    createdAt: t.Optional[datetime] = None
    updatedAt: t.Optional[datetime] = None

    class Config:
        from_attributes = True


class InvestmentWithProject(Investment):
    projectName: str


class CreateInvestmentResponse(BaseModel):
    statusCode: int
    responseMessage: str
    investmentID: int


class InvestmentListResponse(BaseModel):
    statusCode: int
    responseMessage: t.Optional[str] = None
    investments: t.List[Investment]


class InvestmentWithProjectListResponse(BaseModel):
    statusCode: int
    investments: t.List[InvestmentWithProject]
