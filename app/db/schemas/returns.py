from pydantic import BaseModel
import typing as t

### SCHEMAS FOR RETURNS ###


class InvestorAmount(BaseModel):
    address: str
    amount: float


class InvestorAmountListResponse(BaseModel):
    statusCode: int
    projectID: int
    investments: t.List[InvestorAmount]
