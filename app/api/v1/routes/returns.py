from fastapi import APIRouter, Depends

from api.utils.envelope import ok, error_response
from api.utils.logger import myself
from db.session import get_db
from db.crud.projects import parse_id
from db.crud.returns import get_investor_returns, get_investor_totals
from db.schemas.returns import InvestorAmountListResponse

returns_router = r = APIRouter()


@r.get(
    "/investorsOnProject/{projectID}",
    response_model=InvestorAmountListResponse,
    name="returns:investor-totals"
)
def investors_on_project(
    projectID: str,
    db=Depends(get_db),
):
    """
    Total invested (given amount) per investor address
    """
    try:
        investments = get_investor_totals(db, projectID)
        return ok(projectID=parse_id(projectID), investments=investments)
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/investorsReturns/{projectID}",
    response_model=InvestorAmountListResponse,
    name="returns:investor-returns"
)
def investors_returns(
    projectID: str,
    db=Depends(get_db),
):
    """
    Token allocation per investor address: tokenSupply / targetAmount for
    every unit invested
    """
    try:
        investments = get_investor_returns(db, projectID)
        return ok(projectID=parse_id(projectID), investments=investments)
    except Exception as e:
        return error_response(e, myself())
