import typing as t

from fastapi import APIRouter, Depends

from api.utils.envelope import ok, error_response
from api.utils.logger import myself
from db.session import get_db
from db.crud.investments import (
    create_investment,
    get_investments,
    get_investments_by_address,
    get_investments_by_project
)
from db.crud.market import (
    buy_stakes,
    get_on_sale_investments,
    sell_stakes
)
from db.schemas.investments import (
    CreateInvestment,
    CreateInvestmentResponse,
    Investment,
    InvestmentListResponse,
    InvestmentWithProjectListResponse
)

investments_router = r = APIRouter()


@r.post(
    "/createInvestment",
    response_model=CreateInvestmentResponse,
    name="investments:create"
)
def investment_create(
    investment: CreateInvestment,
    db=Depends(get_db),
):
    """
    Invest in an open project; the project closes once amountRaised reaches
    its target
    """
    try:
        db_investment = create_investment(db, investment)
        return ok(responseMessage="Investment Listed Successfully", investmentID=db_investment.id)
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/getInvestmentByProject/{projectId}",
    response_model=InvestmentListResponse,
    response_model_exclude_none=True,
    name="investments:by-project"
)
def investments_by_project(
    projectId: str,
    db=Depends(get_db),
):
    """
    Get all investments in a project
    """
    try:
        investments = get_investments_by_project(db, projectId)
        return ok(investments=[Investment.model_validate(i) for i in investments])
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/getInvestmentByAddress/{address}",
    response_model=InvestmentWithProjectListResponse,
    response_model_exclude_none=True,
    name="investments:by-address"
)
def investments_by_address(
    address: str,
    db=Depends(get_db),
):
    """
    Get all investments of an investor, with the project name
    """
    try:
        return ok(investments=get_investments_by_address(db, address))
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/getAllInvestment",
    response_model=InvestmentListResponse,
    response_model_exclude_none=True,
    name="investments:all-investments"
)
def investments_list(
    skip: int = 0,
    limit: t.Optional[int] = None,
    db=Depends(get_db),
):
    """
    Get all investments
    """
    try:
        investments = get_investments(db, skip, limit)
        return ok(investments=[Investment.model_validate(i) for i in investments])
    except Exception as e:
        return error_response(e, myself())


#region SECONDARY MARKET
@r.post(
    "/sellStakes",
    response_model=InvestmentListResponse,
    response_model_exclude_none=True,
    name="investments:sell-stakes"
)
def investments_sell(
    investorAddress: t.Optional[str] = None,
    projectID: t.Optional[str] = None,
    db=Depends(get_db),
):
    """
    Put every investment of investorAddress in projectID on sale
    """
    try:
        investments = sell_stakes(db, investorAddress, projectID)
        return ok(responseMessage="Stakes listed for sale", investments=[Investment.model_validate(i) for i in investments])
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/getOnSaleInvestmentByProject/{projectID}",
    response_model=InvestmentListResponse,
    response_model_exclude_none=True,
    name="investments:on-sale"
)
def investments_on_sale(
    projectID: str,
    db=Depends(get_db),
):
    """
    Get the investments on sale in a project
    """
    try:
        investments = get_on_sale_investments(db, projectID)
        return ok(investments=[Investment.model_validate(i) for i in investments])
    except Exception as e:
        return error_response(e, myself())


@r.post(
    "/buyStakes",
    response_model=InvestmentListResponse,
    response_model_exclude_none=True,
    name="investments:buy-stakes"
)
def investments_buy(
    investorAddress: t.Optional[str] = None,
    projectID: t.Optional[str] = None,
    newInvestorAddress: t.Optional[str] = None,
    db=Depends(get_db),
):
    """
    Transfer the whole on-sale stake of investorAddress in projectID to
    newInvestorAddress
    """
    try:
        investments = buy_stakes(db, investorAddress, projectID, newInvestorAddress)
        return ok(responseMessage="Stakes transferred successfully", investments=[Investment.model_validate(i) for i in investments])
    except Exception as e:
        return error_response(e, myself())
#endregion SECONDARY MARKET
