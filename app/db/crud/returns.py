from decimal import Decimal, ROUND_FLOOR
from sqlalchemy import func
from sqlalchemy.orm import Session
import typing as t

from config import Config, Network  # api specific config
from core.errors import NoInvestments
from db.crud.projects import get_project
from db.models.investments import Investment
from db.schemas import returns as schemas

CFG = Config[Network]

####################################
### RETURNS OVER THE INVESTMENTS ###
####################################


def investor_totals(db: Session, projectId: int) -> t.List[t.Tuple[str, float]]:
    """(address, sum of givenAmount) per investor, ordered by address"""
    return db.query(
        Investment.investorAddress,
        func.sum(Investment.givenAmount)
    ).filter(
        Investment.projectId == projectId
    ).group_by(
        Investment.investorAddress
    ).order_by(
        Investment.investorAddress
    ).all()


def allocate(
    tokenSupply: float, targetAmount: float, totals: t.List[t.Tuple[str, float]], decimals: int
) -> t.List[t.Tuple[str, Decimal]]:
    """
    Pro-rata token allocation, tokenSupply / targetAmount per unit invested.

    Each share is floored to `decimals` places. What flooring drops, measured
    against the floored exact total, goes to the largest share (first address
    wins a tie), so the shares always add up to the total at that precision.
    """
    quantum = Decimal(1).scaleb(-decimals)
    supply = Decimal(str(tokenSupply))
    target = Decimal(str(targetAmount))

    exact = [(address, supply * Decimal(str(total)) / target) for address, total in totals]
    shares = [(address, amount.quantize(quantum, rounding=ROUND_FLOOR)) for address, amount in exact]
    if not shares:
        return shares

    grand = (supply * sum((Decimal(str(total)) for _, total in totals), Decimal(0)) / target).quantize(quantum, rounding=ROUND_FLOOR)
    remainder = grand - sum((amount for _, amount in shares), Decimal(0))
    if remainder > 0:
        largest = max(range(len(shares)), key=lambda i: (shares[i][1], -i))
        address, amount = shares[largest]
        shares[largest] = (address, amount + remainder)
    return shares


def get_investor_totals(db: Session, projectId) -> t.List[schemas.InvestorAmount]:
    project = get_project(db, projectId)
    totals = investor_totals(db, project.id)
    if not totals:
        raise NoInvestments()
    return [schemas.InvestorAmount(address=address, amount=total) for address, total in totals]


def get_investor_returns(db: Session, projectId) -> t.List[schemas.InvestorAmount]:
    project = get_project(db, projectId)
    totals = investor_totals(db, project.id)
    if not totals:
        raise NoInvestments()
    shares = allocate(project.tokenSupply, project.targetAmount, totals, CFG.allocationDecimals)
    return [schemas.InvestorAmount(address=address, amount=float(amount)) for address, amount in shares]
