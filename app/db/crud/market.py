from sqlalchemy.orm import Session
import typing as t

from api.utils.logger import logger
from core.errors import BadRequest, NotFound
from db.crud.projects import parse_id
from db.models import investments as models

#############################################
### CRUD OPERATIONS FOR SECONDARY MARKET ###
#############################################

# A stake is every investment one address holds in one project; stakes are
# listed and sold whole.


def _stakes(db: Session, investorAddress: str, projectId: int, onSale: t.Optional[bool] = None):
    query = db.query(models.Investment).filter(
        models.Investment.investorAddress == investorAddress,
        models.Investment.projectId == projectId
    )
    if onSale is not None:
        query = query.filter(models.Investment.onSale == onSale)
    return query.order_by(models.Investment.id).all()


def get_on_sale_investments(db: Session, projectId) -> t.List[models.Investment]:
    id = parse_id(projectId)
    investments = []
    if id is not None:
        investments = db.query(models.Investment).filter(
            models.Investment.projectId == id,
            models.Investment.onSale == True
        ).order_by(models.Investment.id).all()
    if not investments:
        raise NotFound("No investments on sale for the specified project")
    return investments


def sell_stakes(db: Session, investorAddress: t.Optional[str], projectId) -> t.List[models.Investment]:
    if not investorAddress or projectId in (None, ''):
        raise BadRequest()

    id = parse_id(projectId)
    investments = _stakes(db, investorAddress, id) if id is not None else []
    if not investments:
        raise NotFound("Investment not found")

    for investment in investments:
        investment.onSale = True
        db.add(investment)
    db.commit()
    for investment in investments:
        db.refresh(investment)
    logger.info(f'{investorAddress}: {len(investments)} investment(s) in project {id} listed for sale')
    return investments


def buy_stakes(
    db: Session, investorAddress: t.Optional[str], projectId, newInvestorAddress: t.Optional[str]
) -> t.List[models.Investment]:
    if not investorAddress or projectId in (None, '') or not newInvestorAddress:
        raise BadRequest("investorAddress, projectID and newInvestorAddress are required")

    id = parse_id(projectId)
    investments = _stakes(db, investorAddress, id, onSale=True) if id is not None else []
    if not investments:
        raise NotFound("No investments on sale for this investor and project")

    for investment in investments:
        investment.onSale = False
        investment.investorAddress = newInvestorAddress
        db.add(investment)
    db.commit()
    for investment in investments:
        db.refresh(investment)
    logger.info(f'project {id}: stake of {investorAddress} transferred to {newInvestorAddress} ({len(investments)} investment(s))')
    return investments
