from sqlalchemy.orm import Session
import typing as t

from api.utils.logger import logger
from core.errors import InvalidInput, NotFound, ProjectNotFound
from db.crud.projects import apply_funding_closure, credit_project, get_open_project, parse_id
from db.models import investments as models
from db.models.projects import Project
from db.schemas import investments as schemas

PROJECT_NOT_FOUND = "project not found"

#######################################
### CRUD OPERATIONS FOR INVESTMENTS ###
#######################################


def get_investments(
    db: Session, skip: int = 0, limit: t.Optional[int] = None
) -> t.List[models.Investment]:
    query = db.query(models.Investment).order_by(models.Investment.id).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_investments_by_project(db: Session, projectId) -> t.List[models.Investment]:
    id = parse_id(projectId)
    if id is None or not db.query(Project.id).filter(Project.id == id).first():
        raise ProjectNotFound()
    return db.query(models.Investment).filter(
        models.Investment.projectId == id
    ).order_by(models.Investment.id).all()


def get_investments_by_address(db: Session, address: str) -> t.List[schemas.InvestmentWithProject]:
    rows = db.query(models.Investment, Project.name).outerjoin(
        Project, Project.id == models.Investment.projectId
    ).filter(
        models.Investment.investorAddress == address
    ).order_by(models.Investment.id).all()
    if not rows:
        raise NotFound("Investment not found")

    investments = []
    for investment, projectName in rows:
        enriched = schemas.Investment.model_validate(investment).model_dump()
        enriched['projectName'] = projectName if projectName is not None else PROJECT_NOT_FOUND
        investments.append(schemas.InvestmentWithProject(**enriched))
    return investments


def create_investment(db: Session, investment: schemas.CreateInvestment) -> models.Investment:
    """
    Record an investment against an OPEN project and credit the project.
    The insert, the counter increments and the closure check commit
    together; nothing is persisted if the project is missing or closed.
    """
    if investment.givenAmount < 0 or investment.actualAmount < 0:
        raise InvalidInput("Investment amounts must not be negative")

    project = get_open_project(db, investment.projectID)

    db_investment = models.Investment(
        investorAddress=investment.investorAddress,
        givenAmount=investment.givenAmount,
        actualAmount=investment.actualAmount,
        projectId=project.id,
        onSale=False,
    )
    db.add(db_investment)

    if not credit_project(db, project.id, investment.givenAmount, investment.actualAmount):
        # closed or blocked between the lookup and the update
        db.rollback()
        raise ProjectNotFound()
    closed = apply_funding_closure(db, project.id)

    db.commit()
    db.refresh(db_investment)
    logger.info(f'investment {db_investment.id}: {db_investment.investorAddress} gave {db_investment.givenAmount} ({db_investment.actualAmount} actual) to project {project.id}')
    if closed:
        logger.info(f'project {project.id} reached its target and is now CLOSED')
    return db_investment
