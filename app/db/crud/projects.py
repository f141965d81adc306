from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import typing as t

from api.utils.logger import logger
from config import Config, Network  # api specific config
from core.errors import AlreadyExists, InvalidAddress, ProjectNotFound
from core.keys import generate_keypair
from db.models import projects as models
from db.models.tokens import Token
from db.schemas import projects as schemas

CFG = Config[Network]

####################################
### CRUD OPERATIONS FOR PROJECTS ###
####################################


def parse_id(id) -> t.Optional[int]:
    """
    Ids arrive from paths, query strings and json bodies; anything that is
    not a plain decimal cannot name a row.
    """
    if isinstance(id, bool):
        return None
    if isinstance(id, int):
        return id
    id = str(id).strip()
    if id.isdecimal():
        return int(id)
    return None


def get_projects(
    db: Session, skip: int = 0, limit: t.Optional[int] = None
) -> t.List[models.Project]:
    query = db.query(models.Project).order_by(models.Project.id).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_project(db: Session, id) -> models.Project:
    project = None
    id = parse_id(id)
    if id is not None:
        project = db.query(models.Project).filter(
            models.Project.id == id).first()
    if not project:
        raise ProjectNotFound()
    return project


def get_project_by_name(db: Session, name: str) -> models.Project:
    project = db.query(models.Project).filter(
        models.Project.name == name).first()
    if not project:
        raise ProjectNotFound()
    return project


def get_project_by_address(db: Session, address: str) -> models.Project:
    project = db.query(models.Project).filter(
        models.Project.payoutAddress == address).first()
    if not project:
        raise ProjectNotFound()
    return project


def get_open_project(db: Session, id) -> models.Project:
    project = None
    id = parse_id(id)
    if id is not None:
        project = db.query(models.Project).filter(
            models.Project.id == id,
            models.Project.status == models.OPEN
        ).first()
    if not project:
        raise ProjectNotFound()
    return project


def create_project(db: Session, project: schemas.CreateProject) -> models.Project:
    if not project.payoutAddress or len(project.payoutAddress) != CFG.payoutAddressLength:
        raise InvalidAddress()

    existing = db.query(models.Project).filter(or_(
        models.Project.name == project.name,
        models.Project.payoutAddress == project.payoutAddress
    )).first()
    if existing:
        raise AlreadyExists()

    keypair = generate_keypair()
    db_project = models.Project(
        name=project.name,
        targetAmount=project.targetAmount,
        tokenSupply=project.tokenSupply,
        minimumBuy=project.minimumBuy,
        maximumBuy=project.maximumBuy,
        vesting=project.vesting,
        payoutAddress=project.payoutAddress,
        amountRaised=0,
        totalRaised=0,
        status=models.OPEN,
        tokenAddress=CFG.unassignedTokenAddress,
        publicKey=keypair.publicKey,
        privateKey=keypair.privateKey,
    )
    db.add(db_project)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against an identical create; the unique indexes decide
        db.rollback()
        raise AlreadyExists()
    db.refresh(db_project)
    logger.info(f'project {db_project.id} ({db_project.name}) listed, target {db_project.targetAmount}')
    return db_project


def credit_project(db: Session, id: int, givenAmount: float, actualAmount: float) -> bool:
    """
    Add an accepted investment to the raised counters in a single conditional
    UPDATE so concurrent investments cannot lose increments. Returns False if
    the project stopped being OPEN in the meantime. Does not commit.
    """
    updated = db.query(models.Project).filter(
        models.Project.id == id,
        models.Project.status == models.OPEN
    ).update({
        models.Project.amountRaised: models.Project.amountRaised + actualAmount,
        models.Project.totalRaised: models.Project.totalRaised + givenAmount,
    }, synchronize_session=False)
    return updated == 1


def apply_funding_closure(db: Session, id: int) -> bool:
    """
    OPEN -> CLOSED once amountRaised reaches targetAmount. Only an OPEN row
    can flip, so the transition happens at most once. Does not commit.
    """
    closed = db.query(models.Project).filter(
        models.Project.id == id,
        models.Project.status == models.OPEN,
        models.Project.amountRaised >= models.Project.targetAmount
    ).update({models.Project.status: models.CLOSED}, synchronize_session=False)
    return closed == 1


def assign_token(db: Session, id, tokenAddress: str) -> models.Project:
    db_project = get_open_project(db, id)
    db_project.tokenAddress = tokenAddress
    db.add(Token(tokenAddress=tokenAddress, projectId=db_project.id))
    db.add(db_project)
    db.commit()
    db.refresh(db_project)
    logger.info(f'project {db_project.id}: token {tokenAddress} assigned')
    return db_project


def withdraw(db: Session, id) -> models.Project:
    """
    Record that the project owner took the raised funds out. Settlement
    happens elsewhere; only totalRaised is reset here.
    """
    db_project = get_open_project(db, id)
    withdrawn = db_project.totalRaised
    db_project.totalRaised = 0
    db.add(db_project)
    db.commit()
    db.refresh(db_project)
    logger.info(f'project {db_project.id}: withdrew {withdrawn}')
    return db_project
