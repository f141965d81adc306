from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from api.utils.logger import logger, myself, LEIF
from config import Config, Network  # api specific config
CFG = Config[Network]


def get_engine(cs: str):
    if cs.startswith('sqlite'):
        # in-memory sqlite must share one connection across threads
        if cs in ('sqlite://', 'sqlite:///:memory:'):
            return create_engine(cs, connect_args={'check_same_thread': False}, poolclass=StaticPool)
        return create_engine(cs, connect_args={'check_same_thread': False})
    return create_engine(cs, pool_pre_ping=True)


engine = get_engine(CFG.connectionString)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# automatically build the models
def init_db():
    # models register themselves on Base.metadata when imported
    from db.models import projects, investments, tokens  # noqa: F401
    logger.log(LEIF, f'{myself()}: {engine.url.render_as_string(hide_password=True)}')
    Base.metadata.create_all(bind=engine)


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
