from fastapi import status
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from api.utils.logger import logger
from config import Config, Network  # api specific config
from core.errors import LedgerError

CFG = Config[Network]


def ok(**payload):
    return {'statusCode': status.HTTP_200_OK, **payload}


def error_response(e: Exception, where: str = None) -> JSONResponse:
    """render any failure as {statusCode, responseMessage[, error]}"""
    if isinstance(e, LedgerError):
        return JSONResponse(status_code=e.status_code, content={
            'statusCode': e.status_code,
            'responseMessage': e.message,
        })

    logger.error(f'ERR:{where}: {e}')
    content = {
        'statusCode': status.HTTP_500_INTERNAL_SERVER_ERROR,
        'responseMessage': 'Something went wrong',
    }
    if CFG.exposeErrors:
        content['error'] = f'{e}'
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def validation_response(errors) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={
        'statusCode': status.HTTP_400_BAD_REQUEST,
        'responseMessage': 'Invalid request',
        'errors': jsonable_encoder(errors),
    })
