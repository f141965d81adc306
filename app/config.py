import os

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

def asBool(value, default=False):
    if value is None:
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')

def connectionString():
    if os.getenv('DATABASE_URL'):
        return os.getenv('DATABASE_URL')
    if os.getenv('POSTGRES_HOST'):
        return f"postgresql://{os.getenv('POSTGRES_USER')}:{os.getenv('POSTGRES_PASSWORD')}@{os.getenv('POSTGRES_HOST')}:{os.getenv('POSTGRES_PORT', '5432')}/{os.getenv('POSTGRES_DBNM')}"
    return 'sqlite:///./fundpad.db'

Network = os.getenv('FUNDPAD_NETWORK', default='mainnet')
Config = {
  'testnet': dotdict({
    'connectionString'       : connectionString(),
    'debug'                  : True,
    'exposeErrors'           : asBool(os.getenv('EXPOSE_ERRORS'), default=True),
    'payoutAddressLength'    : 42,
    'unassignedTokenAddress' : '0x0000000000000000000000000000000000000000',
    'allocationDecimals'     : int(os.getenv('ALLOCATION_DECIMALS', '8')),
    'corsOrigins'            : os.getenv('CORS_ORIGINS', '*').split(','),
  }),
  'mainnet': dotdict({
    'connectionString'       : connectionString(),
    'debug'                  : asBool(os.getenv('DEBUG')),
    'exposeErrors'           : asBool(os.getenv('EXPOSE_ERRORS')), # echo internal error detail in 500s
    'payoutAddressLength'    : 42,
    'unassignedTokenAddress' : '0x0000000000000000000000000000000000000000',
    'allocationDecimals'     : int(os.getenv('ALLOCATION_DECIMALS', '8')),
    'corsOrigins'            : os.getenv('CORS_ORIGINS', '*').split(','),
  })
}
