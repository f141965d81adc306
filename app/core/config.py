from config import Config, Network  # api specific config
CFG = Config[Network]

PROJECT_NAME = "FundPad"
SQLALCHEMY_DATABASE_URI = CFG.connectionString
API_V1_STR = "/api"
