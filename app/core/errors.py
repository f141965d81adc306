from fastapi import status

####################################
### LEDGER ERRORS                ###
####################################


class LedgerError(Exception):
    """
    Base for every failure a ledger operation reports to its caller.
    status_code and message end up in the response envelope.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Something went wrong"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFound(LedgerError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ProjectNotFound(NotFound):
    message = "Project not found"


class NoInvestments(NotFound):
    message = "No investments found for the specified project"


class InvalidInput(LedgerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class InvalidAddress(InvalidInput):
    message = "Invalid Address"


class BadRequest(InvalidInput):
    message = "investorAddress and projectID are required"


class Conflict(LedgerError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class AlreadyExists(Conflict):
    message = "Project already exists"
