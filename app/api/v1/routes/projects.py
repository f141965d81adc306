import typing as t

from fastapi import APIRouter, Depends

from api.utils.envelope import ok, error_response
from api.utils.logger import myself
from db.session import get_db
from db.crud.projects import (
    get_projects,
    get_project,
    get_project_by_name,
    get_project_by_address,
    create_project,
    assign_token,
    withdraw
)
from db.schemas.projects import (
    AssignToken,
    CreateProject,
    CreateProjectResponse,
    Project,
    ProjectListResponse,
    ProjectResponse
)

projects_router = r = APIRouter()


@r.post(
    "/createProject",
    response_model=CreateProjectResponse,
    response_model_exclude_none=True,
    name="projects:create"
)
def project_create(
    project: CreateProject,
    db=Depends(get_db),
):
    """
    List a new project; payoutAddress must be 42 characters and both name and
    payoutAddress must be unused
    """
    try:
        db_project = create_project(db, project)
        return ok(
            responseMessage="Project Listed Successfully",
            projectID=db_project.id,
            project=Project.model_validate(db_project)
        )
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/getProjectByName/{name}",
    response_model=ProjectResponse,
    response_model_exclude_none=True,
    name="projects:by-name"
)
def project_by_name(
    name: str,
    db=Depends(get_db),
):
    """
    Get a project by name
    """
    try:
        return ok(project=Project.model_validate(get_project_by_name(db, name)))
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/getProjectByAddress/{address}",
    response_model=ProjectResponse,
    response_model_exclude_none=True,
    name="projects:by-address"
)
def project_by_address(
    address: str,
    db=Depends(get_db),
):
    """
    Get a project by payout address
    """
    try:
        return ok(project=Project.model_validate(get_project_by_address(db, address)))
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/getProjectById/{id}",
    response_model=ProjectResponse,
    response_model_exclude_none=True,
    name="projects:by-id"
)
def project_by_id(
    id: str,
    db=Depends(get_db),
):
    """
    Get a project by id
    """
    try:
        return ok(project=Project.model_validate(get_project(db, id)))
    except Exception as e:
        return error_response(e, myself())


@r.get(
    "/getAllProjects",
    response_model=ProjectListResponse,
    response_model_exclude_none=True,
    name="projects:all-projects"
)
def projects_list(
    skip: int = 0,
    limit: t.Optional[int] = None,
    db=Depends(get_db),
):
    """
    Get all projects
    """
    try:
        projects = get_projects(db, skip, limit)
        return ok(projects=[Project.model_validate(p) for p in projects])
    except Exception as e:
        return error_response(e, myself())


@r.post(
    "/assignTokenToProject",
    response_model=ProjectResponse,
    response_model_exclude_none=True,
    name="projects:assign-token"
)
def project_assign_token(
    token: AssignToken,
    db=Depends(get_db),
):
    """
    Assign a token address to an open project
    """
    try:
        db_project = assign_token(db, token.projectID, token.tokenAddress)
        return ok(responseMessage="Token assigned successfully", project=Project.model_validate(db_project))
    except Exception as e:
        return error_response(e, myself())


@r.post(
    "/withdraw/{projectID}",
    response_model=ProjectResponse,
    response_model_exclude_none=True,
    name="projects:withdraw"
)
def project_withdraw(
    projectID: str,
    db=Depends(get_db),
):
    """
    Reset the total raised of an open project after its owner withdraws
    """
    try:
        db_project = withdraw(db, projectID)
        return ok(responseMessage="Withdrawn successfully", project=Project.model_validate(db_project))
    except Exception as e:
        return error_response(e, myself())
