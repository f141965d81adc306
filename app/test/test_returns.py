from decimal import Decimal

import pytest

from conftest import address
from core.errors import NoInvestments, ProjectNotFound
from db.crud.investments import create_investment
from db.crud.projects import create_project, get_project
from db.crud.returns import allocate, get_investor_returns, get_investor_totals
from db.models.projects import CLOSED
from db.schemas.investments import CreateInvestment
from db.schemas.projects import CreateProject


def newProject(db, targetAmount=1000, tokenSupply=500):
    return create_project(db, CreateProject(
        name="Sunrise Solar",
        targetAmount=targetAmount,
        tokenSupply=tokenSupply,
        payoutAddress=address(1),
    ))


def invest(db, projectID, investor, given, actual=None):
    create_investment(db, CreateInvestment(
        investorAddress=investor,
        givenAmount=given,
        actualAmount=given if actual is None else actual,
        projectID=projectID,
    ))


def test_returns_example(db):
    # setup
    project = newProject(db)
    invest(db, project.id, address(100), 300)
    invest(db, project.id, address(101), 700)

    # act
    returns = get_investor_returns(db, project.id)

    # assert
    assert [(r.address, r.amount) for r in returns] == [(address(100), 150), (address(101), 350)]
    assert sum(r.amount for r in returns) == 500
    db.expire_all()
    assert get_project(db, project.id).status == CLOSED


def test_totals_group_by_investor_on_given_amount(db):
    # setup
    project = newProject(db, targetAmount=10000)
    invest(db, project.id, address(101), 50, actual=45)
    invest(db, project.id, address(100), 10, actual=9)
    invest(db, project.id, address(101), 25, actual=20)

    # act
    totals = get_investor_totals(db, project.id)

    # assert
    assert [(r.address, r.amount) for r in totals] == [(address(100), 10), (address(101), 75)]


@pytest.mark.parametrize('k', [2, 3, 10])
def test_returns_are_linear(db, k):
    # setup
    project = newProject(db, targetAmount=100000, tokenSupply=20000)
    for n, given in enumerate([120, 45, 300]):
        invest(db, project.id, address(100 + n), given * k)

    # act
    returns = [r.amount for r in get_investor_returns(db, project.id)]

    # assert
    assert returns == [24 * k, 9 * k, 60 * k]


def test_returns_missing_project(db):
    with pytest.raises(ProjectNotFound):
        get_investor_returns(db, 999)
    with pytest.raises(ProjectNotFound):
        get_investor_totals(db, 'abc')


def test_returns_without_investments(db):
    # setup
    project = newProject(db)

    # act / assert
    with pytest.raises(NoInvestments):
        get_investor_returns(db, project.id)
    with pytest.raises(NoInvestments):
        get_investor_totals(db, project.id)


def test_allocate_floors_and_gives_remainder_to_largest():
    # 100 tokens over three equal investors of 1 each, target 3
    shares = allocate(100, 3, [('a', 1), ('b', 1), ('c', 1)], 2)

    # 33.33 each, the lost cent goes to the first of the tied largest shares
    assert shares == [('a', Decimal('33.34')), ('b', Decimal('33.33')), ('c', Decimal('33.33'))]
    assert sum(amount for _, amount in shares) == Decimal('100.00')


def test_allocate_remainder_to_largest_share():
    shares = allocate(10, 7, [('a', 1), ('b', 5)], 0)

    # exact 1.43 and 7.14, floored 1 and 7, total floors to 8
    assert shares == [('a', Decimal('1')), ('b', Decimal('7'))]

    shares = allocate(10, 6, [('a', 1), ('b', 5)], 0)

    # exact 1.67 and 8.33, total 10
    assert shares == [('a', Decimal('1')), ('b', Decimal('9'))]


def test_allocate_empty():
    assert allocate(100, 10, [], 8) == []


### ROUTES ###

def test_route_returns(client):
    # setup
    projectID = client.post("/api/projects/createProject", json={
        "name": "Sunrise Solar",
        "targetAmount": 1000,
        "tokenSupply": 500,
        "payoutAddress": address(1),
    }).json()["projectID"]
    for investor, given in [(address(100), 300), (address(101), 700)]:
        client.post("/api/investments/createInvestment", json={
            "investorAddress": investor,
            "givenAmount": given,
            "actualAmount": given,
            "projectID": projectID,
        })

    # raw totals
    res = client.get(f"/api/returns/investorsOnProject/{projectID}")
    assert res.status_code == 200
    assert res.json() == {
        "statusCode": 200,
        "projectID": projectID,
        "investments": [
            {"address": address(100), "amount": 300},
            {"address": address(101), "amount": 700},
        ],
    }

    # token allocation
    res = client.get(f"/api/returns/investorsReturns/{projectID}")
    assert res.status_code == 200
    assert [i["amount"] for i in res.json()["investments"]] == [150, 350]


def test_route_returns_not_found(client):
    res = client.get("/api/returns/investorsReturns/999")
    assert res.status_code == 404
    assert res.json() == {"statusCode": 404, "responseMessage": "Project not found"}
