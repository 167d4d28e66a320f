"""Tests for catalog and review endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from carbon_market.api.app import create_app
from carbon_market.containers import AppContainer
from tests.conftest import InMemoryProjectRepository, make_project


def test_list_projects_endpoint(
    container: AppContainer, project_repository: InMemoryProjectRepository
) -> None:
    project_repository.projects.extend(
        [
            make_project("Cheap", price=5.0, ratings=[7, 8]),
            make_project("Pricey", price=40.0, standard=None),
        ]
    )
    client = TestClient(create_app(container))

    response = client.get("/projects", params={"maxPrice": 10, "sort": "price-asc"})

    assert response.status_code == 200
    data = response.json()
    assert data["pagination"] == {"page": 1, "limit": 12, "total": 1, "totalPages": 1}
    assert data["countries"] == ["Brazil"]
    card = data["projects"][0]
    assert card["title"] == "Cheap"
    assert card["rating"] == 7.5
    assert card["reviewCount"] == 2
    assert card["isVerraCertified"] is True


def test_list_projects_parses_sdg_goals(
    container: AppContainer, project_repository: InMemoryProjectRepository
) -> None:
    project_repository.projects.extend(
        [
            make_project("Water", sdg_goals=[6]),
            make_project("Energy", sdg_goals=[7]),
        ]
    )
    client = TestClient(create_app(container))

    response = client.get("/projects", params={"sdgGoals": "6,x,"})

    assert [p["title"] for p in response.json()["projects"]] == ["Water"]


def test_project_detail_not_found(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/projects/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"message": "Project not found"}


def test_project_detail(
    container: AppContainer, project_repository: InMemoryProjectRepository
) -> None:
    project = make_project("Forest")
    project_repository.projects.append(project)
    client = TestClient(create_app(container))

    response = client.get(f"/projects/{project.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(project.id)
    assert data["seller"] is None
    assert data["reviews"] == []
    assert data["priceHistory"] == []
    assert data["isActive"] is True


def test_map_projects(
    container: AppContainer, project_repository: InMemoryProjectRepository
) -> None:
    project = make_project("Forest")
    project_repository.projects.append(project)
    client = TestClient(create_app(container))

    response = client.get("/map/projects")

    assert response.json() == {
        "projects": [
            {
                "id": str(project.id),
                "title": "Forest",
                "category": "Forestry",
                "country": "Brazil",
                "latitude": -3.4,
                "longitude": -62.2,
                "pricePerCredit": 10.0,
            }
        ]
    }


def test_review_flow(
    container: AppContainer, project_repository: InMemoryProjectRepository
) -> None:
    project = make_project("Forest")
    project_repository.projects.append(project)
    client = TestClient(create_app(container))
    headers = {"X-User-Id": str(uuid4())}

    created = client.post(
        f"/projects/{project.id}/reviews",
        json={"rating": 9, "title": "Great", "comment": "Transparent reporting"},
        headers=headers,
    )
    duplicate = client.post(
        f"/projects/{project.id}/reviews", json={"rating": 2}, headers=headers
    )
    helpful = client.post(f"/reviews/{created.json()['id']}/helpful")
    listed = client.get(f"/projects/{project.id}/reviews", params={"sort": "helpful"})

    assert created.status_code == 201
    assert created.json()["rating"] == 9
    assert duplicate.status_code == 400
    assert duplicate.json() == {"message": "You have already reviewed this project"}
    assert helpful.json()["helpfulCount"] == 1
    assert [r["title"] for r in listed.json()["reviews"]] == ["Great"]


def test_create_review_requires_identity(
    container: AppContainer, project_repository: InMemoryProjectRepository
) -> None:
    project = make_project()
    project_repository.projects.append(project)
    client = TestClient(create_app(container))

    response = client.post(f"/projects/{project.id}/reviews", json={"rating": 5})

    assert response.status_code == 401


def test_create_review_rejects_bad_rating(
    container: AppContainer, project_repository: InMemoryProjectRepository
) -> None:
    project = make_project()
    project_repository.projects.append(project)
    client = TestClient(create_app(container))

    response = client.post(
        f"/projects/{project.id}/reviews",
        json={"rating": 11},
        headers={"X-User-Id": str(uuid4())},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Rating must be between 1 and 10"}


def test_helpful_unknown_review(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(f"/reviews/{uuid4()}/helpful")

    assert response.status_code == 404
    assert response.json() == {"message": "Review not found"}
