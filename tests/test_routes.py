"""
Path2Hack Backend: HTTP Endpoint Tests
=======================================

What:  Every route through the real FastAPI app: status codes, bodies and the
       generic error responses.
How:   HTTPX AsyncClient over ASGITransport; database, model, fetcher, GitHub
       client and upload store are injected via dependency_overrides (conftest).
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from path2hack.exceptions import GitHubServiceError, LLMServiceError, PageFetchError
from path2hack.models.project import Project
from path2hack.models.user import User


async def count_rows(session_factory, model):
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


def project_form(**overrides):
    form = {
        "projectName": "Grove",
        "hackathonName": "HackNY",
        "devpostUrl": "https://devpost.com/software/grove",
        "devfolioUrl": "",
        "githubUrl": "https://github.com/example/grove",
        "projectDescription": "Plant care reminders",
        "techStack": json.dumps(["React", "FastAPI"]),
        "isProjectPublic": "true",
        "isWinner": "false",
        "userName": "ada",
    }
    form.update(overrides)
    return form


# ══════════════════════════════════════════════════════════════════════════
# POST /api/register
# ══════════════════════════════════════════════════════════════════════════

class TestRegisterEndpoint:

    @pytest.mark.asyncio
    async def test_register_then_exists(self, test_client, session_factory):
        body = {"username": "ada", "email": "ada@example.com"}

        first = await test_client.post("/api/register", json=body)
        assert first.status_code == 201
        assert first.json() == {"message": "User registered successfully"}

        second = await test_client.post("/api/register", json=body)
        assert second.status_code == 200
        assert second.json() == {"exists": True}

        assert await count_rows(session_factory, User) == 1

    @pytest.mark.asyncio
    async def test_response_carries_request_id(self, test_client):
        response = await test_client.post(
            "/api/register",
            json={"username": "bo", "email": "bo@example.com"},
            headers={"X-Request-ID": "trace123"},
        )
        assert response.headers["X-Request-ID"] == "trace123"


# ══════════════════════════════════════════════════════════════════════════
# POST /api/githubProjectIdea, POST /api/projectIdea
# ══════════════════════════════════════════════════════════════════════════

class TestIdeaEndpoints:

    @pytest.mark.asyncio
    async def test_github_idea(self, test_client, mock_llm, mock_github):
        mock_llm.generate_text.return_value = "Project Name: Grove"

        response = await test_client.post(
            "/api/githubProjectIdea",
            json={"gitHubToken": "octocat", "ideaDesc": "plant care"},
        )

        assert response.status_code == 200
        assert response.json() == {"idea": "Project Name: Grove"}
        mock_github.get_languages.assert_awaited_once_with("octocat")

    @pytest.mark.asyncio
    async def test_github_idea_failure_is_generic(self, test_client, mock_github):
        mock_github.get_languages.side_effect = GitHubServiceError(context={"status": 403})

        response = await test_client.post(
            "/api/githubProjectIdea",
            json={"gitHubToken": "octocat", "ideaDesc": "plant care"},
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Error fetching GitHub repositories"
        assert "403" not in response.text

    @pytest.mark.asyncio
    async def test_project_idea(self, test_client, mock_llm):
        mock_llm.generate_text.return_value = "An idea"

        response = await test_client.post(
            "/api/projectIdea",
            json={"description": "d", "theme": "t", "keywords": ["k1", "k2"]},
        )

        assert response.status_code == 200
        assert response.json() == {"idea": "An idea"}
        assert "Keywords: k1, k2" in mock_llm.generate_text.await_args.args[0]

    @pytest.mark.asyncio
    async def test_project_idea_model_failure(self, test_client, mock_llm):
        mock_llm.generate_text.side_effect = LLMServiceError()

        response = await test_client.post(
            "/api/projectIdea",
            json={"description": "d", "theme": "t", "keywords": []},
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Error generating project idea"


# ══════════════════════════════════════════════════════════════════════════
# POST /api/scrapeAndReviewProject
# ══════════════════════════════════════════════════════════════════════════

class TestReviewEndpoint:

    @pytest.mark.asyncio
    async def test_review(self, test_client, mock_llm, mock_fetcher):
        mock_fetcher.fetch.return_value = "<body><div>A<span>B</span></div></body>"
        mock_llm.generate_text.return_value = "Review: ok\nRating (1-10): 8"

        response = await test_client.post(
            "/api/scrapeAndReviewProject", json={"url": "https://devpost.test/p"}
        )

        assert response.status_code == 200
        assert response.json() == {"review": "Review: ok\nRating (1-10): 8"}
        assert "Project Text Content: A B\n" in mock_llm.generate_text.await_args.args[0]

    @pytest.mark.asyncio
    async def test_empty_page_still_reviewed(self, test_client, mock_llm, mock_fetcher):
        mock_fetcher.fetch.return_value = "<html><body></body></html>"

        response = await test_client.post(
            "/api/scrapeAndReviewProject", json={"url": "https://devpost.test/p"}
        )

        assert response.status_code == 200
        assert "Project Text Content: \n" in mock_llm.generate_text.await_args.args[0]

    @pytest.mark.asyncio
    async def test_fetch_failure_is_generic(self, test_client, mock_fetcher):
        mock_fetcher.fetch.side_effect = PageFetchError(context={"status": 404})

        response = await test_client.post(
            "/api/scrapeAndReviewProject", json={"url": "https://devpost.test/missing"}
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Error scraping and reviewing project"


# ══════════════════════════════════════════════════════════════════════════
# POST /api/createProject
# ══════════════════════════════════════════════════════════════════════════

class TestCreateProjectEndpoint:

    @pytest.mark.asyncio
    async def test_create_with_image(self, test_client, session_factory, upload_store):
        response = await test_client.post(
            "/api/createProject",
            data=project_form(),
            files={"imageUrl": ("cover.png", b"\x89PNG", "image/png")},
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Project created successfully"}

        async with session_factory() as session:
            stored = (await session.execute(select(Project))).scalar_one()
        assert stored.tech_stack == ["React", "FastAPI"]
        assert stored.is_project_public is True
        assert stored.is_winner is False
        assert stored.image_url.endswith("-cover.png")
        assert len(list(upload_store.upload_dir.glob("*-cover.png"))) == 1

    @pytest.mark.asyncio
    async def test_create_without_image(self, test_client, session_factory):
        response = await test_client.post("/api/createProject", data=project_form())

        assert response.status_code == 201
        async with session_factory() as session:
            stored = (await session.execute(select(Project))).scalar_one()
        assert stored.image_url is None

    @pytest.mark.asyncio
    async def test_duplicate_name_is_400(self, test_client, session_factory):
        first = await test_client.post("/api/createProject", data=project_form())
        assert first.status_code == 201

        second = await test_client.post("/api/createProject", data=project_form())
        assert second.status_code == 400
        assert second.json()["error"] == "Project with the same name already exists"

        assert await count_rows(session_factory, Project) == 1

    @pytest.mark.asyncio
    async def test_malformed_tech_stack_is_500(self, test_client, session_factory):
        response = await test_client.post(
            "/api/createProject", data=project_form(techStack="React, FastAPI")
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Error creating project"
        assert await count_rows(session_factory, Project) == 0

    @pytest.mark.asyncio
    async def test_flag_coercion(self, test_client, session_factory):
        response = await test_client.post(
            "/api/createProject",
            data=project_form(isProjectPublic="yes", isWinner="true"),
        )

        assert response.status_code == 201
        async with session_factory() as session:
            stored = (await session.execute(select(Project))).scalar_one()
        assert stored.is_project_public is False
        assert stored.is_winner is True


# ══════════════════════════════════════════════════════════════════════════
# GET /health
# ══════════════════════════════════════════════════════════════════════════

class TestHealthEndpoint:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["gemini"] == "available"

    @pytest.mark.asyncio
    async def test_degraded_when_model_unreachable(self, test_client, mock_llm):
        mock_llm.health_check.return_value = False

        response = await test_client.get("/health")

        assert response.json()["status"] == "degraded"
        assert response.json()["gemini"] == "unavailable"


# ══════════════════════════════════════════════════════════════════════════
# Unusable request bodies
# ══════════════════════════════════════════════════════════════════════════

class TestInvalidBodies:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, body, message",
        [
            ("/api/register", {"username": "ada"}, "Error registering user"),
            ("/api/githubProjectIdea", {"ideaDesc": "x"}, "Error fetching GitHub repositories"),
            ("/api/projectIdea", {"description": "d", "theme": "t"}, "Error generating project idea"),
            ("/api/projectIdea", {"description": "d", "theme": "t", "keywords": "k"},
             "Error generating project idea"),
            ("/api/scrapeAndReviewProject", {}, "Error scraping and reviewing project"),
        ],
    )
    async def test_missing_or_mistyped_field_is_route_failure(
        self, test_client, mock_llm, path, body, message
    ):
        response = await test_client.post(path, json=body)

        assert response.status_code == 500
        assert response.json()["error"] == message
        assert "detail" not in response.json()
        mock_llm.generate_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unparseable_json_is_route_failure(self, test_client):
        response = await test_client.post(
            "/api/projectIdea",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Error generating project idea"

    @pytest.mark.asyncio
    async def test_missing_project_name_is_route_failure(self, test_client, session_factory):
        form = project_form()
        del form["projectName"]

        response = await test_client.post("/api/createProject", data=form)

        assert response.status_code == 500
        assert response.json()["error"] == "Error creating project"
        assert await count_rows(session_factory, Project) == 0


# ══════════════════════════════════════════════════════════════════════════
# Unexpected errors
# ══════════════════════════════════════════════════════════════════════════

class TestUnexpectedErrors:

    @pytest.mark.asyncio
    async def test_generic_500_keeps_request_id_header(self, test_client, mock_llm):
        from path2hack.main import app

        mock_llm.health_check.side_effect = RuntimeError("boom")

        # The outermost middleware re-raises after responding
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/health", headers={"X-Request-ID": "trace500"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "An unexpected error occurred",
            "request_id": "trace500",
        }
        assert response.headers["X-Request-ID"] == "trace500"
        assert "boom" not in response.text
