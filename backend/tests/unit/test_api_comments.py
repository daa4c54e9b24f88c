"""Unit tests for comment API endpoints."""

import pytest


@pytest.fixture
async def idea_id(test_client, register_user, idea_payload):
    await register_user(test_client, "alice")
    response = await test_client.post("/api/ideas", json=idea_payload)
    return response.json()["id"]


class TestCommentsAPI:
    """Test cases for comment API endpoints."""

    @pytest.mark.asyncio
    async def test_create_comment(self, test_client, idea_id):
        response = await test_client.post(
            f"/api/ideas/{idea_id}/comments",
            json={"section": "who", "content": "Students too"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["ideaId"] == idea_id
        assert data["section"] == "who"
        assert data["content"] == "Students too"
        assert data["authorUsername"] == "alice"
        assert "createdAt" in data

    @pytest.mark.asyncio
    async def test_list_comments_by_section(self, test_client, idea_id):
        await test_client.post(
            f"/api/ideas/{idea_id}/comments",
            json={"section": "who", "content": "Students too"}
        )

        who = await test_client.get(f"/api/ideas/{idea_id}/comments/who")
        features = await test_client.get(f"/api/ideas/{idea_id}/comments/features")

        assert who.status_code == 200
        assert [c["content"] for c in who.json()] == ["Students too"]
        assert features.status_code == 200
        assert features.json() == []

    @pytest.mark.asyncio
    async def test_list_comments_anonymous(self, test_client, idea_id, client_factory):
        await test_client.post(
            f"/api/ideas/{idea_id}/comments",
            json={"section": "doneCriteria", "content": "Needs a metric"}
        )

        response = await client_factory().get(f"/api/ideas/{idea_id}/comments/doneCriteria")

        assert response.status_code == 200
        assert len(response.json()) == 1

    @pytest.mark.asyncio
    async def test_unknown_section(self, test_client, idea_id):
        response = await test_client.post(
            f"/api/ideas/{idea_id}/comments",
            json={"section": "pricing", "content": "Too cheap"}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "section"

    @pytest.mark.asyncio
    async def test_empty_content(self, test_client, idea_id):
        response = await test_client.post(
            f"/api/ideas/{idea_id}/comments",
            json={"section": "what", "content": ""}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "content"

    @pytest.mark.asyncio
    async def test_missing_section(self, test_client, idea_id):
        response = await test_client.post(
            f"/api/ideas/{idea_id}/comments",
            json={"content": "Orphan"}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "section"

    @pytest.mark.asyncio
    async def test_comment_requires_login(self, test_client, idea_id):
        await test_client.post("/api/auth/logout")

        response = await test_client.post(
            f"/api/ideas/{idea_id}/comments",
            json={"section": "what", "content": "Hi"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_comment_on_missing_idea(self, test_client, idea_id):
        response = await test_client.post(
            "/api/ideas/999/comments",
            json={"section": "what", "content": "Hi"}
        )

        assert response.status_code == 404
