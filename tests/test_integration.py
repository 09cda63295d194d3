"""
Integration tests for the HTTP API.

Tests the complete guidance flow through the FastAPI application.
"""

import pytest
from fastapi.testclient import TestClient
from main import app


# Test client
client = TestClient(app)


OPTIMAL_ARTICLE = {
    "seoTitle": "A" * 45,
    "seoDescription": "B" * 140,
    "wordCount": 1000,
    "contentDepth": "medium",
    "featuredImageId": "img1",
    "jsonLdStructuredData": {"@type": "Article"},
    "authorId": "author-1",
    "datePublished": "2024-05-01T10:00:00Z",
    "canonicalUrl": "https://x.com/a",
    "faqs": [{"question": "Q1"}, {"question": "Q2"}, {"question": "Q3"}],
}


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_returns_ok(self):
        """Health endpoint should return healthy status."""
        response = client.get("/seo/guidance/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["engine"]["default_language"] == "ar"
        assert sum(data["engine"]["category_weights"].values()) == 100


class TestGuidanceEndpointValidation:
    """Tests for guidance endpoint input validation."""

    def test_missing_content_item_returns_422(self):
        """Missing required fields should return 422."""
        response = client.post("/seo/guidance/analyze", json={})
        assert response.status_code == 422

    def test_negative_word_count_returns_422(self):
        response = client.post("/seo/guidance/analyze", json={
            "contentItem": {"wordCount": -5},
        })
        assert response.status_code == 422

    def test_sitemap_priority_out_of_range_returns_422(self):
        response = client.post("/seo/guidance/analyze", json={
            "contentItem": {"sitemapPriority": 1.5},
        })
        assert response.status_code == 422


class TestGuidanceEndpoint:
    """Tests for the guidance analysis flow."""

    def test_optimal_article(self):
        response = client.post("/seo/guidance/analyze", json={"contentItem": OPTIMAL_ARTICLE})
        assert response.status_code == 200

        data = response.json()
        assert data["overallScore"] == 95
        assert list(data["categories"]) == [
            "metaTags", "content", "images", "structuredData", "technical", "mobile",
        ]
        assert data["categories"]["mobile"] == {
            "score": 0, "maxScore": 5, "percentage": 0, "passed": 0, "total": 2,
        }
        assert data["criticalIssues"] == []
        assert data["warnings"] == []
        assert len(data["suggestions"]) == 2
        assert "lastUpdated" in data

    def test_empty_article(self):
        response = client.post("/seo/guidance/analyze", json={"contentItem": {}})
        assert response.status_code == 200

        data = response.json()
        assert data["overallScore"] == 18
        assert {issue["severity"] for issue in data["criticalIssues"]} == {"critical"}
        assert data["inPageChecklist"][0]["id"] == "seo-title-missing"
        assert data["inPageChecklist"][0]["officialSource"].startswith("https://")

    def test_snake_case_body_accepted(self):
        response = client.post("/seo/guidance/analyze", json={
            "content_item": {"seo_title": "A" * 45, "featured_image_id": "img1"},
        })
        assert response.status_code == 200
        assert response.json()["categories"]["images"]["score"] == 15

    def test_options_accepted(self):
        response = client.post("/seo/guidance/analyze", json={
            "contentItem": OPTIMAL_ARTICLE,
            "options": {"validateStructuredData": True},
        })
        assert response.status_code == 200
        assert response.json()["overallScore"] == 95

    def test_off_page_guidance_returned(self):
        response = client.post("/seo/guidance/analyze", json={"contentItem": OPTIMAL_ARTICLE})
        guidance = response.json()["offPageGuidance"]

        assert [item["category"] for item in guidance] == [
            "link-building", "social-signals", "authority-building", "content-distribution",
        ]
        assert all(item["actionable"] for item in guidance)

    def test_string_citations_accepted(self):
        response = client.post("/seo/guidance/analyze", json={
            "contentItem": {"citations": ["https://example.org/study"]},
        })
        assert response.status_code == 200

        guidance = {item["id"]: item for item in response.json()["offPageGuidance"]}
        assert guidance["authoritative-citations"]["actionable"] is False

    def test_null_content_scores_as_missing(self):
        response = client.post("/seo/guidance/analyze", json={"contentItem": {"content": None}})
        assert response.status_code == 200

        checklist = {item["id"]: item for item in response.json()["inPageChecklist"]}
        assert checklist["word-count-missing"]["status"] == "fail"


class TestWordCountEndpoint:
    """Tests for the word count endpoint."""

    def test_english_html(self):
        response = client.post("/seo/guidance/word-count", json={
            "content": "<p>Hello <b>world</b></p>",
            "language": "en",
        })
        assert response.status_code == 200
        assert response.json() == {
            "wordCount": 2,
            "readingTimeMinutes": 1,
            "contentDepth": "short",
        }

    def test_default_language_is_arabic(self):
        response = client.post("/seo/guidance/word-count", json={"content": "مَرْحَبًا بِالْعَالَمِ"})
        assert response.status_code == 200
        assert response.json()["wordCount"] == 2

    def test_missing_content_returns_422(self):
        response = client.post("/seo/guidance/word-count", json={})
        assert response.status_code == 422


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root(self):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["health"] == "/seo/guidance/health"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
