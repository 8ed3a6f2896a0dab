from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

from heartkemy.models.ai_analysis import AiAnalysis
from heartkemy.services import analysis_service
from heartkemy.services.analysis_service import PLACEHOLDER_ANALYSIS, analyze_content


def _analysis_body(**overrides):
    body = {"postId": "post-demo-1", "userId": "user-demo-1", "content": "하늘을 올려다본 오후"}
    body.update(overrides)
    return body


def test_analyze_content_returns_independent_copies():
    first = analyze_content("a")
    first["keywords"].append("changed")
    assert "changed" not in analyze_content("b")["keywords"]
    assert "changed" not in PLACEHOLDER_ANALYSIS["keywords"]


def test_create_analysis(seeded_client, seeded_db):
    response = seeded_client.post("/api/analysis", json=_analysis_body())
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["coreValues"] == ["진정성", "공감", "자기이해"]
    assert data["emotionTone"] == {"warm": 20, "comfort": 30, "excitement": 10, "solitude": 25, "sincerity": 15}
    assert sum(data["emotionTone"].values()) == 100
    assert data["keywords"] == ["외로움", "위안", "평화", "고요함", "별"]
    assert data["patternChanges"] is None

    stored = seeded_db.query(AiAnalysis).filter(AiAnalysis.post_id == "post-demo-1").one()
    assert stored.user_id == "user-demo-1"
    assert stored.emotion_tone["comfort"] == 30


def test_get_latest_analysis(seeded_client):
    seeded_client.post("/api/analysis", json=_analysis_body())
    response = seeded_client.get("/api/posts/post-demo-1/analysis")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["postId"] == "post-demo-1"
    assert data["userId"] == "user-demo-1"
    assert data["coreValues"][0] == "진정성"


def test_get_analysis_missing(seeded_client):
    response = seeded_client.get("/api/posts/post-demo-2/analysis")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"success": False, "error": "Analysis not found"}


def test_create_analysis_validation(seeded_client):
    assert seeded_client.post("/api/analysis", json=_analysis_body(content="")).status_code == 400
    assert seeded_client.post("/api/analysis", json={"postId": "post-demo-1"}).status_code == 400
    assert seeded_client.post("/api/analysis", json=_analysis_body(postId="nope")).status_code == 404


def test_storage_failure_uses_error_envelope(seeded_client, monkeypatch):
    def broken_lookup(db, post_id):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(analysis_service, "latest_analysis", broken_lookup)
    response = seeded_client.get("/api/posts/post-demo-1/analysis")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"success": False, "error": "Internal storage error"}
