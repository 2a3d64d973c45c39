import uuid

from structlog.testing import capture_logs


def test_request_end_is_logged_with_status(client):
    with capture_logs() as logs:
        response = client.get("/student/99999")

    ends = [e for e in logs if e["event"] == "request.end"]
    assert len(ends) == 1
    assert ends[0]["status_code"] == 404
    assert ends[0]["log_level"] == "info"
    assert response.headers["X-Request-ID"]


def test_request_id_generated_when_missing(client):
    response = client.get("/student")

    assert uuid.UUID(response.headers["X-Request-ID"]).version == 4
